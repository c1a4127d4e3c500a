# shakesearch/searcher.py
from __future__ import annotations

import re
from typing import Any, Iterator, List, Optional

from . import config as CFG
from .errors import ValidationError
from .index import SuffixIndex
from .models import Direction, Match, SearchResult

# int() alone would also take "+5", "1_0", " 5" and non-ASCII digits
_DECIMAL = re.compile(r"-?[0-9]+")


def parse_offset(value: Any) -> int:
    """Accept an int or a plain decimal string: optional "-", ASCII digits only."""
    if isinstance(value, bool):
        raise ValidationError(f"offset should be integer (got {value!r})")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        if _DECIMAL.fullmatch(value):
            try:
                return int(value, 10)
            except ValueError:
                # longer than sys.get_int_max_str_digits()
                pass
    raise ValidationError(f"offset should be integer (got {value!r})")


class Searcher:
    """
    Immutable query engine over one corpus.

    Keeps the original text for display and a SuffixIndex over its folded
    copy. Nothing is mutated after __init__, so search() and
    expand_context() can be called from any number of threads.

    Windows near either end of the corpus are clamped, never wrapped:
    a match closer than `width` characters to an edge gets a shorter
    snippet instead of an error.
    """

    def __init__(
        self,
        corpus: str,
        index: Optional[SuffixIndex] = None,
        *,
        width: int = CFG.CONTEXT_WIDTH,
        mark_open: str = CFG.MARK_OPEN,
        mark_close: str = CFG.MARK_CLOSE,
    ) -> None:
        if width < 0:
            raise ValueError("width must be non-negative")
        self._corpus = corpus
        self._index = index if index is not None else SuffixIndex.build(corpus)
        if len(self._index) != len(corpus):
            raise ValueError("index was built over a different corpus")
        self.width = width
        self.mark_open = mark_open
        self.mark_close = mark_close

    @property
    def corpus(self) -> str:
        return self._corpus

    def __len__(self) -> int:
        return len(self._corpus)

    # ------------- search -------------

    def matches(self, query: str) -> List[Match]:
        self._check_query(query)
        n = len(query)
        return [Match(offset=idx, length=n) for idx in self._index.lookup(query)]

    def iter_search(self, query: str) -> Iterator[SearchResult]:
        """Lazy form of search(); validation happens on the first next()."""
        self._check_query(query)
        for idx in self._index.lookup(query):
            yield self._result(idx, len(query))

    def search(self, query: str) -> List[SearchResult]:
        return list(self.iter_search(query))

    # ------------- pagination -------------

    def expand_context(self, offset: Any, direction: Any) -> str:
        """
        Next `width` characters adjacent to offset: before it for "prev",
        from it onwards for "nxt". Offsets outside the corpus are clamped.
        """
        way = Direction.parse(direction)
        pos = min(max(parse_offset(offset), 0), len(self._corpus))
        if way is Direction.PREV:
            return self._corpus[max(0, pos - self.width):pos]
        return self._corpus[pos:pos + self.width]

    # ------------- internals -------------

    @staticmethod
    def _check_query(query: Any) -> None:
        if not isinstance(query, str):
            raise ValidationError(f"query must be a string (got {type(query).__name__})")
        if not query:
            raise ValidationError("query must not be empty")

    def _result(self, idx: int, length: int) -> SearchResult:
        text, w = self._corpus, self.width
        match_end = idx + length
        start = max(0, idx - w)
        end = min(len(text), max(idx + w, match_end))
        snippet = (
            text[start:idx]
            + self.mark_open + text[idx:match_end] + self.mark_close
            + text[match_end:end]
        )
        return SearchResult(snippet=snippet, context_start=start, context_end=end, offset=idx)
