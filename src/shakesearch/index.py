# shakesearch/index.py
from __future__ import annotations

import logging
import time
from typing import List, Optional

import numpy as np

from .errors import LoadError
from .normalize import fold_case

log = logging.getLogger(__name__)


def _code_points(text: str) -> np.ndarray:
    """One int64 per character (UTF-32 code units are code points)."""
    raw = text.encode("utf-32-le", "surrogatepass")
    return np.frombuffer(raw, dtype="<u4").astype(np.int64)


def build_suffix_array(text: str) -> np.ndarray:
    """
    /* ~~~ Suffix array by prefix doubling.
       Round k sorts suffixes by their first 2k characters using the ranks of
       the previous round as keys; stops as soon as every rank is unique. ~~~ */
    """
    n = len(text)
    if n == 0:
        return np.empty(0, dtype=np.int64)

    # dense ranks keep rank * (n + 1) + second inside int64
    _, rank = np.unique(_code_points(text), return_inverse=True)
    rank = rank.reshape(-1).astype(np.int64)
    sa = np.argsort(rank, kind="stable")
    second = np.empty(n, dtype=np.int64)
    k = 1
    while True:
        # rank of the suffix k positions later; -1 sorts "end of text" first
        second.fill(-1)
        if k < n:
            second[: n - k] = rank[k:]

        # sa is already ordered by rank: only suffixes that still share a
        # rank with a neighbour need sorting, and they stay inside their group
        r = rank[sa]
        tied = r[1:] == r[:-1]
        unsettled = np.zeros(n, dtype=bool)
        unsettled[1:] |= tied
        unsettled[:-1] |= tied

        key = r * (n + 1) + (second[sa] + 1)
        pos = np.flatnonzero(unsettled)
        order = np.argsort(key[pos], kind="stable")
        sa[pos] = sa[pos][order]
        key[pos] = key[pos][order]

        boundary = np.empty(n, dtype=bool)
        boundary[0] = True
        boundary[1:] = key[1:] != key[:-1]
        new_rank = np.cumsum(boundary) - 1

        rank = np.empty(n, dtype=np.int64)
        rank[sa] = new_rank
        if new_rank[-1] == n - 1 or k >= n:
            return sa.astype(np.int64, copy=False)
        k *= 2


class SuffixIndex:
    """
    Substring index over the case-folded corpus.
    Holds the folded text and its suffix array; offsets are character offsets
    and are valid against the original (unfolded) corpus as well.
    """

    def __init__(self, folded: str, suffixes: np.ndarray) -> None:
        self._text = folded
        self._sa = suffixes

    # ---- Build (once, at startup) ----
    @classmethod
    def build(cls, corpus: str) -> "SuffixIndex":
        if not corpus:
            raise LoadError("Build: corpus is empty, nothing to index")
        t0 = time.perf_counter()
        folded = fold_case(corpus)
        sa = build_suffix_array(folded)
        log.info("Suffix array built: chars=%d in %.2fs", len(folded), time.perf_counter() - t0)
        return cls(folded, sa)

    def __len__(self) -> int:
        return len(self._text)

    # ---- Query ----
    def _range(self, needle: str) -> tuple[int, int]:
        """[lo, hi) slice of the suffix array whose suffixes start with needle."""
        text, sa, m = self._text, self._sa, len(needle)

        lo, hi = 0, len(sa)
        while lo < hi:
            mid = (lo + hi) // 2
            pos = int(sa[mid])
            if text[pos:pos + m] < needle:
                lo = mid + 1
            else:
                hi = mid
        first = lo

        hi = len(sa)
        while lo < hi:
            mid = (lo + hi) // 2
            pos = int(sa[mid])
            if text[pos:pos + m] <= needle:
                lo = mid + 1
            else:
                hi = mid
        return first, lo

    def count(self, query: str) -> int:
        if not query:
            return 0
        lo, hi = self._range(fold_case(query))
        return hi - lo

    def lookup(self, query: str, limit: Optional[int] = None) -> List[int]:
        """
        Start offsets of every occurrence of query (case-insensitive),
        ascending. limit=None or a negative limit returns all of them.
        """
        if not query:
            return []
        lo, hi = self._range(fold_case(query))
        if lo == hi:
            return []
        offsets = np.sort(self._sa[lo:hi])
        if limit is not None and limit >= 0:
            offsets = offsets[:limit]
        return offsets.tolist()
