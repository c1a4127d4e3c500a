# shakesearch/engine.py
from __future__ import annotations

import logging
import os
import threading
import time
from typing import Any, Dict, Iterator, List, Optional

from . import config as CFG
from .loader import Source, load_corpus
from .models import SearchResult
from .searcher import Searcher

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer around one immutable Searcher snapshot:
      - build(source):   load corpus -> build index -> install snapshot
      - reload(source):  same, then swap the snapshot in one assignment
      - search / iter_search / expand_context: delegate to the snapshot
      - shutdown():      drop the snapshot

    Readers grab `self._snapshot` once per call, so a concurrent reload
    is seen either entirely or not at all.
    """

    # ------------- lifecycle -------------

    def __init__(self, *, width: int = CFG.CONTEXT_WIDTH) -> None:
        self._snapshot: Optional[Searcher] = None
        self._source: Optional[str] = None
        self._built_at: Optional[float] = None
        self._width = width
        self._reload_lock = threading.Lock()

    # /* ~~~ Load the corpus and build its index (fatal on LoadError) ~~~ */
    def build(self, source: Source, *, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
        with self._reload_lock:
            self._install(source)
        log.info("Engine build() complete: chars=%d", len(self._current()))

    # /* ~~~ Rebuild from the same (or a new) source and swap atomically ~~~ */
    def reload(self, source: Optional[Source] = None) -> None:
        with self._reload_lock:
            src = source if source is not None else self._source
            if src is None:
                raise RuntimeError("Engine has no corpus source. Call build() first.")
            self._install(src)
        log.info("Engine reload() complete: chars=%d", len(self._current()))

    def _install(self, source: Source) -> None:
        # a failed load leaves the previous snapshot in place
        corpus = load_corpus(source)
        snapshot = Searcher(corpus, width=self._width)
        self._snapshot = snapshot
        self._source = os.fspath(source)
        self._built_at = time.time()

    # ------------- query -------------

    def search(self, query: str) -> List[SearchResult]:
        return self._current().search(query)

    def iter_search(self, query: str) -> Iterator[SearchResult]:
        return self._current().iter_search(query)

    def expand_context(self, offset: Any, direction: Any) -> str:
        return self._current().expand_context(offset, direction)

    def stats(self) -> Dict[str, Any]:
        snap = self._current()
        return {"chars": len(snap), "source": self._source, "built_at": self._built_at}

    @property
    def ready(self) -> bool:
        return self._snapshot is not None

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self._snapshot = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _current(self) -> Searcher:
        snap = self._snapshot
        if snap is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return snap
