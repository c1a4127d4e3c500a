"""Case-insensitive substring search over one static corpus."""
from __future__ import annotations

from .engine import Engine
from .errors import LoadError, SearchError, ValidationError
from .index import SuffixIndex
from .models import Direction, Match, SearchResult
from .searcher import Searcher

__all__ = [
    "Engine",
    "Searcher",
    "SuffixIndex",
    "SearchResult",
    "Match",
    "Direction",
    "SearchError",
    "LoadError",
    "ValidationError",
]
