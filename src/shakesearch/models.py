from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from .errors import ValidationError


@dataclass(frozen=True)
class Match:
    offset: int               # start index into the corpus
    length: int               # length of the query that matched


@dataclass(frozen=True)
class SearchResult:
    snippet: str              # context + marked match + context
    context_start: int        # first corpus index covered by the snippet
    context_end: int          # one past the last corpus index covered
    offset: int               # where the match itself starts

    def to_json(self) -> Dict[str, Any]:
        return {
            "snippet": self.snippet,
            "contextStart": self.context_start,
            "contextEnd": self.context_end,
            "offset": self.offset,
        }


class Direction(str, Enum):
    PREV = "prev"
    NXT = "nxt"

    @classmethod
    def parse(cls, value: Any) -> "Direction":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(d.value for d in cls)
            raise ValidationError(f"direction must be one of: {allowed} (got {value!r})") from None
