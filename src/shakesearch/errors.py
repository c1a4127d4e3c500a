from __future__ import annotations


class SearchError(Exception):
    """Base class for everything the search core raises on purpose."""


class LoadError(SearchError):
    """The corpus could not be read or indexed. Fatal at startup."""


class ValidationError(SearchError, ValueError):
    """A caller-supplied parameter is missing, malformed or out of range."""
