# shakesearch/loader.py
from __future__ import annotations

import logging
import os
from typing import Union

from .config import ENCODING, ENCODING_ERRORS
from .errors import LoadError

log = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]"]


def load_corpus_bytes(source: Source) -> bytes:
    """Read the raw corpus from a file. Any read failure is a LoadError."""
    path = os.fspath(source)
    if os.path.isdir(path):
        raise LoadError(f"Load: {path} is a directory, expected a text file")
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as exc:
        raise LoadError(f"Load: {exc}") from exc


def decode_corpus(raw: bytes, *, encoding: str = ENCODING, errors: str = ENCODING_ERRORS) -> str:
    try:
        return raw.decode(encoding, errors)
    except (UnicodeDecodeError, LookupError) as exc:
        # only reachable with errors="strict" or an unknown codec name
        raise LoadError(f"Load: cannot decode corpus as {encoding}: {exc}") from exc


def load_corpus(source: Source) -> str:
    """Read and decode the corpus text."""
    raw = load_corpus_bytes(source)
    text = decode_corpus(raw)
    log.info("Loaded corpus %s: bytes=%d chars=%d", os.fspath(source), len(raw), len(text))
    return text
