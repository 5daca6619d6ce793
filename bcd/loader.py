"""Load a compat document from disk or over HTTP."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .constants import DEFAULT_TIMEOUT_SECONDS
from .exceptions import DocumentError
from .http import fetch_document

LOGGER = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def parse_document(raw: str, source: str = "<string>") -> dict[str, Any]:
    """Parse JSON text into a document; anything but an object is rejected."""
    try:
        document = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DocumentError(source, cause=f"invalid JSON at line {exc.lineno}") from exc
    if not isinstance(document, dict):
        raise DocumentError(source, cause="expected a JSON object at the top level")
    return document


def load_document(source: str | Path, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> dict[str, Any]:
    """Read and parse the whole document before any traversal starts."""
    source_text = str(source)
    if is_url(source_text):
        LOGGER.info("Fetching compat data from %s", source_text)
        raw = fetch_document(source_text, timeout=timeout)
    else:
        try:
            raw = Path(source_text).read_text(encoding="utf-8")
        except OSError as exc:
            raise DocumentError(source_text, cause=exc.__class__.__name__) from exc
        except UnicodeDecodeError as exc:
            raise DocumentError(source_text, cause="not UTF-8 text") from exc
    return parse_document(raw, source_text)
