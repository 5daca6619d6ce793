"""Text utility helpers."""

from __future__ import annotations

import re

_SLUG_UNSAFE_RE = re.compile(r"[^a-z0-9_]+")
_TOKEN_SPLIT_RE = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """Build a URL-safe slug from a dotted feature name."""
    slug = _SLUG_UNSAFE_RE.sub("-", value.strip().lower())
    return slug.strip("-")


def tokenize(value: str) -> list[str]:
    """Split a name or query into lowercase alphanumeric tokens."""
    return [token for token in _TOKEN_SPLIT_RE.split(value.lower()) if token]


def trigrams(value: str) -> set[str]:
    """Return padded word trigrams, pg_trgm style."""
    grams: set[str] = set()
    for token in tokenize(value):
        padded = f"  {token} "
        grams.update(padded[index : index + 3] for index in range(len(padded) - 2))
    return grams


def similarity(left: str, right: str) -> float:
    """Trigram similarity between two strings in the range [0, 1]."""
    left_grams = trigrams(left)
    right_grams = trigrams(right)
    if not left_grams or not right_grams:
        return 0.0
    shared = len(left_grams & right_grams)
    return shared / len(left_grams | right_grams)


def ellipsize(value: str, width: int) -> str:
    """Shorten long strings while preserving suffix visibility."""
    if width <= 0:
        return ""
    if len(value) <= width:
        return value
    if width <= 1:
        return "…"
    return f"{value[: width - 1]}…"
