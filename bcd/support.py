"""Classification of raw browser support values.

A browser's support value in a compat record is either a single support
entry (``{"version_added": ...}``) or a list of entries, one per historical
support window (unprefixed, prefixed, behind a flag, ...). Records keep the
raw value; these helpers turn it into a :class:`Classification` when a query
needs a yes/no/unknown answer.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Literal

from .model import Classification

FoldPolicy = Literal["any", "first", "all"]
SupportBucket = Literal["exactly_true", "true", "false", "nil", "no_data"]

FOLD_POLICIES: tuple[FoldPolicy, ...] = ("any", "first", "all")
SUPPORT_BUCKETS: tuple[SupportBucket, ...] = ("exactly_true", "true", "false", "nil", "no_data")

SUPPORTED = Classification("supported")
UNSUPPORTED = Classification("unsupported")
UNKNOWN = Classification("unknown")

_LITERAL_TOKENS: dict[str, Classification] = {
    "true": SUPPORTED,
    "false": UNSUPPORTED,
    "null": UNKNOWN,
}


def classify(entry: object) -> Classification:
    """Classify one support entry by its ``version_added`` field."""
    if not isinstance(entry, Mapping):
        return UNKNOWN

    version_added = entry.get("version_added")
    if version_added is True:
        return SUPPORTED
    if version_added is False:
        return UNSUPPORTED
    if isinstance(version_added, str):
        token = version_added.strip()
        if token in _LITERAL_TOKENS:
            return _LITERAL_TOKENS[token]
        return Classification("supported_since", version=version_added)
    return UNKNOWN


def classify_all(value: object) -> list[Classification]:
    """Classify a single entry or every entry of a list, in order."""
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return [classify(entry) for entry in value]
    if value is None:
        return []
    return [classify(value)]


def is_supported(classification: Classification) -> bool:
    return classification.state in {"supported", "supported_since"}


def fold(classifications: Iterable[Classification], policy: FoldPolicy = "any") -> Classification:
    """Fold per-window classifications into one browser-level answer.

    ``any``
        Supported when any window is supported. An exact ``supported`` wins
        over a version; otherwise the first version in list order is used.
        Falls back to unsupported when any window says so, else unknown.
    ``first``
        Only the first window counts. BCD lists the current implementation
        first, so this answers "is the main implementation supported".
    ``all``
        Supported only when every window is supported; any unsupported
        window makes the answer unsupported, and unknown wins otherwise.
    """
    if policy not in FOLD_POLICIES:
        raise ValueError(f"Unknown fold policy: {policy!r}")

    items = list(classifications)
    if not items:
        return UNKNOWN

    if policy == "first":
        return items[0]

    if policy == "all":
        if any(item.state == "unsupported" for item in items):
            return UNSUPPORTED
        if any(item.state == "unknown" for item in items):
            return UNKNOWN
        return next((item for item in items if item.state == "supported"), items[0])

    supported = [item for item in items if is_supported(item)]
    if supported:
        return next((item for item in supported if item.state == "supported"), supported[0])
    if any(item.state == "unsupported" for item in items):
        return UNSUPPORTED
    return UNKNOWN


def classify_support(value: object, policy: FoldPolicy = "any") -> Classification:
    """Classify a browser's raw support value (entry or list of entries)."""
    return fold(classify_all(value), policy)


def support_bucket_matches(
    support: Mapping[str, Any],
    browser: str,
    bucket: SupportBucket,
    policy: FoldPolicy = "any",
) -> bool:
    """Check whether ``browser`` in a support map falls in a query bucket.

    ``no_data`` matches only when the browser has no entry at all; the
    other buckets classify the entry with :func:`classify_support`.
    """
    if bucket not in SUPPORT_BUCKETS:
        raise ValueError(f"Unknown support bucket: {bucket!r}")

    if browser not in support or support[browser] is None:
        return bucket == "no_data"
    if bucket == "no_data":
        return False

    classification = classify_support(support[browser], policy)
    if bucket == "exactly_true":
        return classification.state == "supported"
    if bucket == "true":
        return is_supported(classification)
    if bucket == "false":
        return classification.state == "unsupported"
    return classification.state == "unknown"
