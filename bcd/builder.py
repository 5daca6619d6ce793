"""Build feature records from ``__compat`` nodes."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
import copy
from types import MappingProxyType
from typing import Any

from .constants import COMPAT_KEY
from .exceptions import SchemaError
from .model import FeatureRecord


def _tri_state(status: Mapping[str, Any], key: str) -> bool | None:
    value = status.get(key)
    if isinstance(value, bool):
        return value
    return None


def build_feature(path: Sequence[str], compat: Mapping[str, Any]) -> FeatureRecord:
    """Build one record from a feature path and the node's ``__compat`` value.

    Absent ``status`` fields stay ``None`` so "no information" is never
    confused with an explicit ``false``. The support map is copied as-is.
    """
    segments = tuple(path)
    if not segments or any(not segment for segment in segments):
        raise SchemaError(f"Feature path must be non-empty: {list(segments)!r}")
    if COMPAT_KEY in segments:
        raise SchemaError(f"Feature path must not contain {COMPAT_KEY!r}: {list(segments)!r}")
    if not isinstance(compat, Mapping):
        raise SchemaError(f"Compat data for {'.'.join(segments)} is not an object")

    raw_status = compat.get("status")
    status: Mapping[str, Any] = raw_status if isinstance(raw_status, Mapping) else {}
    raw_support = compat.get("support")
    support = copy.deepcopy(dict(raw_support)) if isinstance(raw_support, Mapping) else {}

    return FeatureRecord(
        name=".".join(segments),
        description=compat.get("description"),
        mdn_url=compat.get("mdn_url"),
        spec_url=copy.deepcopy(compat.get("spec_url")),
        deprecated=_tri_state(status, "deprecated"),
        experimental=_tri_state(status, "experimental"),
        standard_track=_tri_state(status, "standard_track"),
        support=MappingProxyType(support),
        path=segments,
    )
