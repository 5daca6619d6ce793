"""Top-level schema: which category/subcategory roots get walked."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
import logging
from typing import Any

from .constants import BROWSERS_KEY, COMPAT_KEY
from .exceptions import SchemaError
from .model import SchemaEntry

LOGGER = logging.getLogger(__name__)

TopLevelSchema = tuple[SchemaEntry, ...]
SchemaLike = Mapping[str, Sequence[str]] | Iterable[SchemaEntry | tuple[str, Sequence[str]]]


def _pairs(schema: SchemaLike) -> Iterator[tuple[Any, Any]]:
    if isinstance(schema, Mapping):
        yield from schema.items()
        return
    for item in schema:
        if isinstance(item, SchemaEntry):
            yield item.category, item.subcategories
        elif isinstance(item, Sequence) and not isinstance(item, str) and len(item) == 2:
            yield item[0], item[1]
        else:
            raise SchemaError(f"Expected a (category, [subcategory, ...]) pair, got {item!r}")


def build_schema(schema: SchemaLike) -> TopLevelSchema:
    """Build an ordered schema.

    Accepts ``{category: [subcategory, ...]}``, a list of
    ``(category, [subcategory, ...])`` pairs, or existing entries.
    """
    entries: list[SchemaEntry] = []
    for category, subcategories in _pairs(schema):
        if not isinstance(category, str) or not category.strip():
            raise SchemaError(f"Invalid schema category: {category!r}")
        if isinstance(subcategories, str) or not isinstance(subcategories, Sequence):
            raise SchemaError(f"Subcategories for {category!r} must be a list of names")
        for subcategory in subcategories:
            if not isinstance(subcategory, str) or not subcategory.strip():
                raise SchemaError(f"Invalid subcategory under {category!r}: {subcategory!r}")
            if subcategory == COMPAT_KEY:
                raise SchemaError(f"{COMPAT_KEY!r} cannot be used as a subcategory")
        entries.append(SchemaEntry(category=category, subcategories=tuple(subcategories)))
    return tuple(entries)


def parse_schema_option(values: Iterable[str]) -> TopLevelSchema:
    """Parse ``category:sub1,sub2`` strings into a schema.

    Repeated categories are merged in first-seen order.
    """
    merged: dict[str, list[str]] = {}
    for raw in values:
        category, sep, rest = raw.partition(":")
        category = category.strip()
        if not sep or not category:
            raise SchemaError(f"Expected CATEGORY:SUB[,SUB...], got {raw!r}")
        subcategories = [part.strip() for part in rest.split(",") if part.strip()]
        if not subcategories:
            raise SchemaError(f"No subcategories given for {category!r}")
        bucket = merged.setdefault(category, [])
        for subcategory in subcategories:
            if subcategory not in bucket:
                bucket.append(subcategory)
    return build_schema(merged)


def validate_schema(document: Mapping[str, Any], schema: TopLevelSchema) -> list[str]:
    """Return ``category.subcategory`` paths from the schema missing in the document."""
    missing: list[str] = []
    for entry in schema:
        category_node = document.get(entry.category)
        for subcategory in entry.subcategories:
            if not isinstance(category_node, Mapping) or subcategory not in category_node:
                missing.append(f"{entry.category}.{subcategory}")
    for path in missing:
        LOGGER.warning("Schema entry %s not found in document; skipping", path)
    return missing


def discover_schema(document: Mapping[str, Any]) -> TopLevelSchema:
    """Build a schema covering every category in the document.

    The ``browsers`` subtree is skipped, as are non-object values.
    """
    mapping: dict[str, list[str]] = {}
    for category, node in document.items():
        if category == BROWSERS_KEY or not isinstance(node, Mapping):
            continue
        subcategories = [
            key for key, value in node.items() if key != COMPAT_KEY and isinstance(value, Mapping)
        ]
        if subcategories:
            mapping[category] = subcategories
    return build_schema(mapping)
