"""Depth-first extraction of feature records from a compat document.

The walk starts at every ``category.subcategory`` root named by the
top-level schema and descends the document in stored key order. Every node
carrying a ``__compat`` key yields one record, and its other keys are still
descended into, so nested features (``css.types.angle.deg``) are found too.

Traversal state lives in :class:`~bcd.model.WalkContext` values on an
explicit work stack, so separate branches share nothing and can be walked
concurrently.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Mapping
from concurrent.futures import ThreadPoolExecutor
import logging
from typing import Any, Literal

from .builder import build_feature
from .constants import COMPAT_KEY, DEFAULT_TOP_LEVEL_SCHEMA
from .exceptions import DocumentError
from .model import FeatureRecord, WalkContext
from .schema import SchemaLike, TopLevelSchema, build_schema, validate_schema
from .util.debug import debug_log

LOGGER = logging.getLogger(__name__)

WalkPolicy = Literal["all", "deepest"]
WALK_POLICIES: tuple[WalkPolicy, ...] = ("all", "deepest")


def _has_nested_compat(node: Mapping[str, Any]) -> bool:
    stack: list[Any] = [value for key, value in node.items() if key != COMPAT_KEY]
    while stack:
        current = stack.pop()
        if not isinstance(current, Mapping):
            continue
        if COMPAT_KEY in current:
            return True
        stack.extend(current.values())
    return False


def _iter_subtree(
    node: Mapping[str, Any],
    context: WalkContext,
    policy: WalkPolicy,
) -> Iterator[FeatureRecord]:
    stack: list[tuple[Mapping[str, Any], WalkContext]] = [(node, context)]
    while stack:
        current, ctx = stack.pop()

        if COMPAT_KEY in current:
            if policy == "all" or not _has_nested_compat(current):
                debug_log("compat node at %s (depth %d)", ".".join(ctx.path), ctx.depth)
                yield build_feature(ctx.path, current[COMPAT_KEY])

        children = [
            (value, ctx.child(key))
            for key, value in current.items()
            if key != COMPAT_KEY and isinstance(value, Mapping)
        ]
        # reversed so children pop in document order
        stack.extend(reversed(children))


def walk_branch(
    document: Mapping[str, Any],
    category: str,
    subcategory: str,
    *,
    policy: WalkPolicy = "all",
) -> list[FeatureRecord]:
    """Walk one ``category.subcategory`` root; missing roots yield nothing."""
    category_node = document.get(category)
    if not isinstance(category_node, Mapping):
        return []
    root = category_node.get(subcategory)
    if not isinstance(root, Mapping):
        return []
    return list(_iter_subtree(root, WalkContext(path=(category, subcategory)), policy))


def _resolve_schema(
    schema: SchemaLike | None,
) -> TopLevelSchema:
    if schema is None:
        return build_schema(DEFAULT_TOP_LEVEL_SCHEMA)
    return build_schema(schema)


def _check_document(document: object) -> Mapping[str, Any]:
    if not isinstance(document, Mapping):
        raise DocumentError("document", cause="expected a JSON object at the top level")
    return document


def _check_policy(policy: str) -> None:
    if policy not in WALK_POLICIES:
        raise ValueError(f"Unknown walk policy: {policy!r}")


def iter_features(
    document: Mapping[str, Any],
    schema: SchemaLike | None = None,
    *,
    policy: WalkPolicy = "all",
) -> Iterator[FeatureRecord]:
    """Lazily yield records in schema order, then document order."""
    document = _check_document(document)
    _check_policy(policy)
    resolved = _resolve_schema(schema)
    validate_schema(document, resolved)
    for entry in resolved:
        category_node = document.get(entry.category)
        if not isinstance(category_node, Mapping):
            continue
        for subcategory in entry.subcategories:
            root = category_node.get(subcategory)
            if not isinstance(root, Mapping):
                continue
            yield from _iter_subtree(root, WalkContext(path=(entry.category, subcategory)), policy)


def walk(
    document: Mapping[str, Any],
    schema: SchemaLike | None = None,
    *,
    policy: WalkPolicy = "all",
    jobs: int = 1,
) -> list[FeatureRecord]:
    """Extract every feature record below the schema's roots.

    With ``jobs > 1`` the roots are walked on a thread pool; results are
    merged back in schema order so the output matches a serial walk.
    """
    if jobs <= 1:
        records = list(iter_features(document, schema, policy=policy))
    else:
        document = _check_document(document)
        _check_policy(policy)
        resolved = _resolve_schema(schema)
        validate_schema(document, resolved)
        roots = [(entry.category, sub) for entry in resolved for sub in entry.subcategories]
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            branches = executor.map(
                lambda root: walk_branch(document, root[0], root[1], policy=policy), roots
            )
            records = [record for branch in branches for record in branch]

    LOGGER.info("Extracted %d feature records", len(records))
    return records


def feature_paths(records: Iterable[FeatureRecord]) -> list[str]:
    """Return the dotted names of records, in order."""
    return [record.name for record in records]


def find_duplicates(records: Iterable[FeatureRecord]) -> list[str]:
    """Return slugs shared by more than one record, in first-seen order.

    Names are unique per path, but distinct names can still collapse to the
    same slug (``a.b-c`` and ``a.b.c``), and a schema may list a root twice.
    """
    counts = Counter(record.slug for record in records)
    return [slug for slug, count in counts.items() if count > 1]
