from __future__ import annotations

from typing import Any

import pytest

from bcd.exceptions import DocumentError
from bcd.schema import build_schema
from bcd.support import SUPPORTED, classify_support
from bcd.walker import feature_paths, find_duplicates, iter_features, walk, walk_branch


def test_walk_default_schema_order(compat_document: dict[str, Any]) -> None:
    records = walk(compat_document)

    assert feature_paths(records) == [
        "css.at-rules.media",
        "css.at-rules.media.hover",
        "css.at-rules.page",
        "css.properties.gap",
    ]


def test_walk_single_marker_document() -> None:
    document = {
        "css": {"at-rules": {"media": {"__compat": {"support": {"chrome": {"version_added": True}}}}}}
    }

    records = walk(document, {"css": ["at-rules"]})

    assert len(records) == 1
    assert records[0].name == "css.at-rules.media"
    assert classify_support(records[0].support["chrome"]) == SUPPORTED


def test_walk_emits_at_every_marker_node(compat_document: dict[str, Any]) -> None:
    records = walk(compat_document, {"css": ["types"]})
    assert feature_paths(records) == ["css.types.angle", "css.types.angle.deg"]


def test_walk_names_by_full_path(compat_document: dict[str, Any]) -> None:
    records = walk(compat_document, {"html": ["elements"]})
    names = feature_paths(records)

    assert names == [
        "html.elements.applet",
        "html.elements.applet.width",
        "html.elements.canvas",
        "html.elements.canvas.width",
    ]
    assert find_duplicates(records) == []


def test_walk_schema_order_controls_output(compat_document: dict[str, Any]) -> None:
    schema = build_schema({"css": ["properties", "at-rules"]})
    names = feature_paths(walk(compat_document, schema))
    assert names[0] == "css.properties.gap"
    assert names[1:] == ["css.at-rules.media", "css.at-rules.media.hover", "css.at-rules.page"]


def test_walk_missing_category_and_subcategory_yield_nothing(
    compat_document: dict[str, Any],
) -> None:
    assert walk(compat_document, {"svg": ["elements"]}) == []
    assert walk(compat_document, {"css": ["selectors"]}) == []
    assert feature_paths(walk(compat_document, {"svg": ["elements"], "css": ["properties"]})) == [
        "css.properties.gap"
    ]


def test_walk_skips_non_object_children() -> None:
    document = {
        "css": {
            "properties": {
                "gap": {
                    "__compat": {"support": {}},
                    "comment": "not a feature",
                    "values": ["a", "b"],
                },
                "stray": 3,
            }
        }
    }
    assert feature_paths(walk(document, {"css": ["properties"]})) == ["css.properties.gap"]


def test_walk_marker_directly_at_root() -> None:
    document = {"api": {"AbortController": {"__compat": {"support": {}}, "abort": {"__compat": {"support": {}}}}}}
    names = feature_paths(walk(document, {"api": ["AbortController"]}))
    assert names == ["api.AbortController", "api.AbortController.abort"]


def test_walk_deepest_policy(compat_document: dict[str, Any]) -> None:
    records = walk(compat_document, {"css": ["at-rules", "types"]}, policy="deepest")
    assert feature_paths(records) == [
        "css.at-rules.media.hover",
        "css.at-rules.page",
        "css.types.angle.deg",
    ]


def test_walk_is_deterministic_and_leaves_document_untouched(
    compat_document: dict[str, Any],
) -> None:
    snapshot = repr(compat_document)
    first = walk(compat_document, {"css": ["at-rules", "properties"], "html": ["elements"]})
    second = walk(compat_document, {"css": ["at-rules", "properties"], "html": ["elements"]})

    assert first == second
    assert repr(compat_document) == snapshot


def test_walk_parallel_matches_serial(compat_document: dict[str, Any]) -> None:
    schema = {"css": ["at-rules", "properties", "types"], "html": ["elements"]}
    assert walk(compat_document, schema, jobs=4) == walk(compat_document, schema)


def test_iter_features_is_lazy(compat_document: dict[str, Any]) -> None:
    iterator = iter_features(compat_document, {"css": ["at-rules"]})
    assert next(iterator).name == "css.at-rules.media"


def test_walk_branch(compat_document: dict[str, Any]) -> None:
    assert feature_paths(walk_branch(compat_document, "css", "properties")) == ["css.properties.gap"]
    assert walk_branch(compat_document, "css", "nope") == []
    assert walk_branch(compat_document, "nope", "properties") == []


def test_walk_deep_document_does_not_hit_recursion_limit() -> None:
    node: dict[str, Any] = {"__compat": {"support": {}}}
    for index in range(3000):
        node = {f"k{index}": node}
    document = {"css": {"properties": node}}

    records = walk(document, {"css": ["properties"]})

    assert len(records) == 1
    assert len(records[0].path) == 3002


def test_walk_rejects_non_object_document() -> None:
    with pytest.raises(DocumentError):
        walk(["not", "a", "document"])  # type: ignore[arg-type]


def test_walk_rejects_unknown_policy(compat_document: dict[str, Any]) -> None:
    with pytest.raises(ValueError, match="walk policy"):
        walk(compat_document, policy="widest")  # type: ignore[arg-type]


def test_find_duplicates_reports_slug_collisions() -> None:
    document = {
        "css": {
            "properties": {
                "a": {"b-c": {"__compat": {"support": {}}}, "b": {"c": {"__compat": {"support": {}}}}}
            }
        }
    }
    records = walk(document, {"css": ["properties"]})

    assert feature_paths(records) == ["css.properties.a.b-c", "css.properties.a.b.c"]
    assert find_duplicates(records) == ["css-properties-a-b-c"]


def test_walk_repeated_root_produces_duplicates(compat_document: dict[str, Any]) -> None:
    records = walk(compat_document, {"css": ["properties", "properties"]})
    assert find_duplicates(records) == ["css-properties-gap"]


def test_walk_accepts_schema_pairs(compat_document: dict[str, Any]) -> None:
    records = walk(compat_document, [("css", ["at-rules"]), ("html", ("elements",))])

    assert feature_paths(records) == [
        "css.at-rules.media",
        "css.at-rules.media.hover",
        "css.at-rules.page",
        "html.elements.applet",
        "html.elements.applet.width",
        "html.elements.canvas",
        "html.elements.canvas.width",
    ]
    assert walk(compat_document, [("css", ["at-rules"])], jobs=2) == records[:3]
