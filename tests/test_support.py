from __future__ import annotations

import pytest

from bcd.model import Classification
from bcd.support import (
    SUPPORTED,
    UNKNOWN,
    UNSUPPORTED,
    classify,
    classify_all,
    classify_support,
    fold,
    is_supported,
    support_bucket_matches,
)


@pytest.mark.parametrize(
    ("entry", "expected"),
    [
        ({"version_added": True}, SUPPORTED),
        ({"version_added": False}, UNSUPPORTED),
        ({"version_added": None}, UNKNOWN),
        ({}, UNKNOWN),
        ({"version_added": "54"}, Classification("supported_since", version="54")),
        ({"version_added": "≤18"}, Classification("supported_since", version="≤18")),
        ({"version_added": "preview"}, Classification("supported_since", version="preview")),
        ({"version_added": "true"}, SUPPORTED),
        ({"version_added": "false"}, UNSUPPORTED),
        ({"version_added": "null"}, UNKNOWN),
        ({"version_added": 12}, UNKNOWN),
        (None, UNKNOWN),
        ("54", UNKNOWN),
    ],
)
def test_classify(entry: object, expected: Classification) -> None:
    assert classify(entry) == expected


def test_classify_is_idempotent() -> None:
    entry = {"version_added": "54", "notes": "x"}
    assert classify(entry) == classify(entry)
    assert entry == {"version_added": "54", "notes": "x"}


def test_classification_str() -> None:
    assert str(Classification("supported_since", version="54")) == "supported since 54"
    assert str(UNKNOWN) == "unknown"


def test_classify_all_handles_single_list_and_missing() -> None:
    assert classify_all({"version_added": True}) == [SUPPORTED]
    assert classify_all([{"version_added": False}, {"version_added": "3"}]) == [
        UNSUPPORTED,
        Classification("supported_since", version="3"),
    ]
    assert classify_all(None) == []
    assert classify_all([]) == []


def test_is_supported() -> None:
    assert is_supported(SUPPORTED)
    assert is_supported(Classification("supported_since", version="1"))
    assert not is_supported(UNSUPPORTED)
    assert not is_supported(UNKNOWN)


def test_fold_any_prefers_exact_support_then_first_version() -> None:
    since_84 = Classification("supported_since", version="84")
    since_66 = Classification("supported_since", version="66")

    assert fold([UNSUPPORTED, since_84, since_66], "any") == since_84
    assert fold([since_84, SUPPORTED], "any") == SUPPORTED
    assert fold([UNKNOWN, UNSUPPORTED], "any") == UNSUPPORTED
    assert fold([UNKNOWN, UNKNOWN], "any") == UNKNOWN


def test_fold_first_uses_only_the_first_window() -> None:
    assert fold([UNSUPPORTED, SUPPORTED], "first") == UNSUPPORTED
    assert fold([UNKNOWN], "first") == UNKNOWN


def test_fold_all_requires_every_window() -> None:
    since_3 = Classification("supported_since", version="3")

    assert fold([since_3, SUPPORTED], "all") == SUPPORTED
    assert fold([since_3, since_3], "all") == since_3
    assert fold([since_3, UNKNOWN], "all") == UNKNOWN
    assert fold([UNKNOWN, UNSUPPORTED, SUPPORTED], "all") == UNSUPPORTED


@pytest.mark.parametrize("policy", ["any", "first", "all"])
def test_fold_empty_is_unknown(policy: str) -> None:
    assert fold([], policy) == UNKNOWN  # type: ignore[arg-type]


def test_fold_rejects_unknown_policy() -> None:
    with pytest.raises(ValueError, match="fold policy"):
        fold([SUPPORTED], "most")  # type: ignore[arg-type]


def test_classify_support_prefixed_windows() -> None:
    value = [{"version_added": False}, {"version_added": "66", "prefix": "-webkit-"}]

    assert classify_support(value) == Classification("supported_since", version="66")
    assert classify_support(value, "first") == UNSUPPORTED
    assert classify_support(value, "all") == UNSUPPORTED


def test_support_bucket_matches() -> None:
    support = {
        "chrome": {"version_added": True},
        "firefox": {"version_added": "1"},
        "safari": {"version_added": None},
        "ie": {"version_added": False},
        "opera": None,
    }

    assert support_bucket_matches(support, "chrome", "exactly_true")
    assert support_bucket_matches(support, "chrome", "true")
    assert not support_bucket_matches(support, "firefox", "exactly_true")
    assert support_bucket_matches(support, "firefox", "true")
    assert support_bucket_matches(support, "safari", "nil")
    assert not support_bucket_matches(support, "safari", "no_data")
    assert support_bucket_matches(support, "ie", "false")
    assert support_bucket_matches(support, "edge", "no_data")
    assert support_bucket_matches(support, "opera", "no_data")
    assert not support_bucket_matches(support, "edge", "nil")


def test_support_bucket_matches_rejects_unknown_bucket() -> None:
    with pytest.raises(ValueError, match="support bucket"):
        support_bucket_matches({}, "chrome", "maybe")  # type: ignore[arg-type]
