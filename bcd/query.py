"""Filtering, search and indexing over extracted feature records."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
import logging
from typing import Literal

from .constants import DEFAULT_PAGE_SIZE, SEARCH_SIMILARITY_THRESHOLD
from .exceptions import DuplicateFeatureError
from .model import FeatureRecord, StatusFlag, UrlField
from .support import FoldPolicy, SupportBucket, support_bucket_matches
from .util.text import similarity, tokenize

LOGGER = logging.getLogger(__name__)

Predicate = Callable[[FeatureRecord], bool]
DuplicatePolicy = Literal["reject", "keep_first", "last_write_wins"]

_URL_FIELDS: tuple[UrlField, ...] = ("description", "mdn_url", "spec_url")
_STATUS_FLAGS: tuple[StatusFlag, ...] = ("deprecated", "experimental", "standard_track")


def has_field(record: FeatureRecord, field: UrlField, present: bool = True) -> bool:
    if field not in _URL_FIELDS:
        raise ValueError(f"Unknown field: {field!r}")
    return (getattr(record, field) is not None) is present


def status_is(record: FeatureRecord, flag: StatusFlag, value: bool | None) -> bool:
    """Match a status tri-state; ``None`` means "no information"."""
    if flag not in _STATUS_FLAGS:
        raise ValueError(f"Unknown status flag: {flag!r}")
    return getattr(record, flag) is value


def support_matches(
    record: FeatureRecord,
    browser: str,
    bucket: SupportBucket,
    policy: FoldPolicy = "any",
) -> bool:
    return support_bucket_matches(record.support, browser, bucket, policy)


def in_category(record: FeatureRecord, category: str) -> bool:
    """Prefix match on whole dotted segments (``css`` or ``css.properties``)."""
    prefix = category.strip(".")
    return record.name == prefix or record.name.startswith(f"{prefix}.")


def filter_features(records: Iterable[FeatureRecord], *predicates: Predicate) -> list[FeatureRecord]:
    return [record for record in records if all(predicate(record) for predicate in predicates)]


def _search_score(name: str, query_tokens: list[str], query: str) -> float:
    name_tokens = tokenize(name)
    if query_tokens and all(
        any(token.startswith(query_token) for token in name_tokens) for query_token in query_tokens
    ):
        return 1.0
    return similarity(name, query)


def search(
    records: Iterable[FeatureRecord],
    text: str,
    threshold: float = SEARCH_SIMILARITY_THRESHOLD,
) -> list[FeatureRecord]:
    """Free-text search over feature names.

    A record matches when every query token prefixes one of its name tokens,
    or when its trigram similarity to the query reaches ``threshold``.
    Results are best-first; ties keep input order.
    """
    query_tokens = tokenize(text)
    if not query_tokens:
        return []
    scored: list[tuple[float, int, FeatureRecord]] = []
    for position, record in enumerate(records):
        score = _search_score(record.name, query_tokens, text)
        if score >= threshold:
            scored.append((score, position, record))
    scored.sort(key=lambda item: (-item[0], item[1]))
    return [record for _score, _position, record in scored]


def paginate(
    records: list[FeatureRecord],
    page: int,
    per_page: int = DEFAULT_PAGE_SIZE,
) -> list[FeatureRecord]:
    """Return one 1-based page of records."""
    if page < 1 or per_page < 1:
        raise ValueError("page and per_page must be positive")
    start = (page - 1) * per_page
    return records[start : start + per_page]


class FeatureIndex:
    """In-memory records keyed by slug with an explicit duplicate policy.

    ``reject`` raises :class:`DuplicateFeatureError`, ``keep_first`` ignores
    later records, ``last_write_wins`` replaces the stored record. Every
    conflict is logged and counted.
    """

    def __init__(self, on_duplicate: DuplicatePolicy = "reject") -> None:
        if on_duplicate not in ("reject", "keep_first", "last_write_wins"):
            raise ValueError(f"Unknown duplicate policy: {on_duplicate!r}")
        self.on_duplicate = on_duplicate
        self.conflicts: list[str] = []
        self._records: dict[str, FeatureRecord] = {}

    def add(self, record: FeatureRecord) -> None:
        slug = record.slug
        if not slug:
            raise ValueError(f"Record {record.name!r} has an empty slug")
        existing = self._records.get(slug)
        if existing is not None:
            self.conflicts.append(slug)
            LOGGER.warning(
                "Duplicate feature slug %s (%s vs %s), policy=%s",
                slug,
                existing.name,
                record.name,
                self.on_duplicate,
            )
            if self.on_duplicate == "reject":
                raise DuplicateFeatureError(slug, record.name)
            if self.on_duplicate == "keep_first":
                return
        self._records[slug] = record

    def extend(self, records: Iterable[FeatureRecord]) -> None:
        for record in records:
            self.add(record)

    def get(self, slug: str) -> FeatureRecord | None:
        return self._records.get(slug)

    def by_name(self, name: str) -> FeatureRecord | None:
        return next((record for record in self._records.values() if record.name == name), None)

    def __contains__(self, slug: object) -> bool:
        return slug in self._records

    def __iter__(self) -> Iterator[FeatureRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)
