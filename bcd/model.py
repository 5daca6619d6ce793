"""Data models for compat document extraction."""

from __future__ import annotations

from collections.abc import Mapping
import copy
from dataclasses import dataclass, field
from typing import Any, Literal

from .util.text import slugify

SupportState = Literal["supported", "unsupported", "unknown", "supported_since"]
StatusFlag = Literal["deprecated", "experimental", "standard_track"]
UrlField = Literal["description", "mdn_url", "spec_url"]


@dataclass(frozen=True)
class SchemaEntry:
    category: str
    subcategories: tuple[str, ...]


@dataclass(frozen=True)
class WalkContext:
    path: tuple[str, ...]
    depth: int = 0

    def child(self, key: str) -> WalkContext:
        return WalkContext(path=(*self.path, key), depth=self.depth + 1)


@dataclass(frozen=True)
class Classification:
    state: SupportState
    version: str | None = None

    def __str__(self) -> str:
        if self.state == "supported_since":
            return f"supported since {self.version}"
        return self.state


@dataclass(frozen=True)
class BrowserRelease:
    version: str
    metadata: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class BrowserInfo:
    id: str
    display_name: str
    releases: tuple[BrowserRelease, ...] = ()


@dataclass(frozen=True)
class FeatureRecord:
    name: str
    description: str | None
    mdn_url: str | None
    spec_url: str | list[str] | None
    deprecated: bool | None
    experimental: bool | None
    standard_track: bool | None
    support: Mapping[str, Any]
    path: tuple[str, ...] = field(default=(), compare=False)

    def __hash__(self) -> int:
        # support is a read-only mapping and cannot be hashed
        return hash(self.name)

    @property
    def category(self) -> str:
        if self.path:
            return self.path[0]
        return self.name.split(".", maxsplit=1)[0]

    @property
    def slug(self) -> str:
        return slugify(self.name)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable view of the record."""
        return {
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
            "mdn_url": self.mdn_url,
            "spec_url": self.spec_url,
            "deprecated": self.deprecated,
            "experimental": self.experimental,
            "standard_track": self.standard_track,
            "support": copy.deepcopy(dict(self.support)),
        }
