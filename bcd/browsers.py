"""Catalog of known browsers and their releases."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
import logging
from typing import Any

from .constants import BROWSER_NAMES, BROWSERS_KEY
from .model import BrowserInfo, BrowserRelease, FeatureRecord

LOGGER = logging.getLogger(__name__)


class BrowserCatalog:
    """Read-only, ordered collection of :class:`BrowserInfo`."""

    def __init__(self, browsers: Iterable[BrowserInfo] = ()) -> None:
        self._browsers: dict[str, BrowserInfo] = {browser.id: browser for browser in browsers}

    def __contains__(self, browser_id: object) -> bool:
        return browser_id in self._browsers

    def __iter__(self) -> Iterator[BrowserInfo]:
        return iter(self._browsers.values())

    def __len__(self) -> int:
        return len(self._browsers)

    def ids(self) -> tuple[str, ...]:
        return tuple(self._browsers)

    def get(self, browser_id: str) -> BrowserInfo | None:
        return self._browsers.get(browser_id)

    def display_name(self, browser_id: str) -> str:
        browser = self._browsers.get(browser_id)
        if browser is not None:
            return browser.display_name
        return BROWSER_NAMES.get(browser_id, browser_id)


def _releases(raw: object) -> tuple[BrowserRelease, ...]:
    if not isinstance(raw, Mapping):
        return ()
    releases: list[BrowserRelease] = []
    for version, info in raw.items():
        metadata = dict(info) if isinstance(info, Mapping) else {}
        metadata.pop("version", None)
        releases.append(BrowserRelease(version=str(version), metadata=metadata))
    return tuple(releases)


def build_catalog(document: Mapping[str, Any]) -> BrowserCatalog:
    """Build the catalog from the document's ``browsers`` subtree."""
    raw_browsers = document.get(BROWSERS_KEY)
    if not isinstance(raw_browsers, Mapping):
        LOGGER.warning("Document has no %r subtree; browser catalog is empty", BROWSERS_KEY)
        return BrowserCatalog()

    browsers: list[BrowserInfo] = []
    for browser_id, info in raw_browsers.items():
        info_map: Mapping[str, Any] = info if isinstance(info, Mapping) else {}
        raw_name = info_map.get("name")
        display_name = BROWSER_NAMES.get(browser_id) or (
            raw_name if isinstance(raw_name, str) and raw_name.strip() else browser_id
        )
        browsers.append(
            BrowserInfo(
                id=browser_id,
                display_name=display_name,
                releases=_releases(info_map.get("releases")),
            )
        )
    return BrowserCatalog(browsers)


def unknown_browsers(record: FeatureRecord, catalog: BrowserCatalog) -> list[str]:
    """Return support keys of ``record`` that the catalog does not know."""
    return [browser_id for browser_id in record.support if browser_id not in catalog]
