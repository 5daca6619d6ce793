"""Rich renderers for feature records and the browser catalog."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .browsers import BrowserCatalog
from .constants import STATUS_ICON_MAP, STATUS_LABEL_MAP, SUMMARY_BROWSERS
from .model import Classification, FeatureRecord
from .support import FoldPolicy, classify_all, classify_support
from .util.text import ellipsize


def _tri_state_label(value: bool | None) -> str:
    if value is None:
        return "no info"
    return "yes" if value else "no"


def _classification_label(classification: Classification) -> str:
    icon = STATUS_ICON_MAP[classification.state]
    label = STATUS_LABEL_MAP[classification.state]
    if classification.state == "supported_since":
        return f"{icon} {label} {classification.version}"
    return f"{icon} {label}"


def _status_line(record: FeatureRecord) -> str:
    return (
        f"Deprecated: {_tri_state_label(record.deprecated)}  "
        f"Experimental: {_tri_state_label(record.experimental)}  "
        f"Standard track: {_tri_state_label(record.standard_track)}"
    )


def render_feature(
    feature: FeatureRecord,
    catalog: BrowserCatalog | None = None,
    policy: FoldPolicy = "any",
) -> Group:
    """Render one feature record as a Rich renderable group."""
    catalog = catalog or BrowserCatalog()
    lines: list[Text] = [Text(feature.name, style="bold")]

    if feature.description:
        lines.append(Text(feature.description))
    if feature.mdn_url:
        lines.append(Text(f"MDN: {feature.mdn_url}"))
    if feature.spec_url:
        spec_urls = feature.spec_url if isinstance(feature.spec_url, list) else [feature.spec_url]
        for spec_url in spec_urls:
            lines.append(Text(f"Spec: {spec_url}"))
    lines.append(Text(_status_line(feature), style="dim"))

    lines.append(Text(""))
    lines.append(Text("Browser Support", style="bold"))
    for browser_id, value in feature.support.items():
        folded = classify_support(value, policy)
        name = catalog.display_name(browser_id)
        lines.append(Text(f"{name}: {_classification_label(folded)}", style="bold cyan"))
        windows = classify_all(value)
        if len(windows) > 1:
            for window in windows:
                lines.append(Text(f"  {_classification_label(window)}"))

    return Group(Panel(Group(*lines), border_style="blue", title=f"/{feature.slug}"))


def render_summary(
    records: Sequence[FeatureRecord],
    browsers: Sequence[str] = SUMMARY_BROWSERS,
    catalog: BrowserCatalog | None = None,
    policy: FoldPolicy = "any",
    name_width: int = 48,
) -> Table:
    """Render a table of records with one support column per browser."""
    catalog = catalog or BrowserCatalog()
    table = Table(title=f"{len(records)} features", show_lines=False)
    table.add_column("Feature", style="bold", no_wrap=True)
    for browser_id in browsers:
        table.add_column(catalog.display_name(browser_id), justify="center")

    for record in records:
        cells = [ellipsize(record.name, name_width)]
        for browser_id in browsers:
            if browser_id not in record.support:
                cells.append("")
                continue
            classification = classify_support(record.support[browser_id], policy)
            cell = STATUS_ICON_MAP[classification.state]
            if classification.state == "supported_since":
                cell = f"{cell} {classification.version}"
            cells.append(cell)
        table.add_row(*cells)
    return table


def render_browsers(catalog: BrowserCatalog) -> Table:
    """Render the browser catalog with release counts."""
    table = Table(title="Browsers")
    table.add_column("Id", style="bold")
    table.add_column("Name")
    table.add_column("Releases", justify="right")
    table.add_column("Latest")
    for browser in catalog:
        latest = browser.releases[-1].version if browser.releases else ""
        table.add_row(browser.id, browser.display_name, str(len(browser.releases)), latest)
    return table
