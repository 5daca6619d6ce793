"""Constants used across pybcd."""

from __future__ import annotations

from typing import Final

COMPAT_KEY: Final[str] = "__compat"
BROWSERS_KEY: Final[str] = "browsers"

DATA_URL: Final[str] = "https://unpkg.com/@mdn/browser-compat-data/data.json"

DEFAULT_TOP_LEVEL_SCHEMA: Final[dict[str, tuple[str, ...]]] = {
    "css": ("at-rules", "properties"),
}

FULL_TOP_LEVEL_SCHEMA: Final[dict[str, tuple[str, ...]]] = {
    "css": ("at-rules", "properties", "selectors", "types"),
    "html": ("elements", "global_attributes"),
    "javascript": (
        "builtins",
        "classes",
        "functions",
        "grammar",
        "operators",
        "statements",
    ),
}

BROWSER_NAMES: Final[dict[str, str]] = {
    "chrome": "Chrome",
    "chrome_android": "Chrome Android",
    "edge": "Edge",
    "edge_mobile": "Edge Mobile",
    "firefox": "Firefox",
    "firefox_android": "Firefox Android",
    "ie": "Internet Explorer",
    "nodejs": "NodeJS",
    "opera": "Opera",
    "opera_android": "Opera Android",
    "qq_android": "QQ Android",
    "safari": "Safari",
    "safari_ios": "Safari Mobile",
    "samsunginternet_android": "Samsung Internet for Android",
    "uc_android": "UC Browser for Android",
    "uc_chinese_android": "Chinese UC Browser for Android",
    "webview_android": "WebView Android",
}

SUMMARY_BROWSERS: Final[tuple[str, ...]] = (
    "chrome",
    "edge",
    "firefox",
    "safari",
    "opera",
)

STATUS_ICON_MAP: Final[dict[str, str]] = {
    "supported": "✅",
    "supported_since": "✅",
    "unsupported": "❌",
    "unknown": "﹖",
}

STATUS_LABEL_MAP: Final[dict[str, str]] = {
    "supported": "Supported",
    "supported_since": "Supported since",
    "unsupported": "Not supported",
    "unknown": "Unknown",
}

SEARCH_SIMILARITY_THRESHOLD: Final[float] = 0.3
DEFAULT_PAGE_SIZE: Final[int] = 50

DEBUG_ENV_VAR: Final[str] = "PYBCD_DEBUG"
DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0
