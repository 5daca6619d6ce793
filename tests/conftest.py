from __future__ import annotations

import copy
from typing import Any

import pytest

_DOCUMENT: dict[str, Any] = {
    "browsers": {
        "chrome": {
            "name": "Chrome",
            "releases": {
                "1": {"release_date": "2008-12-11", "status": "retired"},
                "120": {"release_date": "2023-12-05", "status": "current"},
            },
        },
        "firefox": {
            "name": "Firefox",
            "releases": {"1": {"release_date": "2004-11-09", "status": "retired"}},
        },
        "servo": {"name": "Servo", "releases": {}},
    },
    "css": {
        "at-rules": {
            "media": {
                "__compat": {
                    "description": "@media",
                    "mdn_url": "https://developer.mozilla.org/docs/Web/CSS/@media",
                    "spec_url": "https://drafts.csswg.org/mediaqueries/",
                    "status": {"deprecated": False, "experimental": False, "standard_track": True},
                    "support": {
                        "chrome": {"version_added": True},
                        "firefox": {"version_added": "1"},
                        "safari": {"version_added": None},
                    },
                },
                "hover": {
                    "__compat": {
                        "support": {"chrome": {"version_added": "38"}},
                    },
                },
            },
            "page": {
                "__compat": {
                    "support": {"chrome": {"version_added": False}},
                },
            },
        },
        "properties": {
            "gap": {
                "__compat": {
                    "status": {"experimental": True},
                    "support": {
                        "chrome": [
                            {"version_added": "84"},
                            {"version_added": "66", "prefix": "-webkit-"},
                        ],
                        "firefox": {"version_added": False},
                        "netscape": {"version_added": "4"},
                    },
                },
            },
        },
        "types": {
            "angle": {
                "__compat": {"support": {"chrome": {"version_added": "2"}}},
                "deg": {"__compat": {"support": {"chrome": {"version_added": "2"}}}},
            },
        },
    },
    "html": {
        "elements": {
            "applet": {
                "__compat": {"status": {"deprecated": True}, "support": {}},
                "width": {"__compat": {"support": {"ie": {"version_added": "6"}}}},
            },
            "canvas": {
                "__compat": {"support": {"chrome": {"version_added": "1"}}},
                "width": {"__compat": {"support": {"chrome": {"version_added": "1"}}}},
            },
        },
    },
}


@pytest.fixture
def compat_document() -> dict[str, Any]:
    return copy.deepcopy(_DOCUMENT)
