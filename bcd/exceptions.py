"""Exception types for pybcd."""

from __future__ import annotations


class BcdError(Exception):
    """Base exception for expected application errors."""


class DocumentError(BcdError):
    """Raised when a compat document cannot be read or parsed."""

    def __init__(self, source: str, *, cause: str | None = None) -> None:
        self.source = source
        detail = f"Unable to load compat data from {source}"
        if cause:
            detail = f"{detail} ({cause})"
        super().__init__(detail)


class SchemaError(BcdError):
    """Raised when a top-level schema or feature path is malformed."""


class DuplicateFeatureError(BcdError):
    """Raised when two records resolve to the same feature slug."""

    def __init__(self, slug: str, name: str) -> None:
        self.slug = slug
        self.name = name
        super().__init__(f"Duplicate feature {name!r} (slug {slug!r})")


class NetworkError(BcdError):
    """Raised when a network operation fails."""

    def __init__(self, url: str, *, cause: str | None = None) -> None:
        detail = f"Unable to connect to {url}"
        if cause:
            detail = f"{detail} ({cause})"
        super().__init__(detail)


class RequestTimeoutError(BcdError):
    """Raised when a request times out."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Request timed out for {url}")


class HttpStatusError(BcdError):
    """Raised when a non-200 HTTP response is returned."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"Request failed with HTTP {status_code} for {url}")


class ContentError(BcdError):
    """Raised when a response body is unexpectedly empty."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Received empty content from {url}")
