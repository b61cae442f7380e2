"""Failure conditions raised along the check pipeline.

Every one of these is terminal for a single origin: the checker turns them
into a CheckOutcome instead of letting them escape.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .validators.manifest import SchemaViolation


class CrawlerError(Exception):
    """Base class for webmcp-crawler errors."""


class InvalidOriginError(CrawlerError, ValueError):
    """Raised when a user-supplied string cannot be turned into an origin."""

    def __init__(self, raw: str, reason: str) -> None:
        super().__init__(f"Invalid origin {raw!r}: {reason}")
        self.raw = raw
        self.reason = reason


class FetchError(CrawlerError):
    """Base class for failures while retrieving the manifest resource."""


class NetworkError(FetchError):
    """DNS, connection, TLS or timeout failure. The message is kept verbatim."""


class HttpError(FetchError):
    """The server answered with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code


class ManifestParseError(FetchError):
    """The response body is not valid JSON."""


class ManifestValidationError(CrawlerError):
    """The parsed document does not conform to the manifest schema."""

    def __init__(self, violations: list[SchemaViolation]) -> None:
        super().__init__("; ".join(str(v) for v in violations))
        self.violations = violations
