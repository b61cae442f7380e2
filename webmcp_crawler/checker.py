"""Single-origin pipeline: normalize, fetch, validate.

Every failure mode ends in a CheckOutcome; nothing raised inside the
pipeline escapes ``Checker.check``.
"""

from .audit import AuditLogger
from .config import TOOL_NAME_SEPARATOR
from .errors import (
    HttpError,
    InvalidOriginError,
    ManifestParseError,
    ManifestValidationError,
    NetworkError,
)
from .fetcher import ManifestFetcher
from .models.outcome import CheckOutcome
from .normalize import normalize_origin
from .validators.manifest import format_violations, load_manifest


class Checker:
    """Checks one origin at a time for a valid WebMCP manifest."""

    def __init__(
        self,
        fetcher: ManifestFetcher | None = None,
        audit: AuditLogger | None = None,
    ) -> None:
        self.fetcher = fetcher or ManifestFetcher()
        self.audit = audit

    def check(self, raw: str) -> CheckOutcome:
        """Run the pipeline for one user-supplied origin string."""
        outcome = self._check(raw)
        if self.audit:
            self.audit.log(
                "CHECK",
                input=raw,
                url=outcome.url,
                detected=outcome.detected,
                valid=outcome.valid,
                tools=outcome.tool_count,
                error=outcome.error or None,
            )
        return outcome

    def _check(self, raw: str) -> CheckOutcome:
        # 1. Normalize
        try:
            origin = normalize_origin(raw)
        except InvalidOriginError:
            return CheckOutcome(url=raw, error="Invalid URL")

        try:
            return self._check_origin(origin)
        except Exception as e:
            # Last resort so one origin can never abort a batch
            if self.audit:
                self.audit.log("CHECK_ERROR", url=origin, error=repr(e))
            return CheckOutcome(url=origin, error=str(e) or type(e).__name__)

    def _check_origin(self, origin: str) -> CheckOutcome:
        # 2. Fetch
        try:
            document = self.fetcher.fetch(origin)
        except NetworkError as e:
            return CheckOutcome(url=origin, error=str(e))
        except HttpError as e:
            return CheckOutcome(url=origin, error=f"HTTP {e.status_code}")
        except ManifestParseError:
            return CheckOutcome(url=origin, error="Invalid JSON")

        # 3. Validate
        try:
            manifest = load_manifest(document)
        except ManifestValidationError as e:
            return CheckOutcome(
                url=origin,
                detected=True,
                error=f"Invalid manifest: {format_violations(e.violations)}",
            )

        return CheckOutcome(
            url=origin,
            detected=True,
            valid=True,
            version=manifest.manifest_version,
            tool_count=len(manifest.tools),
            tool_names=TOOL_NAME_SEPARATOR.join(manifest.tool_names),
        )


def check_origin(raw: str, fetcher: ManifestFetcher | None = None) -> CheckOutcome:
    """Check a single origin with a default or supplied fetcher."""
    return Checker(fetcher=fetcher).check(raw)
