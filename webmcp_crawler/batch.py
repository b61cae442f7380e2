"""Batch runner: check a list of origins strictly in input order."""

from collections.abc import Callable, Iterable, Iterator

from .audit import AuditLogger
from .checker import Checker
from .models.outcome import BatchResult, CheckOutcome

# Called after each origin with (1-based position, total, outcome)
ProgressCallback = Callable[[int, int, CheckOutcome], None]


def iter_checks(origins: list[str], checker: Checker) -> Iterator[CheckOutcome]:
    """Yield one outcome per origin, each fetched only after the previous one."""
    for raw in origins:
        yield checker.check(raw)


def count_detected(outcomes: Iterable[CheckOutcome]) -> int:
    """Number of outcomes carrying a valid manifest."""
    return sum(1 for outcome in outcomes if outcome.valid)


def run_batch(
    origins: list[str],
    checker: Checker | None = None,
    on_outcome: ProgressCallback | None = None,
    audit: AuditLogger | None = None,
) -> BatchResult:
    """Check every origin sequentially and aggregate the outcomes.

    Args:
        origins: Raw origin strings, already extracted from the input table.
        checker: Checker to use (a default one is built if omitted).
        on_outcome: Optional progress sink invoked after each origin.
        audit: Optional audit logger for batch start/finish events.

    Returns:
        BatchResult with outcomes in input order and the valid count.
    """
    checker = checker or Checker(audit=audit)
    total = len(origins)

    if audit:
        audit.log("BATCH_START", total=total)

    outcomes: list[CheckOutcome] = []
    for position, outcome in enumerate(iter_checks(origins, checker), start=1):
        outcomes.append(outcome)
        if on_outcome:
            on_outcome(position, total, outcome)

    detected = count_detected(outcomes)

    if audit:
        audit.log("BATCH_DONE", total=total, detected=detected)

    return BatchResult(outcomes=tuple(outcomes), detected_count=detected)
