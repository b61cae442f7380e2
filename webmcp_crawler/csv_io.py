"""Tabular input/output: origin lists in, check results out."""

import csv
import io
import re
from collections.abc import Iterable
from pathlib import Path

from .config import CSV_HEADER, HEADER_ALIASES
from .models.outcome import CheckOutcome

QUOTE_PATTERN = re.compile(r"^[\"']|[\"']$")


def _first_column(line: str) -> str:
    # Each physical line is parsed on its own so a stray quote cannot span lines
    row = next(csv.reader([line]), [""])
    return QUOTE_PATTERN.sub("", (row[0] if row else "").strip())


def parse_origins(text: str) -> list[str]:
    """Extract origin strings from comma-delimited text.

    Blank lines are ignored. The first non-blank row is treated as a header
    and skipped when its first column is ``url``, ``domain`` or ``website``
    (case-insensitive). Every other row contributes its first column.

    Args:
        text: Contents of the input table.

    Returns:
        Origin strings in file order, not yet normalized.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if lines and _first_column(lines[0]).lower() in HEADER_ALIASES:
        lines = lines[1:]
    return [_first_column(line) for line in lines]


def read_origins(path: Path) -> list[str]:
    """Read origin strings from a CSV file.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not UTF-8 text.
    """
    with open(path, newline="", encoding="utf-8-sig") as f:
        return parse_origins(f.read())


def outcome_to_row(outcome: CheckOutcome) -> list[str]:
    """Render one outcome as CSV cells, in header order."""
    return [
        outcome.url,
        "true" if outcome.detected else "false",
        "true" if outcome.valid else "false",
        outcome.version,
        str(outcome.tool_count),
        outcome.tool_names,
        outcome.error,
    ]


def results_to_csv(outcomes: Iterable[CheckOutcome]) -> str:
    """Serialize outcomes as CSV text with a fixed header row.

    Fields containing a comma, quote or line break are quoted with inner
    quotes doubled. The text always ends with a single newline.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(CSV_HEADER)
    for outcome in outcomes:
        writer.writerow(outcome_to_row(outcome))
    return buffer.getvalue()


def write_results(path: Path, outcomes: Iterable[CheckOutcome]) -> None:
    """Write outcomes to a CSV file, creating parent directories.

    Raises:
        OSError: If the file cannot be written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        f.write(results_to_csv(outcomes))
