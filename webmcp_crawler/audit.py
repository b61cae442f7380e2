"""Audit logging for manifest checks."""

from datetime import datetime, timezone
from pathlib import Path


def _format_value(value: str | int | float | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    str_value = str(value)
    if str_value == "" or any(c in str_value for c in ' "\t\n'):
        escaped = str_value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
        return f'"{escaped}"'
    return str_value


class AuditLogger:
    """Appends check events to an audit file.

    Log format: ISO8601_TIMESTAMP [OPERATION] key1=value1 key2=value2
    Example: 2026-02-01T10:00:00Z [CHECK] url=https://example.com detected=true valid=true tools=3

    Operations: BATCH_START, CHECK, CHECK_ERROR, BATCH_DONE
    """

    def __init__(self, log_path: Path) -> None:
        """Initialize audit logger with the path to the audit log file."""
        self.log_path = log_path

    def log(self, operation: str, **kwargs: str | int | float | bool | None) -> None:
        """Append an audit log entry.

        Args:
            operation: The operation name (e.g., CHECK, BATCH_DONE)
            **kwargs: Key-value pairs to include in the log entry.
                      None values are dropped; empty values and values
                      containing whitespace or quotes are quoted.
        """
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")

        pairs = [f"{key}={_format_value(value)}" for key, value in kwargs.items() if value is not None]
        if pairs:
            log_line = f"{timestamp} [{operation}] {' '.join(pairs)}\n"
        else:
            log_line = f"{timestamp} [{operation}]\n"

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.log_path, "a") as f:
            f.write(log_line)
