"""Command-line interface: check one origin or a CSV list of origins."""

import argparse
import os
import sys
from pathlib import Path

from .audit import AuditLogger
from .batch import run_batch
from .checker import Checker
from .config import DEFAULT_OUTPUT_FILE, DEFAULT_TIMEOUT_SECONDS, TOOL_NAME_SEPARATOR
from .csv_io import read_origins, write_results
from .errors import InvalidOriginError
from .fetcher import ManifestFetcher
from .models.outcome import CheckOutcome
from .normalize import normalize_origin

EPILOG = """\
examples:
  webmcp-crawler https://example.com
  webmcp-crawler stripe.com
  webmcp-crawler --csv urls.csv -o results.csv

Fetches <origin>/.well-known/webmcp.json and validates the manifest
against the WebMCP v0.1 schema.

exit codes:
  0  WebMCP manifest detected (at least one in batch mode)
  1  not detected or invalid
"""


class Style:
    """ANSI styling, switched off for pipes, NO_COLOR and --no-color."""

    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled

    def _wrap(self, code: str, text: str) -> str:
        return f"\x1b[{code}m{text}\x1b[0m" if self.enabled else text

    def bold(self, text: str) -> str:
        return self._wrap("1", text)

    def green(self, text: str) -> str:
        return self._wrap("32", text)

    def red(self, text: str) -> str:
        return self._wrap("31", text)

    def dim(self, text: str) -> str:
        return self._wrap("2", text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webmcp-crawler",
        description="Detect WebMCP manifests on websites",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("url", nargs="?", help="Origin or URL to check")
    parser.add_argument(
        "--csv",
        type=Path,
        dest="input_file",
        help="Input CSV file with URLs (one per line or first column)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path(DEFAULT_OUTPUT_FILE),
        help=f"Output CSV file for results (default: {DEFAULT_OUTPUT_FILE})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT_SECONDS,
        help=f"Request timeout in seconds (default: {DEFAULT_TIMEOUT_SECONDS:g})",
    )
    parser.add_argument("--audit-log", type=Path, help="Path to audit log file (optional)")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    return parser


def run_single(raw: str, checker: Checker, style: Style) -> int:
    """Check one origin and print a report. Returns the exit code."""
    try:
        origin = normalize_origin(raw)
    except InvalidOriginError:
        print(style.red("✘") + f" Invalid URL: {raw}", file=sys.stderr)
        return 1

    print(style.dim(f"Checking {checker.fetcher.url_for(origin)}...\n"))

    outcome = checker.check(raw)

    if not outcome.detected:
        print(style.red("✘") + " WebMCP not detected")
        if outcome.error:
            print(style.dim(f"  {outcome.error}"))
        return 1

    if not outcome.valid:
        print(style.red("✘") + " WebMCP manifest found but invalid")
        if outcome.error:
            print(style.dim(f"  {outcome.error}"))
        return 1

    print(style.green("✔") + " WebMCP detected")
    print(f"  Origin:   {outcome.url}")
    print(f"  Version:  {outcome.version}")
    print(f"  Tools:    {outcome.tool_count}")
    for name in outcome.tool_names.split(TOOL_NAME_SEPARATOR):
        print(f"    - {name}")
    return 0


def _progress_line(position: int, total: int, outcome: CheckOutcome, style: Style) -> str:
    progress = style.dim(f"[{position}/{total}]")
    if outcome.valid:
        return f"{progress} {style.green('✔')} {outcome.url} — {outcome.tool_count} tools"
    if outcome.detected:
        return f"{progress} {style.red('✘')} {outcome.url} — invalid manifest"
    return f"{progress} {style.red('✘')} {outcome.url}"


def run_csv(
    input_file: Path,
    output_file: Path,
    checker: Checker,
    style: Style,
    audit: AuditLogger | None = None,
) -> int:
    """Check every origin listed in a CSV file and export the results.

    Returns the exit code: 0 if at least one origin has a valid manifest.
    """
    try:
        origins = read_origins(input_file)
    except (OSError, UnicodeDecodeError) as e:
        print(style.red("✘") + f" Could not read CSV: {e}", file=sys.stderr)
        return 1

    if not origins:
        print(style.red("✘") + " No URLs found in CSV", file=sys.stderr)
        return 1

    print(style.dim(f"Processing {len(origins)} URLs...\n"))

    result = run_batch(
        origins,
        checker=checker,
        on_outcome=lambda i, n, outcome: print(_progress_line(i, n, outcome, style)),
        audit=audit,
    )

    try:
        write_results(output_file, result.outcomes)
    except OSError as e:
        print(style.red("✘") + f" Could not write CSV: {e}", file=sys.stderr)
        return 1

    print(f"\n{style.bold('Done.')} {result.detected_count}/{result.total} sites have WebMCP.")
    print(style.dim(f"Results written to {output_file}"))

    return 0 if result.detected_count > 0 else 1


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for webmcp-crawler."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.input_file is None and args.url is None:
        parser.print_help()
        sys.exit(1)

    if args.timeout <= 0:
        parser.error("--timeout must be positive")

    style = Style(
        enabled=not args.no_color and "NO_COLOR" not in os.environ and sys.stdout.isatty()
    )
    audit = AuditLogger(args.audit_log) if args.audit_log else None
    checker = Checker(fetcher=ManifestFetcher(timeout=args.timeout), audit=audit)

    if args.input_file is not None:
        code = run_csv(args.input_file, args.output, checker, style, audit=audit)
    else:
        code = run_single(args.url, checker, style)

    sys.exit(code)


if __name__ == "__main__":
    main()
