"""Fixed settings for manifest discovery and result export."""

from . import __version__

# Manifest location relative to the origin
WELL_KNOWN_PATH = "/.well-known/webmcp.json"

# Hard deadline for one manifest request, measured from request start
DEFAULT_TIMEOUT_SECONDS = 10.0

USER_AGENT = f"webmcp-crawler/{__version__}"

DEFAULT_OUTPUT_FILE = "results.csv"

# Column order of the exported table is part of the output contract
CSV_HEADER = (
    "url",
    "detected",
    "valid",
    "version",
    "tool_count",
    "tool_names",
    "error",
)

# First-column values that mark the first row of an input table as a header
HEADER_ALIASES = frozenset({"url", "domain", "website"})

TOOL_NAME_SEPARATOR = "; "
