"""Turn free-form user input into a canonical origin."""

import re

import httpx

from .errors import InvalidOriginError

SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)

# Characters that cannot appear in a hostname once it has been encoded
FORBIDDEN_HOST_CHARS = re.compile(r"[\s#%/:<>?@\[\\\]^|\"`{}]")


def normalize_origin(raw: str) -> str:
    """Return scheme://host[:port] for a user-supplied URL or bare domain.

    Surrounding whitespace is trimmed and ``https://`` is assumed when no
    http(s) scheme is present. Path, query, fragment and credentials are
    dropped; default ports are omitted.

    Args:
        raw: The string as typed by the user or read from a table.

    Returns:
        The canonical origin, e.g. ``https://example.com``.

    Raises:
        InvalidOriginError: If the string cannot be parsed as a URL.
    """
    candidate = raw.strip()
    if not SCHEME_PATTERN.match(candidate):
        candidate = f"https://{candidate}"

    try:
        url = httpx.URL(candidate)
    except httpx.InvalidURL as e:
        raise InvalidOriginError(raw, str(e)) from e

    host = url.raw_host.decode("ascii")
    if not host:
        raise InvalidOriginError(raw, "missing host")

    if ":" in host:
        host = f"[{host}]"
    elif FORBIDDEN_HOST_CHARS.search(host):
        raise InvalidOriginError(raw, f"invalid host {host!r}")

    origin = f"{url.scheme.lower()}://{host}"
    if url.port is not None:
        origin += f":{url.port}"
    return origin


def manifest_url(origin: str, path: str) -> str:
    """Join a normalized origin and an absolute path."""
    return f"{origin}{path}"
