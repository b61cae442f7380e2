"""Retrieve the well-known manifest resource for an origin."""

import json
import time
from typing import Any

import httpx

from .config import DEFAULT_TIMEOUT_SECONDS, USER_AGENT, WELL_KNOWN_PATH
from .errors import HttpError, ManifestParseError, NetworkError
from .normalize import manifest_url


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


class ManifestFetcher:
    """Single-attempt HTTP fetcher for /.well-known/webmcp.json.

    A fresh client is opened per request: there is no connection pooling and
    nothing is cached between origins.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        path: str = WELL_KNOWN_PATH,
        transport: httpx.BaseTransport | None = None,
        follow_redirects: bool = True,
    ):
        """Initialize the fetcher.

        Args:
            timeout: Deadline in seconds for the whole request, body included
            path: Well-known path appended to the origin
            transport: Optional httpx transport (tests inject a MockTransport)
            follow_redirects: Follow 3xx responses before classifying the status
        """
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self.timeout = timeout
        self.path = path
        self.transport = transport
        self.follow_redirects = follow_redirects

    def url_for(self, origin: str) -> str:
        """Return the manifest URL for a normalized origin."""
        return manifest_url(origin, self.path)

    def _client(self) -> httpx.Client:
        # Each phase gets a third of the budget so connect + write + read fit the deadline
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout / 3),
            follow_redirects=self.follow_redirects,
            headers={"User-Agent": USER_AGENT},
            transport=self.transport,
        )

    def _check_deadline(self, deadline: float) -> None:
        if time.monotonic() > deadline:
            raise NetworkError(f"Request timed out after {self.timeout:g}s")

    def fetch(self, origin: str) -> Any:
        """Fetch and decode the manifest document.

        Outcomes are classified in priority order: transport failure, then
        non-2xx status, then undecodable body.

        Args:
            origin: A normalized origin such as ``https://example.com``.

        Returns:
            The decoded JSON value, of any shape.

        Raises:
            NetworkError: DNS, connection, TLS or timeout failure.
            HttpError: The final response status is not 2xx.
            ManifestParseError: The body is not valid JSON.
        """
        deadline = time.monotonic() + self.timeout
        url = self.url_for(origin)

        try:
            with self._client() as client:
                with client.stream("GET", url, headers={"Accept": "application/json"}) as response:
                    self._check_deadline(deadline)
                    if not response.is_success:
                        raise HttpError(response.status_code)

                    body = bytearray()
                    for chunk in response.iter_bytes():
                        body.extend(chunk)
                        self._check_deadline(deadline)
                    self._check_deadline(deadline)
        except httpx.RequestError as e:
            raise NetworkError(str(e) or "Unknown network error") from e

        try:
            return json.loads(bytes(body).decode("utf-8-sig"), parse_constant=_reject_constant)
        except ValueError as e:
            raise ManifestParseError(str(e)) from e
