"""Pytest fixtures for webmcp-crawler tests."""

import copy
import json
from collections.abc import Callable

import httpx
import pytest

from webmcp_crawler.checker import Checker
from webmcp_crawler.fetcher import ManifestFetcher

VALID_MANIFEST = {
    "manifest_version": "0.1",
    "origin": "https://example.com",
    "updated_at": "2026-02-01T10:00:00Z",
    "tools": [
        {
            "name": "search_products",
            "description": "Search the product catalog",
            "version": "1.0.0",
            "tags": ["catalog", "search"],
            "risk_level": "low",
            "requires_user_confirm": False,
            "input_schema": {"type": "object", "properties": {"query": {"type": "string"}}},
            "output_schema": {"type": "object"},
        },
        {
            "name": "get_order",
            "description": "Look up an order by id",
            "version": "1.0.0",
            "tags": [],
            "risk_level": "medium",
            "requires_user_confirm": False,
            "input_schema": {"type": "object"},
            "output_schema": {"type": "object"},
            "pricing": {"model": "free"},
        },
        {
            "name": "create_return",
            "description": "Start a return for an order",
            "version": "2.1",
            "tags": ["orders"],
            "risk_level": "high",
            "requires_user_confirm": True,
            "input_schema": {"type": "object"},
            "output_schema": {"type": "object"},
            "pricing": {"model": "per_call", "price_usd": 0.01, "notes": "billed monthly"},
        },
    ],
}


@pytest.fixture
def valid_manifest() -> dict:
    """Return a fresh, fully conformant 3-tool manifest."""
    return copy.deepcopy(VALID_MANIFEST)


Handler = Callable[[httpx.Request], httpx.Response]


def _json_response(document, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=json.dumps(document).encode(),
        headers={"Content-Type": "application/json"},
    )


@pytest.fixture
def make_fetcher() -> Callable[[Handler], ManifestFetcher]:
    """Factory for a ManifestFetcher backed by an httpx.MockTransport."""

    def _make(handler: Handler, timeout: float = 10.0) -> ManifestFetcher:
        return ManifestFetcher(timeout=timeout, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def json_response() -> Callable[..., httpx.Response]:
    """Build a JSON response for a MockTransport handler."""
    return _json_response


@pytest.fixture
def sites(valid_manifest) -> dict[str, Callable[[], httpx.Response]]:
    """Response factories keyed by host: only example.com serves a manifest."""
    return {
        "stripe.com": lambda: httpx.Response(404, text="Not Found"),
        "github.com": lambda: httpx.Response(200, text="<html>not json</html>"),
        "example.com": lambda: _json_response(valid_manifest),
    }


@pytest.fixture
def site_checker(make_fetcher, sites) -> Checker:
    """Checker that serves the canned `sites` responses and fails DNS otherwise."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host not in sites:
            raise httpx.ConnectError("getaddrinfo ENOTFOUND", request=request)
        if request.url.path != "/.well-known/webmcp.json":
            return httpx.Response(404)
        return sites[request.url.host]()

    return Checker(fetcher=make_fetcher(handler))
