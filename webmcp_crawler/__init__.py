"""WebMCP crawler: detect and validate /.well-known/webmcp.json manifests."""

__version__ = "0.1.0"
