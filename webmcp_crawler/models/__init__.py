"""Data models for manifests and check results."""

from .manifest import Attestation, Auth, Pricing, Tool, WebMCPManifest
from .outcome import BatchResult, CheckOutcome

__all__ = [
    "Attestation",
    "Auth",
    "Pricing",
    "Tool",
    "WebMCPManifest",
    "BatchResult",
    "CheckOutcome",
]
