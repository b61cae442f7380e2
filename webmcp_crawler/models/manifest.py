"""WebMCP manifest data models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Pricing(BaseModel):
    """Pricing declaration for a tool."""

    model_config = ConfigDict(extra="forbid")
    model: Literal["free", "per_call", "subscription"]
    price_usd: float | None = Field(default=None, ge=0)
    notes: str | None = None


class Tool(BaseModel):
    """A single tool exposed by the origin."""

    model_config = ConfigDict(extra="forbid")
    name: str = Field(..., pattern=r"^[a-z][a-z0-9_]*$")
    description: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1)
    tags: list[str]
    risk_level: Literal["low", "medium", "high"]
    requires_user_confirm: bool
    input_schema: dict
    output_schema: dict
    pricing: Pricing | None = None


class Auth(BaseModel):
    """Authentication requirements of the origin."""

    model_config = ConfigDict(extra="forbid")
    requires_login: bool
    oauth_scopes: list[str] | None = None


class Attestation(BaseModel):
    """Signature block. Only its shape is checked, never the signature itself."""

    model_config = ConfigDict(extra="forbid")
    algo: Literal["ed25519"]
    public_key_jwk: dict
    signature: str
    signed_fields: list[str]


class WebMCPManifest(BaseModel):
    """
    Capability manifest contract.

    Served by an origin at /.well-known/webmcp.json.
    """

    model_config = ConfigDict(extra="forbid")
    manifest_version: Literal["0.1"]
    origin: str = Field(..., pattern=r"^https?://")
    updated_at: str
    tools: list[Tool] = Field(..., min_length=1)
    auth: Auth | None = None
    attestation: Attestation | None = None

    @property
    def tool_names(self) -> list[str]:
        """Tool names in manifest order."""
        return [tool.name for tool in self.tools]
