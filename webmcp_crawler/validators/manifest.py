"""Manifest validation against the WebMCP JSON Schema."""

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
from pydantic import ValidationError

from ..errors import ManifestValidationError
from ..models.manifest import WebMCPManifest

# Path to the manifest schema
SCHEMA_PATH = Path(__file__).parent.parent / "contracts" / "webmcp_schema.json"


@dataclass(frozen=True)
class SchemaViolation:
    """One structural mismatch, located by a JSON pointer."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path} {self.message}"


def load_schema() -> dict:
    """Load the WebMCP manifest JSON schema."""
    with open(SCHEMA_PATH) as f:
        return json.load(f)


@lru_cache(maxsize=1)
def _validator() -> jsonschema.Draft7Validator:
    # Compiled once and never mutated, so it is shared across checks.
    return jsonschema.Draft7Validator(load_schema(), format_checker=jsonschema.FormatChecker())


def _pointer(parts) -> str:
    if not parts:
        return "/"
    return "".join(f"/{str(p).replace('~', '~0').replace('/', '~1')}" for p in parts)


def validate_manifest(document: Any) -> tuple[bool, list[SchemaViolation]]:
    """
    Validate a parsed document against the manifest schema.

    All violations are collected rather than stopping at the first one.

    Args:
        document: Any JSON value decoded from the response body.

    Returns:
        A tuple of (is_valid, list_of_violations).
        If valid, the violations list is empty.
    """
    violations = [
        SchemaViolation(path=_pointer(error.absolute_path), message=error.message)
        for error in _validator().iter_errors(document)
    ]
    violations.sort(key=lambda v: (v.path, v.message))
    return (len(violations) == 0, violations)


def load_manifest(document: Any) -> WebMCPManifest:
    """Validate a document and return its typed view.

    Raises:
        ManifestValidationError: If the document does not conform.
    """
    is_valid, violations = validate_manifest(document)
    if not is_valid:
        raise ManifestValidationError(violations)

    try:
        return WebMCPManifest.model_validate(document)
    except ValidationError as e:
        # The schema and the model disagree on edge cases such as a trailing
        # newline in a pattern-checked string; report them the same way.
        raise ManifestValidationError(
            [
                SchemaViolation(path=_pointer(err["loc"]), message=err["msg"])
                for err in e.errors()
            ]
        ) from e


def format_violations(violations: list[SchemaViolation]) -> str:
    """Join violations into a single diagnostic string."""
    return "; ".join(str(v) for v in violations)
