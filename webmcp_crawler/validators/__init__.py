"""Manifest validators."""

from .manifest import SchemaViolation, format_violations, load_manifest, validate_manifest

__all__ = ["SchemaViolation", "format_violations", "load_manifest", "validate_manifest"]
