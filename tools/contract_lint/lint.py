#!/usr/bin/env python3
"""Check that the packaged manifest schema and the pydantic models agree."""
import json
import sys
from pathlib import Path

try:
    import jsonschema
except Exception as exc:  # pragma: no cover
    print(f"ERROR: jsonschema not available: {exc}")
    sys.exit(2)

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from webmcp_crawler.models import Attestation, Auth, Pricing, Tool, WebMCPManifest  # noqa: E402
from webmcp_crawler.validators.manifest import SCHEMA_PATH  # noqa: E402

# Schema location (as a path of property names) -> model mirroring it
MODEL_LOCATIONS = {
    (): WebMCPManifest,
    ("tools", "[]"): Tool,
    ("tools", "[]", "pricing"): Pricing,
    ("auth",): Auth,
    ("attestation",): Attestation,
}


def load_schema(path: Path) -> dict:
    data = json.loads(path.read_text(encoding="utf-8"))
    jsonschema.Draft7Validator.check_schema(data)
    return data


def resolve(schema: dict, location: tuple[str, ...]) -> dict:
    node = schema
    for part in location:
        node = node["items"] if part == "[]" else node["properties"][part]
    return node


def compare_models(schema: dict) -> list[str]:
    """Return mismatches between schema objects and their models."""
    errors: list[str] = []
    for location, model in MODEL_LOCATIONS.items():
        where = "/" + "/".join(location)
        node = resolve(schema, location)

        if node.get("additionalProperties") is not False:
            errors.append(f"{where}: schema allows additional properties")
        if model.model_config.get("extra") != "forbid":
            errors.append(f"{where}: {model.__name__} does not forbid extra fields")

        schema_fields = set(node.get("properties", {}))
        model_fields = set(model.model_fields)
        for name in sorted(schema_fields - model_fields):
            errors.append(f"{where}: {model.__name__} is missing field {name!r}")
        for name in sorted(model_fields - schema_fields):
            errors.append(f"{where}: {model.__name__} declares unknown field {name!r}")

        schema_required = set(node.get("required", []))
        model_required = {name for name, field in model.model_fields.items() if field.is_required()}
        if schema_required != model_required:
            errors.append(
                f"{where}: required fields differ "
                f"(schema={sorted(schema_required)}, {model.__name__}={sorted(model_required)})"
            )
    return errors


def main() -> int:
    print("== Contract Lint ==")

    if not SCHEMA_PATH.exists():
        print(f"ERROR: schema not found: {SCHEMA_PATH}")
        return 2

    schema = load_schema(SCHEMA_PATH)
    print(f"Schema OK: {SCHEMA_PATH}")

    model_errors = compare_models(schema)

    if model_errors:
        print("\nSchema/model mismatches:")
        for err in model_errors:
            print(f"- {err}")
    else:
        print("\nSchema/model checks: OK")

    total_errors = len(model_errors)
    print(f"\nTotal errors: {total_errors}")
    return 1 if total_errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
