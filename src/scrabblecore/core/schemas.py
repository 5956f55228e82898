"""Schema loading and action validation."""

import json
from pathlib import Path

import jsonschema


def load_schema(path: Path) -> dict:
    """Load a JSON Schema file and return as dict."""
    with open(path) as f:
        return json.load(f)


def schema_error(action: object, schema: dict) -> str | None:
    """Validate ``action`` against ``schema``. Returns the error message or None."""
    try:
        jsonschema.validate(action, schema)
    except jsonschema.ValidationError as e:
        return f"Schema validation: {e.message}"
    return None
