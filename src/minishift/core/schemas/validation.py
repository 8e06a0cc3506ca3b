"""Shared schema validation utilities.

minishift validates its persisted JSON documents using JSON Schema.
Schemas are stored as YAML files under ``minishift.data/schemas`` and
loaded in a single, consistent way.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, List

import yaml
from jsonschema import Draft202012Validator

from minishift.core.errors import ConfigError
from minishift.data import get_data_path


class SchemaValidationError(ConfigError):
    """Raised when schema validation fails."""

    pass


@lru_cache(maxsize=16)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a bundled schema.

    Automatically appends ``.schema.yaml`` when no extension is present.

    Raises:
        FileNotFoundError: If the schema file doesn't exist.
        ValueError: If the schema is not a YAML mapping.
    """
    lowered = schema_name.lower()
    if not (lowered.endswith(".yaml") or lowered.endswith(".yml")):
        schema_name = f"{schema_name}.schema.yaml"

    schema_path = get_data_path("schemas", schema_name)
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_name}")

    schema = yaml.safe_load(schema_path.read_text(encoding="utf-8"))
    if not isinstance(schema, dict):
        raise ValueError(f"Schema must be a YAML mapping, got {type(schema).__name__}")
    return schema


def _iter_messages(payload: Any, schema_name: str) -> List[str]:
    validator = Draft202012Validator(load_schema(schema_name))
    messages: List[str] = []
    for error in sorted(validator.iter_errors(payload), key=lambda e: str(e.path)):
        if error.path:
            path_str = ".".join(str(p) for p in error.path)
            messages.append(f"{path_str}: {error.message}")
        else:
            messages.append(error.message)
    return messages


def validate_payload(payload: Any, schema_name: str) -> None:
    """Validate a payload against a bundled schema.

    Raises:
        SchemaValidationError: If validation fails.
    """
    messages = _iter_messages(payload, schema_name)
    if messages:
        raise SchemaValidationError(
            f"Validation failed against schema '{schema_name}': {'; '.join(messages)}"
        )


def validate_payload_safe(payload: Any, schema_name: str) -> List[str]:
    """Validate a payload and return error messages (empty if valid)."""
    return _iter_messages(payload, schema_name)


__all__ = [
    "load_schema",
    "validate_payload",
    "validate_payload_safe",
    "SchemaValidationError",
]
