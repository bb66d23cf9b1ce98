from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.conversion_options import ConversionOptions

"""Conversion options loader.

Responsibilities:
- Load ConversionOptions from a YAML file
- Validate keys and types against the bundled JSON schema
- Apply defaults for keys that are not given
"""

__all__ = [
    "SCHEMA_PATH",
    "ConfigError",
    "load_options",
    "options_from_mapping",
]

SCHEMA_PATH = Path(__file__).with_name("options_schema.json")


class ConfigError(Exception):
    pass


def _validate_options_schema(data: dict[str, Any]) -> None:
    """Validate options data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or invalid, or the data
            fails schema validation (unknown keys, wrong types).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"options schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def options_from_mapping(data: dict[str, Any]) -> ConversionOptions:
    """Build ConversionOptions from an already parsed mapping."""
    if not isinstance(data, dict):
        raise ConfigError(f"config must be a mapping, got {type(data).__name__}")
    _validate_options_schema(data)
    defaults = ConversionOptions()
    return ConversionOptions(
        default_int=data.get("default_int", defaults.default_int),
        default_uint=data.get("default_uint", defaults.default_uint),
        default_bool=data.get("default_bool", defaults.default_bool),
        default_string=data.get("default_string", defaults.default_string),
        true_values=tuple(data.get("true_values", defaults.true_values)),
        false_values=tuple(data.get("false_values", defaults.false_values)),
    )


def load_options(path: Path) -> ConversionOptions:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    return options_from_mapping(data)
