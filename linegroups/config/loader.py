from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import (
    DEFAULT_DELIMITER,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_QUOTE_CHAR,
    GroupingConfig,
    ValidationPolicy,
)

"""Config loader.

Responsibilities:
- Load YAML config/grouping.yml (absent default file -> all defaults)
- Apply LINEGROUPS_* environment overrides (python-dotenv fills os.environ
  from .env beforehand, see linegroups.cli)
- Validate against the bundled JSON schema
- Build the frozen GroupingConfig
"""

SCHEMA_PATH = Path(__file__).parent / "config_schema.json"
DEFAULT_CONFIG_PATH = Path("config/grouping.yml")

# Environment variable -> config key
ENV_OVERRIDES = {
    "LINEGROUPS_OUTPUT": "output_path",
    "LINEGROUPS_POLICY": "validation_policy",
}


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: If the schema file is missing or unreadable, or the data
            violates it (unknown keys, wrong types, bad enum values).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    merged = dict(data)
    for env_name, key in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            merged[key] = value
    return merged


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Path | None = None) -> GroupingConfig:
    """Load, override and validate the grouping configuration.

    Args:
        path: Explicit config path (must exist). None means the default
            config/grouping.yml, which may be absent.

    Raises:
        ConfigError: Missing explicit file, invalid YAML or schema violation
    """
    if path is not None:
        if not path.exists():
            raise ConfigError(f"config file not found: {path}")
        data = _read_yaml(path)
    elif DEFAULT_CONFIG_PATH.exists():
        data = _read_yaml(DEFAULT_CONFIG_PATH)
    else:
        data = {}

    data = _apply_env_overrides(data)
    _validate_config_schema(data)

    delimiter = data.get("delimiter", DEFAULT_DELIMITER)
    quote_char = data.get("quote_char", DEFAULT_QUOTE_CHAR)
    if delimiter == quote_char:
        raise ConfigError(f"delimiter and quote_char must differ (both {delimiter!r})")

    return GroupingConfig(
        output_path=data.get("output_path", DEFAULT_OUTPUT_PATH),
        delimiter=delimiter,
        quote_char=quote_char,
        validation_policy=ValidationPolicy(data.get("validation_policy", ValidationPolicy.TOLERANT.value)),
        include_diagnostics=data.get("include_diagnostics", True),
        rejection_log_dir=data.get("rejection_log_dir"),
    )
