"""Configuration loading, merging, and validation for the thuis-seo CLI."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
from typing_extensions import TypedDict

import yaml
from jsonschema import Draft7Validator


# ============================================================================
# Typed Configuration Dictionaries
# ============================================================================

class KeywordsConfig(TypedDict, total=False):
    """Keyword extraction defaults."""
    language: str  # "es", "en", "nl"
    category: Optional[str]


class MetaConfig(TypedDict, total=False):
    """Meta description defaults."""
    max_length: int
    include_call_to_action: bool
    seed: Optional[int]


class TitleConfig(TypedDict, total=False):
    """Page title defaults."""
    suffix: str
    max_length: int


class OutputConfig(TypedDict, total=False):
    """Output format configuration."""
    format: str  # "json", "table"
    max_rows: int


class EngineConfig(TypedDict, total=False):
    """
    Complete thuis-seo configuration schema.

    All fields are optional as they fall back to defaults.
    Use load_config() to get a fully merged configuration.

    Example:
        >>> config = load_config("config.yaml")
        >>> config["title"]["suffix"]
        ' - Thuis 3D'
    """
    keywords: KeywordsConfig
    meta: MetaConfig
    title: TitleConfig
    output: OutputConfig


# JSON Schema for config validation
CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "keywords": {
            "type": "object",
            "properties": {
                "language": {"type": "string", "enum": ["es", "en", "nl"]},
                "category": {"type": ["string", "null"]},
            },
            "additionalProperties": False,
        },
        "meta": {
            "type": "object",
            "properties": {
                "max_length": {"type": "integer", "minimum": 1},
                "include_call_to_action": {"type": "boolean"},
                "seed": {"type": ["integer", "null"]},
            },
            "additionalProperties": False,
        },
        "title": {
            "type": "object",
            "properties": {
                "suffix": {"type": "string"},
                "max_length": {"type": "integer", "minimum": 1},
            },
            "additionalProperties": False,
        },
        "output": {
            "type": "object",
            "properties": {
                "format": {"type": "string", "enum": ["json", "table"]},
                "max_rows": {"type": "integer", "minimum": 1},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": True,  # Allow extra top-level keys for flexibility
}

_config_validator = Draft7Validator(CONFIG_SCHEMA)


class ConfigValidationError(Exception):
    """Raised when config validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration against schema.

    Args:
        config: Configuration dictionary to validate

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    for error in _config_validator.iter_errors(config):
        path = ".".join(str(p) for p in error.path) if error.path else "(root)"
        errors.append(f"{path}: {error.message}")
    return errors


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into base dict."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_default_config() -> Dict[str, Any]:
    """Load the bundled default configuration."""
    default_path = Path(__file__).parent / "default_config.yaml"
    if default_path.exists():
        return yaml.safe_load(default_path.read_text(encoding="utf-8")) or {}
    return {}


def load_config(config_path: Optional[str] = None, validate: bool = True) -> EngineConfig:
    """
    Load configuration, merging the user config over the bundled defaults.

    Args:
        config_path: Optional path to a user config file; ./config.yaml is
            used when present and no path is given
        validate: Whether to validate config against schema

    Returns:
        Merged configuration dictionary

    Raises:
        FileNotFoundError: If an explicit config path does not exist
        ConfigValidationError: If the file is not valid YAML or validation fails
    """
    config = load_default_config()

    if config_path and not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    user_config_path = Path(config_path) if config_path else Path("config.yaml")

    if user_config_path.exists():
        try:
            user_config = yaml.safe_load(user_config_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigValidationError([f"Failed to parse {user_config_path}: {e}"])
        if not isinstance(user_config, dict):
            raise ConfigValidationError([f"{user_config_path}: top level must be a mapping"])
        config = _deep_merge(config, user_config)
        logging.debug(f"Loaded user config from {user_config_path}")

    if validate:
        errors = validate_config(config)
        if errors:
            raise ConfigValidationError(errors)

    return config
