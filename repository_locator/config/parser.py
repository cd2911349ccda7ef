"""
Configuration Parser and Validator for repository locations.

Configuration files are YAML or JSON documents with a REPOSITORY section.
User values are merged over built-in defaults, then checked by the
pluggable validators in config.validators.
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .validators import ConfigError, validate_config_with_validators

DEFAULTS: Dict[str, Any] = {
    "REPOSITORY": {
        "TYPE": None,
        "RELATIVE_PATHS": {
            "SEGMENT_AWARE": False,
        },
    },
}


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    def __init__(self, message: str, errors: Optional[List[ConfigError]] = None):
        super().__init__(message)
        self.errors = errors or []

    def __str__(self) -> str:
        if self.errors:
            error_list = "\n  - ".join(str(e) for e in self.errors)
            return f"{self.args[0]}\n  - {error_list}"
        return self.args[0]


def load_defaults() -> Dict[str, Any]:
    """Return a fresh copy of the built-in configuration defaults."""
    return copy.deepcopy(DEFAULTS)


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into base, returning a new dict.

    Nested dicts are merged key by key; any other value in override
    replaces the value in base. Neither input is modified.
    """
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def process_config(config: Any) -> Dict[str, Any]:
    """Merge a raw configuration with the defaults and validate it.

    Raises:
        ConfigurationError: If the configuration is not a mapping or fails validation.
    """
    if not isinstance(config, dict):
        raise ConfigurationError("Configuration must be a dictionary/object")

    merged = deep_merge(load_defaults(), config)
    errors = validate_config_with_validators(merged)
    if errors:
        raise ConfigurationError(
            f"Configuration validation failed with {len(errors)} error(s)",
            errors=errors,
        )
    return merged


class ConfigurationParser:
    """Configuration parser and validator for repository locations."""

    def parse_config(self, config_path: str) -> Dict[str, Any]:
        """Parse configuration file and validate its contents."""
        config_file = Path(config_path)

        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        # Parse file based on extension
        with open(config_file, "r", encoding="utf-8") as f:
            if config_file.suffix.lower() in [".json"]:
                config = json.load(f)
            elif config_file.suffix.lower() in [".yaml", ".yml"]:
                config = yaml.safe_load(f)
            else:
                # Try JSON first, then YAML
                content = f.read()
                try:
                    config = json.loads(content)
                except json.JSONDecodeError:
                    config = yaml.safe_load(content)

        return process_config(config)


def parse_config_file(config_path: str) -> Dict[str, Any]:
    """Convenience function to parse a configuration file."""
    parser = ConfigurationParser()
    return parser.parse_config(config_path)


# Helper functions for extracting config parts
def get_repository_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Extract REPOSITORY from parsed config."""
    return config["REPOSITORY"]


def get_repository_url(config: Dict[str, Any]) -> str:
    """Extract REPOSITORY.URL from parsed config."""
    return config["REPOSITORY"]["URL"]


def get_repository_type(config: Dict[str, Any]) -> Optional[str]:
    """Extract REPOSITORY.TYPE from parsed config, None when not set."""
    return config["REPOSITORY"].get("TYPE")


def is_segment_aware(config: Dict[str, Any]) -> bool:
    """Extract REPOSITORY.RELATIVE_PATHS.SEGMENT_AWARE from parsed config."""
    relative_paths = config["REPOSITORY"].get("RELATIVE_PATHS") or {}
    return bool(relative_paths.get("SEGMENT_AWARE", False))
