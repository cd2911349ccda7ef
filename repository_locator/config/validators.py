"""
Pluggable Configuration Validators.

Each validator handles a specific section of the configuration, making it
easy to extend validation for new sections or repository types.

Usage:
    # Register a custom validator
    @register_validator("REPOSITORY.CREDENTIALS")
    class CredentialsValidator(ConfigValidator):
        def validate(self, config: Dict) -> List[ConfigError]:
            errors = []
            if "USERNAME" not in config:
                errors.append(ConfigError("USERNAME", "Field is required"))
            return errors

    # Validate configuration
    errors = validate_config_with_validators(config)
    if errors:
        raise ConfigurationError("Invalid configuration", errors=errors)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type


@dataclass
class ConfigError:
    """Represents a single configuration validation error."""

    field: str
    message: str
    section: Optional[str] = None

    def __str__(self) -> str:
        if self.section:
            return f"{self.section}.{self.field}: {self.message}"
        return f"{self.field}: {self.message}"


class ConfigValidator(ABC):
    """Abstract base class for configuration validators.

    Validators are responsible for validating a specific section of the
    configuration. They return a list of errors (empty if valid).
    """

    @abstractmethod
    def validate(self, config: Dict[str, Any]) -> List[ConfigError]:
        """Validate the configuration section.

        Args:
            config: The configuration section to validate.

        Returns:
            List of ConfigError objects. Empty list means valid.
        """
        pass


# Registry of validators by section name
_VALIDATOR_REGISTRY: Dict[str, Type[ConfigValidator]] = {}


def register_validator(section: str) -> Callable[[Type[ConfigValidator]], Type[ConfigValidator]]:
    """Decorator to register a validator for a configuration section.

    Args:
        section: The section name this validator handles (e.g., "REPOSITORY").

    Returns:
        Decorator function.
    """

    def decorator(cls: Type[ConfigValidator]) -> Type[ConfigValidator]:
        _VALIDATOR_REGISTRY[section] = cls
        return cls

    return decorator


def get_validator(section: str) -> Optional[ConfigValidator]:
    """Get an instance of the validator for the given section, or None."""
    validator_cls = _VALIDATOR_REGISTRY.get(section)
    if validator_cls:
        return validator_cls()
    return None


def list_validators() -> List[str]:
    """List all registered validator sections."""
    return list(_VALIDATOR_REGISTRY.keys())


# ---------------------------------------------------------------------------
# Built-in Validators
# ---------------------------------------------------------------------------


@register_validator("REPOSITORY")
class RepositoryValidator(ConfigValidator):
    """Validates REPOSITORY configuration section.

    Delegates RELATIVE_PATHS to its own registered validator.
    """

    def validate(self, config: Dict[str, Any]) -> List[ConfigError]:
        errors: List[ConfigError] = []
        section = "REPOSITORY"

        if not isinstance(config, dict):
            errors.append(ConfigError("REPOSITORY", "Must be a mapping"))
            return errors

        if "URL" not in config:
            errors.append(ConfigError("URL", "Required field missing", section))
        elif not isinstance(config["URL"], str) or not config["URL"].strip():
            errors.append(ConfigError("URL", "Must be a non-empty string", section))

        if "TYPE" in config and config["TYPE"] is not None and not isinstance(config["TYPE"], str):
            errors.append(ConfigError("TYPE", "Must be a string", section))

        if "RELATIVE_PATHS" in config:
            validator = get_validator(f"{section}.RELATIVE_PATHS")
            if validator:
                errors.extend(validator.validate(config["RELATIVE_PATHS"]))

        return errors


@register_validator("REPOSITORY.RELATIVE_PATHS")
class RelativePathsValidator(ConfigValidator):
    """Validates REPOSITORY.RELATIVE_PATHS configuration section."""

    def validate(self, config: Dict[str, Any]) -> List[ConfigError]:
        errors: List[ConfigError] = []
        section = "REPOSITORY.RELATIVE_PATHS"

        if not isinstance(config, dict):
            errors.append(ConfigError("RELATIVE_PATHS", "Must be a mapping", "REPOSITORY"))
            return errors

        if "SEGMENT_AWARE" in config and not isinstance(config["SEGMENT_AWARE"], bool):
            errors.append(ConfigError("SEGMENT_AWARE", "Must be true or false", section))

        return errors


# ---------------------------------------------------------------------------
# Main Validation Function
# ---------------------------------------------------------------------------


def validate_config_with_validators(config: Dict[str, Any]) -> List[ConfigError]:
    """Validate configuration using registered validators.

    Args:
        config: Full configuration dictionary.

    Returns:
        List of all validation errors. Empty if valid.
    """
    all_errors: List[ConfigError] = []

    if "REPOSITORY" not in config:
        all_errors.append(ConfigError("REPOSITORY", "Required section missing"))
    else:
        validator = get_validator("REPOSITORY")
        if validator:
            all_errors.extend(validator.validate(config["REPOSITORY"]))

    return all_errors
