"""
Configuration module for repository_locator.

Provides configuration parsing, validation, and helper functions.
"""

from .parser import (
    DEFAULTS,
    ConfigurationError,
    ConfigurationParser,
    deep_merge,
    get_repository_config,
    get_repository_type,
    get_repository_url,
    is_segment_aware,
    load_defaults,
    parse_config_file,
    process_config,
)
from .validators import (
    ConfigError,
    ConfigValidator,
    RelativePathsValidator,
    RepositoryValidator,
    get_validator,
    list_validators,
    register_validator,
    validate_config_with_validators,
)

__all__ = [
    # Parser exports
    "DEFAULTS",
    "ConfigurationError",
    "ConfigurationParser",
    "deep_merge",
    "load_defaults",
    "parse_config_file",
    "process_config",
    "get_repository_config",
    "get_repository_type",
    "get_repository_url",
    "is_segment_aware",
    # Validator exports
    "ConfigError",
    "ConfigValidator",
    "RelativePathsValidator",
    "RepositoryValidator",
    "get_validator",
    "list_validators",
    "register_validator",
    "validate_config_with_validators",
]
