"""
Factory functions for creating repository backends.

This module handles backend selection based on the location protocol,
keeping the backends themselves focused on path handling.
"""

from typing import Any, Dict, Optional

from ..config import get_repository_type, get_repository_url, is_segment_aware, parse_config_file
from ..core import Registry
from ..url_parser import parse_repository_url
from .base import RepositoryInterface

# Registry of available repository backends - backends self-register via decorator
REPOSITORY_REGISTRY: Registry[RepositoryInterface] = Registry(RepositoryInterface, "repository protocol")


def create_repository(
    location: str,
    segment_aware: bool = False,
    repository_type: Optional[str] = None,
) -> RepositoryInterface:
    """Create a repository backend from a URL or plain path.

    Args:
        location: Path or URL of the repository (e.g., "./repo", "file:///srv/repo").
        segment_aware: Match the base directory on whole path segments when
            computing relative paths.
        repository_type: Backend to use; defaults to the location protocol.
            Protocols are matched case-insensitively.

    Returns:
        RepositoryInterface: The backend for the location.

    Raises:
        ValueError: If no backend handles the protocol.
    """
    protocol = (repository_type or parse_repository_url(location)["protocol"]).lower()

    if protocol not in REPOSITORY_REGISTRY:
        raise ValueError(f"Unsupported protocol: {protocol}")

    return REPOSITORY_REGISTRY.get(protocol, location, segment_aware=segment_aware)


def create_repository_from_config(config: Dict[str, Any]) -> RepositoryInterface:
    """Create a repository backend from a parsed configuration dict.

    Args:
        config: Configuration as returned by parse_config_file or process_config.

    Returns:
        RepositoryInterface: The configured backend.
    """
    return create_repository(
        get_repository_url(config),
        segment_aware=is_segment_aware(config),
        repository_type=get_repository_type(config),
    )


def create_repository_from_file(config_path: str) -> RepositoryInterface:
    """Parse a configuration file and create the repository it describes."""
    return create_repository_from_config(parse_config_file(config_path))


# Import backends to trigger self-registration via decorators
# These imports must be at the end after REPOSITORY_REGISTRY is defined
from .file import FileRepository  # noqa: E402, F401
