"""Repository backends for repository_locator."""

from .base import RepositoryInterface
from .factory import (
    REPOSITORY_REGISTRY,
    create_repository,
    create_repository_from_config,
    create_repository_from_file,
)
from .file import FileRepository

__all__ = [
    "RepositoryInterface",
    "FileRepository",
    "REPOSITORY_REGISTRY",
    "create_repository",
    "create_repository_from_config",
    "create_repository_from_file",
]
