"""
Base interface for repository backends.
"""

from abc import ABC, abstractmethod
from typing import List

from ..path_utils import segments_of


class RepositoryInterface(ABC):
    """Abstract base class defining the contract for all repository backends.

    Required methods (must override):
        - full_path: Get the full path for a repository-relative path
        - relative_path: Express an absolute path relative to the repository

    Optional methods (have sensible defaults):
        - segments: Directory names of a path below the repository
    """

    protocol: str
    basedir: str

    def __init__(self, url: str):
        self.url = url

    @abstractmethod
    def full_path(self, path: str) -> str:
        """Get the full path for a path relative to the repository.

        Args:
            path: Relative path within the repository.

        Returns:
            str: Full path to the resource.
        """
        pass

    @abstractmethod
    def relative_path(self, absolute_path: str) -> str:
        """Express an absolute path relative to the repository base directory.

        Args:
            absolute_path: Path to a resource, usually inside the repository.

        Returns:
            str: Path relative to the base directory, "." for the base
            directory itself, or the path unchanged if it lies outside.
        """
        pass

    def segments(self, path: str) -> List[str]:
        """Return the directory names of a path below the repository base directory.

        A file directly in the base directory has no segments.
        """
        relative = self.relative_path(path)
        if relative == ".":
            return []
        return segments_of(relative)
