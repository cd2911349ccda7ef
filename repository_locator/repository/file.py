"""File repository backend for local filesystem locations."""

import logging
import os

from ..path_utils import relative_path
from ..url_parser import parse_repository_url, to_file_url
from .base import RepositoryInterface
from .factory import REPOSITORY_REGISTRY


@REPOSITORY_REGISTRY.register_decorator("file")
class FileRepository(RepositoryInterface):
    """Repository addressed by a local path or a file URL.

    Only resolves locations; it never touches the filesystem.
    """

    def __init__(self, url: str, segment_aware: bool = False):
        super().__init__(url)
        self.logger = logging.getLogger(__name__)
        parsed = parse_repository_url(url)
        self.protocol = parsed["protocol"]
        self.basedir = parsed["basedir"]
        self.segment_aware = segment_aware
        self.logger.debug(f"Resolved repository location {url!r} to {self.basedir!r}")

    def full_path(self, path: str) -> str:
        """Join a repository-relative path onto the base directory."""
        relative = path.replace("\\", "/").lstrip("/")
        if not relative or relative == ".":
            return self.basedir
        if not self.basedir:
            return relative
        return f"{self.basedir.rstrip('/')}/{relative}"

    def relative_path(self, absolute_path: str) -> str:
        """Express an absolute path relative to the repository base directory."""
        relative = relative_path(self.basedir, absolute_path, segment_aware=self.segment_aware)
        path = os.fspath(absolute_path).replace("\\", "/")
        base = self.basedir.replace("\\", "/")
        # a rejected segment-aware match also comes back unchanged
        if not path.startswith(base) or (base and relative == path and relative != "."):
            self.logger.debug(f"{absolute_path!r} is outside repository {self.basedir!r}")
        return relative

    def to_url(self) -> str:
        """Return the base directory as a file URL."""
        return to_file_url(self.basedir)

    def __repr__(self) -> str:
        return f"FileRepository(basedir={self.basedir!r})"
