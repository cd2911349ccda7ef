from .config import ConfigurationError, ConfigurationParser, parse_config_file
from .path_utils import directory_of, filename_of, relative_path, segments_of, split
from .repository import (
    FileRepository,
    RepositoryInterface,
    create_repository,
    create_repository_from_config,
    create_repository_from_file,
)
from .url_parser import base_directory_of, decode, parse_repository_url, protocol_of, to_file_url

"""
Repository Locator - resolves repository location strings into filesystem paths.
"""

__version__ = "0.1.0"
__author__ = "Repository Locator Team"


__all__ = [
    "directory_of",
    "filename_of",
    "segments_of",
    "split",
    "relative_path",
    "protocol_of",
    "base_directory_of",
    "decode",
    "parse_repository_url",
    "to_file_url",
    "RepositoryInterface",
    "FileRepository",
    "create_repository",
    "create_repository_from_config",
    "create_repository_from_file",
    "ConfigurationParser",
    "ConfigurationError",
    "parse_config_file",
]
