"""Path utilities for slash-separated repository paths."""

import os
from typing import List, Optional, Union

PathType = Union[str, "os.PathLike[str]"]


def directory_of(path: str) -> str:
    """Return the directory portion of a path, without the ending separator.

    Matches the equally named unix command, except that a path without any
    separator yields an empty string.
    """
    index = path.rfind("/")
    return path[:index] if index >= 0 else ""


def filename_of(path: str) -> str:
    """Return the filename portion of a path, extension included."""
    index = path.rfind("/")
    return path[index + 1 :] if index >= 0 else path


def segments_of(path: str) -> List[str]:
    """Return the directory names of a path, from root to leaf.

    Examples:
        "a/b/c" → ["a", "b"]
        "//a//b/" → ["a", "b"]
        "file.txt" → []
    """
    return split(directory_of(path), "/")


def split(text: str, separator: Optional[str] = None, max_tokens: int = -1) -> List[str]:
    """Split text into tokens, never yielding empty ones.

    Args:
        text: The text to split.
        separator: Delimiter to split on. None splits on runs of whitespace.
        max_tokens: When positive, the maximum number of tokens. Tokens past
            the limit are joined back into the last one.

    Returns:
        List[str]: The tokens in order of appearance.
    """
    if separator is None:
        tokens = text.split()
        joiner = " "
    else:
        tokens = [token for token in text.split(separator) if token]
        joiner = separator

    if max_tokens > 0 and len(tokens) > max_tokens:
        head = tokens[: max_tokens - 1]
        tail = joiner.join(tokens[max_tokens - 1 :])
        return head + [tail]
    return tokens


def relative_path(
    base_directory: PathType,
    absolute_path: PathType,
    segment_aware: bool = False,
) -> str:
    """Express an absolute path relative to a base directory.

    Both paths are compared with ``/`` separators. By default the base
    directory is matched as a plain text prefix, so ``/repo`` also matches
    ``/repository/x``. With ``segment_aware`` the match has to end at a
    segment boundary.

    Args:
        base_directory: The directory to relativize against.
        absolute_path: The path to relativize.
        segment_aware: Only match the base directory on whole segments.

    Returns:
        str: The relative path, "." for the base directory itself, or the
        normalized absolute path if it lies outside the base directory.
    """
    base = os.fspath(base_directory).replace("\\", "/")
    path = os.fspath(absolute_path).replace("\\", "/")

    if not path.startswith(base):
        return path

    relative = path[len(base) :]
    if segment_aware and relative and not relative.startswith("/") and not base.endswith("/"):
        return path

    if relative.startswith("/"):
        relative = relative[1:]
    if not relative:
        relative = "."
    return relative
