"""URL parsing utilities for file repository locations."""

from string import hexdigits
from typing import Dict, Optional

DRIVE_SEPARATORS = ("|", ":")


def protocol_of(url: str) -> str:
    """Return the protocol name of a URL.

    Examples:
        "http://www.example.org" → "http"
        "noscheme" → ""
    """
    protocol, found, _ = url.partition(":")
    if not found:
        return ""
    return protocol.strip()


def is_drive_letter(text: str) -> bool:
    """Check whether text starts with a Windows drive marker like ``C:`` or ``C|``."""
    return len(text) >= 2 and text[1] in DRIVE_SEPARATORS


def _fix_drive_letter(text: str) -> str:
    return text[0] + ":" + text[2:]


def base_directory_of(url: str) -> str:
    """Derive the filesystem path portion of a repository URL.

    Handles the authority-less (``file:/path``), empty-authority
    (``file:///path``), host (``file://host/path``) and Windows drive
    (``file:///C:/path``, ``file:/C|/path``) shapes of file URLs. Input
    without a protocol is treated as a path as a whole.

    Args:
        url: The repository URL or plain path.

    Returns:
        str: The base directory with protocol and host removed.
    """
    _, found, rest = url.partition(":")
    if not found:
        rest = url
    rest = decode(rest)

    if rest.startswith("//"):
        rest = rest[2:]

        if is_drive_letter(rest):
            # a drive letter was taken for the authority
            rest = _fix_drive_letter(rest)
        else:
            index = rest.find("/")
            if index >= 0:
                rest = rest[index + 1 :]

            if is_drive_letter(rest):
                rest = _fix_drive_letter(rest)
            elif index >= 0:
                # host parsing consumed the leading slash
                rest = "/" + rest

    if len(rest) >= 2 and rest[1] == "|":
        rest = _fix_drive_letter(rest)

    return rest.strip()


def decode(text: Optional[str]) -> Optional[str]:
    """Decode %XX escapes in a (portion of a) URL.

    Escaped octets map directly to ISO-8859-1 characters; multi-byte UTF-8
    sequences are not reassembled. Escapes that are truncated or not
    hexadecimal are kept as they are.

    Args:
        text: The text to decode, may be None.

    Returns:
        The decoded text, or None if the input was None.
    """
    if text is None:
        return None

    decoded = text
    pos = decoded.find("%")
    while pos >= 0:
        if pos + 2 < len(decoded):
            hex_str = decoded[pos + 1 : pos + 3]
            if all(ch in hexdigits for ch in hex_str):
                decoded = decoded[:pos] + chr(int(hex_str, 16)) + decoded[pos + 3 :]
        pos = decoded.find("%", pos + 1)
    return decoded


def to_file_url(path: str) -> str:
    """Convert a local path to a file URL.

    Paths are written without an authority (``file:/srv/repo``), except
    those starting with ``//``, which would otherwise read as a host.
    """
    if path.startswith("//"):
        return f"file://{path}"
    return f"file:{path}"


def is_plain_path(location: str) -> bool:
    """Check whether a location is a filesystem path rather than a URL.

    A one-letter protocol is a Windows drive (``C:\\repo``), not a scheme.
    Neither is a "protocol" with characters a scheme can't hold, such as
    the ``/srv/a`` of ``/srv/a:b``.
    """
    protocol = protocol_of(location)
    if len(protocol) <= 1 or not protocol[0].isalpha():
        return True
    return not all(ch.isalnum() or ch in "+-." for ch in protocol)


def parse_repository_url(location: str) -> Dict[str, str]:
    """
    Parse repository location into components.

    Examples:
        "./repo" → {"protocol": "file", "basedir": "./repo"}
        "C|/repo" → {"protocol": "file", "basedir": "C:/repo"}
        "file:///srv/repo" → {"protocol": "file", "basedir": "/srv/repo"}
        "file:///C|/repo" → {"protocol": "file", "basedir": "C:/repo"}
    """
    if is_plain_path(location):
        basedir = location.strip()
        if len(basedir) >= 2 and basedir[1] == "|":
            basedir = _fix_drive_letter(basedir)
        return {"protocol": "file", "basedir": basedir}
    return {"protocol": protocol_of(location), "basedir": base_directory_of(location)}
