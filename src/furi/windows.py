"""Conversion between file URIs and Windows paths.

Four address forms are supported:

- short device path: ``C:\\dir\\foo``
- short UNC (server) path: ``\\\\server\\dir\\foo``
- long device path: ``\\\\?\\C:\\dir\\foo``
- long UNC (server) path: ``\\\\?\\unc\\server\\dir\\foo``

Local paths map to URIs with an empty host (``file:///C:/dir/foo``), server
paths keep the server name as the host (``file://server/dir/foo``).
"""

import re

from .errors import InvalidFileUriError, InvalidWindowsPathError
from .furi import FileUri, UriLike, as_furi
from .logging_config import get_logger
from .utils.encoding import encode_uri_path

logger = get_logger("windows")

WINDOWS_PREFIX_REGEX = re.compile(r"^[\\/]{2,}([^\\/]+)(?:$|[\\/]+)")
WINDOWS_UNC_REGEX = re.compile(r"^unc(?:$|[\\/]+)([^\\/]+)(?:$|[\\/]+)", re.IGNORECASE)

_DRIVE_REGEX = re.compile(r"^[A-Za-z]:(?:$|[\\/])")
_RESERVED_CHARS_REGEX = re.compile(r'[<>:"|?*\x00-\x1f]')

_ROOT = FileUri("file:///")


def to_windows_short_path(furi: UriLike) -> str:
    """Convert a file URI to a Windows short path.

    The result is either a short device path or a short UNC server path.

    Example:
        >>> to_windows_short_path("file:///C:/dir/foo")
        'C:\\\\dir\\\\foo'
        >>> to_windows_short_path("file://server/Users/foo")
        '\\\\\\\\server\\\\Users\\\\foo'
    """
    uri = as_furi(furi)
    backward = "\\".join(uri.decoded_segments())
    if uri.host == "":
        # Local drive path: drop the separator in front of the drive letter
        return backward[1:]
    return f"\\\\{uri.host}{backward}"


def to_windows_long_path(furi: UriLike) -> str:
    """Convert a file URI to a Windows long path.

    The result is either a long device path or a long UNC server path.

    Example:
        >>> to_windows_long_path("file:///C:/dir/foo")
        '\\\\\\\\?\\\\C:\\\\dir\\\\foo'
        >>> to_windows_long_path("file://server/Users/foo")
        '\\\\\\\\?\\\\unc\\\\server\\\\Users\\\\foo'
    """
    uri = as_furi(furi)
    backward = "\\".join(uri.decoded_segments())
    if uri.host == "":
        return f"\\\\?\\{backward[1:]}"
    return f"\\\\?\\unc\\{uri.host}{backward}"


def from_windows_path(abs_path: str, *, strict: bool = False) -> FileUri:
    """Convert an absolute Windows path to a file URI.

    Any path a file URI can hold is mapped on a best-effort basis. With
    ``strict=True``, local paths must start with a drive letter and path
    components must not contain reserved characters.

    Args:
        abs_path: Absolute Windows path (short or long form)
        strict: Reject malformed paths instead of mapping them

    Returns:
        File URI

    Raises:
        InvalidWindowsPathError: If the server name cannot be a URI host or
            the path is not encodable as UTF-8; in strict mode, also if the
            path is malformed

    Example:
        >>> str(from_windows_path("C:\\\\dir\\\\foo"))
        'file:///C:/dir/foo'
        >>> str(from_windows_path("\\\\\\\\?\\\\unc\\\\server\\\\Users\\\\foo"))
        'file://server/Users/foo'
    """
    prefix_match = WINDOWS_PREFIX_REGEX.match(abs_path)
    if prefix_match is None:
        logger.debug(f"Short device path: {abs_path!r}")
        return _device_uri(abs_path, abs_path, strict)

    prefix = prefix_match.group(1)
    tail = abs_path[prefix_match.end():]
    if prefix != "?":
        logger.debug(f"Short server path: host={prefix!r}")
        return _server_uri(abs_path, prefix, tail, strict)

    unc_match = WINDOWS_UNC_REGEX.match(tail)
    if unc_match is None:
        logger.debug(f"Long device path: {abs_path!r}")
        return _device_uri(abs_path, tail, strict)

    logger.debug(f"Long server path: host={unc_match.group(1)!r}")
    return _server_uri(abs_path, unc_match.group(1), tail[unc_match.end():], strict)


def _device_uri(abs_path: str, local_path: str, strict: bool) -> FileUri:
    if strict:
        if _DRIVE_REGEX.match(local_path) is None:
            raise InvalidWindowsPathError(abs_path, "expected a drive letter")
        _check_components(abs_path, _to_forward_slashes(local_path[2:]))
    pathname = _encode_pathname(abs_path, f"/{_to_forward_slashes(local_path)}")
    return _ROOT.replace(pathname=pathname)


def _server_uri(abs_path: str, host: str, server_path: str, strict: bool) -> FileUri:
    forward = _to_forward_slashes(server_path)
    if strict:
        _check_components(abs_path, forward)
    pathname = _encode_pathname(abs_path, f"/{forward}")
    try:
        # Server names are literal: "%" never starts an escape
        return _ROOT.replace(host=host.replace("%", "%25"), pathname=pathname)
    except InvalidFileUriError as e:
        raise InvalidWindowsPathError(abs_path, f"invalid server name {host!r}") from e


def _encode_pathname(abs_path: str, forward: str) -> str:
    try:
        return encode_uri_path(forward)
    except UnicodeEncodeError as e:
        raise InvalidWindowsPathError(abs_path, f"not encodable as UTF-8: {e.reason}") from e


def _check_components(abs_path: str, forward: str) -> None:
    for component in forward.split("/"):
        match = _RESERVED_CHARS_REGEX.search(component)
        if match is not None:
            raise InvalidWindowsPathError(
                abs_path, f"reserved character {match.group(0)!r} in {component!r}"
            )


def _to_forward_slashes(path: str) -> str:
    return path.replace("\\", "/")
