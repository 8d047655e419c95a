"""System-dependent path conversion.

The platform is an explicit input: every function accepts ``platform=``.
When it is omitted, the ``FURI_PLATFORM`` setting decides, and ``auto``
falls back to the interpreter's own platform.
"""

import sys
from enum import Enum

from .config import get_config
from .furi import FileUri, UriLike
from .posix import from_posix_path, to_posix_path
from .windows import from_windows_path, to_windows_long_path, to_windows_short_path


class Platform(str, Enum):
    """Native path flavour."""

    POSIX = "posix"
    WINDOWS = "windows"


def detect_platform() -> Platform:
    """Return the path flavour of the running interpreter."""
    return Platform.WINDOWS if sys.platform == "win32" else Platform.POSIX


def current_platform() -> Platform:
    """Return the configured path flavour.

    Reads ``FURI_PLATFORM`` through the config singleton; ``auto`` means
    ``detect_platform()``.
    """
    setting = get_config().platform
    if setting == "auto":
        return detect_platform()
    return Platform(setting)


def to_sys_path(
    furi: UriLike,
    windows_long_path: bool = False,
    *,
    platform: Platform | None = None,
) -> str:
    """Convert a file URI to a system-dependent path.

    Use ``to_posix_path``, ``to_windows_short_path`` or
    ``to_windows_long_path`` for system-independent results.

    Args:
        furi: File URI to convert
        windows_long_path: Use long paths on Windows
        platform: Target path flavour (default: ``current_platform()``)

    Returns:
        System-dependent path

    Example:
        >>> to_sys_path("file:///C:/dir/foo", platform=Platform.WINDOWS)
        'C:\\\\dir\\\\foo'
        >>> to_sys_path("file:///dir/foo", platform=Platform.POSIX)
        '/dir/foo'
    """
    if platform is None:
        platform = current_platform()
    if platform is Platform.WINDOWS:
        return to_windows_long_path(furi) if windows_long_path else to_windows_short_path(furi)
    return to_posix_path(furi)


def from_sys_path(abs_path: str, *, platform: Platform | None = None) -> FileUri:
    """Convert an absolute system-dependent path to a file URI.

    Use ``from_posix_path`` or ``from_windows_path`` for
    system-independent results.

    Example:
        >>> str(from_sys_path("C:\\\\dir\\\\foo", platform=Platform.WINDOWS))
        'file:///C:/dir/foo'
    """
    if platform is None:
        platform = current_platform()
    if platform is Platform.WINDOWS:
        return from_windows_path(abs_path)
    return from_posix_path(abs_path)
