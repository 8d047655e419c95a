"""Conversion between file:// URIs and native paths, plus path algebra on URIs."""

from .errors import (
    FuriError,
    InvalidFileUriError,
    InvalidHostError,
    InvalidPathError,
    InvalidWindowsPathError,
)
from .furi import FILE_PROTOCOL, FileUri, UriLike, as_furi
from .paths import append, basename, join, parent, relative
from .posix import from_posix_path, to_posix_path
from .system import Platform, current_platform, detect_platform, from_sys_path, to_sys_path
from .windows import from_windows_path, to_windows_long_path, to_windows_short_path

__version__ = "0.1.0"

__all__ = [
    "FILE_PROTOCOL",
    "FileUri",
    "FuriError",
    "InvalidFileUriError",
    "InvalidHostError",
    "InvalidPathError",
    "InvalidWindowsPathError",
    "Platform",
    "UriLike",
    "append",
    "as_furi",
    "basename",
    "current_platform",
    "detect_platform",
    "from_posix_path",
    "from_sys_path",
    "from_windows_path",
    "join",
    "parent",
    "relative",
    "to_posix_path",
    "to_sys_path",
    "to_windows_long_path",
    "to_windows_short_path",
]
