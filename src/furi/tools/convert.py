"""Conversion tools: file URI <-> native path.

This module provides the uri_to_path and path_to_uri MCP tools.
"""

from typing import Any

from ..config import get_config
from ..posix import from_posix_path, to_posix_path
from ..system import current_platform, from_sys_path, to_sys_path
from ..validation import validate_path_format, validate_required
from ..windows import from_windows_path, to_windows_long_path, to_windows_short_path
from ._handler import tool_handler


@tool_handler("uri_to_path")
async def uri_to_path(
    uri: str,
    format: str | None = "system",
    windows_long_path: bool | None = None,
) -> dict[str, Any]:
    """
    Convert a file URI to a native path.

    Args:
        uri: Absolute file:// URI
        format: system, posix, windows, windows_short or windows_long
        windows_long_path: For system/windows formats, emit a long (\\\\?\\)
            path. Defaults to FURI_WINDOWS_LONG_PATH.

    Returns:
        Success:
            {"status": "success", "path": "/dir/foo", "format": "posix"}

        Error:
            {
                "status": "error",
                "error_code": "validation_error" | "ERR_INVALID_FILE_URI" | "ERR_INVALID_HOST",
                "message": "Human-readable error message"
            }
    """
    uri = validate_required("uri", uri)
    path_format = validate_path_format(format)
    if windows_long_path is None:
        windows_long_path = get_config().windows_long_path

    if path_format == "system":
        platform = current_platform()
        path = to_sys_path(uri, windows_long_path, platform=platform)
        return {"path": path, "format": platform.value}
    if path_format == "posix":
        return {"path": to_posix_path(uri), "format": "posix"}
    if path_format == "windows_long" or (path_format == "windows" and windows_long_path):
        return {"path": to_windows_long_path(uri), "format": "windows_long"}
    return {"path": to_windows_short_path(uri), "format": "windows_short"}


@tool_handler("path_to_uri")
async def path_to_uri(path: str, format: str | None = "system") -> dict[str, Any]:
    """
    Convert an absolute native path to a file URI.

    Windows input may use any of the short, long, device or UNC forms, so
    windows, windows_short and windows_long are equivalent here.

    Returns:
        Success:
            {"status": "success", "uri": "file:///dir/foo"}
    """
    path = validate_required("path", path)
    path_format = validate_path_format(format)

    if path_format == "system":
        uri = from_sys_path(path)
    elif path_format == "posix":
        uri = from_posix_path(path)
    else:
        uri = from_windows_path(path)
    return {"uri": uri.href}
