"""FastMCP server exposing furi conversions as tools.

NOTE: Do NOT initialize logging here at import time.
Logging is initialized in __main__.py to avoid import side effects.

Conversion tools:
- uri_to_path: file URI -> POSIX / Windows / system path
- path_to_uri: native path -> file URI

Path algebra tools:
- join_uri, append_uri, parent_uri, relative_uri, basename_uri
"""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP


def create_mcp_server() -> FastMCP:
    """Create and initialize the MCP server instance.

    Logging is only configured here when nothing else did it first (e.g.
    when the module is imported by a host application or by tests).

    Returns:
        FastMCP server instance
    """
    root_logger = logging.getLogger()
    if not root_logger.hasHandlers():
        from .config import get_config
        from .logging_config import setup_logging

        setup_logging(get_config())

    return FastMCP("furi")


mcp = create_mcp_server()


# ============================================================================
# Conversions
# ============================================================================


@mcp.tool()
async def uri_to_path(
    uri: str,
    format: str = "system",
    windows_long_path: bool | None = None,
) -> dict[str, Any]:
    """
    Convert a file:// URI to a native filesystem path.

    Args:
        uri: Absolute file:// URI (e.g., "file:///home/user/a%20b.txt")
        format: Output flavour: "system" (server platform), "posix",
                "windows", "windows_short" or "windows_long"
        windows_long_path: Emit \\\\?\\ long paths for Windows output.
                           Defaults to the server configuration.

    Returns:
        Dictionary with status field.
        Success includes path and the format actually used.
        Error includes error_code and message.

    Example:
        uri_to_path("file://server/share/doc.txt", format="windows")
        -> {"status": "success", "path": "\\\\server\\share\\doc.txt", ...}
    """
    # Lazy import to avoid import-time side effects
    from .tools.convert import uri_to_path as uri_to_path_impl

    return await uri_to_path_impl(uri, format, windows_long_path)


@mcp.tool()
async def path_to_uri(path: str, format: str = "system") -> dict[str, Any]:
    """
    Convert an absolute native filesystem path to a file:// URI.

    Args:
        path: Absolute path (POSIX "/dir/foo" or Windows "C:\\dir\\foo",
              "\\\\server\\share", "\\\\?\\C:\\dir", "\\\\?\\UNC\\server\\share")
        format: Input flavour: "system", "posix" or "windows"

    Returns:
        Dictionary with status field.
        Success includes uri.
        Error includes error_code and message.
    """
    from .tools.convert import path_to_uri as path_to_uri_impl

    return await path_to_uri_impl(path, format)


# ============================================================================
# Path algebra
# ============================================================================


@mcp.tool()
async def join_uri(base: str, components: list[str]) -> dict[str, Any]:
    """
    Append raw file or directory names to a file:// URI.

    Each name is percent-encoded on its own: "a/b" becomes one segment "a%2Fb".

    Args:
        base: Base file:// URI
        components: Names to append, in order

    Returns:
        Dictionary with status field. Success includes uri.
    """
    from .tools.navigate import join_uri as join_uri_impl

    return await join_uri_impl(base, components)


@mcp.tool()
async def append_uri(base: str, uri_paths: list[str]) -> dict[str, Any]:
    """
    Append already percent-encoded relative URI paths to a file:// URI.

    "/" inside a path separates segments. The result ends with "/" iff the
    last non-empty path does.

    Args:
        base: Base file:// URI
        uri_paths: Relative URI paths (e.g., ["src/", "main%20file.py"])

    Returns:
        Dictionary with status field. Success includes uri.
    """
    from .tools.navigate import append_uri as append_uri_impl

    return await append_uri_impl(base, uri_paths)


@mcp.tool()
async def parent_uri(uri: str) -> dict[str, Any]:
    """
    Get the parent directory URI of a file:// URI.

    Args:
        uri: Absolute file:// URI

    Returns:
        Dictionary with status field. Success includes uri.
    """
    from .tools.navigate import parent_uri as parent_uri_impl

    return await parent_uri_impl(uri)


@mcp.tool()
async def relative_uri(from_uri: str, to_uri: str) -> dict[str, Any]:
    """
    Compute a relative reference from one file:// URI (a directory) to another.

    Args:
        from_uri: Starting directory URI
        to_uri: Target URI

    Returns:
        Dictionary with status field.
        Success includes relative (percent-encoded) and is_absolute, which is
        true when the hosts differ and relative is the absolute target URI.
    """
    from .tools.navigate import relative_uri as relative_uri_impl

    return await relative_uri_impl(from_uri, to_uri)


@mcp.tool()
async def basename_uri(uri: str, ext: str | None = None) -> dict[str, Any]:
    """
    Get the last path segment of a file:// URI, optionally without a suffix.

    Args:
        uri: Absolute file:// URI
        ext: Suffix to remove (e.g., ".py")

    Returns:
        Dictionary with status field. Success includes basename (percent-encoded).
    """
    from .tools.navigate import basename_uri as basename_uri_impl

    return await basename_uri_impl(uri, ext)
