"""Path algebra tools operating directly on file URIs."""

from typing import Any

from ..paths import append, basename, join, parent, relative
from ..validation import ValidationError, validate_required
from ._handler import tool_handler


@tool_handler("join_uri")
async def join_uri(base: str, components: list[str]) -> dict[str, Any]:
    """
    Append raw names to a file URI, percent-encoding each one.

    A "/" inside a name is encoded and does not create a new segment.

    Returns:
        {"status": "success", "uri": "file:///foo/bar"}
    """
    base = validate_required("base", base)
    if components is None:
        raise ValidationError("components", "components parameter is required")
    return {"uri": join(base, components).href}


@tool_handler("append_uri")
async def append_uri(base: str, uri_paths: list[str]) -> dict[str, Any]:
    """
    Append pre-encoded, "/"-separated relative paths to a file URI.

    The trailing slash of the result follows the last non-empty path.

    Returns:
        {"status": "success", "uri": "file:///foo/bar/baz/"}
    """
    base = validate_required("base", base)
    if uri_paths is None:
        raise ValidationError("uri_paths", "uri_paths parameter is required")
    return {"uri": append(base, *uri_paths).href}


@tool_handler("parent_uri")
async def parent_uri(uri: str) -> dict[str, Any]:
    """
    Return the parent of a file URI. The root is its own parent.

    Returns:
        {"status": "success", "uri": "file:///foo"}
    """
    uri = validate_required("uri", uri)
    return {"uri": parent(uri).href}


@tool_handler("relative_uri")
async def relative_uri(from_uri: str, to_uri: str) -> dict[str, Any]:
    """
    Compute the relative reference from one file URI to another.

    When the hosts differ, `relative` is the absolute target URI and
    `is_absolute` is true.

    Returns:
        {"status": "success", "relative": "../log", "is_absolute": false}
    """
    from_uri = validate_required("from_uri", from_uri)
    to_uri = validate_required("to_uri", to_uri)
    result = relative(from_uri, to_uri)
    return {"relative": result, "is_absolute": result.startswith("file:")}


@tool_handler("basename_uri")
async def basename_uri(uri: str, ext: str | None = None) -> dict[str, Any]:
    """
    Return the percent-encoded basename of a file URI.

    Args:
        uri: Absolute file:// URI
        ext: Suffix to strip (only if strictly shorter than the basename)

    Returns:
        {"status": "success", "basename": "main"}
    """
    uri = validate_required("uri", uri)
    return {"basename": basename(uri, ext)}
