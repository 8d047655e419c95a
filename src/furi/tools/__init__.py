"""MCP tool implementations."""

from .convert import path_to_uri, uri_to_path
from .navigate import append_uri, basename_uri, join_uri, parent_uri, relative_uri

__all__ = [
    "append_uri",
    "basename_uri",
    "join_uri",
    "parent_uri",
    "path_to_uri",
    "relative_uri",
    "uri_to_path",
]
