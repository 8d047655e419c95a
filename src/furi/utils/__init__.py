"""Utility modules for furi."""

from .encoding import (
    canonicalize_pathname,
    collapse_slashes,
    decode_uri_component,
    encode_uri_component,
    encode_uri_path,
)

__all__ = [
    "canonicalize_pathname",
    "collapse_slashes",
    "decode_uri_component",
    "encode_uri_component",
    "encode_uri_path",
]
