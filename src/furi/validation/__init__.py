"""Input validation utilities."""

from .inputs import (
    PATH_FORMATS,
    PathFormat,
    ValidationError,
    validate_path_format,
    validate_required,
)

__all__ = [
    "PATH_FORMATS",
    "PathFormat",
    "ValidationError",
    "validate_path_format",
    "validate_required",
]
