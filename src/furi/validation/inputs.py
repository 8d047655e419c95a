"""Input validation for MCP tool parameters."""

from typing import Literal, cast

PathFormat = Literal["system", "posix", "windows", "windows_short", "windows_long"]

PATH_FORMATS: frozenset[str] = frozenset(
    {"system", "posix", "windows", "windows_short", "windows_long"}
)


class ValidationError(Exception):
    """Raised when a tool parameter is missing or malformed."""

    def __init__(self, field: str, message: str) -> None:
        """Initialize validation error.

        Args:
            field: The field that failed validation
            message: Description of what went wrong
        """
        super().__init__(message)
        self.field = field
        self.message = message

    def to_error_response(self) -> dict[str, str]:
        """Convert to MCP-compatible error response.

        Returns:
            Error dict with status, error_code, and message fields
        """
        return {
            "status": "error",
            "error_code": "validation_error",
            "message": f"{self.field}: {self.message}",
        }


def validate_required(field: str, value: str | None) -> str:
    """Ensure a string parameter is present and not blank.

    Only blank-ness is checked: the value itself is passed on unchanged, so
    paths with leading or trailing spaces survive.

    Raises:
        ValidationError: If value is None or only whitespace
    """
    if value is None:
        raise ValidationError(field, f"{field} parameter is required")
    if not value.strip():
        raise ValidationError(field, f"{field} parameter cannot be empty")
    return value


def validate_path_format(format: str | None) -> PathFormat:
    """Validate the `format` parameter of the conversion tools.

    Args:
        format: One of PATH_FORMATS, case-insensitive (None means "system")

    Returns:
        Normalized format name

    Raises:
        ValidationError: If the format is unknown
    """
    if format is None:
        return "system"
    normalized = format.strip().lower()
    if normalized not in PATH_FORMATS:
        allowed = ", ".join(sorted(PATH_FORMATS))
        raise ValidationError("format", f"must be one of: {allowed}, got: {format!r}")
    return cast(PathFormat, normalized)
