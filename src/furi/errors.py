"""Typed errors raised by furi.

Every error carries a stable, machine-readable ``code`` so callers can match
on it without parsing messages, and renders into the MCP error dict shape
used by the tool layer.
"""

from typing import Any


class FuriError(Exception):
    """Base exception for file URI and path conversion errors."""

    code: str = "ERR_FURI"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize furi error.

        Args:
            message: Human-readable error description
            details: Optional additional context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Convert to MCP-compatible error response.

        Returns:
            Error dict with status, error_code, and message fields
        """
        response: dict[str, Any] = {
            "status": "error",
            "error_code": self.code,
            "message": self.message,
        }
        if self.details:
            response["details"] = self.details
        return response


class InvalidFileUriError(FuriError, ValueError):
    """Raised when an input cannot be parsed as an absolute ``file:`` URI."""

    code = "ERR_INVALID_FILE_URI"

    def __init__(self, input: str, reason: str | None = None) -> None:
        message = f"Invalid file URI: {input}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, details={"input": input})
        self.input = input
        self.reason = reason


class InvalidHostError(FuriError, ValueError):
    """Raised when a URI with a remote host is converted to a POSIX path."""

    code = "ERR_INVALID_HOST"

    def __init__(self, uri: str, host: str) -> None:
        super().__init__(
            f'Expected `host` to be "" or "localhost": {uri}',
            details={"uri": uri, "host": host},
        )
        self.uri = uri
        self.host = host


class InvalidPathError(FuriError, ValueError):
    """Raised when a native path cannot be turned into a file URI."""

    code = "ERR_INVALID_PATH"
    kind = "path"

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"Invalid {self.kind}: {path!r}: {reason}",
            details={"path": path},
        )
        self.path = path
        self.reason = reason


class InvalidWindowsPathError(InvalidPathError):
    """Raised for malformed Windows paths.

    Best-effort parsing only raises it for paths no file URI can hold,
    such as lone surrogates or a server name with a space. Strict parsing
    also checks drive letters and components.
    """

    code = "ERR_INVALID_WINDOWS_PATH"
    kind = "Windows path"
