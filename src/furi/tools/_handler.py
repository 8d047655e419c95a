"""Shared error handling for MCP tool implementations."""

import time
import uuid
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, ParamSpec

from ..errors import FuriError
from ..logging_config import get_logger, request_id_var
from ..validation import ValidationError

logger = get_logger("tools")

P = ParamSpec("P")

ToolResult = dict[str, Any]


def tool_handler(
    name: str,
) -> Callable[[Callable[P, Awaitable[ToolResult]]], Callable[P, Awaitable[ToolResult]]]:
    """
    Decorator turning exceptions raised by a tool into error responses.

    The wrapped coroutine returns its success payload; this decorator adds
    ``"status": "success"``, tags log records with a fresh request id and
    maps exceptions:

    - ValidationError -> ``validation_error``
    - FuriError -> its ``code`` (e.g. ``ERR_INVALID_FILE_URI``)
    - anything else -> ``execution_error`` (logged with traceback)

    Args:
        name: Tool name used in log records
    """

    def decorator(
        func: Callable[P, Awaitable[ToolResult]],
    ) -> Callable[P, Awaitable[ToolResult]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> ToolResult:
            token = request_id_var.set(uuid.uuid4().hex[:12])
            start = time.perf_counter()
            try:
                logger.info(f"{name} called", extra={"tool": name})
                result = await func(*args, **kwargs)
                return {"status": "success", **result}
            except ValidationError as e:
                logger.warning(f"Input validation failed in {name}: {e}", extra={"tool": name})
                return e.to_error_response()
            except FuriError as e:
                logger.warning(
                    f"{name} failed: {e.message}",
                    extra={"tool": name, "error_code": e.code},
                )
                return e.to_error_response()
            except Exception as e:
                logger.error(f"Unexpected error in {name}: {e}", exc_info=True, extra={"tool": name})
                return {
                    "status": "error",
                    "error_code": "execution_error",
                    "message": f"Unexpected error in {name}: {e}",
                }
            finally:
                duration_ms = round((time.perf_counter() - start) * 1000, 3)
                logger.debug(f"{name} finished", extra={"tool": name, "duration_ms": duration_ms})
                request_id_var.reset(token)

        return wrapper

    return decorator
