"""Logging configuration for furi.

Library modules only obtain loggers through get_logger() and log at DEBUG;
they never configure handlers. The MCP server entry point calls
setup_logging() once, which installs:

- JSON lines on stderr (stdout belongs to the MCP stdio transport)
- an optional human-readable rotating log file

IMPORTANT: No logging at import time.
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config

# Identifies the MCP tool call a record belongs to
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)

# Record attributes copied into JSON output when passed via `extra=`
EXTRA_FIELDS = ("tool", "uri", "path", "platform", "error_code", "duration_ms")

HUMAN_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
HUMAN_DATEFMT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """Format log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if request_id := request_id_var.get():
            log_obj["request_id"] = request_id

        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log_obj[key] = getattr(record, key)

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        # Paths may hold control characters or lone surrogates
        return json.dumps(log_obj, default=str, ensure_ascii=True)


class RequestIdFilter(logging.Filter):
    """Inject request_id into log records from context variable."""

    def filter(self, record: logging.LogRecord) -> bool:
        if request_id := request_id_var.get():
            record.request_id = request_id  # type: ignore[attr-defined]
        return True


def setup_logging(config: "Config") -> None:
    """
    Configure logging based on config.log_mode.

    Args:
        config: Configuration instance with logging settings

    Logging Modes:
        - "stderr": JSON lines to stderr (default)
        - "file": Human-readable lines to config.log_file
        - "both": Both outputs

    Existing root handlers are replaced, so calling this twice does not
    duplicate output.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.log_level)
    root_logger.handlers.clear()

    request_id_filter = RequestIdFilter()

    if config.log_mode in ("stderr", "both"):
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JsonFormatter())
        handler.addFilter(request_id_filter)
        root_logger.addHandler(handler)

    if config.log_mode in ("file", "both"):
        log_file = _get_log_file(config)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(HUMAN_FORMAT, datefmt=HUMAN_DATEFMT))
        handler.addFilter(request_id_filter)
        root_logger.addHandler(handler)

        _create_current_log_symlink(log_file)

    logging.getLogger("furi").setLevel(config.log_level)

    get_logger("logging").info(
        "Logging initialized",
        extra={"platform": config.platform},
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the furi namespace.

    Example:
        >>> get_logger("windows").name
        'furi.windows'
    """
    return logging.getLogger(f"furi.{name}")


def _get_log_file(config: "Config") -> Path:
    if config.log_file:
        return config.log_file

    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    return _get_log_directory() / f"furi-{timestamp}.log"


def _get_log_directory() -> Path:
    if sys.platform == "win32":
        return Path.home() / "AppData" / "Local" / "furi" / "logs"
    return Path.home() / ".furi" / "logs"


def _create_current_log_symlink(log_file: Path) -> None:
    """Point current.log at the active log file."""
    current_link = log_file.parent / "current.log"

    if current_link.exists() or current_link.is_symlink():
        current_link.unlink()

    try:
        current_link.symlink_to(log_file.name)
    except OSError:
        # Symlinks may not be supported on some systems
        pass
