"""Runtime configuration management.

Environment Variables:
    FURI_PLATFORM: Path flavour for system conversions: auto, posix, windows (default: auto)
    FURI_WINDOWS_LONG_PATH: Emit long (\\\\?\\) Windows paths by default (default: false)
    FURI_LOG_LEVEL: Logging level (default: INFO)
    FURI_LOG_MODE: Logging mode: stderr, file, both (default: stderr)
    FURI_LOG_FILE: Log file path (optional, for file/both modes)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, cast

PlatformSetting = Literal["auto", "posix", "windows"]


@dataclass
class Config:
    """Runtime configuration for furi."""

    platform: PlatformSetting  # "auto" = detect from sys.platform
    windows_long_path: bool  # Default output form for Windows paths
    log_level: str  # Logging level: DEBUG, INFO, WARNING, ERROR
    log_mode: Literal["stderr", "file", "both"]  # Logging mode
    log_file: Path | None  # Log file path (for file/both modes)


_config: Config | None = None


def _parse_bool(name: str, default: str) -> bool:
    value = os.getenv(name, default).strip().lower()
    if value in ("true", "1", "yes"):
        return True
    if value in ("false", "0", "no"):
        return False
    raise ValueError(f"{name} must be true or false, got: {value}")


def load_config() -> Config:
    """
    Load configuration from environment variables.

    Validates all configuration values and returns a Config instance with
    defaults applied.

    Returns:
        Config instance with validated values

    Raises:
        ValueError: If configuration values are invalid
    """
    # Parse platform
    platform_str = os.getenv("FURI_PLATFORM", "auto").lower()
    valid_platforms = {"auto", "posix", "windows"}
    if platform_str not in valid_platforms:
        raise ValueError(
            f"FURI_PLATFORM must be one of {valid_platforms}, got: {platform_str}"
        )
    platform = cast(PlatformSetting, platform_str)

    windows_long_path = _parse_bool("FURI_WINDOWS_LONG_PATH", "false")

    # Parse log level
    log_level = os.getenv("FURI_LOG_LEVEL", "INFO").upper()
    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if log_level not in valid_levels:
        raise ValueError(
            f"FURI_LOG_LEVEL must be one of {valid_levels}, got: {log_level}"
        )

    # Parse log mode
    log_mode_str = os.getenv("FURI_LOG_MODE", "stderr").lower()
    valid_modes = {"stderr", "file", "both"}
    if log_mode_str not in valid_modes:
        raise ValueError(
            f"FURI_LOG_MODE must be one of {valid_modes}, got: {log_mode_str}"
        )
    # Type assertion: we validated above that log_mode_str is in valid_modes
    log_mode = cast(Literal["stderr", "file", "both"], log_mode_str)

    # Parse log file
    log_file = None
    if log_file_str := os.getenv("FURI_LOG_FILE"):
        log_file = Path(log_file_str).resolve()

    return Config(
        platform=platform,
        windows_long_path=windows_long_path,
        log_level=log_level,
        log_mode=log_mode,
        log_file=log_file,
    )


def get_config() -> Config:
    """
    Get singleton config instance.

    Loads configuration on first call and caches the result.

    Returns:
        Config instance (loads on first call)
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """
    Reset cached config (for testing only).

    This clears the singleton config instance, forcing load_config() to be
    called again on the next get_config() call.
    """
    global _config
    _config = None
