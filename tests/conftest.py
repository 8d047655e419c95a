"""Pytest configuration and shared fixtures."""

import os
from typing import Iterator

import pytest

from furi.config import reset_config


@pytest.fixture(autouse=True)
def reset_config_fixture() -> Iterator[None]:
    """Reset config singleton between tests for isolation."""
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def clean_env() -> Iterator[None]:
    """Run every test without FURI_* variables, restoring them afterwards."""
    saved = {key: value for key, value in os.environ.items() if key.startswith("FURI_")}
    for key in saved:
        del os.environ[key]
    yield
    for key in [key for key in os.environ if key.startswith("FURI_")]:
        del os.environ[key]
    os.environ.update(saved)


@pytest.fixture
def set_env_vars():
    """Fixture to temporarily set environment variables."""

    def _set_env_vars(**kwargs: str) -> None:
        for key, value in kwargs.items():
            os.environ[key] = value
        reset_config()

    yield _set_env_vars


@pytest.fixture
def posix_platform(set_env_vars) -> None:
    """Force POSIX conversions for FURI_PLATFORM-driven code."""
    set_env_vars(FURI_PLATFORM="posix")


@pytest.fixture
def windows_platform(set_env_vars) -> None:
    """Force Windows conversions for FURI_PLATFORM-driven code."""
    set_env_vars(FURI_PLATFORM="windows")
