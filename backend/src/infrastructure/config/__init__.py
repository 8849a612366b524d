"""Configuration module for application settings and logging."""

from .settings import Settings, get_settings
from .logger import (
    ConfigurationError,
    Logger,
    build_error_context,
    get_context,
    get_logger,
    reset_logger,
    run_with_context,
    set_context,
)

__all__ = [
    "Settings",
    "get_settings",
    "ConfigurationError",
    "Logger",
    "build_error_context",
    "get_context",
    "get_logger",
    "reset_logger",
    "run_with_context",
    "set_context",
]
