"""Common models and logging used across xdgdir modules."""

from .logging import (
    LoggingConfig,
    LogLevel,
    create_logger,
    disable_library_logging,
    enable_library_logging,
    setup_cli_logging,
)
from .models import AppInfo

__all__ = [
    "AppInfo",
    "LogLevel",
    "LoggingConfig",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "setup_cli_logging",
]
