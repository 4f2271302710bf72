"""Logging utilities for install-appimage.

Architecture:
    Application -> QueueHandler -> Queue -> QueueListener Thread
                                                 |
                                       Console + File Handlers

Usage:
    >>> from install_appimage.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Installing %s", app_name)  # Use %-style formatting

Environment Variables:
    INSTALL_APPIMAGE_LOG_DIR: Override the log directory (used by tests).

Rules for contributors:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls
"""

from install_appimage.logger.config import (
    update_logger_from_config as _update_config,
)
from install_appimage.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from install_appimage.logger.handlers import ConfigurationError
from install_appimage.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    set_console_level,
    setup_logging,
)
from install_appimage.logger.state import get_state

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "get_state",
    "set_console_level",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(global_config=None) -> None:
    """Apply log levels from settings.conf to the running handlers."""
    _update_config(get_state(), global_config)
