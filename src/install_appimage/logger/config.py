"""Log settings loading for the install_appimage logging system.

Bootstrap defaults are used while the logger is first created; the levels
from settings.conf are applied afterwards through
update_logger_from_config(), which avoids a circular import between the
logger and config packages.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from install_appimage.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_FILE_NAME,
)

if TYPE_CHECKING:
    from install_appimage.logger.state import LoggingState
    from install_appimage.types import GlobalConfig

LOG_DIR_ENV_VAR = "INSTALL_APPIMAGE_LOG_DIR"


def load_log_settings() -> tuple[str, str, Path]:
    """Load bootstrap console level, file level, and file path.

    Environment Variable Override:
        INSTALL_APPIMAGE_LOG_DIR: Directory for the log file. The test
        suite points it at a temporary directory.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if env_log_dir:
        log_dir = Path(env_log_dir).expanduser()
    else:
        log_dir = (
            Path.home() / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR / "logs"
        )

    log_path = log_dir / LOG_FILE_NAME
    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_path


def apply_handler_levels(
    state: "LoggingState", console_level: str, file_level: str
) -> None:
    """Set console and file handler levels on the running listener.

    Args:
        state: Logger state object
        console_level: Level name for the console handler
        file_level: Level name for the file handler

    """
    if state.queue_listener is None:
        return

    for handler in state.queue_listener.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.setLevel(getattr(logging, file_level, logging.INFO))
        elif isinstance(handler, logging.StreamHandler):
            handler.setLevel(
                getattr(logging, console_level, logging.WARNING)
            )


def update_logger_from_config(
    state: "LoggingState", global_config: "GlobalConfig | None" = None
) -> None:
    """Update handler levels from settings.conf.

    Only handler levels change; handlers are never added or removed.

    Args:
        state: Logger state object
        global_config: Already loaded configuration; settings.conf is
            read when omitted

    """
    config = global_config
    if config is None:
        try:
            from install_appimage.config import (  # noqa: PLC0415
                GlobalConfigManager,
            )

            config = GlobalConfigManager().load_global_config()
        except (ImportError, KeyError, OSError):
            # Config not readable yet - keep bootstrap defaults
            return

    apply_handler_levels(
        state, config["console_log_level"], config["log_level"]
    )
    state.config_applied = True
