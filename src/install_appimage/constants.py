"""Centralized constants module for install-appimage.

Constants are grouped by concern and use typing.Final annotations.

Usage:
    from install_appimage.constants import DEFAULT_APPIMAGE_ROOT
"""

from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_VERSION: Final[str] = "1.0.0"
CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "install-appimage"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_TIMEOUT_SECONDS: Final[int] = 10
DEFAULT_ELEVATE_COMMAND: Final[str] = "sudo"

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_DIRECTORY: Final[str] = "directory"
SECTION_NETWORK: Final[str] = "network"
SECTION_PRIVILEGE: Final[str] = "privilege"

KEY_CONFIG_VERSION: Final[str] = "config_version"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_TIMEOUT_SECONDS: Final[str] = "timeout_seconds"
KEY_ELEVATE_COMMAND: Final[str] = "elevate_command"

DIRECTORY_KEYS: Final[tuple[str, ...]] = (
    "appimage_root",
    "applications",
    "user_applications",
)

VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

# =============================================================================
# Filesystem Layout
# =============================================================================

DEFAULT_APPIMAGE_ROOT: Final[str] = "/usr/share/AppImages"
DEFAULT_APPLICATIONS_DIR: Final[str] = "/usr/share/applications"
DEFAULT_USER_APPLICATIONS_DIR: Final[str] = "~/.local/share/applications"

APPIMAGE_SUFFIX: Final[str] = ".AppImage"
DESKTOP_SUFFIX: Final[str] = ".desktop"
ICON_SUFFIX: Final[str] = ".png"
TEMP_DIR_PREFIX: Final[str] = "install-appimage-"

# =============================================================================
# Desktop Entry
# =============================================================================

DESKTOP_SECTION_HEADER: Final[str] = "[Desktop Entry]"
DESKTOP_FILE_TYPE: Final[str] = "Application"
DESKTOP_DEFAULT_CATEGORIES: Final[str] = "Utility;"
DESKTOP_DEFAULT_COMMENT: Final[str] = "AppImage application"
DESKTOP_MISSING_VALUE: Final[str] = "N/A"

# =============================================================================
# Uninstall Confirmation
# =============================================================================

CONFIRM_ANSWERS: Final[frozenset[str]] = frozenset({"y", "yes"})
UNINSTALL_PROMPT: Final[str] = (
    "Are you sure you want to uninstall these AppImages? (y/n) "
)

# =============================================================================
# Logging
# =============================================================================

LOG_FILE_NAME: Final[str] = "install-appimage.log"
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1_048_576
LOG_BACKUP_COUNT: Final[int] = 3
LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(funcName)s:%(lineno)d] - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
