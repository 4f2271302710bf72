"""Global configuration manager for INI settings."""

import configparser
import logging
from datetime import UTC, datetime
from pathlib import Path

from install_appimage.config.paths import Paths
from install_appimage.constants import (
    CONFIG_FILE_NAME,
    CONFIG_VERSION,
    DEFAULT_APPIMAGE_ROOT,
    DEFAULT_APPLICATIONS_DIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_ELEVATE_COMMAND,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_APPLICATIONS_DIR,
    DIRECTORY_KEYS,
    KEY_CONFIG_VERSION,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_ELEVATE_COMMAND,
    KEY_LOG_LEVEL,
    KEY_TIMEOUT_SECONDS,
    SECTION_DEFAULT,
    SECTION_DIRECTORY,
    SECTION_NETWORK,
    SECTION_PRIVILEGE,
    VALID_LOG_LEVELS,
)
from install_appimage.types import (
    DirectoryConfig,
    GlobalConfig,
    NetworkConfig,
    PrivilegeConfig,
)

logger = logging.getLogger(__name__)

# Type alias for raw INI config dictionary
RawConfigDict = dict[str, str | dict[str, str]]

FILE_HEADER = """\
# install-appimage configuration
# Generated: {timestamp}
#
# Edit values below to change where AppImages and desktop entries live.
# Paths support ~ expansion.

"""

SECTION_COMMENTS: dict[str, str] = {
    SECTION_DEFAULT: "# Log levels: DEBUG, INFO, WARNING, ERROR, CRITICAL\n",
    SECTION_DIRECTORY: (
        "\n# appimage_root: one sub-directory per installed AppImage\n"
        "# applications: system desktop entries\n"
        "# user_applications: per-user symlinks to the desktop entries\n"
    ),
    SECTION_NETWORK: "\n# Icon download timeout\n",
    SECTION_PRIVILEGE: (
        "\n# Command prefixed to every filesystem change."
        " Leave empty to run without elevation.\n"
    ),
}


def _strip_inline_comment(value: str) -> str:
    """Strip inline comments (anything after '  #') from a config value."""
    if "  #" in value:
        return value.split("  #")[0].strip()
    return value.strip()


class GlobalConfigManager:
    """Manages the global INI configuration."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize global config manager.

        Args:
            config_dir: Configuration directory path
                (defaults to Paths.CONFIG_DIR)

        """
        self.config_dir = config_dir or Paths.CONFIG_DIR
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    def get_default_global_config(self) -> RawConfigDict:
        """Get default global configuration values."""
        return {
            KEY_CONFIG_VERSION: CONFIG_VERSION,
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            SECTION_DIRECTORY: {
                "appimage_root": DEFAULT_APPIMAGE_ROOT,
                "applications": DEFAULT_APPLICATIONS_DIR,
                "user_applications": DEFAULT_USER_APPLICATIONS_DIR,
            },
            SECTION_NETWORK: {
                KEY_TIMEOUT_SECONDS: str(DEFAULT_TIMEOUT_SECONDS),
            },
            SECTION_PRIVILEGE: {
                KEY_ELEVATE_COMMAND: DEFAULT_ELEVATE_COMMAND,
            },
        }

    def _create_parser(self) -> configparser.ConfigParser:
        return configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )

    def _create_config_from_defaults(
        self, defaults: RawConfigDict
    ) -> configparser.ConfigParser:
        """Create ConfigParser populated with defaults."""
        config = self._create_parser()

        flat_defaults = {
            key: str(value)
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})

        for key, value in defaults.items():
            if isinstance(value, dict):
                config.add_section(key)
                for subkey, subvalue in value.items():
                    config.set(key, subkey, str(subvalue))

        return config

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration, writing defaults on first run.

        Returns:
            Loaded global configuration

        """
        defaults = self.get_default_global_config()
        config = self._create_config_from_defaults(defaults)

        if self.settings_file.exists():
            try:
                config.read(self.settings_file, encoding="utf-8")
            except configparser.Error as e:
                logger.warning(
                    "Invalid settings file %s, using defaults: %s",
                    self.settings_file,
                    e,
                )
                config = self._create_config_from_defaults(defaults)
        else:
            logger.debug("Creating default settings: %s", self.settings_file)
            self.save_global_config(self._convert_to_global_config(config))

        return self._convert_to_global_config(config)

    def save_global_config(self, config: GlobalConfig) -> None:
        """Save global configuration to INI file with comments.

        Args:
            config: Global configuration to save

        """
        self.config_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now(tz=UTC).strftime("%Y-%m-%d %H:%M:%S")

        sections: dict[str, dict[str, str]] = {
            SECTION_DEFAULT: {
                KEY_CONFIG_VERSION: config["config_version"],
                KEY_LOG_LEVEL: config["log_level"],
                KEY_CONSOLE_LOG_LEVEL: config["console_log_level"],
            },
            SECTION_DIRECTORY: {
                key: str(path) for key, path in config["directory"].items()
            },
            SECTION_NETWORK: {
                KEY_TIMEOUT_SECONDS: str(
                    config["network"]["timeout_seconds"]
                ),
            },
            SECTION_PRIVILEGE: {
                KEY_ELEVATE_COMMAND: config["privilege"]["elevate_command"],
            },
        }

        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write(FILE_HEADER.format(timestamp=timestamp))
            for section, values in sections.items():
                f.write(SECTION_COMMENTS[section])
                f.write(f"[{section}]\n")
                for key, value in values.items():
                    f.write(f"{key} = {value}\n")

    def _convert_to_global_config(
        self, config: configparser.ConfigParser
    ) -> GlobalConfig:
        """Convert a populated ConfigParser to a typed GlobalConfig."""
        defaults = config.defaults()

        def get_level(key: str, default: str) -> str:
            value = _strip_inline_comment(defaults.get(key, default)).upper()
            if value not in VALID_LOG_LEVELS:
                logger.warning(
                    "Unknown %s '%s', using %s", key, value, default
                )
                return default
            return value

        def get_section(section: str) -> dict[str, str]:
            # Section values only; DEFAULT keys would otherwise bleed in
            return {
                key: _strip_inline_comment(value)
                for key, value in config.items(section, raw=True)
                if key not in defaults
            }

        directory_raw = get_section(SECTION_DIRECTORY)
        directory_paths = {
            key: Paths.expand_path(directory_raw[key])
            for key in DIRECTORY_KEYS
            if directory_raw.get(key)
        }

        network_raw = get_section(SECTION_NETWORK)
        try:
            timeout_seconds = int(
                network_raw.get(KEY_TIMEOUT_SECONDS, DEFAULT_TIMEOUT_SECONDS)
            )
        except ValueError:
            logger.warning(
                "Invalid %s '%s', using %s",
                KEY_TIMEOUT_SECONDS,
                network_raw.get(KEY_TIMEOUT_SECONDS),
                DEFAULT_TIMEOUT_SECONDS,
            )
            timeout_seconds = DEFAULT_TIMEOUT_SECONDS

        privilege_raw = get_section(SECTION_PRIVILEGE)

        return GlobalConfig(
            config_version=_strip_inline_comment(
                defaults.get(KEY_CONFIG_VERSION, CONFIG_VERSION)
            ),
            log_level=get_level(KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL),
            console_log_level=get_level(
                KEY_CONSOLE_LOG_LEVEL, DEFAULT_CONSOLE_LOG_LEVEL
            ),
            directory=DirectoryConfig(
                appimage_root=directory_paths.get(
                    "appimage_root", Path(DEFAULT_APPIMAGE_ROOT)
                ),
                applications=directory_paths.get(
                    "applications", Path(DEFAULT_APPLICATIONS_DIR)
                ),
                user_applications=directory_paths.get(
                    "user_applications",
                    Paths.expand_path(DEFAULT_USER_APPLICATIONS_DIR),
                ),
            ),
            network=NetworkConfig(timeout_seconds=timeout_seconds),
            privilege=PrivilegeConfig(
                elevate_command=privilege_raw.get(
                    KEY_ELEVATE_COMMAND, DEFAULT_ELEVATE_COMMAND
                ),
            ),
        )
