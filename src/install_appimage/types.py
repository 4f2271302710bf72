"""Shared types for install-appimage.

Configuration is exchanged as TypedDicts, operation results as frozen
dataclasses.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, TypedDict

from install_appimage.constants import (
    APPIMAGE_SUFFIX,
    DESKTOP_MISSING_VALUE,
    DESKTOP_SUFFIX,
    ICON_SUFFIX,
)

if TYPE_CHECKING:
    from install_appimage.config.paths import InstallPaths


class DirectoryConfig(TypedDict):
    """Directory section of the global configuration."""

    appimage_root: Path
    applications: Path
    user_applications: Path


class NetworkConfig(TypedDict):
    """Network section of the global configuration."""

    timeout_seconds: int


class PrivilegeConfig(TypedDict):
    """Privilege section of the global configuration."""

    elevate_command: str


class GlobalConfig(TypedDict):
    """Parsed global configuration."""

    config_version: str
    log_level: str
    console_log_level: str
    directory: DirectoryConfig
    network: NetworkConfig
    privilege: PrivilegeConfig


@dataclass(frozen=True)
class InstalledAppImage:
    """An AppImage living under the AppImage root."""

    name: str
    paths: "InstallPaths"

    @property
    def directory(self) -> Path:
        return self.paths.appimage_root / self.name

    @property
    def appimage_path(self) -> Path:
        return self.directory / f"{self.name}{APPIMAGE_SUFFIX}"

    @property
    def icon_path(self) -> Path:
        return self.directory / f"{self.name}{ICON_SUFFIX}"

    @property
    def desktop_entry(self) -> Path:
        return self.paths.applications_dir / f"{self.name}{DESKTOP_SUFFIX}"

    @property
    def symlink(self) -> Path:
        filename = f"{self.name}{DESKTOP_SUFFIX}"
        return self.paths.user_applications_dir / filename


@dataclass(frozen=True)
class InstallResult:
    """Outcome of a successful installation."""

    name: str
    appimage_path: Path
    desktop_entry: Path
    symlink: Path
    icon_path: Path | None = None


@dataclass(frozen=True)
class AppImageListing:
    """One row of the installed AppImage listing."""

    name: str
    appimage_path: Path
    desktop_entry: Path
    exec_command: str = DESKTOP_MISSING_VALUE
    icon: str = DESKTOP_MISSING_VALUE
    error: str | None = None


@dataclass(frozen=True)
class RemovalResult:
    """Outcome of removing a single AppImage."""

    name: str
    success: bool
    removed: tuple[Path, ...] = ()
    error: str | None = None
