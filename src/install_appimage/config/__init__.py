"""Configuration management for install-appimage.

This package provides:
- GlobalConfigManager: INI settings (from settings.py)
- Paths: per-user locations of install-appimage itself (from paths.py)
- InstallPaths: directories the operations work in (from paths.py)
"""

from install_appimage.config.paths import InstallPaths, Paths
from install_appimage.config.settings import GlobalConfigManager
from install_appimage.types import GlobalConfig

__all__ = [
    "GlobalConfig",
    "GlobalConfigManager",
    "InstallPaths",
    "Paths",
]
