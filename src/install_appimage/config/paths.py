"""Path constants and the injectable install layout.

Paths holds where install-appimage keeps its own settings. InstallPaths
holds the three directories every operation works in; it is built from
the global config and passed into each service so tests can point it at
a temporary tree.
"""

from dataclasses import dataclass
from pathlib import Path

from install_appimage.constants import CONFIG_DIR_NAME, DEFAULT_CONFIG_SUBDIR
from install_appimage.types import GlobalConfig, InstalledAppImage


class Paths:
    """Application paths and directory structure."""

    HOME_DIR = Path.home()
    CONFIG_DIR = HOME_DIR / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand ~ and resolve a path string.

        Example:
            >>> Paths.expand_path("~/.local/share/applications")
            Path('/home/user/.local/share/applications')
        """
        return Path(path_str).expanduser().resolve(strict=False)


@dataclass(frozen=True)
class InstallPaths:
    """Directories an install, listing or uninstall operates on."""

    appimage_root: Path
    applications_dir: Path
    user_applications_dir: Path

    @classmethod
    def from_config(cls, global_config: GlobalConfig) -> "InstallPaths":
        """Build the layout from the directory section of the config."""
        directory = global_config["directory"]
        return cls(
            appimage_root=directory["appimage_root"],
            applications_dir=directory["applications"],
            user_applications_dir=directory["user_applications"],
        )

    def app(self, name: str) -> InstalledAppImage:
        """Return the on-disk layout for the AppImage called ``name``."""
        return InstalledAppImage(name=name, paths=self)
