"""List service: enumerate installed AppImages.

An AppImage counts as installed when ``<root>/<name>`` is a directory;
its desktop entry is only read when details are requested.
"""

from install_appimage.config.paths import InstallPaths
from install_appimage.core.desktop_entry import read_desktop_entry
from install_appimage.logger import get_logger
from install_appimage.types import AppImageListing

logger = get_logger(__name__)


class ListService:
    """Reports what is installed under the AppImage root."""

    def __init__(self, paths: InstallPaths) -> None:
        self.paths = paths

    def installed_names(self) -> list[str]:
        """Return installed AppImage names, sorted.

        A missing AppImage root is treated as an empty installation.
        """
        root = self.paths.appimage_root
        if not root.is_dir():
            logger.debug("AppImage root does not exist: %s", root)
            return []
        return sorted(entry.name for entry in root.iterdir() if entry.is_dir())

    def list_installed(self, details: bool = False) -> list[AppImageListing]:
        """List installed AppImages.

        Args:
            details: Read each desktop entry for its Exec and Icon values

        Returns:
            One listing per installed AppImage. Unreadable desktop entries
            are reported through ``error`` with N/A values instead of
            aborting the listing.

        """
        listings = []
        for name in self.installed_names():
            app = self.paths.app(name)
            if not details:
                listings.append(
                    AppImageListing(
                        name=name,
                        appimage_path=app.appimage_path,
                        desktop_entry=app.desktop_entry,
                    )
                )
                continue

            try:
                values = read_desktop_entry(app.desktop_entry)
            except (OSError, UnicodeDecodeError) as e:
                logger.debug(
                    "Cannot read desktop entry %s: %s", app.desktop_entry, e
                )
                listings.append(
                    AppImageListing(
                        name=name,
                        appimage_path=app.appimage_path,
                        desktop_entry=app.desktop_entry,
                        error=str(e),
                    )
                )
                continue

            listings.append(
                AppImageListing(
                    name=name,
                    appimage_path=app.appimage_path,
                    desktop_entry=app.desktop_entry,
                    exec_command=values["Exec"],
                    icon=values["Icon"],
                )
            )
        return listings
