"""Install service: relocate an AppImage and integrate it with the desktop.

Steps, each awaited in order through the privileged executor:

1. create ``<root>/<name>``
2. move the AppImage to ``<root>/<name>/<name>.AppImage`` and mark it
   executable
3. optionally download the icon and move it next to the AppImage
4. write the desktop entry to a temporary file and move it into the
   applications directory
5. symlink the entry into the user applications directory
6. refresh the desktop database

A failing step aborts the install; earlier steps are not rolled back.
"""

import tempfile
from pathlib import Path

from install_appimage.config.paths import InstallPaths
from install_appimage.constants import (
    APPIMAGE_SUFFIX,
    DESKTOP_SUFFIX,
    TEMP_DIR_PREFIX,
)
from install_appimage.core.desktop_entry import render_desktop_entry
from install_appimage.core.icon import IconDownloader
from install_appimage.core.privileged import PrivilegedExecutor
from install_appimage.exceptions import (
    IconDownloadError,
    InstallationError,
    PrivilegedCommandError,
    SourceNotFoundError,
    ValidationError,
)
from install_appimage.logger import get_logger
from install_appimage.types import InstalledAppImage, InstallResult

logger = get_logger(__name__)


def derive_app_name(source: Path) -> str:
    """Return the AppImage name: the file name without a trailing .AppImage.

    Other suffixes are part of the name, so "tool-1.0" stays "tool-1.0".
    """
    return source.name.removesuffix(APPIMAGE_SUFFIX)


class InstallService:
    """Installs AppImage bundles into the system AppImage root."""

    def __init__(
        self,
        paths: InstallPaths,
        executor: PrivilegedExecutor,
        icon_downloader: IconDownloader | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            paths: Directory layout to install into
            executor: Runs the privileged filesystem commands
            icon_downloader: Used when an icon URL is given

        """
        self.paths = paths
        self.executor = executor
        self.icon_downloader = icon_downloader

    async def install(
        self,
        source: Path | str,
        icon_url: str | None = None,
        params: str | None = None,
    ) -> InstallResult:
        """Install the AppImage at ``source``.

        Args:
            source: Path to the AppImage file
            icon_url: Optional URL of an icon to download
            params: Optional extra arguments for the Exec line

        Returns:
            Paths of everything that was installed

        Raises:
            SourceNotFoundError: If ``source`` does not exist
            ValidationError: If ``source`` is not a regular file
            InstallationError: If a privileged command fails

        """
        source_path = Path(source).expanduser().resolve()
        if not source_path.exists():
            msg = f'The file "{source_path}" does not exist.'
            raise SourceNotFoundError(msg)
        if not source_path.is_file():
            msg = f'"{source_path}" is not a file.'
            raise ValidationError(msg)

        app = self.paths.app(derive_app_name(source_path))
        logger.info("Installing %s from %s", app.name, source_path)

        try:
            with tempfile.TemporaryDirectory(prefix=TEMP_DIR_PREFIX) as tmp:
                staging_dir = Path(tmp)
                await self._install_appimage(source_path, app)
                icon_path = await self._install_icon(
                    app, icon_url, staging_dir
                )
                await self._install_desktop_entry(
                    app, icon_path, params, staging_dir
                )
            await self._link_user_entry(app)
            await self.executor.run(
                ["update-desktop-database", str(self.paths.applications_dir)]
            )
        except PrivilegedCommandError as e:
            raise InstallationError(e.message, app.name) from e
        except OSError as e:
            raise InstallationError(str(e), app.name) from e

        logger.debug("Installed %s", app.name)
        return InstallResult(
            name=app.name,
            appimage_path=app.appimage_path,
            desktop_entry=app.desktop_entry,
            symlink=app.symlink,
            icon_path=icon_path,
        )

    async def _install_appimage(
        self, source_path: Path, app: InstalledAppImage
    ) -> None:
        await self.executor.run(
            ["mkdir", "-p", str(self.paths.appimage_root)]
        )
        await self.executor.run(["mkdir", "-p", str(app.directory)])
        await self.executor.run(
            ["mv", str(source_path), str(app.appimage_path)]
        )
        await self.executor.run(["chmod", "+x", str(app.appimage_path)])

    async def _install_icon(
        self,
        app: InstalledAppImage,
        icon_url: str | None,
        staging_dir: Path,
    ) -> Path | None:
        """Download and place the icon.

        A failed download is not fatal: the install continues and the
        desktop entry is written without an Icon key.
        """
        if not icon_url:
            return None

        if self.icon_downloader is None:
            logger.warning("No icon downloader configured, skipping icon")
            return None

        staged_icon = staging_dir / app.icon_path.name
        try:
            await self.icon_downloader.download(icon_url, staged_icon)
        except IconDownloadError as e:
            logger.warning("%s; continuing without an icon", e)
            return None

        await self.executor.run(
            ["mv", str(staged_icon), str(app.icon_path)]
        )
        return app.icon_path

    async def _install_desktop_entry(
        self,
        app: InstalledAppImage,
        icon_path: Path | None,
        params: str | None,
        staging_dir: Path,
    ) -> None:
        content = render_desktop_entry(
            app.name, app.appimage_path, icon_path=icon_path, params=params
        )
        staged_entry = staging_dir / f"{app.name}{DESKTOP_SUFFIX}"
        staged_entry.write_text(content, encoding="utf-8")

        await self.executor.run(
            ["mv", str(staged_entry), str(app.desktop_entry)]
        )
        await self.executor.run(["chmod", "+x", str(app.desktop_entry)])

    async def _link_user_entry(self, app: InstalledAppImage) -> None:
        await self.executor.run(
            ["mkdir", "-p", str(self.paths.user_applications_dir)]
        )
        await self.executor.run(
            ["ln", "-sf", str(app.desktop_entry), str(app.symlink)]
        )
