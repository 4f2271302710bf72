"""Remove service: select and uninstall installed AppImages.

Selection uses wildcard patterns (see core.pattern). For each selected
AppImage the directory, the system desktop entry and the user symlink are
removed when present. A failure on one AppImage is recorded in its result
and the remaining AppImages are still processed.
"""

from collections.abc import Iterable
from pathlib import Path

from install_appimage.config.paths import InstallPaths
from install_appimage.core.listing import ListService
from install_appimage.core.pattern import filter_names
from install_appimage.core.privileged import PrivilegedExecutor
from install_appimage.exceptions import PrivilegedCommandError, RemovalError
from install_appimage.logger import get_logger
from install_appimage.types import InstalledAppImage, RemovalResult

logger = get_logger(__name__)


def _is_present(path: Path) -> bool:
    # is_symlink() catches dangling links that exists() reports as missing
    return path.is_symlink() or path.exists()


class RemoveService:
    """Uninstalls AppImages from the AppImage root."""

    def __init__(
        self,
        paths: InstallPaths,
        executor: PrivilegedExecutor,
        list_service: ListService | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            paths: Directory layout to remove from
            executor: Runs the privileged removal commands
            list_service: Source of installed names (built from ``paths``
                when omitted)

        """
        self.paths = paths
        self.executor = executor
        self.list_service = list_service or ListService(paths)

    def find_matches(self, pattern: str) -> list[str]:
        """Return installed names matched by the wildcard ``pattern``."""
        matches = filter_names(pattern, self.list_service.installed_names())
        logger.debug("Pattern %r matched %s", pattern, matches)
        return matches

    async def remove(self, names: Iterable[str]) -> list[RemovalResult]:
        """Remove each named AppImage.

        Returns:
            One result per name, in the given order

        """
        results = []
        for name in names:
            app = self.paths.app(name)
            try:
                removed = await self._remove_app(app)
            except RemovalError as e:
                logger.error("%s", e)
                results.append(
                    RemovalResult(name=name, success=False, error=e.message)
                )
                continue
            results.append(
                RemovalResult(name=name, success=True, removed=removed)
            )
        return results

    async def _remove_app(self, app: InstalledAppImage) -> tuple[Path, ...]:
        """Remove the files belonging to ``app`` that exist.

        Raises:
            RemovalError: If a privileged command fails

        """
        steps = [
            (app.directory, ["rm", "-rf", str(app.directory)]),
            (app.desktop_entry, ["rm", "-f", str(app.desktop_entry)]),
            (app.symlink, ["rm", "-f", str(app.symlink)]),
        ]

        removed: list[Path] = []
        for path, argv in steps:
            if not _is_present(path):
                logger.debug("Already absent: %s", path)
                continue
            try:
                await self.executor.run(argv)
            except PrivilegedCommandError as e:
                raise RemovalError(e.message, app.name) from e
            removed.append(path)

        return tuple(removed)
