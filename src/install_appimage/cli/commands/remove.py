"""Uninstall command coordinator.

Matches installed AppImages against a wildcard pattern, asks for
confirmation, then removes every match.
"""

from argparse import Namespace

from install_appimage.config import InstallPaths
from install_appimage.constants import UNINSTALL_PROMPT
from install_appimage.core.confirm import Confirm, prompt_confirmation
from install_appimage.core.privileged import PrivilegedExecutor
from install_appimage.core.remove import RemoveService
from install_appimage.exceptions import RemovalError, ValidationError
from install_appimage.logger import get_logger
from install_appimage.types import GlobalConfig
from install_appimage.ui.display import (
    display_cancelled,
    display_matches,
    display_no_matches,
    display_removal_results,
)

from .base import BaseCommandHandler

logger = get_logger(__name__)


class RemoveHandler(BaseCommandHandler):
    """Thin coordinator for the uninstall command."""

    def __init__(
        self,
        global_config: GlobalConfig,
        paths: InstallPaths,
        executor: PrivilegedExecutor,
        confirm: Confirm = prompt_confirmation,
    ) -> None:
        """Initialize the handler.

        Args:
            global_config: Parsed global configuration
            paths: Directories the operations work in
            executor: Runs privileged filesystem commands
            confirm: Asks the user to approve the removal

        """
        super().__init__(global_config, paths, executor)
        self.confirm = confirm

    async def execute(self, args: Namespace) -> None:
        """Execute the uninstall command."""
        if not args.pattern:
            msg = "Please provide an AppImage name or pattern to uninstall."
            raise ValidationError(msg)

        service = RemoveService(self.paths, self.executor)
        matches = service.find_matches(args.pattern)
        if not matches:
            display_no_matches()
            return

        display_matches(matches)
        if not self.confirm(UNINSTALL_PROMPT):
            logger.debug("Uninstall of %s declined", matches)
            display_cancelled()
            return

        results = await service.remove(matches)
        display_removal_results(results)

        failed = [result.name for result in results if not result.success]
        if failed:
            msg = f"{len(failed)} AppImage(s) could not be uninstalled"
            raise RemovalError(msg, ", ".join(failed))
