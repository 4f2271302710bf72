"""Base command handler for install-appimage CLI commands."""

from abc import ABC, abstractmethod
from argparse import Namespace

from install_appimage.config import InstallPaths
from install_appimage.core.privileged import PrivilegedExecutor
from install_appimage.types import GlobalConfig


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    CLIRunner is the composition root: it builds the configuration, the
    install layout and the privileged executor and injects them here, so
    tests can pass a temporary layout and a fake executor instead.
    """

    def __init__(
        self,
        global_config: GlobalConfig,
        paths: InstallPaths,
        executor: PrivilegedExecutor,
    ) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            global_config: Parsed global configuration
            paths: Directories the operations work in
            executor: Runs privileged filesystem commands

        """
        self.global_config = global_config
        self.paths = paths
        self.executor = executor

    @abstractmethod
    async def execute(self, args: Namespace) -> None:
        """Execute the command with the given arguments.

        Raises:
            InstallerError: On any failure that should exit non-zero

        """
