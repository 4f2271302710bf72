"""CLI runner for install-appimage.

Builds the shared dependencies, routes parsed arguments to the command
handlers and turns failures into exit status 1.
"""

import sys
from argparse import Namespace
from collections.abc import Sequence

from install_appimage import __version__
from install_appimage.cli.commands import (
    BaseCommandHandler,
    InstallHandler,
    ListHandler,
    RemoveHandler,
)
from install_appimage.cli.parser import (
    COMMAND_INSTALL,
    COMMAND_LIST,
    COMMAND_UNINSTALL,
    CLIParser,
)
from install_appimage.config import GlobalConfigManager, InstallPaths
from install_appimage.core.confirm import Confirm, prompt_confirmation
from install_appimage.core.privileged import (
    PrivilegedExecutor,
    SubprocessExecutor,
)
from install_appimage.exceptions import InstallerError
from install_appimage.logger import (
    get_logger,
    set_console_level,
    update_logger_from_config,
)
from install_appimage.ui.display import display_error

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(
        self,
        config_manager: GlobalConfigManager | None = None,
        paths: InstallPaths | None = None,
        executor: PrivilegedExecutor | None = None,
        confirm: Confirm = prompt_confirmation,
    ) -> None:
        """Initialize CLI runner with shared dependencies.

        Args:
            config_manager: Source of settings.conf
            paths: Install layout (derived from config when omitted)
            executor: Privileged executor (sudo-backed when omitted)
            confirm: Uninstall confirmation prompt

        """
        self.config_manager = config_manager or GlobalConfigManager()
        self.global_config = self.config_manager.load_global_config()
        update_logger_from_config(self.global_config)

        self.paths = paths or InstallPaths.from_config(self.global_config)
        self.executor = executor or SubprocessExecutor.from_config(
            self.global_config
        )
        self.parser = CLIParser()
        self._init_command_handlers(confirm)

    def _init_command_handlers(self, confirm: Confirm) -> None:
        shared = (self.global_config, self.paths, self.executor)
        self.command_handlers: dict[str, BaseCommandHandler] = {
            COMMAND_INSTALL: InstallHandler(*shared),
            COMMAND_LIST: ListHandler(*shared),
            COMMAND_UNINSTALL: RemoveHandler(*shared, confirm=confirm),
        }

    async def run(self, argv: Sequence[str] | None = None) -> None:
        """Run the CLI application.

        Exits with status 1 on any operation failure; help and version
        output return normally.
        """
        args = self.parser.parse_args(argv)

        if args.version:
            print(__version__)
            return

        if args.verbose:
            set_console_level("DEBUG")

        if not args.command:
            self.parser.print_help()
            return

        try:
            await self._execute_command(args)
        except InstallerError as e:
            logger.info("Command failed: %s", e)
            display_error(str(e))
            sys.exit(1)
        except KeyboardInterrupt:
            print("\n⏹️  Operation cancelled by user")
            sys.exit(1)

    async def _execute_command(self, args: Namespace) -> None:
        handler_name = getattr(args, "handler", args.command)
        handler = self.command_handlers.get(handler_name)
        if handler is None:
            display_error(f"Unknown command: {args.command}")
            sys.exit(1)

        logger.debug("Executing %s", handler_name)
        await handler.execute(args)
