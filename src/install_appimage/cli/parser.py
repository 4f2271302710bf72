"""CLI argument parser for install-appimage.

Besides the ``install``/``list``/``uninstall`` subcommands, the legacy
flag forms are accepted and rewritten before argparse sees them:

- a bare path means ``install <path>``
- ``--list`` means ``list``
- ``--uninstall PATTERN`` / ``--remove PATTERN`` mean ``uninstall PATTERN``
"""

import argparse
import sys
from argparse import Namespace
from collections.abc import Sequence

COMMAND_INSTALL = "install"
COMMAND_LIST = "list"
COMMAND_UNINSTALL = "uninstall"

KNOWN_COMMANDS = frozenset({"install", "list", "ls", "uninstall", "remove"})
LIST_FLAGS = frozenset({"--list", "--ls"})
UNINSTALL_FLAGS = frozenset({"--uninstall", "--remove"})
VALUE_OPTIONS = frozenset({"--icon", "--params", *UNINSTALL_FLAGS})


def _first_positional(argv: Sequence[str]) -> int | None:
    """Return the index of the first non-option token, if any."""
    skip_next = False
    for index, token in enumerate(argv):
        if skip_next:
            skip_next = False
            continue
        if token == "--":
            return index + 1 if index + 1 < len(argv) else None
        if token.startswith("-"):
            skip_next = token in VALUE_OPTIONS
            continue
        return index
    return None


def normalize_argv(argv: Sequence[str]) -> list[str]:
    """Rewrite legacy flag forms into subcommand form.

    Example:
        >>> normalize_argv(["--uninstall", "redis*"])
        ['uninstall', 'redis*']
        >>> normalize_argv(["./App.AppImage", "--icon", "URL"])
        ['install', './App.AppImage', '--icon', 'URL']
    """
    args = list(argv)

    for index, token in enumerate(args):
        flag, _, inline_value = token.partition("=")
        if flag not in UNINSTALL_FLAGS:
            continue
        rest = args[:index]
        if inline_value:
            pattern = [inline_value]
            rest += args[index + 1 :]
        else:
            pattern = args[index + 1 : index + 2]
            rest += args[index + 2 :]
        rest = [t for t in rest if t not in KNOWN_COMMANDS]
        return [COMMAND_UNINSTALL, *pattern, *rest]

    for index, token in enumerate(args):
        if token in LIST_FLAGS:
            rest = args[:index] + args[index + 1 :]
            rest = [t for t in rest if t not in KNOWN_COMMANDS]
            return [COMMAND_LIST, *rest]

    position = _first_positional(args)
    if position is not None and args[position] not in KNOWN_COMMANDS:
        return [COMMAND_INSTALL, *args]

    return args


class CLIParser:
    """Command-line argument parser for install-appimage."""

    def __init__(self) -> None:
        self.parser = self._create_main_parser()
        self._add_global_options(self.parser)
        self._add_subcommands(self.parser)

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments without the program name (defaults to
                sys.argv[1:])

        Returns:
            Parsed arguments namespace. ``command`` is None when no
            command was given.

        """
        if argv is None:
            argv = sys.argv[1:]
        return self.parser.parse_args(normalize_argv(argv))

    def print_help(self) -> None:
        self.parser.print_help()

    def _create_main_parser(self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog="install-appimage",
            description="Install, list and uninstall AppImages",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s install /path/to/app.AppImage --icon https://example.com/icon.png
  %(prog)s /path/to/app.AppImage --params=--no-sandbox
  %(prog)s ls --details
  %(prog)s remove app-name
  %(prog)s --uninstall 'redis*'
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show install-appimage version and exit",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging on the console",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )

        # SUPPRESS keeps subcommand defaults from clobbering a global
        # --verbose given before the command
        common = argparse.ArgumentParser(add_help=False)
        common.add_argument(
            "--verbose",
            action="store_true",
            default=argparse.SUPPRESS,
            help="Show debug logging on the console",
        )

        self._add_install_command(subparsers, common)
        self._add_list_command(subparsers, common)
        self._add_uninstall_command(subparsers, common)

    def _add_install_command(self, subparsers, common) -> None:
        install_parser = subparsers.add_parser(
            COMMAND_INSTALL,
            parents=[common],
            help="Install an AppImage (default when a path is given)",
        )
        install_parser.add_argument(
            "path", nargs="?", help="Path to the AppImage file"
        )
        install_parser.add_argument(
            "--icon", metavar="URL", help="Icon URL for the AppImage"
        )
        install_parser.add_argument(
            "--params",
            metavar="PARAMS",
            help="Extra command line parameters for the AppImage",
        )
        install_parser.set_defaults(handler=COMMAND_INSTALL)

    def _add_list_command(self, subparsers, common) -> None:
        list_parser = subparsers.add_parser(
            COMMAND_LIST,
            aliases=["ls"],
            parents=[common],
            help="List installed AppImages",
        )
        list_parser.add_argument(
            "--details",
            action="store_true",
            help="Show desktop entry details for each AppImage",
        )
        list_parser.set_defaults(handler=COMMAND_LIST)

    def _add_uninstall_command(self, subparsers, common) -> None:
        uninstall_parser = subparsers.add_parser(
            COMMAND_UNINSTALL,
            aliases=["remove"],
            parents=[common],
            help="Uninstall AppImages (supports * wildcards)",
        )
        uninstall_parser.add_argument(
            "pattern", nargs="?", help="AppImage name or wildcard pattern"
        )
        uninstall_parser.set_defaults(handler=COMMAND_UNINSTALL)
