"""Command handlers for the install-appimage CLI."""

from install_appimage.cli.commands.base import BaseCommandHandler
from install_appimage.cli.commands.install import InstallHandler
from install_appimage.cli.commands.list import ListHandler
from install_appimage.cli.commands.remove import RemoveHandler

__all__ = [
    "BaseCommandHandler",
    "InstallHandler",
    "ListHandler",
    "RemoveHandler",
]
