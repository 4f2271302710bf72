"""Command-line interface for install-appimage."""

from install_appimage.cli.parser import CLIParser
from install_appimage.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
