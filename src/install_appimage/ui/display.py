"""Presentation helpers for CLI output.

Uses print() directly so user-facing output is independent of the
console log level; diagnostics go through the logger instead.
"""
# ruff: noqa: T201

import sys
from collections.abc import Iterable

from install_appimage.types import (
    AppImageListing,
    InstallResult,
    RemovalResult,
)


def display_install_result(result: InstallResult) -> None:
    """Print where an installed AppImage was integrated."""
    print(f"{result.name} has been installed successfully!")
    print(f"Desktop entry created at: {result.desktop_entry}")
    print(f"Symlink created at: {result.symlink}")


def display_listing(
    listings: list[AppImageListing], details: bool = False
) -> None:
    """Print the installed AppImages, optionally with entry details."""
    if not listings:
        print("No AppImages installed.")
        return

    print("Installed AppImages:")
    for listing in listings:
        print(f"- {listing.name}")
        if not details:
            continue
        if listing.error:
            print(f"  Error reading desktop file: {listing.error}")
        print(f"  Desktop Entry: {listing.desktop_entry}")
        print(f"  Exec: {listing.exec_command}")
        print(f"  Icon: {listing.icon}")
        print(f"  AppImage Path: {listing.appimage_path}")
        print()


def display_matches(names: Iterable[str]) -> None:
    """Print the AppImages selected for removal."""
    print("Matching AppImages:")
    for name in names:
        print(f"- {name}")


def display_no_matches() -> None:
    print("No matching AppImages found.")


def display_cancelled() -> None:
    print("Uninstallation cancelled.")


def display_removal_results(results: list[RemovalResult]) -> None:
    """Print one line per removed AppImage and a closing summary."""
    for result in results:
        if result.success:
            print(f"Uninstalled {result.name}")
        else:
            print(
                f"❌ Failed to uninstall {result.name}: {result.error}",
                file=sys.stderr,
            )
    print("Uninstallation complete.")


def display_error(message: str) -> None:
    print(f"❌ {message}", file=sys.stderr)
