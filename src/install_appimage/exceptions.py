"""Exception classes for install-appimage operations."""

from collections.abc import Sequence


class InstallerError(Exception):
    """Base exception for install-appimage operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the AppImage that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class ValidationError(InstallerError):
    """Raised when user input fails validation."""

    error_prefix = "Validation failed"


class SourceNotFoundError(ValidationError):
    """Raised when the AppImage to install does not exist."""

    error_prefix = "File not found"


class PrivilegedCommandError(InstallerError):
    """Raised when an elevated command exits non-zero or cannot start."""

    error_prefix = "Command failed"

    def __init__(
        self,
        argv: Sequence[str],
        returncode: int | None,
        stderr: str = "",
    ) -> None:
        """Initialize with the failed command and its outcome.

        Args:
            argv: Command that was run, without the elevation prefix.
            returncode: Exit status, or None if the process never started.
            stderr: Captured standard error output.

        """
        command = " ".join(argv)
        if returncode is None:
            message = f"could not start '{command}'"
        else:
            message = f"'{command}' exited with status {returncode}"
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr


class InstallationError(InstallerError):
    """Raised when installation fails."""

    error_prefix = "Installation failed"


class RemovalError(InstallerError):
    """Raised when removing an installed AppImage fails."""

    error_prefix = "Uninstall failed"


class IconDownloadError(InstallerError):
    """Raised when an icon cannot be downloaded."""

    error_prefix = "Icon download failed"
