"""Pytest configuration and fixtures for install-appimage tests."""

import logging
import os
import shutil
import stat
import tempfile
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

# Keep test logs out of ~/.config before any install_appimage import
os.environ.setdefault(
    "INSTALL_APPIMAGE_LOG_DIR",
    str(Path(tempfile.gettempdir()) / "install-appimage-test-logs"),
)

from install_appimage.config import InstallPaths  # noqa: E402
from install_appimage.exceptions import PrivilegedCommandError  # noqa: E402
from install_appimage.types import GlobalConfig  # noqa: E402


class LocalExecutor:
    """PrivilegedExecutor double that performs commands with pathlib.

    Every argv is recorded in ``calls``. ``fail_when`` makes matching
    commands raise PrivilegedCommandError before doing anything.
    """

    def __init__(
        self, fail_when: Callable[[list[str]], bool] | None = None
    ) -> None:
        self.calls: list[list[str]] = []
        self.fail_when = fail_when

    async def run(self, argv: Sequence[str]) -> None:
        argv = list(argv)
        self.calls.append(argv)
        if self.fail_when is not None and self.fail_when(argv):
            raise PrivilegedCommandError(argv, 1, "simulated failure")

        command, *rest = argv
        if command == "mkdir":
            Path(rest[-1]).mkdir(parents=True, exist_ok=True)
        elif command == "mv":
            shutil.move(rest[0], rest[1])
        elif command == "chmod":
            path = Path(rest[-1])
            mode = path.stat().st_mode
            path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        elif command == "ln":
            target, link = Path(rest[-2]), Path(rest[-1])
            if link.is_symlink() or link.exists():
                link.unlink()
            link.symlink_to(target)
        elif command == "rm":
            path = Path(rest[-1])
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink(missing_ok="-f" in rest or "-rf" in rest)
        elif command == "update-desktop-database":
            pass
        else:
            raise PrivilegedCommandError(argv, None, "unknown command")

    def commands(self) -> list[str]:
        """Return just the command names, in call order."""
        return [call[0] for call in self.calls]


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Let caplog see records from install_appimage loggers.

    The root install_appimage logger is created with propagate=False.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("install_appimage"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value


@pytest.fixture
def install_paths(tmp_path: Path) -> InstallPaths:
    """Install layout rooted in a temporary directory.

    The applications directory exists up front, as it does on a real
    system; the AppImage root does not.
    """
    paths = InstallPaths(
        appimage_root=tmp_path / "usr" / "share" / "AppImages",
        applications_dir=tmp_path / "usr" / "share" / "applications",
        user_applications_dir=(
            tmp_path / "home" / ".local" / "share" / "applications"
        ),
    )
    paths.applications_dir.mkdir(parents=True)
    return paths


@pytest.fixture
def global_config(install_paths: InstallPaths) -> GlobalConfig:
    """Global configuration pointing at the temporary install layout."""
    return {
        "config_version": "1.0.0",
        "log_level": "INFO",
        "console_log_level": "WARNING",
        "directory": {
            "appimage_root": install_paths.appimage_root,
            "applications": install_paths.applications_dir,
            "user_applications": install_paths.user_applications_dir,
        },
        "network": {"timeout_seconds": 10},
        "privilege": {"elevate_command": ""},
    }


@pytest.fixture
def executor() -> LocalExecutor:
    return LocalExecutor()


@pytest.fixture
def make_appimage(tmp_path: Path) -> Callable[[str], Path]:
    """Create a fake AppImage file in a downloads directory."""
    downloads = tmp_path / "Downloads"

    def _make(filename: str = "MyApp.AppImage") -> Path:
        downloads.mkdir(parents=True, exist_ok=True)
        path = downloads / filename
        path.write_bytes(b"\x7fELF fake appimage")
        return path

    return _make


@pytest.fixture
def make_installed(install_paths: InstallPaths):
    """Lay out an already-installed AppImage without using the services."""

    def _make(name: str, desktop_content: str | None = None) -> None:
        app = install_paths.app(name)
        app.directory.mkdir(parents=True, exist_ok=True)
        app.appimage_path.write_bytes(b"appimage")
        if desktop_content is not None:
            install_paths.applications_dir.mkdir(parents=True, exist_ok=True)
            app.desktop_entry.write_text(desktop_content, encoding="utf-8")
            install_paths.user_applications_dir.mkdir(
                parents=True, exist_ok=True
            )
            app.symlink.symlink_to(app.desktop_entry)

    return _make


@pytest.fixture
def make_executor():
    """Build a LocalExecutor that fails commands matching a predicate."""

    def _make(
        fail_when: Callable[[list[str]], bool] | None = None,
    ) -> LocalExecutor:
        return LocalExecutor(fail_when=fail_when)

    return _make
