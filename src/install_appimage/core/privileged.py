"""Privileged command execution.

Every filesystem change made by install and uninstall goes through a
PrivilegedExecutor. Services depend only on the protocol, so tests can
substitute an executor that works on a temporary directory instead of
invoking sudo.

Usage::

    executor = SubprocessExecutor.from_config(global_config)
    await executor.run(["mkdir", "-p", "/usr/share/AppImages"])

"""

import asyncio
import os
import shlex
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from install_appimage.exceptions import PrivilegedCommandError
from install_appimage.logger import get_logger
from install_appimage.types import GlobalConfig

logger = get_logger(__name__)


@runtime_checkable
class PrivilegedExecutor(Protocol):
    """Runs a command with superuser rights."""

    async def run(self, argv: Sequence[str]) -> None:
        """Run ``argv`` to completion.

        Raises:
            PrivilegedCommandError: If the command cannot be started or
                exits with a non-zero status.

        """
        ...


class SubprocessExecutor:
    """Executor that prefixes commands with an elevation helper."""

    def __init__(self, elevate_command: Sequence[str] = ("sudo",)) -> None:
        """Initialize the executor.

        Args:
            elevate_command: Prefix such as ``("sudo",)``. Empty runs the
                command directly.

        """
        self.elevate_command = list(elevate_command)

    @classmethod
    def from_config(
        cls, global_config: GlobalConfig
    ) -> "SubprocessExecutor":
        """Create an executor from the privilege section of the config.

        No prefix is used when the setting is empty or when already
        running as root.
        """
        prefix = shlex.split(global_config["privilege"]["elevate_command"])
        if os.geteuid() == 0:
            prefix = []
        return cls(prefix)

    async def run(self, argv: Sequence[str]) -> None:
        full_argv = [*self.elevate_command, *argv]
        logger.debug("Running: %s", shlex.join(full_argv))

        try:
            # stdin is inherited so the elevation helper can prompt
            process = await asyncio.create_subprocess_exec(
                *full_argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.error("Failed to start %s: %s", full_argv[0], e)
            raise PrivilegedCommandError(argv, None, str(e)) from e

        stdout, stderr = await process.communicate()
        stderr_text = (
            stderr.decode("utf-8", errors="ignore") if stderr else ""
        )

        if stdout:
            logger.debug(
                "stdout: %s", stdout.decode("utf-8", errors="ignore").strip()
            )

        if process.returncode != 0:
            logger.error(
                "Command failed (%s): %s",
                process.returncode,
                shlex.join(argv),
            )
            raise PrivilegedCommandError(
                argv, process.returncode, stderr_text
            )

        if stderr_text.strip():
            logger.warning("stderr: %s", stderr_text.strip())
