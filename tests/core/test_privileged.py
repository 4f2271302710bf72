"""Tests for SubprocessExecutor."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from install_appimage.core.privileged import (
    PrivilegedExecutor,
    SubprocessExecutor,
)
from install_appimage.exceptions import PrivilegedCommandError

GETEUID = "install_appimage.core.privileged.os.geteuid"


def _process(returncode=0, stdout=b"", stderr=b""):
    process = MagicMock()
    process.returncode = returncode
    process.communicate = AsyncMock(return_value=(stdout, stderr))
    return process


@pytest.fixture
def mock_exec():
    with patch(
        "install_appimage.core.privileged.asyncio.create_subprocess_exec",
        new_callable=AsyncMock,
    ) as mock:
        mock.return_value = _process()
        yield mock


def test_satisfies_protocol():
    assert isinstance(SubprocessExecutor(), PrivilegedExecutor)


@pytest.mark.asyncio
async def test_run_prefixes_elevation_command(mock_exec):
    executor = SubprocessExecutor(["sudo"])

    await executor.run(["mkdir", "-p", "/usr/share/AppImages"])

    args, kwargs = mock_exec.call_args
    assert args == ("sudo", "mkdir", "-p", "/usr/share/AppImages")
    assert kwargs["stdout"] == asyncio.subprocess.PIPE
    assert kwargs["stderr"] == asyncio.subprocess.PIPE


@pytest.mark.asyncio
async def test_run_without_prefix(mock_exec):
    await SubprocessExecutor([]).run(["chmod", "+x", "/tmp/app"])

    assert mock_exec.call_args.args == ("chmod", "+x", "/tmp/app")


@pytest.mark.asyncio
async def test_paths_are_passed_as_single_arguments(mock_exec):
    path = "/home/user/My Apps/$(rm -rf ~).AppImage"

    await SubprocessExecutor([]).run(["chmod", "+x", path])

    assert mock_exec.call_args.args[-1] == path


@pytest.mark.asyncio
async def test_nonzero_exit_raises(mock_exec):
    mock_exec.return_value = _process(
        returncode=1, stderr=b"mv: cannot stat 'x': No such file\n"
    )

    with pytest.raises(PrivilegedCommandError) as exc_info:
        await SubprocessExecutor(["sudo"]).run(["mv", "x", "y"])

    error = exc_info.value
    assert error.returncode == 1
    assert error.argv == ["mv", "x", "y"]
    assert "No such file" in error.stderr
    assert "'mv x y' exited with status 1" in str(error)


@pytest.mark.asyncio
async def test_spawn_failure_raises(mock_exec):
    mock_exec.side_effect = FileNotFoundError("sudo not found")

    with pytest.raises(PrivilegedCommandError) as exc_info:
        await SubprocessExecutor(["sudo"]).run(["true"])

    assert exc_info.value.returncode is None
    assert "could not start 'true'" in str(exc_info.value)


@pytest.mark.asyncio
async def test_stderr_on_success_is_logged(mock_exec, caplog):
    mock_exec.return_value = _process(stderr=b"note: something\n")

    with caplog.at_level("WARNING"):
        await SubprocessExecutor([]).run(["true"])

    assert "note: something" in caplog.text


def test_from_config_splits_command(global_config):
    global_config["privilege"]["elevate_command"] = "doas -n"

    with patch(GETEUID, return_value=1000):
        executor = SubprocessExecutor.from_config(global_config)

    assert executor.elevate_command == ["doas", "-n"]


def test_from_config_as_root_drops_prefix(global_config):
    global_config["privilege"]["elevate_command"] = "sudo"

    with patch(GETEUID, return_value=0):
        executor = SubprocessExecutor.from_config(global_config)

    assert executor.elevate_command == []


def test_from_config_empty_command(global_config):
    with patch(GETEUID, return_value=1000):
        executor = SubprocessExecutor.from_config(global_config)

    assert executor.elevate_command == []
