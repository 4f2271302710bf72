"""Tests for RemoveHandler."""

from argparse import Namespace

import pytest

from install_appimage.cli.commands import RemoveHandler
from install_appimage.constants import UNINSTALL_PROMPT
from install_appimage.exceptions import RemovalError, ValidationError


@pytest.fixture
def make_handler(global_config, install_paths, executor):
    def _make(answer=True, handler_executor=None):
        asked = []

        def confirm(prompt):
            asked.append(prompt)
            return answer

        handler = RemoveHandler(
            global_config,
            install_paths,
            handler_executor or executor,
            confirm=confirm,
        )
        return handler, asked

    return _make


@pytest.mark.asyncio
async def test_missing_pattern(make_handler):
    handler, asked = make_handler()

    with pytest.raises(ValidationError):
        await handler.execute(Namespace(pattern=None))

    assert asked == []


@pytest.mark.asyncio
async def test_no_matches_skips_prompt(make_handler, make_installed, capsys):
    make_installed("foo")
    handler, asked = make_handler()

    await handler.execute(Namespace(pattern="bar*"))

    assert capsys.readouterr().out == "No matching AppImages found.\n"
    assert asked == []


@pytest.mark.asyncio
async def test_wildcard_removes_matches_only(
    make_handler, make_installed, install_paths, capsys
):
    for name in ("foo", "foobar", "baz"):
        make_installed(name, "[Desktop Entry]\n")
    handler, asked = make_handler(answer=True)

    await handler.execute(Namespace(pattern="foo*"))

    assert asked == [UNINSTALL_PROMPT]
    assert capsys.readouterr().out == (
        "Matching AppImages:\n"
        "- foo\n"
        "- foobar\n"
        "Uninstalled foo\n"
        "Uninstalled foobar\n"
        "Uninstallation complete.\n"
    )
    assert not install_paths.app("foo").directory.exists()
    assert not install_paths.app("foobar").directory.exists()
    assert install_paths.app("baz").directory.exists()
    assert install_paths.app("baz").symlink.is_symlink()


@pytest.mark.asyncio
async def test_declined(make_handler, make_installed, executor, capsys):
    make_installed("foo", "[Desktop Entry]\n")
    handler, _ = make_handler(answer=False)

    await handler.execute(Namespace(pattern="foo"))

    assert capsys.readouterr().out.endswith("Uninstallation cancelled.\n")
    assert executor.calls == []


@pytest.mark.asyncio
async def test_partial_failure_raises_after_batch(
    make_handler, make_installed, install_paths, make_executor, capsys
):
    make_installed("app-one")
    make_installed("app-two")
    failing = str(install_paths.app("app-one").directory)
    handler, _ = make_handler(
        handler_executor=make_executor(lambda argv: argv[-1] == failing)
    )

    with pytest.raises(RemovalError) as exc_info:
        await handler.execute(Namespace(pattern="app-*"))

    captured = capsys.readouterr()
    assert "Uninstalled app-two" in captured.out
    assert "Uninstallation complete." in captured.out
    assert "Failed to uninstall app-one" in captured.err
    assert exc_info.value.target == "app-one"
    assert not install_paths.app("app-two").directory.exists()
