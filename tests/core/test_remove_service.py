"""Tests for RemoveService."""

import pytest

from install_appimage.core.remove import RemoveService


def test_find_matches(install_paths, executor, make_installed):
    for name in ("foo", "foobar", "baz"):
        make_installed(name)
    service = RemoveService(install_paths, executor)

    assert service.find_matches("foo*") == ["foo", "foobar"]
    assert service.find_matches("baz") == ["baz"]
    assert service.find_matches("nope") == []


def test_find_matches_with_no_root(install_paths, executor):
    assert RemoveService(install_paths, executor).find_matches("*") == []


@pytest.mark.asyncio
async def test_remove_deletes_everything(
    install_paths, executor, make_installed
):
    make_installed("MyApp", "[Desktop Entry]\n")
    app = install_paths.app("MyApp")

    (result,) = await RemoveService(install_paths, executor).remove(
        ["MyApp"]
    )

    assert result.success
    assert result.removed == (app.directory, app.desktop_entry, app.symlink)
    assert not app.directory.exists()
    assert not app.desktop_entry.exists()
    assert not app.symlink.is_symlink()
    assert executor.calls == [
        ["rm", "-rf", str(app.directory)],
        ["rm", "-f", str(app.desktop_entry)],
        ["rm", "-f", str(app.symlink)],
    ]


@pytest.mark.asyncio
async def test_remove_skips_absent_paths(
    install_paths, executor, make_installed
):
    make_installed("MyApp")
    app = install_paths.app("MyApp")

    (result,) = await RemoveService(install_paths, executor).remove(
        ["MyApp"]
    )

    assert result.success
    assert result.removed == (app.directory,)
    assert executor.calls == [["rm", "-rf", str(app.directory)]]


@pytest.mark.asyncio
async def test_remove_dangling_symlink(install_paths, executor):
    app = install_paths.app("Ghost")
    app.directory.mkdir(parents=True)
    install_paths.user_applications_dir.mkdir(parents=True)
    app.symlink.symlink_to(app.desktop_entry)
    assert not app.symlink.exists()

    (result,) = await RemoveService(install_paths, executor).remove(
        ["Ghost"]
    )

    assert result.success
    assert app.symlink in result.removed
    assert not app.symlink.is_symlink()


@pytest.mark.asyncio
async def test_failure_does_not_stop_batch(
    install_paths, make_installed, make_executor
):
    make_installed("alpha", "[Desktop Entry]\n")
    make_installed("beta", "[Desktop Entry]\n")
    failing_dir = str(install_paths.app("alpha").directory)
    executor = make_executor(fail_when=lambda argv: argv[-1] == failing_dir)

    results = await RemoveService(install_paths, executor).remove(
        ["alpha", "beta"]
    )

    alpha, beta = results
    assert not alpha.success
    assert "simulated failure" in alpha.error
    assert beta.success
    assert not install_paths.app("beta").directory.exists()
    assert install_paths.app("alpha").directory.exists()
