"""Tests for CLI argument parsing."""

import pytest

from install_appimage.cli.parser import CLIParser, normalize_argv


@pytest.fixture
def parser():
    return CLIParser()


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["./App.AppImage"], ["install", "./App.AppImage"]),
        (
            ["./App.AppImage", "--icon", "URL"],
            ["install", "./App.AppImage", "--icon", "URL"],
        ),
        (
            ["--icon", "URL", "./App.AppImage"],
            ["install", "--icon", "URL", "./App.AppImage"],
        ),
        (["--list"], ["list"]),
        (["--ls", "--details"], ["list", "--details"]),
        (["--uninstall", "redis*"], ["uninstall", "redis*"]),
        (["--remove", "foo"], ["uninstall", "foo"]),
        (["--uninstall=foo"], ["uninstall", "foo"]),
        (["--uninstall"], ["uninstall"]),
        (["install", "a.AppImage"], ["install", "a.AppImage"]),
        (["ls"], ["ls"]),
        (["--verbose", "remove", "x"], ["--verbose", "remove", "x"]),
        ([], []),
    ],
)
def test_normalize_argv(argv, expected):
    assert normalize_argv(argv) == expected


def test_bare_path_installs(parser):
    args = parser.parse_args(
        ["/tmp/App.AppImage", "--icon", "https://x/i.png"]
    )

    assert args.command == "install"
    assert args.handler == "install"
    assert args.path == "/tmp/App.AppImage"
    assert args.icon == "https://x/i.png"
    assert args.params is None


def test_params_with_leading_dashes(parser):
    args = parser.parse_args(["--params=--no-sandbox", "App.AppImage"])

    assert args.path == "App.AppImage"
    assert args.params == "--no-sandbox"


@pytest.mark.parametrize("argv", [["list"], ["ls"], ["--list"]])
def test_list_forms(parser, argv):
    args = parser.parse_args(argv)

    assert args.handler == "list"
    assert args.details is False


def test_list_details(parser):
    assert parser.parse_args(["ls", "--details"]).details is True


@pytest.mark.parametrize(
    "argv",
    [["uninstall", "foo*"], ["remove", "foo*"], ["--uninstall", "foo*"]],
)
def test_uninstall_forms(parser, argv):
    args = parser.parse_args(argv)

    assert args.handler == "uninstall"
    assert args.pattern == "foo*"


def test_uninstall_without_pattern(parser):
    assert parser.parse_args(["--uninstall"]).pattern is None


def test_no_arguments(parser):
    args = parser.parse_args([])

    assert args.command is None
    assert args.version is False


def test_verbose_before_and_after_command(parser):
    assert parser.parse_args(["--verbose", "ls"]).verbose is True
    assert parser.parse_args(["ls", "--verbose"]).verbose is True
    assert parser.parse_args(["ls"]).verbose is False


def test_icon_without_path_is_a_usage_error(parser):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--icon", "https://x/i.png"])

    assert exc_info.value.code == 2
