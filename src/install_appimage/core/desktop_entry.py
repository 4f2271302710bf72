"""Desktop entry rendering and reading.

Entries follow the freedesktop.org desktop entry specification. Only the
keys install-appimage writes are produced; reading is limited to pulling
single values back out for the detailed listing.
"""

from pathlib import Path

from install_appimage.constants import (
    DESKTOP_DEFAULT_CATEGORIES,
    DESKTOP_DEFAULT_COMMENT,
    DESKTOP_FILE_TYPE,
    DESKTOP_MISSING_VALUE,
    DESKTOP_SECTION_HEADER,
)


def build_exec_line(appimage_path: Path, params: str | None = None) -> str:
    """Return the Exec value: the quoted AppImage path plus extra params."""
    exec_value = f'"{appimage_path}"'
    if params and params.strip():
        exec_value = f"{exec_value} {params.strip()}"
    return exec_value


def render_desktop_entry(
    name: str,
    appimage_path: Path,
    icon_path: Path | None = None,
    params: str | None = None,
) -> str:
    """Generate desktop entry file content.

    Args:
        name: Application name shown in menus
        appimage_path: Installed AppImage the entry launches
        icon_path: Installed icon; the Icon key is omitted when None
        params: Extra command line arguments appended to Exec

    Returns:
        Desktop file content ending with a newline

    """
    content_lines = [
        DESKTOP_SECTION_HEADER,
        f"Name={name}",
        f"Exec={build_exec_line(appimage_path, params)}",
    ]
    if icon_path is not None:
        content_lines.append(f"Icon={icon_path}")
    content_lines.extend(
        [
            f"Type={DESKTOP_FILE_TYPE}",
            f"Categories={DESKTOP_DEFAULT_CATEGORIES}",
            "Terminal=false",
            f"Comment={DESKTOP_DEFAULT_COMMENT}",
            "",
        ]
    )
    return "\n".join(content_lines)


def get_entry_value(
    content: str, key: str, default: str = DESKTOP_MISSING_VALUE
) -> str:
    """Return the value of the first ``key=`` line in ``content``.

    The value is everything after the first ``=``, so values that contain
    ``=`` themselves are returned whole. ``default`` is returned when the
    key is absent or empty.
    """
    prefix = f"{key}="
    for line in content.splitlines():
        if line.startswith(prefix):
            return line[len(prefix) :] or default
    return default


def read_desktop_entry(desktop_file: Path) -> dict[str, str]:
    """Read the Exec and Icon values of an installed desktop entry.

    Raises:
        OSError: If the file is missing or unreadable

    """
    content = desktop_file.read_text(encoding="utf-8")
    return {
        "Exec": get_entry_value(content, "Exec"),
        "Icon": get_entry_value(content, "Icon"),
    }
