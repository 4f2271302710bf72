"""Allow running the CLI with ``python -m install_appimage``."""

from install_appimage.main import main

main()
