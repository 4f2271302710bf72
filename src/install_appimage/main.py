"""Main CLI entry point for install-appimage."""

import sys

import uvloop

from install_appimage.cli import CLIRunner
from install_appimage.logger import get_logger

logger = get_logger(__name__)


async def async_main() -> None:
    """Build the runner and execute the requested command."""
    logger.debug("CLI started")
    runner = CLIRunner()
    await runner.run()
    logger.debug("CLI completed")


def main() -> None:
    """Run the CLI application on uvloop.

    Exits with status 1 on cancellation or unexpected errors.
    """
    try:
        uvloop.run(async_main())
    except KeyboardInterrupt:
        logger.info("CLI cancelled by user")
        sys.exit(1)
    except Exception:
        logger.exception("❌ Unexpected error")
        sys.exit(1)


if __name__ == "__main__":
    main()
