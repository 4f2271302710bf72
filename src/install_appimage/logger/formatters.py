"""Console formatters for the install_appimage logging system.

- ColoredConsoleFormatter: ANSI colored level names
- SimpleConsoleFormatter: message only
- HybridConsoleFormatter: simple for INFO, colored and structured otherwise
"""

import logging

from install_appimage.constants import LOG_COLORS


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record with a colored level name.

        The record's levelname is restored afterwards so other handlers
        see the plain value.
        """
        if record.levelname in LOG_COLORS:
            color = LOG_COLORS[record.levelname]
            reset = LOG_COLORS["RESET"]

            original_levelname = record.levelname
            record.levelname = f"{color}{record.levelname}{reset}"
            try:
                return super().format(record)
            finally:
                record.levelname = original_levelname

        return super().format(record)


class SimpleConsoleFormatter(logging.Formatter):
    """Formatter that only shows the message content."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


class HybridConsoleFormatter(logging.Formatter):
    """Simple format for INFO records, structured format for the rest.

    Example Output:
        INFO:     "Installing Obsidian"
        WARNING:  "12:30:45 - install_appimage.core.icon - WARNING - ..."
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
    ) -> None:
        """Initialize hybrid formatter.

        Args:
            fmt: Format string for structured messages
            datefmt: Date format string for timestamps

        """
        super().__init__(fmt, datefmt)
        self._simple_formatter = SimpleConsoleFormatter()
        self._colored_formatter = ColoredConsoleFormatter(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == logging.INFO:
            return self._simple_formatter.format(record)
        return self._colored_formatter.format(record)
