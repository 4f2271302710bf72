"""Public logging API for install-appimage.

- setup_logging(): initialize the queue-based root logger once
- get_logger(): module-level logger accessor
- set_console_level(): change console verbosity at runtime (--verbose)
- flush_all_handlers(): wait for queued records to be written
- clear_logger_state(): reset everything, for tests
"""

import atexit
import contextlib
import logging
import time
from pathlib import Path

from install_appimage.logger.config import load_log_settings
from install_appimage.logger.handlers import (
    ROOT_LOGGER_NAME,
    setup_root_logger,
)
from install_appimage.logger.state import get_state

FLUSH_TIMEOUT_SECONDS = 5.0


def flush_all_handlers() -> None:
    """Wait for the log queue to drain and flush every handler."""
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    # QueueListener doesn't use task_done(), so poll the queue
    start_time = time.time()
    while not state.log_queue.empty():
        if time.time() - start_time > FLUSH_TIMEOUT_SECONDS:
            break
        time.sleep(0.01)

    time.sleep(0.1)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure logging and return the named logger.

    The root "install_appimage" logger is initialized exactly once. Child
    loggers such as "install_appimage.core.install" propagate to it.

    Args:
        name: Logger name, typically __name__
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file
        enable_file_logging: Whether to enable file logging

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
                enable_file_logging,
            )

    return logging.getLogger(name)


def get_logger(
    name: str = ROOT_LOGGER_NAME,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Get a logger, initializing the logging system on first use.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Installing %s", app_name)

    """
    return setup_logging(name=name, enable_file_logging=enable_file_logging)


def set_console_level(level: str) -> None:
    """Change the console handler level, leaving the file handler alone."""
    state = get_state()
    if state.queue_listener is None:
        return

    for handler in state.queue_listener.handlers:
        if isinstance(handler, logging.FileHandler):
            continue
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(getattr(logging, level, logging.WARNING))


def clear_logger_state() -> None:
    """Reset logging to an uninitialized state.

    Intended for tests only: stops the listener and closes the handlers
    attached to install_appimage loggers.
    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
        state.reset()

        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name.startswith(ROOT_LOGGER_NAME):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)


__all__ = [
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "set_console_level",
    "setup_logging",
]
