"""Process-wide logging state.

One LoggingState instance owns the queue and the listener thread that
writes install_appimage records to the console and the log file.
"""

import queue
import threading
from dataclasses import dataclass, field
from logging.handlers import QueueListener


@dataclass
class LoggingState:
    """Mutable logging state shared by the logger package.

    ``lock`` guards the one-time root logger setup. ``config_applied`` is
    set once levels from settings.conf have reached the handlers.
    """

    lock: threading.Lock = field(default_factory=threading.Lock)
    root_initialized: bool = False
    config_applied: bool = False
    queue_listener: QueueListener | None = None
    log_queue: queue.Queue | None = None

    def reset(self) -> None:
        """Forget the listener and queue; the caller stops the listener."""
        self.queue_listener = None
        self.log_queue = None
        self.root_initialized = False
        self.config_applied = False


_state = LoggingState()


def get_state() -> LoggingState:
    return _state
