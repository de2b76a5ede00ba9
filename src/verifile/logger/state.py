"""Process-wide logger state.

One 'verifile' root logger exists per process; this module holds what its
setup produced so later calls reuse it instead of adding handlers.
"""

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import queue
    from logging.handlers import QueueListener
    from pathlib import Path


@dataclass
class _LoggerState:
    """Mutable logger state shared by the logger package.

    Attributes:
        lock: Guards root logger initialization
        root_initialized: Whether the root logger has handlers
        config_applied: Whether settings.conf levels were applied
        queue_listener: Thread draining the queue into real handlers
        log_queue: Queue fed by the root logger's QueueHandler
        log_file: Active log file, None when file logging is off

    """

    lock: threading.Lock = field(default_factory=threading.Lock)
    root_initialized: bool = False
    config_applied: bool = False
    queue_listener: "QueueListener | None" = None
    log_queue: "queue.Queue | None" = None
    log_file: "Path | None" = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Get the global logger state singleton."""
    return _state
