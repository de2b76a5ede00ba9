"""Logging utilities for verifile.

Architecture:
    Application → QueueHandler → Queue → QueueListener Thread
                                              ↓
                                    Console + File Handlers

Usage:
    >>> from verifile.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Computed %s for %s", algorithm, file_name)

Rules:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Use %-formatting in log calls, never f-strings
"""

from verifile.logger.config import apply_log_levels as _apply_levels
from verifile.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
)
from verifile.logger.handlers import ConfigurationError
from verifile.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from verifile.logger.state import get_state

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "apply_log_levels",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "setup_logging",
]


def apply_log_levels(console_level: str, file_level: str) -> None:
    """Apply already-loaded log level names to the running handlers."""
    _apply_levels(get_state(), console_level, file_level)
