"""Console formatters.

INFO records are the CLI's user-facing output and print as the bare
message. Every other level gets a timestamped line with a colored level.
"""

import logging

from verifile.constants import LOG_COLORS


class ColoredConsoleFormatter(logging.Formatter):
    """Formatter that wraps the level name in ANSI color codes."""

    def format(self, record: logging.LogRecord) -> str:
        """Format with the level name colored for this call only."""
        color = LOG_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        levelname = record.levelname
        record.levelname = f"{color}{levelname}{LOG_COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class HybridConsoleFormatter(ColoredConsoleFormatter):
    """Bare messages for INFO, colored structured lines otherwise.

    Example Output:
        INFO:     "✓ Verification successful!"
        WARNING:  "12:30:45 - verifile.core.history - WARNING - ..."
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format by level."""
        if record.levelno == logging.INFO:
            return record.getMessage()
        return super().format(record)
