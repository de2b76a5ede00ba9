"""Bootstrap log settings and level updates for the logging system.

The settings module imports the logger, so levels from settings.conf are
passed in by the caller instead of being read here.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from verifile.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    LOG_FILE_NAME,
)

if TYPE_CHECKING:
    from verifile.logger.state import _LoggerState


def load_log_settings() -> tuple[str, str, Path]:
    """Load bootstrap console level, file level, and file path.

    Returns hardcoded defaults to avoid importing the settings module
    during logger initialization. ``VERIFILE_LOG_DIR`` overrides the log
    directory so test runs never write to the user's config directory.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv(ENV_LOG_DIR)
    if env_log_dir:
        log_path = Path(env_log_dir).expanduser() / LOG_FILE_NAME
    else:
        log_path = (
            Path.home()
            / CONFIG_DIR_NAME
            / DEFAULT_CONFIG_SUBDIR
            / "logs"
            / LOG_FILE_NAME
        )

    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_path


def apply_log_levels(
    state: "_LoggerState", console_level: str, file_level: str
) -> None:
    """Set console and file handler levels from level names.

    Only handler levels change; handlers are never added or removed.

    Args:
        state: Logger state object (from logger.state module)
        console_level: Console level name, e.g. "INFO"
        file_level: File level name, e.g. "DEBUG"

    """
    console_levelno = getattr(logging, console_level, logging.INFO)
    file_levelno = getattr(logging, file_level, logging.INFO)

    if state.queue_listener is not None:
        for handler in state.queue_listener.handlers:
            if isinstance(handler, RotatingFileHandler):
                handler.setLevel(file_levelno)
            elif isinstance(handler, logging.StreamHandler):
                handler.setLevel(console_levelno)

    state.config_applied = True
