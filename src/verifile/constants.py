"""Centralized constants module for verifile.

This module serves as the single source of truth for shared constants
across the verifile codebase. Constants use typing.Final annotations to
ensure immutability.

Usage:
    from verifile.constants import DIGEST_CHUNK_SIZE
"""

from typing import Final

# =============================================================================
# Digest Engine Constants
# =============================================================================

# Bytes read from the stream per hash update (64 KiB)
DIGEST_CHUNK_SIZE: Final[int] = 64 * 1024

# Minimum length of a hex token accepted from multi-token checksum lines
MIN_REFERENCE_HEX_LENGTH: Final[int] = 16

# Display name used when a verified path has no final component
FALLBACK_FILE_NAME: Final[str] = "file"

# =============================================================================
# History Constants
# =============================================================================

# History snapshot file, relative to the working directory unless configured
HISTORY_FILE_NAME: Final[str] = "verifications.json"

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_VERSION: Final[str] = "1.0.0"
CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "verifile"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_ALGORITHM_NAME: Final[str] = "BLAKE3"
DEFAULT_BACKUP_COUNT: Final[int] = 3

VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

ISO_DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

SECTION_DEFAULT: Final[str] = "DEFAULT"

KEY_CONFIG_VERSION: Final[str] = "config_version"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_DEFAULT_ALGORITHM: Final[str] = "default_algorithm"
KEY_HISTORY_FILE: Final[str] = "history_file"

# Environment variable overriding the log directory (used by the test-suite)
ENV_LOG_DIR: Final[str] = "VERIFILE_LOG_DIR"

# =============================================================================
# Logging Constants
# =============================================================================

LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = DEFAULT_BACKUP_COUNT
LOG_FILE_NAME: Final[str] = "verifile.log"

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
