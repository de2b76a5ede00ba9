"""Path constants and utilities for verifile configuration."""

from pathlib import Path

from verifile.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_SUBDIR,
)


class Paths:
    """Application paths and directory structure."""

    HOME_DIR = Path.home()
    CONFIG_BASE_DIR = HOME_DIR / CONFIG_DIR_NAME
    CONFIG_DIR = CONFIG_BASE_DIR / DEFAULT_CONFIG_SUBDIR
    LOGS_DIR = CONFIG_DIR / "logs"
    SETTINGS_FILE = CONFIG_DIR / CONFIG_FILE_NAME

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand ``~`` in a configured path.

        Relative paths stay relative so they resolve against the working
        directory at open time.

        Example:
            >>> Paths.expand_path("~/verifications.json")
            Path('/home/user/verifications.json')
        """
        return Path(path_str).expanduser()

    @classmethod
    def ensure_directories(cls, config_dir: Path | None = None) -> None:
        """Create the configuration and log directories if missing."""
        base = config_dir or cls.CONFIG_DIR
        for directory in (base, base / "logs"):
            directory.mkdir(parents=True, exist_ok=True)
