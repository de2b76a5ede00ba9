"""Settings manager for the verifile INI configuration."""

import configparser
from pathlib import Path
from typing import TypedDict

from verifile.config.parser import ConfigCommentManager, create_parser
from verifile.config.paths import Paths
from verifile.constants import (
    CONFIG_FILE_NAME,
    CONFIG_VERSION,
    DEFAULT_ALGORITHM_NAME,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    HISTORY_FILE_NAME,
    KEY_CONFIG_VERSION,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_DEFAULT_ALGORITHM,
    KEY_HISTORY_FILE,
    KEY_LOG_LEVEL,
    SECTION_DEFAULT,
    VALID_LOG_LEVELS,
)
from verifile.core.verification.algorithms import Algorithm
from verifile.exceptions import UnsupportedAlgorithmError
from verifile.logger import get_logger

logger = get_logger(__name__)


class Settings(TypedDict):
    """Typed view of settings.conf."""

    config_version: str
    log_level: str
    console_log_level: str
    default_algorithm: Algorithm
    history_file: Path


class SettingsManager:
    """Loads and saves settings.conf."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize settings manager.

        Args:
            config_dir: Configuration directory path
                (defaults to Paths.CONFIG_DIR)

        """
        self.config_dir = config_dir or Paths.CONFIG_DIR
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    def get_default_settings(self) -> dict[str, str]:
        """Get default settings as raw INI strings."""
        return {
            KEY_CONFIG_VERSION: CONFIG_VERSION,
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            KEY_DEFAULT_ALGORITHM: DEFAULT_ALGORITHM_NAME,
            KEY_HISTORY_FILE: HISTORY_FILE_NAME,
        }

    def load_settings(self) -> Settings:
        """Load settings, creating settings.conf with defaults if missing.

        Unreadable or malformed files and a config directory that cannot
        be created fall back to defaults with a warning.

        Returns:
            Typed settings; invalid values are replaced by defaults

        """
        defaults = self.get_default_settings()
        config = create_parser()
        config.read_dict({SECTION_DEFAULT: defaults})

        if self.settings_file.exists():
            try:
                config.read(self.settings_file, encoding="utf-8")
            except (configparser.Error, UnicodeDecodeError, OSError) as e:
                logger.warning(
                    "Invalid settings file %s, using defaults: %s",
                    self.settings_file,
                    e,
                )
                config = create_parser()
                config.read_dict({SECTION_DEFAULT: defaults})
        else:
            try:
                self.save_settings(self._convert_to_settings(config, defaults))
            except OSError as e:
                logger.warning(
                    "Could not create settings file %s: %s",
                    self.settings_file,
                    e,
                )

        return self._convert_to_settings(config, defaults)

    def save_settings(self, settings: Settings) -> None:
        """Save settings to settings.conf with explanatory comments."""
        Paths.ensure_directories(self.config_dir)
        comment_manager = ConfigCommentManager()
        key_comments = comment_manager.get_key_comments()

        values = {
            KEY_CONFIG_VERSION: settings["config_version"],
            KEY_LOG_LEVEL: settings["log_level"],
            KEY_CONSOLE_LOG_LEVEL: settings["console_log_level"],
            KEY_DEFAULT_ALGORITHM: settings["default_algorithm"].display_name,
            KEY_HISTORY_FILE: str(settings["history_file"]),
        }

        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write(comment_manager.get_file_header())
            f.write(f"[{SECTION_DEFAULT}]\n")
            for key, value in values.items():
                inline_comment = key_comments.get(key, "")
                if inline_comment:
                    f.write(f"{key} = {value}  {inline_comment}\n")
                else:
                    f.write(f"{key} = {value}\n")

        logger.debug("Saved settings to %s", self.settings_file)

    def _convert_to_settings(
        self,
        config: configparser.ConfigParser,
        defaults: dict[str, str],
    ) -> Settings:
        """Convert parsed INI values to typed Settings."""
        section = config[SECTION_DEFAULT]

        log_level = self._validated_level(
            section.get(KEY_LOG_LEVEL, ""), defaults[KEY_LOG_LEVEL]
        )
        console_log_level = self._validated_level(
            section.get(KEY_CONSOLE_LOG_LEVEL, ""),
            defaults[KEY_CONSOLE_LOG_LEVEL],
        )

        algorithm_name = section.get(KEY_DEFAULT_ALGORITHM, "")
        try:
            default_algorithm = Algorithm.from_name(algorithm_name)
        except UnsupportedAlgorithmError:
            logger.warning(
                "Unknown default_algorithm %r, using %s",
                algorithm_name,
                defaults[KEY_DEFAULT_ALGORITHM],
            )
            default_algorithm = Algorithm.from_name(
                defaults[KEY_DEFAULT_ALGORITHM]
            )

        history_file = (
            section.get(KEY_HISTORY_FILE, "").strip()
            or defaults[KEY_HISTORY_FILE]
        )

        return Settings(
            config_version=section.get(
                KEY_CONFIG_VERSION, defaults[KEY_CONFIG_VERSION]
            ),
            log_level=log_level,
            console_log_level=console_log_level,
            default_algorithm=default_algorithm,
            history_file=Paths.expand_path(history_file),
        )

    @staticmethod
    def _validated_level(value: str, default: str) -> str:
        level = value.strip().upper()
        if level in VALID_LOG_LEVELS:
            return level
        logger.warning("Invalid log level %r, using %s", value, default)
        return default
