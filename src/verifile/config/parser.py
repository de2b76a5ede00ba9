"""INI parser helpers for verifile configuration."""

import configparser
from datetime import UTC, datetime

from verifile.constants import CONFIG_VERSION, ISO_DATETIME_FORMAT


def create_parser() -> configparser.ConfigParser:
    """Create the ConfigParser flavour used for settings.conf."""
    return configparser.ConfigParser(
        inline_comment_prefixes=("#", ";"),
        interpolation=None,
    )


class ConfigCommentManager:
    """Manages settings file comments for user-friendly documentation."""

    @staticmethod
    def get_file_header() -> str:
        """Generate file header comment with description and timestamp."""
        timestamp = datetime.now(tz=UTC).strftime(ISO_DATETIME_FORMAT)
        return f"""# verifile Configuration
# Settings for the verifile file verification tool.
#
# Last updated: {timestamp}
# Configuration version: {CONFIG_VERSION}

"""

    @staticmethod
    def get_key_comments() -> dict[str, str]:
        """Get inline comments for each settings key."""
        return {
            "config_version": "# DO NOT MODIFY - Config format version",
            "log_level": "# File log level: DEBUG, INFO, WARNING, ERROR",
            "console_log_level": "# Console log level: INFO shows results",
            "default_algorithm": (
                "# BLAKE3, SHA-256, SHA-512, SHA3-256 or MD5"
            ),
            "history_file": "# Relative paths resolve from the working dir",
        }
