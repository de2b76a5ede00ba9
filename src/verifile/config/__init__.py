"""Configuration management - settings file and path utilities.

This package provides:
- SettingsManager: INI settings management (from settings.py)
- Paths: Path constants and utilities (from paths.py)
- Parser utilities: INI parser helpers (from parser.py)
"""

from verifile.config.parser import ConfigCommentManager, create_parser
from verifile.config.paths import Paths
from verifile.config.settings import Settings, SettingsManager

__all__ = [
    "ConfigCommentManager",
    "Paths",
    "Settings",
    "SettingsManager",
    "create_parser",
]
