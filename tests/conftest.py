"""Pytest configuration and fixtures for verifile tests."""

import logging
import os
import tempfile
from pathlib import Path

import pytest

# Keep test logs out of ~/.config/verifile; must run before verifile imports
os.environ.setdefault(
    "VERIFILE_LOG_DIR",
    str(Path(tempfile.gettempdir()) / "verifile-pytest-logs"),
)


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all verifile loggers during tests.

    This allows pytest's caplog fixture to capture records even though the
    'verifile' root logger is created with propagate=False.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("verifile"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Create a file with known content ("abc")."""
    file_path = tmp_path / "sample.bin"
    file_path.write_bytes(b"abc")
    return file_path


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    """Create a zero-byte file."""
    file_path = tmp_path / "empty.bin"
    file_path.write_bytes(b"")
    return file_path
