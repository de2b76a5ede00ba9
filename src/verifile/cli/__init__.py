"""Command-line interface for verifile."""

from verifile.cli.runner import CLIRunner

__all__ = ["CLIRunner"]
