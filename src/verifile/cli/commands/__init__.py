"""Command handlers for the verifile CLI."""

from verifile.cli.commands.algorithms import AlgorithmsHandler
from verifile.cli.commands.base import BaseCommandHandler
from verifile.cli.commands.history import HistoryHandler
from verifile.cli.commands.verify import VerifyHandler

__all__ = [
    "AlgorithmsHandler",
    "BaseCommandHandler",
    "HistoryHandler",
    "VerifyHandler",
]
