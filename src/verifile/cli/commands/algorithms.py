"""Algorithms command handler."""

from argparse import Namespace

from verifile.cli.commands.base import BaseCommandHandler
from verifile.core.verification.algorithms import Algorithm
from verifile.logger import get_logger

logger = get_logger(__name__)


class AlgorithmsHandler(BaseCommandHandler):
    """List supported algorithms with their descriptions."""

    async def execute(self, args: Namespace) -> int:  # noqa: ARG002
        """Execute the algorithms command."""
        default = self.settings["default_algorithm"]
        for algorithm in Algorithm.all():
            marker = "*" if algorithm is default else " "
            logger.info(
                "%s %s - %s",
                marker,
                f"{algorithm.display_name:<9}",
                algorithm.description,
            )
        return 0
