"""History command handler."""

from argparse import Namespace

from verifile.cli.commands.base import BaseCommandHandler
from verifile.cli.display import format_record_line
from verifile.logger import get_logger

logger = get_logger(__name__)


class HistoryHandler(BaseCommandHandler):
    """Show stored verification records, newest first."""

    async def execute(self, args: Namespace) -> int:
        """Execute the history command."""
        records = self.store.load()
        limit = getattr(args, "limit", None)
        if limit is not None and limit >= 0:
            records = records[:limit]

        if not records:
            logger.info("No verifications recorded yet")
            return 0

        logger.info("📋 Past verifications (%d):", len(records))
        for record in records:
            logger.info("  %s", format_record_line(record))
        return 0
