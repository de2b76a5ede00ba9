"""Verify command handler.

Runs one attempt through the verification workflow: the file is chosen,
the reference is taken from --hash or --hash-file, and the digest is
computed in a worker thread.
"""

from argparse import Namespace
from pathlib import Path

from verifile.cli.commands.base import BaseCommandHandler
from verifile.cli.display import show_record
from verifile.core.verification.records import VerificationStatus
from verifile.core.verification.workflow import VerificationWorkflow
from verifile.logger import get_logger

logger = get_logger(__name__)


class VerifyHandler(BaseCommandHandler):
    """Handler for the verify command."""

    async def execute(self, args: Namespace) -> int:
        """Execute the verify command.

        Returns:
            0 on Success, 1 on Failed or when the file cannot be read

        """
        workflow = VerificationWorkflow(
            self.store, algorithm=args.algorithm
        )
        workflow.choose_file(Path(args.file).expanduser())

        if args.hash_file:
            reference = workflow.load_reference_file(
                Path(args.hash_file).expanduser()
            )
            if reference is None:
                logger.info("Continuing without a reference hash")
        elif args.reference:
            workflow.set_reference_text(args.reference)

        logger.info(
            "🧮 Computing %s hash for %s...",
            workflow.algorithm.display_name,
            workflow.file_path.name if workflow.file_path else "",
        )
        outcome = await workflow.verify()

        if outcome.record is None:
            logger.error("❌ %s", workflow.status_message)
            return 1

        show_record(outcome.record)
        if workflow.last_warning:
            logger.warning(
                "History was not saved: %s", workflow.last_warning
            )

        if outcome.record.status is VerificationStatus.SUCCESS:
            return 0
        return 1
