"""Per-attempt verification workflow.

Stages advance UPLOAD_FILE → UPLOAD_HASH → VERIFYING → RESULT. ``reset()``
returns to UPLOAD_FILE from any stage. The workflow owns the in-memory
history: completed records are inserted at the front and the full list is
handed to the history store after every verification.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from verifile.core.verification.algorithms import Algorithm
from verifile.core.verification.records import (
    STATUS_MESSAGES,
    VerificationStatus,
    normalize_reference,
)
from verifile.core.verification.reference_parser import load_reference_file
from verifile.core.verification.service import (
    VerificationOutcome,
    VerificationService,
)
from verifile.exceptions import StorageWriteError, WorkflowError
from verifile.logger import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from verifile.core.history import HistoryStorage
    from verifile.core.verification.records import VerificationRecord

logger = get_logger(__name__)


class WorkflowStage(Enum):
    """Stage of the current verification attempt."""

    UPLOAD_FILE = "upload_file"
    UPLOAD_HASH = "upload_hash"
    VERIFYING = "verifying"
    RESULT = "result"


class VerificationWorkflow:
    """Drives one verification attempt at a time and records the outcome.

    Persistence is best effort: when the history cannot be written the
    new record stays in :attr:`history` and :attr:`last_warning` is set.
    """

    def __init__(
        self,
        store: HistoryStorage,
        service: VerificationService | None = None,
        algorithm: Algorithm = Algorithm.BLAKE3,
    ) -> None:
        """Initialize the workflow and load history from ``store``.

        Args:
            store: History storage backend
            service: Verification service (created when omitted)
            algorithm: Initially selected algorithm

        """
        self.store = store
        self.service = service or VerificationService()
        self.algorithm = algorithm
        self.history: list[VerificationRecord] = store.load()

        self.stage = WorkflowStage.UPLOAD_FILE
        self.file_path: Path | None = None
        self.reference_text = ""
        self.last_record: VerificationRecord | None = None
        self.last_error: str | None = None
        self.last_warning: str | None = None
        self.status_message = ""
        self._attempt = 0

    @property
    def reference_hash(self) -> str | None:
        """Normalized reference, None when nothing usable was entered."""
        return normalize_reference(self.reference_text)

    @property
    def display_status(self) -> VerificationStatus | None:
        """Status to render for the current attempt."""
        if self.stage is WorkflowStage.VERIFYING:
            return VerificationStatus.IN_PROGRESS
        if self.last_record is not None:
            return self.last_record.status
        return None

    def choose_file(self, file_path: Path | None) -> None:
        """Select the file to verify; None means the picker was cancelled."""
        self._ensure_idle("choose a file")
        if file_path is None:
            return
        self.file_path = file_path
        self.stage = WorkflowStage.UPLOAD_HASH
        logger.debug("File chosen: %s", file_path)

    def select_algorithm(self, algorithm: Algorithm) -> None:
        """Select the digest algorithm for the next verification."""
        self._ensure_idle("change the algorithm")
        self.algorithm = algorithm

    def set_reference_text(self, text: str) -> None:
        """Set typed or pasted reference text."""
        self._ensure_idle("change the reference hash")
        self.reference_text = text

    def load_reference_file(self, checksum_file: Path) -> str | None:
        """Fill the reference from a checksum file.

        The current reference is kept when the file yields no candidate.

        Returns:
            The extracted reference, or None

        """
        self._ensure_idle("load a checksum file")
        reference = load_reference_file(checksum_file)
        if reference is not None:
            self.reference_text = reference
        return reference

    async def verify(self) -> VerificationOutcome:
        """Compute the digest off the caller's thread and record the result.

        The stage always leaves VERIFYING, even when the computation
        raises something other than a computation error.

        Raises:
            WorkflowError: If no file is chosen or a verification is running

        """
        self._ensure_idle("start a verification")
        if (
            self.file_path is None
            or self.stage is not WorkflowStage.UPLOAD_HASH
        ):
            message = "No file chosen"
            raise WorkflowError(message)

        self._attempt += 1
        attempt = self._attempt
        self.stage = WorkflowStage.VERIFYING
        self.status_message = "Computing hash..."
        self.last_record = None
        self.last_error = None
        self.last_warning = None
        logger.debug("Starting verification for: %s", self.file_path)

        try:
            outcome = await self.service.verify_async(
                self.file_path, self.algorithm, self.reference_text
            )
        except Exception as e:
            if attempt == self._attempt:
                self.stage = WorkflowStage.RESULT
                self.last_error = str(e) or type(e).__name__
                self.status_message = f"Error: {self.last_error}"
            logger.exception("Verification aborted unexpectedly")
            raise

        if attempt != self._attempt:
            logger.debug("Discarding result of reset verification attempt")
            return outcome

        self.stage = WorkflowStage.RESULT
        if outcome.record is None:
            self.last_error = outcome.error
            self.status_message = f"Error: {outcome.error}"
            logger.debug("Verification error: %s", outcome.error)
            return outcome

        self._commit(outcome.record)
        return outcome

    def reset(self) -> None:
        """Return to UPLOAD_FILE, discarding the current attempt.

        History is never modified by a reset.
        """
        self._attempt += 1
        self.stage = WorkflowStage.UPLOAD_FILE
        self.file_path = None
        self.reference_text = ""
        self.last_record = None
        self.last_error = None
        self.last_warning = None
        self.status_message = ""

    def _commit(self, record: VerificationRecord) -> None:
        self.last_record = record
        self.status_message = STATUS_MESSAGES[record.status]
        self.history.insert(0, record)
        logger.debug("Verification complete: %s", record.status.value)

        try:
            self.store.save_all(self.history)
        except StorageWriteError as e:
            self.last_warning = str(e)
            logger.warning("⚠️  %s", e)

    def _ensure_idle(self, action: str) -> None:
        if self.stage is WorkflowStage.VERIFYING:
            message = f"Cannot {action} while a verification is running"
            raise WorkflowError(message)
