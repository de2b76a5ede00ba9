"""Verification service composing the digest engine and outcome policy.

``verify()`` blocks for as long as the file takes to read. Callers that
must stay responsive use ``verify_async()``, which runs the same work on
the event loop's default executor and always resolves to a single
:class:`VerificationOutcome`.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path

from verifile.core.verification.algorithms import Algorithm
from verifile.core.verification.digest import compute_file_digest
from verifile.core.verification.records import (
    VerificationRecord,
    VerificationStatus,
    normalize_reference,
)
from verifile.exceptions import DigestComputationError
from verifile.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class VerificationOutcome:
    """Completion message of one verification attempt.

    Exactly one of ``record`` and ``error`` is set.
    """

    record: VerificationRecord | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        """Return True when a record was produced."""
        return self.record is not None


class VerificationService:
    """Computes file digests and builds verification records."""

    def verify(
        self,
        file_path: Path,
        algorithm: Algorithm,
        reference_text: str | None = None,
    ) -> VerificationRecord:
        """Verify ``file_path`` against an optional reference digest.

        Args:
            file_path: File to hash
            algorithm: Digest algorithm
            reference_text: Expected digest; blank text means no comparison

        Returns:
            New record with status Success or Failed

        Raises:
            DigestComputationError: If the file cannot be read

        """
        reference_hash = normalize_reference(reference_text)
        logger.debug(
            "🔍 Starting %s verification for %s",
            algorithm.display_name,
            file_path.name,
        )
        if reference_hash is not None:
            logger.debug("   Expected hash: %s", reference_hash)

        computed_hash = compute_file_digest(file_path, algorithm)
        record = VerificationRecord.create(
            file_path=file_path,
            algorithm=algorithm,
            computed_hash=computed_hash,
            reference_hash=reference_hash,
        )

        if record.status is VerificationStatus.FAILED:
            logger.debug("❌ %s verification FAILED!", algorithm.display_name)
            logger.debug("   Expected: %s", reference_hash)
            logger.debug("   Actual:   %s", computed_hash)
        else:
            logger.debug("✅ %s verification PASSED!", algorithm.display_name)
        return record

    async def verify_async(
        self,
        file_path: Path,
        algorithm: Algorithm,
        reference_text: str | None = None,
    ) -> VerificationOutcome:
        """Run :meth:`verify` in a worker thread.

        Computation errors are reported in the outcome instead of raised.
        """
        loop = asyncio.get_running_loop()
        try:
            record = await loop.run_in_executor(
                None, self.verify, file_path, algorithm, reference_text
            )
        except DigestComputationError as e:
            return VerificationOutcome(error=str(e))
        return VerificationOutcome(record=record)
