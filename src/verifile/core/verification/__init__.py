"""File verification engine.

This module provides the public API for hashing files, extracting
reference digests from checksum text and building verification records.
"""

from verifile.core.verification.algorithms import Algorithm
from verifile.core.verification.digest import (
    compute_digest,
    compute_file_digest,
)
from verifile.core.verification.records import (
    VerificationRecord,
    VerificationStatus,
    determine_status,
)
from verifile.core.verification.reference_parser import (
    extract_digest,
    load_reference_file,
)
from verifile.core.verification.service import (
    VerificationOutcome,
    VerificationService,
)
from verifile.core.verification.workflow import (
    VerificationWorkflow,
    WorkflowStage,
)

__all__ = [
    "Algorithm",
    "VerificationOutcome",
    "VerificationRecord",
    "VerificationService",
    "VerificationStatus",
    "VerificationWorkflow",
    "WorkflowStage",
    "compute_digest",
    "compute_file_digest",
    "determine_status",
    "extract_digest",
    "load_reference_file",
]
