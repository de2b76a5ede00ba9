"""Console rendering of verification records."""

from verifile.constants import ISO_DATETIME_FORMAT
from verifile.core.verification.records import (
    VerificationRecord,
    VerificationStatus,
)
from verifile.logger import get_logger

logger = get_logger(__name__)

STATUS_ICONS = {
    VerificationStatus.SUCCESS: "✅",
    VerificationStatus.FAILED: "❌",
    VerificationStatus.IN_PROGRESS: "⏳",
}


def format_timestamp(record: VerificationRecord) -> str:
    """Format the record timestamp for display."""
    return record.timestamp.strftime(ISO_DATETIME_FORMAT) + " UTC"


def format_record_line(record: VerificationRecord) -> str:
    """One-line summary used by the history listing."""
    return (
        f"{STATUS_ICONS[record.status]} {format_timestamp(record)}  "
        f"{record.algorithm.display_name:<9} {record.file_name}  "
        f"{record.computed_hash}"
    )


def show_record(record: VerificationRecord) -> None:
    """Print the full result of a verification."""
    logger.info(record.status_message)
    logger.info("   File:      %s", record.file_path)
    logger.info("   Algorithm: %s", record.algorithm.display_name)
    logger.info("   Computed:  %s", record.computed_hash)
    if record.reference_hash is not None:
        logger.info("   Expected:  %s", record.reference_hash)
    else:
        logger.info("   Expected:  (none, digest recorded only)")
    logger.info("   Time:      %s", format_timestamp(record))
