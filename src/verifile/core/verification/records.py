"""Verification record model and comparison policy."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from verifile.constants import FALLBACK_FILE_NAME
from verifile.core.verification.algorithms import Algorithm


class VerificationStatus(Enum):
    """Outcome of a verification attempt.

    ``IN_PROGRESS`` is a display-only transient and is never persisted.
    """

    SUCCESS = "Success"
    FAILED = "Failed"
    IN_PROGRESS = "InProgress"

    @property
    def is_final(self) -> bool:
        """Return True for statuses that may be written to history."""
        return self is not VerificationStatus.IN_PROGRESS


STATUS_MESSAGES: dict[VerificationStatus, str] = {
    VerificationStatus.SUCCESS: "✓ Verification successful!",
    VerificationStatus.FAILED: "✗ Verification failed - hash mismatch!",
    VerificationStatus.IN_PROGRESS: "In progress...",
}


def normalize_reference(text: str | None) -> str | None:
    """Strip reference text, mapping empty or blank input to None."""
    if text is None:
        return None
    stripped = text.strip()
    return stripped or None


def determine_status(
    computed_hash: str, reference_hash: str | None
) -> VerificationStatus:
    """Apply the outcome policy.

    No reference means a presence-only check, which always succeeds.
    Otherwise the trimmed reference is compared case-insensitively.
    """
    if reference_hash is None:
        return VerificationStatus.SUCCESS
    if reference_hash.strip().lower() == computed_hash.strip().lower():
        return VerificationStatus.SUCCESS
    return VerificationStatus.FAILED


def display_file_name(file_path: Path) -> str:
    """Return the final path component, or a placeholder if it has none."""
    return file_path.name or FALLBACK_FILE_NAME


def current_timestamp() -> datetime:
    """Current UTC time truncated to whole seconds."""
    return datetime.now(tz=UTC).replace(microsecond=0)


@dataclass(slots=True, frozen=True)
class VerificationRecord:
    """Immutable result of one verification.

    Attributes:
        id: Unique identifier assigned at creation
        file_name: Display name of the verified file
        file_path: Full path at verification time
        algorithm: Digest algorithm used
        computed_hash: Lowercase hex digest of the file
        reference_hash: Caller-supplied digest, None when not compared
        status: Outcome of the comparison
        timestamp: Creation time, UTC, second precision

    """

    id: str
    file_name: str
    file_path: Path
    algorithm: Algorithm
    computed_hash: str
    reference_hash: str | None
    status: VerificationStatus
    timestamp: datetime

    @classmethod
    def create(
        cls,
        file_path: Path,
        algorithm: Algorithm,
        computed_hash: str,
        reference_hash: str | None,
    ) -> VerificationRecord:
        """Build a record with a fresh id, timestamp and derived status."""
        return cls(
            id=str(uuid.uuid4()),
            file_name=display_file_name(file_path),
            file_path=file_path,
            algorithm=algorithm,
            computed_hash=computed_hash,
            reference_hash=reference_hash,
            status=determine_status(computed_hash, reference_hash),
            timestamp=current_timestamp(),
        )

    @property
    def status_message(self) -> str:
        """User-facing summary of the outcome."""
        return STATUS_MESSAGES[self.status]

    def to_dict(self) -> dict[str, Any]:
        """Convert to the history snapshot representation.

        Raises:
            ValueError: If the record is still in progress

        """
        if not self.status.is_final:
            message = f"Record {self.id} is in progress and cannot be saved"
            raise ValueError(message)

        return {
            "id": self.id,
            "file_name": self.file_name,
            "file_path": str(self.file_path),
            "algorithm": self.algorithm.value,
            "computed_hash": self.computed_hash,
            "reference_hash": self.reference_hash,
            "status": self.status.value,
            "timestamp": int(self.timestamp.timestamp()),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VerificationRecord:
        """Create a record from its snapshot representation.

        Raises:
            KeyError: If a required field is missing
            TypeError: If a field has the wrong type
            ValueError: If an enum tag is unknown or the status is not final

        """
        if not isinstance(data, dict):
            message = f"Expected object, got {type(data).__name__}"
            raise TypeError(message)

        status = VerificationStatus(data["status"])
        if not status.is_final:
            message = f"Persisted record {data.get('id')} is in progress"
            raise ValueError(message)

        reference_hash = data.get("reference_hash")
        timestamp = data["timestamp"]
        text_fields = ("id", "file_name", "file_path", "computed_hash")
        if not all(isinstance(data[key], str) for key in text_fields):
            message = "Record text fields must be strings"
            raise TypeError(message)
        if reference_hash is not None and not isinstance(reference_hash, str):
            message = "reference_hash must be a string or null"
            raise TypeError(message)
        if isinstance(timestamp, bool) or not isinstance(timestamp, int):
            message = "timestamp must be an integer number of seconds"
            raise TypeError(message)

        return cls(
            id=data["id"],
            file_name=data["file_name"],
            file_path=Path(data["file_path"]),
            algorithm=Algorithm(data["algorithm"]),
            computed_hash=data["computed_hash"],
            reference_hash=reference_hash,
            status=status,
            timestamp=datetime.fromtimestamp(timestamp, tz=UTC),
        )
