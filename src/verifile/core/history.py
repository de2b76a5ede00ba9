"""Persistent verification history.

The whole history is stored as one JSON array, newest record first, and
rewritten in full on every save. Writes go to a temporary file that is
then renamed over the snapshot, so readers see either the old or the new
history and never a partial one.

A single writer process is assumed; concurrent saves are not coordinated.
"""

import contextlib
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Protocol

import orjson

from verifile.constants import HISTORY_FILE_NAME
from verifile.core.verification.records import VerificationRecord
from verifile.exceptions import StorageReadError, StorageWriteError
from verifile.logger import get_logger

logger = get_logger(__name__)


class HistoryStorage(Protocol):
    """Storage contract used by the verification workflow."""

    def load(self) -> list[VerificationRecord]:
        """Return the stored history, newest first."""
        ...

    def save_all(self, records: Sequence[VerificationRecord]) -> None:
        """Replace the stored history with ``records``."""
        ...


class HistoryStore:
    """JSON snapshot store for verification records.

    Usage:
        store = HistoryStore(Path("verifications.json"))
        history = store.load()
        history.insert(0, record)
        store.save_all(history)
    """

    def __init__(self, history_file: Path | None = None) -> None:
        """Initialize the store.

        Args:
            history_file: Snapshot path (default: verifications.json in
                the working directory)

        """
        self.history_file = history_file or Path(HISTORY_FILE_NAME)

    def load(self) -> list[VerificationRecord]:
        """Load the history snapshot.

        A missing snapshot is an empty history. A snapshot that cannot be
        read or parsed is also treated as empty so startup never fails on a
        corrupt file.

        Returns:
            Records in stored order (newest first)

        """
        if not self.history_file.exists():
            logger.debug("No history file at %s", self.history_file)
            return []

        try:
            records = self._read_snapshot()
        except StorageReadError as e:
            logger.warning("⚠️  Ignoring unreadable history: %s", e)
            return []

        logger.debug(
            "Loaded %d records from %s", len(records), self.history_file
        )
        return records

    def save_all(self, records: Sequence[VerificationRecord]) -> None:
        """Overwrite the snapshot with the complete history.

        Args:
            records: Full history, newest first

        Raises:
            StorageWriteError: If the snapshot cannot be written
            ValueError: If any record is still in progress

        """
        payload = orjson.dumps(
            [record.to_dict() for record in records],
            option=orjson.OPT_INDENT_2,
        )
        temp_file = self.history_file.with_name(
            f".{self.history_file.name}.tmp"
        )

        try:
            if self.history_file.parent != Path():
                self.history_file.parent.mkdir(parents=True, exist_ok=True)
            temp_file.write_bytes(payload)
            # Atomic move (rename is atomic on most filesystems)
            temp_file.replace(self.history_file)
        except OSError as e:
            logger.error(
                "Failed to save history to %s: %s", self.history_file, e
            )
            with contextlib.suppress(OSError):
                temp_file.unlink()
            raise StorageWriteError(
                str(e), target=str(self.history_file)
            ) from e

        logger.debug(
            "Saved %d records to %s", len(records), self.history_file
        )

    def _read_snapshot(self) -> list[VerificationRecord]:
        """Read and decode the snapshot.

        Raises:
            StorageReadError: If the file cannot be read or decoded

        """
        target = str(self.history_file)
        try:
            raw = self.history_file.read_bytes()
            data = orjson.loads(raw)
        except (OSError, orjson.JSONDecodeError) as e:
            raise StorageReadError(str(e), target=target) from e

        if not isinstance(data, list):
            message = f"Expected a JSON array, got {type(data).__name__}"
            raise StorageReadError(message, target=target)

        try:
            return list(_decode_records(data))
        except (KeyError, TypeError, ValueError, OverflowError, OSError) as e:
            message = f"Invalid record: {e!r}"
            raise StorageReadError(message, target=target) from e


def _decode_records(items: Iterable[object]) -> Iterable[VerificationRecord]:
    for item in items:
        yield VerificationRecord.from_dict(item)  # type: ignore[arg-type]
