"""Tests for the verification record model and outcome policy."""

import dataclasses
from datetime import UTC, datetime
from pathlib import Path

import pytest

from verifile.core.verification.algorithms import Algorithm
from verifile.core.verification.records import (
    VerificationRecord,
    VerificationStatus,
    determine_status,
    display_file_name,
    normalize_reference,
)

DIGEST = "d41d8cd98f00b204e9800998ecf8427e"


def make_record(**overrides) -> VerificationRecord:
    fields = {
        "id": "6f1c2f0e-0000-4000-8000-000000000001",
        "file_name": "empty.bin",
        "file_path": Path("/data/empty.bin"),
        "algorithm": Algorithm.MD5,
        "computed_hash": DIGEST,
        "reference_hash": None,
        "status": VerificationStatus.SUCCESS,
        "timestamp": datetime(2025, 1, 2, 3, 4, 5, tzinfo=UTC),
    }
    fields.update(overrides)
    return VerificationRecord(**fields)


class TestDetermineStatus:
    """Outcome policy."""

    def test_no_reference_is_success(self) -> None:
        assert determine_status(DIGEST, None) is VerificationStatus.SUCCESS

    def test_equal_reference_is_success(self) -> None:
        assert determine_status(DIGEST, DIGEST) is VerificationStatus.SUCCESS

    def test_comparison_ignores_case_and_whitespace(self) -> None:
        reference = f"  {DIGEST.upper()}\n"

        assert (
            determine_status(DIGEST, reference) is VerificationStatus.SUCCESS
        )

    def test_mismatch_is_failed(self) -> None:
        assert (
            determine_status(DIGEST, "0" * 32) is VerificationStatus.FAILED
        )


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (None, None),
        ("", None),
        ("   \n\t", None),
        ("  abc  ", "abc"),
    ],
)
def test_normalize_reference(text: str | None, expected: str | None) -> None:
    assert normalize_reference(text) == expected


def test_display_file_name_falls_back() -> None:
    assert display_file_name(Path("/data/image.iso")) == "image.iso"
    assert display_file_name(Path("/")) == "file"


class TestVerificationRecord:
    """VerificationRecord construction and serialization."""

    def test_create_assigns_identity_and_timestamp(self) -> None:
        record = VerificationRecord.create(
            file_path=Path("/data/empty.bin"),
            algorithm=Algorithm.MD5,
            computed_hash=DIGEST,
            reference_hash="ffff" * 8,
        )

        assert record.file_name == "empty.bin"
        assert record.status is VerificationStatus.FAILED
        assert record.timestamp.tzinfo is UTC
        assert record.timestamp.microsecond == 0
        assert record.id

    def test_create_generates_unique_ids(self) -> None:
        ids = {
            VerificationRecord.create(
                Path("a"), Algorithm.MD5, DIGEST, None
            ).id
            for _ in range(50)
        }

        assert len(ids) == 50

    def test_record_is_immutable(self) -> None:
        record = make_record()

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.status = VerificationStatus.FAILED  # type: ignore[misc]

    def test_status_message(self) -> None:
        assert "successful" in make_record().status_message
        failed = make_record(status=VerificationStatus.FAILED)
        assert "mismatch" in failed.status_message

    def test_to_dict_uses_snapshot_tags(self) -> None:
        data = make_record(
            algorithm=Algorithm.SHA3_256, reference_hash="abc"
        ).to_dict()

        assert data == {
            "id": "6f1c2f0e-0000-4000-8000-000000000001",
            "file_name": "empty.bin",
            "file_path": "/data/empty.bin",
            "algorithm": "Sha3_256",
            "computed_hash": DIGEST,
            "reference_hash": "abc",
            "status": "Success",
            "timestamp": 1735787045,
        }

    def test_to_dict_rejects_in_progress(self) -> None:
        record = make_record(status=VerificationStatus.IN_PROGRESS)

        with pytest.raises(ValueError, match="in progress"):
            record.to_dict()

    def test_from_dict_round_trip(self) -> None:
        record = make_record(reference_hash=DIGEST)

        assert VerificationRecord.from_dict(record.to_dict()) == record

    def test_from_dict_rejects_in_progress(self) -> None:
        data = make_record().to_dict()
        data["status"] = "InProgress"

        with pytest.raises(ValueError, match="in progress"):
            VerificationRecord.from_dict(data)

    def test_from_dict_rejects_unknown_algorithm(self) -> None:
        data = make_record().to_dict()
        data["algorithm"] = "Sha1"

        with pytest.raises(ValueError):
            VerificationRecord.from_dict(data)

    def test_from_dict_missing_field(self) -> None:
        data = make_record().to_dict()
        del data["computed_hash"]

        with pytest.raises(KeyError):
            VerificationRecord.from_dict(data)

    def test_from_dict_rejects_non_integer_timestamp(self) -> None:
        data = make_record().to_dict()
        data["timestamp"] = "2025-01-02T03:04:05Z"

        with pytest.raises(TypeError):
            VerificationRecord.from_dict(data)

    def test_from_dict_accepts_missing_reference(self) -> None:
        data = make_record().to_dict()
        del data["reference_hash"]

        assert VerificationRecord.from_dict(data).reference_hash is None
