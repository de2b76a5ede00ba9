"""Tests for VerificationService."""

import threading
from pathlib import Path
from unittest.mock import patch

import pytest

from verifile.core.verification.algorithms import Algorithm
from verifile.core.verification.records import VerificationStatus
from verifile.core.verification.service import (
    VerificationOutcome,
    VerificationService,
)
from verifile.exceptions import DigestComputationError

ABC_SHA256 = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


@pytest.fixture
def service() -> VerificationService:
    return VerificationService()


class TestVerify:
    """Synchronous verification."""

    def test_empty_file_blake3_without_reference(
        self,
        service: VerificationService,
        empty_file: Path,
        empty_digests: dict[Algorithm, str],
    ) -> None:
        record = service.verify(empty_file, Algorithm.BLAKE3)

        assert record.status is VerificationStatus.SUCCESS
        assert record.computed_hash == empty_digests[Algorithm.BLAKE3]
        assert record.reference_hash is None
        assert record.file_name == "empty.bin"
        assert record.file_path == empty_file

    def test_matching_reference(
        self, service: VerificationService, sample_file: Path
    ) -> None:
        record = service.verify(
            sample_file, Algorithm.SHA256, f"  {ABC_SHA256.upper()}  "
        )

        assert record.status is VerificationStatus.SUCCESS
        assert record.reference_hash == ABC_SHA256.upper()

    def test_mismatching_reference(
        self, service: VerificationService, sample_file: Path
    ) -> None:
        record = service.verify(sample_file, Algorithm.SHA256, "0" * 64)

        assert record.status is VerificationStatus.FAILED
        assert record.computed_hash == ABC_SHA256

    def test_blank_reference_means_no_comparison(
        self, service: VerificationService, sample_file: Path
    ) -> None:
        record = service.verify(sample_file, Algorithm.SHA256, " \n ")

        assert record.reference_hash is None
        assert record.status is VerificationStatus.SUCCESS

    def test_missing_file_raises(
        self, service: VerificationService, tmp_path: Path
    ) -> None:
        with pytest.raises(DigestComputationError):
            service.verify(tmp_path / "nope.bin", Algorithm.MD5)


class TestVerifyAsync:
    """Worker-thread verification."""

    @pytest.mark.asyncio
    async def test_returns_record(
        self, service: VerificationService, sample_file: Path
    ) -> None:
        outcome = await service.verify_async(
            sample_file, Algorithm.SHA256, ABC_SHA256
        )

        assert isinstance(outcome, VerificationOutcome)
        assert outcome.succeeded
        assert outcome.error is None
        assert outcome.record is not None
        assert outcome.record.status is VerificationStatus.SUCCESS

    @pytest.mark.asyncio
    async def test_error_is_reported_not_raised(
        self, service: VerificationService, tmp_path: Path
    ) -> None:
        outcome = await service.verify_async(
            tmp_path / "nope.bin", Algorithm.SHA256
        )

        assert not outcome.succeeded
        assert outcome.record is None
        assert outcome.error is not None
        assert "nope.bin" in outcome.error

    @pytest.mark.asyncio
    async def test_invalid_path_is_reported_not_raised(
        self, service: VerificationService, tmp_path: Path
    ) -> None:
        outcome = await service.verify_async(
            tmp_path / "bad\0name", Algorithm.MD5
        )

        assert outcome.record is None
        assert outcome.error is not None
        assert "Hash compute error" in outcome.error

    @pytest.mark.asyncio
    async def test_runs_off_the_event_loop_thread(
        self, service: VerificationService, sample_file: Path
    ) -> None:
        loop_thread = threading.get_ident()
        seen: list[int] = []
        original = service.verify

        def spy(*args, **kwargs):
            seen.append(threading.get_ident())
            return original(*args, **kwargs)

        with patch.object(service, "verify", side_effect=spy):
            await service.verify_async(sample_file, Algorithm.MD5)

        assert seen
        assert seen[0] != loop_thread
