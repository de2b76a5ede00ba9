"""Tests for reference digest extraction from checksum text."""

from pathlib import Path

import pytest

from verifile.core.verification.reference_parser import (
    extract_digest,
    is_hex_candidate,
    load_reference_file,
)

MD5_EMPTY = "d41d8cd98f00b204e9800998ecf8427e"


def test_single_token_returned_verbatim() -> None:
    assert extract_digest("abc123") == "abc123"


def test_single_non_hex_token_still_returned() -> None:
    assert extract_digest("not-a-hash!") == "not-a-hash!"


def test_hash_then_filename() -> None:
    assert extract_digest(f"{MD5_EMPTY}  myfile.bin") == MD5_EMPTY


def test_filename_then_hash() -> None:
    assert extract_digest(f"myfile.bin {MD5_EMPTY}") == MD5_EMPTY


def test_short_tokens_yield_nothing() -> None:
    assert extract_digest("short abcd") is None


def test_leading_blank_lines_skipped() -> None:
    text = f"\n   \n\t\n{MD5_EMPTY} *myfile.bin\n"

    assert extract_digest(text) == MD5_EMPTY


def test_only_first_non_blank_line_is_examined() -> None:
    text = f"# checksums for release\n{MD5_EMPTY}  myfile.bin\n"

    assert extract_digest(text) is None


def test_first_qualifying_token_wins() -> None:
    first = "a" * 16
    second = "b" * 64

    assert extract_digest(f"{first} {second}") == first


def test_uppercase_hex_accepted_and_case_preserved() -> None:
    upper = MD5_EMPTY.upper()

    assert extract_digest(f"{upper}  file") == upper


@pytest.mark.parametrize("text", ["", "   ", "\n\n", "\t \n  \n"])
def test_blank_text_yields_nothing(text: str) -> None:
    assert extract_digest(text) is None


def test_windows_line_endings() -> None:
    assert extract_digest(f"{MD5_EMPTY}  file.iso\r\n") == MD5_EMPTY


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("0123456789abcdef", True),
        ("0123456789ABCDEF", True),
        ("0123456789abcde", False),
        ("0123456789abcdeg", False),
        ("", False),
    ],
)
def test_is_hex_candidate(token: str, expected: bool) -> None:
    assert is_hex_candidate(token) is expected


def test_load_reference_file(tmp_path: Path) -> None:
    checksum_file = tmp_path / "SHA256SUMS"
    checksum_file.write_text(f"{MD5_EMPTY}  empty.bin\n", encoding="utf-8")

    assert load_reference_file(checksum_file) == MD5_EMPTY


def test_load_reference_file_without_candidate(tmp_path: Path) -> None:
    checksum_file = tmp_path / "notes.txt"
    checksum_file.write_text("see website for hashes\n", encoding="utf-8")

    assert load_reference_file(checksum_file) is None


def test_load_reference_file_missing(tmp_path: Path) -> None:
    assert load_reference_file(tmp_path / "missing.sha256") is None


def test_load_reference_file_invalid_utf8(tmp_path: Path) -> None:
    checksum_file = tmp_path / "binary.sha256"
    checksum_file.write_bytes(MD5_EMPTY.encode() + b"  \xff\xfe.bin\n")

    assert load_reference_file(checksum_file) == MD5_EMPTY
