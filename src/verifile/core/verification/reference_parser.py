"""Reference digest extraction from checksum text.

Handles the loose formats people paste or download next to a file:

- a bare hash on its own line
- ``<hash>  <filename>`` (coreutils ``sha256sum`` output)
- ``<filename> <hash>``

Only the first non-blank line is examined. A checksum file whose hash
sits on a later line yields no reference. This is deliberately narrower
than the Rust desktop app verifile replaces, which kept scanning later
lines until one produced a candidate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from verifile.constants import MIN_REFERENCE_HEX_LENGTH
from verifile.logger import get_logger

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_hex_candidate(token: str) -> bool:
    """Return True for ASCII-hex tokens of at least 16 characters.

    Examples:
        >>> is_hex_candidate("d41d8cd98f00b204e9800998ecf8427e")
        True
        >>> is_hex_candidate("abcd")
        False
        >>> is_hex_candidate("myfile.bin")
        False
    """
    return len(token) >= MIN_REFERENCE_HEX_LENGTH and all(
        ch in _HEX_DIGITS for ch in token
    )


def extract_digest(text: str) -> str | None:
    """Extract a candidate reference digest from checksum text.

    A single-token line is returned verbatim without hex validation.
    Otherwise the first token passing :func:`is_hex_candidate` wins.

    Args:
        text: Checksum file contents or pasted text

    Returns:
        The candidate digest, or None when the first non-blank line has none

    """
    for line in text.splitlines():
        tokens = line.split()
        if not tokens:
            continue

        if len(tokens) == 1:
            return tokens[0]

        for token in tokens:
            if is_hex_candidate(token):
                return token

        logger.debug("No hash-like token in first line: %r", line.strip())
        return None

    return None


def load_reference_file(file_path: Path) -> str | None:
    """Read a checksum file and extract its reference digest.

    An unreadable file yields None; a missing reference never aborts a
    verification.
    """
    try:
        text = file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning(
            "⚠️  Could not read checksum file %s: %s", file_path, e
        )
        return None

    reference = extract_digest(text)
    if reference is None:
        logger.info("No reference hash found in %s", file_path.name)
    else:
        logger.debug("Reference hash from %s: %s", file_path.name, reference)
    return reference
