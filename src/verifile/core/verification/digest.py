"""Streaming digest computation.

Files are hashed in fixed-size chunks so memory use stays constant no
matter how large the input is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

from verifile.constants import DIGEST_CHUNK_SIZE
from verifile.exceptions import DigestComputationError
from verifile.logger import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from verifile.core.verification.algorithms import Algorithm

logger = get_logger(__name__)

BYTES_PER_UNIT = 1024.0


def format_bytes(num_bytes: float) -> str:
    """Convert a byte count to a human-readable string.

    Uses binary multiples with one decimal place.
    Raises ``ValueError`` if the input is negative.
    """
    if num_bytes < 0:
        message = "Byte size cannot be negative"
        raise ValueError(message)

    units = ["B", "KB", "MB", "GB", "TB", "PB", "EB"]
    size = float(num_bytes)
    unit_index = 0

    while size >= BYTES_PER_UNIT and unit_index < len(units) - 1:
        size /= BYTES_PER_UNIT
        unit_index += 1

    return f"{size:.1f} {units[unit_index]}"


def compute_digest(
    stream: BinaryIO,
    algorithm: Algorithm,
    chunk_size: int = DIGEST_CHUNK_SIZE,
) -> str:
    """Compute the lowercase hex digest of everything left in ``stream``.

    Args:
        stream: Binary stream positioned at the first byte to hash
        algorithm: Digest algorithm to use
        chunk_size: Bytes per read; does not affect the result

    Returns:
        Lowercase hex digest without separators

    Raises:
        OSError: If the stream cannot be read to completion

    """
    if chunk_size <= 0:
        message = "Chunk size must be positive"
        raise ValueError(message)

    hasher = algorithm.new_hasher()
    bytes_processed = 0

    for chunk in iter(lambda: stream.read(chunk_size), b""):
        hasher.update(chunk)
        bytes_processed += len(chunk)

    computed_hash = hasher.hexdigest().lower()
    logger.debug(
        "   Processed: %s (%d bytes)",
        format_bytes(bytes_processed),
        bytes_processed,
    )
    return computed_hash


def compute_file_digest(file_path: Path, algorithm: Algorithm) -> str:
    """Open ``file_path`` and compute its digest.

    Raises:
        DigestComputationError: If the path is invalid or the file cannot
            be opened or read

    """
    logger.debug(
        "🧮 Computing %s hash for %s", algorithm.display_name, file_path.name
    )
    try:
        with file_path.open("rb") as f:
            computed_hash = compute_digest(f, algorithm)
    except (OSError, ValueError) as e:
        # ValueError: open() rejects paths with embedded NUL bytes
        logger.error("❌ Failed to read %s: %s", file_path, e)
        raise DigestComputationError(str(e), target=str(file_path)) from e

    logger.debug("   Hash: %s", computed_hash)
    return computed_hash
