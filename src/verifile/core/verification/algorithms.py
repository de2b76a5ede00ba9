"""Supported digest algorithms.

Each member owns a factory for its streaming hash primitive. BLAKE3 comes
from the ``blake3`` package; the others are provided by ``hashlib``.
"""

from __future__ import annotations

import hashlib
from enum import Enum
from typing import TYPE_CHECKING, Protocol

import blake3

from verifile.exceptions import UnsupportedAlgorithmError

if TYPE_CHECKING:
    from collections.abc import Callable


class StreamingHasher(Protocol):
    """Incremental hash primitive interface shared by hashlib and blake3."""

    def update(self, data: bytes, /) -> object: ...

    def hexdigest(self) -> str: ...


def _md5() -> StreamingHasher:
    return hashlib.md5(usedforsecurity=False)


# Display name, description, hex digest length, hasher factory
_ALGORITHM_INFO: dict[
    str, tuple[str, str, int, Callable[[], StreamingHasher]]
] = {
    "Blake3": (
        "BLAKE3",
        "Fastest option; modern tree hash with 256-bit output",
        64,
        blake3.blake3,
    ),
    "Sha256": (
        "SHA-256",
        "Most widely published checksum for downloads",
        64,
        hashlib.sha256,
    ),
    "Sha512": (
        "SHA-512",
        "SHA-2 with 512-bit output, faster than SHA-256 on 64-bit CPUs",
        128,
        hashlib.sha512,
    ),
    "Sha3_256": (
        "SHA3-256",
        "Keccak-based SHA-3 standard with 256-bit output",
        64,
        hashlib.sha3_256,
    ),
    "Md5": (
        "MD5",
        "Legacy checksum; detects corruption but not tampering",
        32,
        _md5,
    ),
}


class Algorithm(Enum):
    """Closed set of digest algorithms.

    Member values are the tags written to the history snapshot.
    """

    BLAKE3 = "Blake3"
    SHA256 = "Sha256"
    SHA512 = "Sha512"
    SHA3_256 = "Sha3_256"
    MD5 = "Md5"

    @classmethod
    def all(cls) -> list[Algorithm]:
        """Return every algorithm in display order."""
        return list(cls)

    @classmethod
    def from_name(cls, name: str) -> Algorithm:
        """Resolve an algorithm from a display name, tag or loose spelling.

        ``"SHA3-256"``, ``"Sha3_256"``, ``"sha3_256"`` and ``"sha3256"`` all
        resolve to :attr:`SHA3_256`.

        Raises:
            UnsupportedAlgorithmError: If nothing matches

        """
        wanted = _normalize(name)
        for algorithm in cls:
            if wanted in (
                _normalize(algorithm.value),
                _normalize(algorithm.display_name),
            ):
                return algorithm
        raise UnsupportedAlgorithmError(f"Unknown algorithm: {name!r}")

    @property
    def display_name(self) -> str:
        """Stable human-readable name, e.g. ``SHA-256``."""
        return _ALGORITHM_INFO[self.value][0]

    @property
    def description(self) -> str:
        """One-line description for display."""
        return _ALGORITHM_INFO[self.value][1]

    @property
    def hex_length(self) -> int:
        """Length of the lowercase hex digest produced by this algorithm."""
        return _ALGORITHM_INFO[self.value][2]

    def new_hasher(self) -> StreamingHasher:
        """Create a fresh, unkeyed streaming hasher."""
        return _ALGORITHM_INFO[self.value][3]()

    def __str__(self) -> str:
        return self.display_name


def _normalize(name: str) -> str:
    return "".join(ch for ch in name.lower() if ch.isalnum())
