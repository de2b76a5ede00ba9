"""Shared fixtures and known-answer vectors for verification tests."""

import pytest

from verifile.core.verification.algorithms import Algorithm

EMPTY_DIGESTS = {
    Algorithm.BLAKE3: (
        "af1349b9f5f9a1a6a0404dea36dcc9499bcb25c9adc112b7cc9a93cae41f3262"
    ),
    Algorithm.SHA256: (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    ),
    Algorithm.SHA512: (
        "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
        "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e"
    ),
    Algorithm.SHA3_256: (
        "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a"
    ),
    Algorithm.MD5: "d41d8cd98f00b204e9800998ecf8427e",
}


@pytest.fixture
def empty_digests() -> dict[Algorithm, str]:
    """Standard empty-input digest for every algorithm."""
    return dict(EMPTY_DIGESTS)
