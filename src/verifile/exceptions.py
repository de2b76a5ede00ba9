"""Exception classes for verifile operations."""


class VerifileError(Exception):
    """Base exception for verifile operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the file or resource that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class DigestComputationError(VerifileError):
    """Raised when a file cannot be opened or read to completion."""

    error_prefix = "Hash compute error"


class UnsupportedAlgorithmError(VerifileError, ValueError):
    """Raised when an algorithm name does not match any known digest."""

    error_prefix = "Unsupported algorithm"


class StorageError(VerifileError):
    """Base class for history storage failures."""

    error_prefix = "History storage failed"


class StorageReadError(StorageError):
    """Raised when a history snapshot exists but cannot be parsed."""

    error_prefix = "History read failed"


class StorageWriteError(StorageError):
    """Raised when the history snapshot cannot be written."""

    error_prefix = "History write failed"


class WorkflowError(VerifileError):
    """Raised when a workflow action is invalid for the current stage."""

    error_prefix = "Verification workflow error"
