class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or record does not exist."""


class StorageError(Exception):
    """Base exception for persistence faults."""


class CorruptStorageError(StorageError):
    """Raised when a stored collection cannot be decoded."""

    def __init__(self, key: str, detail: str = ""):
        self.key = key
        message = f"Stored data for {key!r} is corrupt"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
