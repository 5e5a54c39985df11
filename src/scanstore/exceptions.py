"""Public exception types for scanstore."""

from __future__ import annotations


class ScanstoreError(Exception):
    """Base class for all scanstore exceptions."""


class NotFoundError(ScanstoreError):
    """Raised when ``get`` addresses a ``(kind, id)`` that was never saved."""

    def __init__(self, kind: str, object_id: str) -> None:
        self.kind = kind
        self.object_id = object_id
        super().__init__(f"Cannot find object: {kind}/{object_id}")


class DecodeError(ScanstoreError):
    """Raised when a stored payload cannot be decoded into an object."""


class StoreIOError(ScanstoreError):
    """Raised when the underlying key-value store reports an I/O failure."""


class UnexpectedStreamTermination(StoreIOError):
    """Raised when a scan stream is closed before it signalled its end."""


class UnsupportedOperationError(ScanstoreError, NotImplementedError):
    """Raised for operations a storage backend does not provide."""
