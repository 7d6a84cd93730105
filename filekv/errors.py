"""filekv error types."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class FileKVError(Exception):
    """Base class for all filekv errors."""


class InvalidArgument(FileKVError, ValueError):
    """Raised when a required argument is missing or has the wrong kind."""


class InvalidKey(FileKVError, ValueError):
    """Raised when a keyed operation receives an empty or non-string key.

    Attributes:
        operation: Name of the operation that rejected the key.
        key: The offending key.
    """

    def __init__(self, operation: str, key: Any) -> None:
        self.operation = operation
        self.key = key
        super().__init__(
            f"{operation}: invalid key {key!r}, keys must be non-empty strings"
        )


class InitializationError(FileKVError):
    """Raised when the backing file exists but cannot be read or decoded.

    Fatal for the store instance: every later operation raises the
    same error.

    Attributes:
        path: Location of the backing file.
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = path
        super().__init__(f"failed to load {path}: {reason}")


class PersistenceError(FileKVError):
    """Raised when rewriting the backing file fails.

    The in-memory table already holds the mutation, so memory and disk
    diverge until the next successful write.

    Attributes:
        operation: Name of the mutating operation.
        path: Location of the backing file.
    """

    def __init__(self, operation: str, path: Path | str, reason: str) -> None:
        self.operation = operation
        self.path = path
        super().__init__(f"{operation}: failed to write {path}: {reason}")


class InvalidData(FileKVError, ValueError):
    """Raised when an import payload cannot be copied, encoded or parsed."""
