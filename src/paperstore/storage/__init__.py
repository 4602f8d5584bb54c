"""Sandboxed data file storage."""

from paperstore.storage.errors import (
    InvalidName,
    IoFailure,
    PathEscapesRoot,
    RootUnavailable,
    SourceMissing,
    StoreError,
)
from paperstore.storage.store import DataFileStore

__all__ = [
    "DataFileStore",
    "StoreError",
    "RootUnavailable",
    "SourceMissing",
    "InvalidName",
    "IoFailure",
    "PathEscapesRoot",
]
