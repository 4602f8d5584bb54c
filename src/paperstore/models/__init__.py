"""Data models for paperstore."""

from paperstore.models.reference import (
    IngestResult,
    RawReference,
    ReferenceKind,
    SkippedAsset,
)

__all__ = ["ReferenceKind", "RawReference", "SkippedAsset", "IngestResult"]
