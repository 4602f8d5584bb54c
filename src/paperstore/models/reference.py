"""Core data models for asset references and ingestion outcomes."""

from dataclasses import dataclass, field
from enum import Enum


class ReferenceKind(str, Enum):
    """Classification of a URL-like attribute value."""

    ABSOLUTE_URL = "absolute-url"
    DATA_URI = "data-uri"
    BLOB_URI = "blob-uri"
    FILE_URI = "file-uri"
    ABSOLUTE_PATH = "absolute-path"
    RELATIVE_PATH = "relative-path"
    EMPTY = "empty"


@dataclass(frozen=True)
class RawReference:
    """An attribute value found in markup, before classification."""

    value: str
    tag_start: int
    next_offset: int  # where scanning resumes


@dataclass(frozen=True)
class SkippedAsset:
    """An asset reference that was not copied, and why."""

    reference: str
    reason: str


@dataclass
class IngestResult:
    """Outcome of ingesting one document into the store."""

    stored_name: str
    copied_assets: list[str] = field(default_factory=list)
    skipped_assets: list[SkippedAsset] = field(default_factory=list)

    @property
    def copied_count(self) -> int:
        return len(self.copied_assets)
