"""Ingester for plain files."""

from pathlib import Path

from paperstore.models import IngestResult
from paperstore.storage import DataFileStore


class FileIngester:
    """Flatten-copy any single file into the store under its basename."""

    source_type = "file"

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing regular file."""
        return source.is_file()

    def ingest(self, source: Path, store: DataFileStore) -> IngestResult:
        return IngestResult(stored_name=store.copy_in(source))
