"""Protocol for document ingesters."""

from pathlib import Path
from typing import Protocol, runtime_checkable

from paperstore.models import IngestResult
from paperstore.storage import DataFileStore


@runtime_checkable
class Ingester(Protocol):
    """Protocol for document ingesters.

    Implementations copy a source document (and anything it depends on)
    into a store. Uses structural subtyping - no inheritance required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this source type (e.g., 'html', 'file')."""
        ...

    def can_handle(self, source: Path) -> bool:
        """Check if this ingester can process the given source."""
        ...

    def ingest(self, source: Path, store: DataFileStore) -> IngestResult:
        """Copy the source into the store and describe what was stored."""
        ...
