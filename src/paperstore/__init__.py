"""paperstore - sandboxed local data store for a document reader."""

from paperstore.ingesters import HtmlIngester, get_ingester
from paperstore.models import IngestResult
from paperstore.storage import DataFileStore, StoreError

__all__ = [
    "DataFileStore",
    "StoreError",
    "HtmlIngester",
    "IngestResult",
    "get_ingester",
]
