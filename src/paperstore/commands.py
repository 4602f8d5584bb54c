"""Command implementations shared by the MCP server and the CLI."""

import base64
import logging
from pathlib import Path

from paperstore.ingesters import HtmlIngester, get_ingester
from paperstore.storage import DataFileStore, SourceMissing, StoreError

logger = logging.getLogger(__name__)


class DataCommands:
    """Request/response operations over one data file store.

    Every method either returns its result or raises a StoreError with a
    human-readable message.
    """

    def __init__(self, store: DataFileStore):
        self.store = store
        self.html_ingester = HtmlIngester()

    def copy_file_to_data(self, source_path: str) -> str:
        """Flatten-copy a file into the store and return its stored name."""
        return self.store.copy_in(source_path)

    def copy_html_with_images(self, source_path: str) -> str:
        """Copy an HTML file plus its local images; return its stored name."""
        result = self.html_ingester.ingest(Path(source_path), self.store)
        return result.stored_name

    def import_document(self, source_path: str) -> str:
        """Copy a document using whichever ingester handles its type."""
        source = Path(source_path)
        if not source.exists():
            raise SourceMissing(f"Source file does not exist: {source_path}")

        ingester = get_ingester(source)
        if ingester is None:
            raise StoreError(f"Cannot import: {source_path}")

        logger.debug(f"Importing {source} as {ingester.source_type}")
        return ingester.ingest(source, self.store).stored_name

    def read_data_file(self, filename: str) -> str:
        return self.store.read_text(filename)

    def read_data_file_binary(self, filename: str) -> str:
        """Read a stored file and return it base64-encoded for transport."""
        data = self.store.read_binary(filename)
        return base64.b64encode(data).decode("ascii")

    def write_data_file(self, filename: str, content: str) -> None:
        self.store.write(filename, content)

    def list_data_files(self) -> list[str]:
        return self.store.list_files()

    def check_data_file_exists(self, filename: str) -> bool:
        return self.store.exists(filename)

    def delete_data_file(self, filename: str) -> None:
        self.store.delete(filename)

    def get_data_dir_path(self) -> str:
        return str(self.store.root_path())
