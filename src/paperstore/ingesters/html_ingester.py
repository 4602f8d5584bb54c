"""Ingester for HTML documents with locally referenced images."""

import logging
from pathlib import Path
from typing import Optional

from paperstore.models import IngestResult, SkippedAsset
from paperstore.protocols import AssetReferenceFinder
from paperstore.scanners import ImgTagScanner
from paperstore.storage import DataFileStore, PathEscapesRoot, SourceMissing, StoreError
from paperstore.utils import classify_reference, percent_decode, relative_candidate

logger = logging.getLogger(__name__)


class HtmlIngester:
    """Copy an HTML file into the store along with the images it references.

    The document itself is flatten-copied (stored under its basename).
    Each relative image reference is copied path-preserving, so the
    unchanged HTML still finds its images next to it in the store.
    Asset failures never fail the ingestion.
    """

    source_type = "html"
    EXTENSIONS = {".html", ".htm"}

    def __init__(self, finder: Optional[AssetReferenceFinder] = None):
        self.finder = finder or ImgTagScanner()

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing .html/.htm file."""
        return source.suffix.lower() in self.EXTENSIONS and source.is_file()

    def ingest(self, source: Path, store: DataFileStore) -> IngestResult:
        """Copy the document, then every local image it references.

        Args:
            source: Absolute path of the HTML document
            store: Destination store

        Returns:
            IngestResult with the stored name and the copied/skipped assets

        Raises:
            SourceMissing: if the document does not exist
            StoreError: if copying the document itself fails
        """
        source = Path(source)
        if not source.exists():
            raise SourceMissing(f"Source file does not exist: {source}")

        asset_base = source.parent
        result = IngestResult(stored_name=store.copy_in(source))

        text = self._read_text(source)
        offset = 0
        while True:
            ref = self.finder.find_next(text, offset)
            if ref is None:
                break
            self._copy_asset(ref.value, asset_base, store, result)
            offset = ref.next_offset

        logger.info(
            f"Copied {result.copied_count} images alongside '{result.stored_name}'"
        )
        return result

    def _read_text(self, source: Path) -> str:
        # The primary copy already succeeded; unreadable markup means no assets
        try:
            # Keep CRLF as-is so the scan window covers the raw text
            with open(source, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {source} for image references: {e}")
            return ""

    def _copy_asset(
        self,
        raw: str,
        asset_base: Path,
        store: DataFileStore,
        result: IngestResult,
    ) -> None:
        relative = relative_candidate(raw)
        if relative is None:
            self._skip(result, raw, classify_reference(raw).value)
            return

        decoded = percent_decode(relative)
        asset_source = asset_base / decoded
        try:
            found = asset_source.exists()
        except (OSError, ValueError):
            # Names the OS cannot represent (too long, NUL bytes)
            found = False
        if not found:
            self._skip(result, raw, "missing")
            return

        try:
            store.copy_to(asset_source, decoded)
        except PathEscapesRoot:
            self._skip(result, raw, "escapes-root")
            return
        except StoreError as e:
            logger.debug(f"  {e}")
            self._skip(result, raw, "copy-failed")
            return

        result.copied_assets.append(decoded)
        logger.debug(f"  {decoded}")

    @staticmethod
    def _skip(result: IngestResult, raw: str, reason: str) -> None:
        result.skipped_assets.append(SkippedAsset(reference=raw, reason=reason))
        logger.debug(f"  skipped {raw!r} ({reason})")
