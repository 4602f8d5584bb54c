"""Shared fixtures: a store under tmp_path and a source document tree."""
import pytest

from paperstore.storage import DataFileStore

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR fake image payload"


@pytest.fixture
def store(tmp_path):
    return DataFileStore(tmp_path / "data")


@pytest.fixture
def docs_dir(tmp_path):
    """Source tree: docs/paper.html next to docs/images/fig1.png."""
    docs = tmp_path / "docs"
    (docs / "images").mkdir(parents=True)
    (docs / "images" / "fig1.png").write_bytes(PNG_BYTES)
    (docs / "paper.html").write_text(
        '<html><body><p>Intro</p><img src="images/fig1.png"></body></html>',
        encoding="utf-8",
    )
    return docs
