"""Document ingesters for paperstore."""

from pathlib import Path
from typing import Optional

from paperstore.ingesters.file_ingester import FileIngester
from paperstore.ingesters.html_ingester import HtmlIngester
from paperstore.protocols import Ingester

# Registry of available ingesters, most specific first
_INGESTERS: list[Ingester] = [
    HtmlIngester(),
    FileIngester(),
]


def get_ingester(source: Path | str) -> Optional[Ingester]:
    """Find an ingester that can handle the given source.

    Args:
        source: Path to the document to import

    Returns:
        An Ingester instance that can handle the source, or None
    """
    source_path = Path(source)
    for ingester in _INGESTERS:
        if ingester.can_handle(source_path):
            return ingester
    return None


def register_ingester(ingester: Ingester) -> None:
    """Register a custom ingester (for plugins/extensions).

    Registered ingesters are consulted before the built-in ones, since
    FileIngester accepts any file.

    Args:
        ingester: An object implementing the Ingester protocol
    """
    _INGESTERS.insert(0, ingester)


__all__ = ["get_ingester", "register_ingester", "HtmlIngester", "FileIngester"]
