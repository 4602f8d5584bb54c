"""Protocol definitions for extensible components."""

from paperstore.protocols.finder import AssetReferenceFinder
from paperstore.protocols.ingester import Ingester

__all__ = ["Ingester", "AssetReferenceFinder"]
