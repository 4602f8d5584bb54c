"""Protocol for locating asset references in document text."""

from typing import Optional, Protocol, runtime_checkable

from paperstore.models import RawReference


@runtime_checkable
class AssetReferenceFinder(Protocol):
    """Protocol for asset reference finders.

    Implementations range from a bounded substring scan to a real
    tokenizer; the copy and resolve logic only sees RawReference values.
    """

    def find_next(self, text: str, offset: int) -> Optional[RawReference]:
        """Return the next reference at or after offset, or None when done."""
        ...
