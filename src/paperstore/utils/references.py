"""Classification of asset references found in markup."""

from typing import Optional

from paperstore.models import ReferenceKind

# Checked in order; prefix matching is case-sensitive
REJECTED_PREFIXES: tuple[tuple[str, ReferenceKind], ...] = (
    ("http://", ReferenceKind.ABSOLUTE_URL),
    ("https://", ReferenceKind.ABSOLUTE_URL),
    ("data:", ReferenceKind.DATA_URI),
    ("blob:", ReferenceKind.BLOB_URI),
    ("file:", ReferenceKind.FILE_URI),
    ("/", ReferenceKind.ABSOLUTE_PATH),
)


def classify_reference(raw: str) -> ReferenceKind:
    """Classify a raw attribute value.

    Anything that is not empty and does not carry one of the rejected
    prefixes is treated as a relative path.

    Args:
        raw: Attribute value as extracted from the tag (untrimmed)

    Returns:
        The ReferenceKind for the trimmed value
    """
    value = raw.strip()
    if not value:
        return ReferenceKind.EMPTY

    for prefix, kind in REJECTED_PREFIXES:
        if value.startswith(prefix):
            return kind

    return ReferenceKind.RELATIVE_PATH


def relative_candidate(raw: str) -> Optional[str]:
    """Return the trimmed value if it is a relative path, else None."""
    if classify_reference(raw) is ReferenceKind.RELATIVE_PATH:
        return raw.strip()
    return None
