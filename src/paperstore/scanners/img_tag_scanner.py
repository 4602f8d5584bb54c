"""Bounded-window scanner for image references in HTML."""

import re
from typing import Optional

from paperstore.models import RawReference


class ImgTagScanner:
    """Find ``<img ... src="...">`` values without parsing the document.

    Heuristic, not a parser:
    - Finds ``<img`` case-insensitively
    - Looks for ``src=`` within a fixed window starting at the tag
    - Requires a quote right after ``src=`` and the matching closing
      quote inside the same window

    Tags whose ``src`` lies beyond the window are missed.
    """

    TAG = "<img"
    ATTRIBUTE = "src="
    WINDOW = 1000
    QUOTES = ('"', "'")

    _tag_re = re.compile(re.escape(TAG), re.IGNORECASE | re.ASCII)
    _attr_re = re.compile(re.escape(ATTRIBUTE), re.IGNORECASE | re.ASCII)

    def __init__(self, window: int = WINDOW):
        self.window = window

    def find_next(self, text: str, offset: int) -> Optional[RawReference]:
        """Return the next image reference at or after offset.

        Args:
            text: Document text
            offset: Character offset to start scanning from

        Returns:
            A RawReference, or None when no further ``<img`` tag has one
        """
        while True:
            match = self._tag_re.search(text, offset)
            if match is None:
                return None

            tag_start = match.start()
            next_offset = tag_start + len(self.TAG)
            value = self._extract_src(text[tag_start : tag_start + self.window])
            if value is not None:
                return RawReference(
                    value=value,
                    tag_start=tag_start,
                    next_offset=next_offset,
                )
            offset = next_offset

    def _extract_src(self, region: str) -> Optional[str]:
        attr = self._attr_re.search(region)
        if attr is None:
            return None

        value_start = attr.end()
        if value_start >= len(region):
            return None

        quote = region[value_start]
        if quote not in self.QUOTES:
            return None

        value_end = region.find(quote, value_start + 1)
        if value_end == -1:
            return None
        return region[value_start + 1 : value_end]
