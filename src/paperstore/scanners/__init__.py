"""Asset reference scanners."""

from paperstore.scanners.img_tag_scanner import ImgTagScanner

__all__ = ["ImgTagScanner"]
