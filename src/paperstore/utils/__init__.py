"""Utility functions for paperstore."""

from paperstore.utils.percent import percent_decode
from paperstore.utils.references import classify_reference, relative_candidate

__all__ = ["percent_decode", "classify_reference", "relative_candidate"]
