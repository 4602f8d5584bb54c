"""Unit tests for reference classification and percent-decoding."""
import pytest

from paperstore.models import ReferenceKind
from paperstore.utils import classify_reference, percent_decode, relative_candidate


@pytest.mark.parametrize(
    "raw, kind",
    [
        ("http://x/y.png", ReferenceKind.ABSOLUTE_URL),
        ("https://x/y.png", ReferenceKind.ABSOLUTE_URL),
        ("data:image/png;base64,AAA", ReferenceKind.DATA_URI),
        ("blob:abc", ReferenceKind.BLOB_URI),
        ("file:///x", ReferenceKind.FILE_URI),
        ("/abs/path.png", ReferenceKind.ABSOLUTE_PATH),
        ("//cdn.example.com/a.png", ReferenceKind.ABSOLUTE_PATH),
        ("", ReferenceKind.EMPTY),
        ("   ", ReferenceKind.EMPTY),
    ],
)
def test_rejected_references(raw, kind):
    assert classify_reference(raw) is kind
    assert relative_candidate(raw) is None


@pytest.mark.parametrize("raw", ["images/fig1.png", "fig1.png", "./fig1.png"])
def test_relative_references_accepted(raw):
    assert classify_reference(raw) is ReferenceKind.RELATIVE_PATH
    assert relative_candidate(raw) == raw


def test_relative_candidate_is_trimmed():
    assert relative_candidate("  images/fig1.png\n") == "images/fig1.png"
    assert classify_reference("  https://x/y.png") is ReferenceKind.ABSOLUTE_URL


def test_prefix_match_is_case_sensitive():
    # Only the exact lowercase prefixes are rejected
    assert classify_reference("HTTP://x/y.png") is ReferenceKind.RELATIVE_PATH
    assert classify_reference("Data:image/png,AAA") is ReferenceKind.RELATIVE_PATH


def test_reference_kind_values():
    assert ReferenceKind.RELATIVE_PATH.value == "relative-path"
    assert ReferenceKind.ABSOLUTE_URL == "absolute-url"


@pytest.mark.parametrize(
    "encoded, decoded",
    [
        ("fig%201.png", "fig 1.png"),
        ("fig%zz.png", "fig%zz.png"),
        ("plain.png", "plain.png"),
        ("%41%42c", "ABc"),
        ("%2f", "/"),
        ("trailing%", "trailing%"),
        ("short%4", "short%4"),
        # Only two hex digits form an escape; a leading sign is not accepted
        ("%+f", "%+f"),
        ("% f", "% f"),
        ("100%%41", "100%A"),
        ("café.png", "café.png"),
    ],
)
def test_percent_decode(encoded, decoded):
    assert percent_decode(encoded) == decoded


def test_percent_decode_emits_single_byte_characters():
    # UTF-8 sequences decode byte by byte, not as one character
    assert percent_decode("%C3%A9") == "Ã©"
