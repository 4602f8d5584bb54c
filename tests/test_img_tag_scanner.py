"""Unit tests for ImgTagScanner: bounded-window src extraction."""
from paperstore.protocols import AssetReferenceFinder
from paperstore.scanners import ImgTagScanner


def collect(text, scanner=None):
    scanner = scanner or ImgTagScanner()
    values = []
    offset = 0
    while True:
        ref = scanner.find_next(text, offset)
        if ref is None:
            return values
        values.append(ref.value)
        offset = ref.next_offset


def test_implements_finder_protocol():
    assert isinstance(ImgTagScanner(), AssetReferenceFinder)


def test_finds_double_and_single_quoted_values():
    html = '<img src="a.png"><p>x</p><img alt=\'b\' src=\'b.png\' />'
    assert collect(html) == ["a.png", "b.png"]


def test_tag_and_attribute_are_case_insensitive():
    assert collect('<IMG SRC="upper.png">') == ["upper.png"]
    assert collect('<Img Src="mixed.png">') == ["mixed.png"]


def test_reference_offsets():
    html = 'xx<img src="a.png">'
    ref = ImgTagScanner().find_next(html, 0)
    assert ref.tag_start == 2
    assert ref.next_offset == 6


def test_unquoted_src_is_skipped():
    assert collect("<img src=a.png>") == []


def test_missing_src_is_skipped():
    assert collect('<img alt="no source">') == []


def test_window_can_reach_into_following_tag():
    # The first tag has no src, but its window covers the second tag's
    html = '<img alt="no source"><img src="ok.png">'
    assert collect(html) == ["ok.png", "ok.png"]


def test_unterminated_quote_is_skipped():
    assert collect('<img src="never-closed.png>') == []


def test_src_beyond_window_is_missed():
    html = "<img " + " " * 1100 + 'src="far.png">'
    assert collect(html) == []


def test_src_just_inside_window_is_found():
    padding = " " * (1000 - len('<img src="n.png"') - 1)
    html = "<img" + padding + ' src="n.png">'
    assert len(html) <= 1001
    assert collect(html) == ["n.png"]


def test_closing_quote_must_be_inside_window():
    html = '<img src="' + "a" * 1000 + '.png">'
    assert collect(html) == []


def test_custom_window():
    html = '<img data-x="123456789" src="late.png">'
    assert collect(html, ImgTagScanner(window=10)) == []
    assert collect(html, ImgTagScanner(window=100)) == ["late.png"]


def test_empty_and_tagless_text():
    assert collect("") == []
    assert collect("<p>no images here</p>") == []


def test_duplicate_references_reported_each_time():
    html = '<img src="same.png"><img src="same.png">'
    assert collect(html) == ["same.png", "same.png"]


def test_case_folding_is_ascii_only():
    # Dotless i and long s must not fold onto "img" / "src"
    assert collect('<ımg src="x.png">') == []
    assert collect('<img ſrc="x.png">') == []
