"""Lenient percent-decoding for path fragments."""

import string

_HEX_DIGITS = frozenset(string.hexdigits)


def percent_decode(text: str) -> str:
    """Decode %XX escapes, leaving malformed escapes as literal text.

    Each escape becomes the single character whose code point equals the
    byte value; multi-byte sequences are not reassembled as UTF-8.

    >>> percent_decode("fig%201.png")
    'fig 1.png'
    >>> percent_decode("fig%zz.png")
    'fig%zz.png'
    """
    out = []
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char == "%" and _is_hex_pair(text[i + 1 : i + 3]):
            out.append(chr(int(text[i + 1 : i + 3], 16)))
            i += 3
            continue
        out.append(char)
        i += 1
    return "".join(out)


def _is_hex_pair(pair: str) -> bool:
    return len(pair) == 2 and all(c in _HEX_DIGITS for c in pair)
