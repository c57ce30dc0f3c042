"""Codecs that spell every code unit out as a number.

ASCII: comma separated decimal values (``72, 105``).
Unicode: ``\\u`` escapes with four hex digits (``\\u0048\\u0069``).
"""
from __future__ import annotations

import re

from ...domain.errors import DecodeError
from ...domain.formats import CanonicalText, FormatId
from .base import Codec

MAX_CODE_POINT = 0x10FFFF
MAX_DECIMAL_DIGITS = len(str(MAX_CODE_POINT))
ESCAPE_MARKER = "\\u"

_DECIMAL = re.compile(r"[0-9]+")
_FOUR_HEX = re.compile(r"[0-9A-Fa-f]{4}")


def decode_ascii(text: str) -> CanonicalText:
    """Parse a comma separated list of decimal values.

    Values up to U+10FFFF are accepted; like the browser's ``fromCharCode``
    only the low 16 bits are kept.
    """
    if not text.strip():
        return ()
    units = []
    for index, token in enumerate(text.split(",")):
        value = token.strip()
        if not value:
            raise DecodeError(FormatId.ASCII, f"empty value at item {index + 1}")
        if not _DECIMAL.fullmatch(value):
            raise DecodeError(FormatId.ASCII, f"{value!r} at item {index + 1} is not a decimal number")
        # int() refuses very long digit strings, so reject them by length first
        digits = value.lstrip("0")
        number = int(digits or "0") if len(digits) <= MAX_DECIMAL_DIGITS else None
        if number is None or number > MAX_CODE_POINT:
            shown = value if len(value) <= 20 else f"{value[:10]}...({len(value)} digits)"
            raise DecodeError(
                FormatId.ASCII,
                f"{shown} at item {index + 1} is outside the range 0-{MAX_CODE_POINT}",
            )
        units.append(number & 0xFFFF)
    return tuple(units)


def encode_ascii(units: CanonicalText) -> str:
    return ", ".join(str(unit) for unit in units)


def decode_unicode_escape(text: str) -> CanonicalText:
    r"""Parse a run of ``\uXXXX`` escapes, one code unit each."""
    leading, *segments = text.split(ESCAPE_MARKER)
    if leading:
        raise DecodeError(FormatId.UNICODE, f"expected {ESCAPE_MARKER!r} before {leading[:10]!r}")
    units = []
    for index, segment in enumerate(segments):
        if not _FOUR_HEX.fullmatch(segment):
            raise DecodeError(
                FormatId.UNICODE,
                f"escape {index + 1} must be exactly 4 hex digits, got {segment[:10]!r}",
            )
        units.append(int(segment, 16))
    return tuple(units)


def encode_unicode_escape(units: CanonicalText) -> str:
    return "".join(f"{ESCAPE_MARKER}{unit:04x}" for unit in units)


ASCII_DECIMAL = Codec(FormatId.ASCII, decode_ascii, encode_ascii)
UNICODE_ESCAPE = Codec(FormatId.UNICODE, decode_unicode_escape, encode_unicode_escape)
