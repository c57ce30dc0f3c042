"""Byte oriented codecs: Base64, hexadecimal and binary.

All three encoders see only the low 8 bits of each code unit, so characters
above U+00FF lose information. Decoders produce one unit per byte (0-255).
"""
from __future__ import annotations

import base64
import binascii
import re
import string

from ...domain.errors import DecodeError
from ...domain.formats import CanonicalText, FormatId
from .base import Codec, low_byte

_BASE64_ALPHABET = frozenset(string.ascii_letters + string.digits + "+/")
_BASE64_PATTERN = re.compile(r"(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?")
_HEX_DIGITS = frozenset(string.hexdigits)


def _to_bytes(units: CanonicalText) -> bytes:
    return bytes(low_byte(unit) for unit in units)


def decode_base64(text: str) -> CanonicalText:
    """Decode standard, padded Base64."""
    for position, char in enumerate(text):
        if char not in _BASE64_ALPHABET and char != "=":
            raise DecodeError(FormatId.BASE64, f"invalid character {char!r} at position {position}")
    if not _BASE64_PATTERN.fullmatch(text):
        if len(text) % 4:
            raise DecodeError(FormatId.BASE64, "incorrect padding: length must be a multiple of 4")
        raise DecodeError(FormatId.BASE64, "padding characters are only allowed at the end")
    try:
        raw = base64.b64decode(text, validate=True)
    except binascii.Error as exc:
        raise DecodeError(FormatId.BASE64, str(exc)) from exc
    return tuple(raw)


def encode_base64(units: CanonicalText) -> str:
    return base64.b64encode(_to_bytes(units)).decode("ascii")


def decode_hex(text: str) -> CanonicalText:
    """Decode pairs of hex digits, one code unit per pair."""
    for position, char in enumerate(text):
        if char not in _HEX_DIGITS:
            raise DecodeError(FormatId.HEX, f"invalid hex character {char!r} at position {position}")
    if len(text) % 2:
        raise DecodeError(FormatId.HEX, f"odd number of hex digits ({len(text)})")
    return tuple(binascii.unhexlify(text))


def encode_hex(units: CanonicalText) -> str:
    return _to_bytes(units).hex()


def decode_binary(text: str) -> CanonicalText:
    """Decode 8-bit groups of binary digits.

    Whitespace is ignored anywhere. A trailing group shorter than 8 bits is
    dropped silently.
    """
    bits = "".join(text.split())
    for char in bits:
        if char not in "01":
            raise DecodeError(FormatId.BINARY, f"invalid binary digit {char!r}")
    usable = len(bits) - len(bits) % 8
    return tuple(int(bits[i:i + 8], 2) for i in range(0, usable, 8))


def encode_binary(units: CanonicalText) -> str:
    return " ".join(format(low_byte(unit), "08b") for unit in units)


BASE64 = Codec(FormatId.BASE64, decode_base64, encode_base64)
HEX = Codec(FormatId.HEX, decode_hex, encode_hex)
BINARY = Codec(FormatId.BINARY, decode_binary, encode_binary)
