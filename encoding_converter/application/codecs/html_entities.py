"""HTML entity codec.

Encoding escapes only the five markup characters. Decoding also understands
numeric character references, so ``&#65;`` decodes to ``A`` but ``A`` never
encodes back to ``&#65;``.
"""
from __future__ import annotations

import re

from ...domain.formats import CanonicalText, FormatId, from_units, to_units
from .base import Codec

NAMED_ENTITIES = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    '"': "&quot;",
    "'": "&#39;",
}
_NAMED_REVERSE = {entity: char for char, entity in NAMED_ENTITIES.items()}

_ENTITY = re.compile(r"&(?:lt|gt|amp|quot);|&#([0-9]+);|&#[xX]([0-9A-Fa-f]+);")
_MARKUP = re.compile("[<>&\"']")
_MAX_CODE_POINT = 0x10FFFF
# 0x10FFFF is 1114111: longer digit strings are always out of range
_MAX_DECIMAL_DIGITS = 7
_MAX_HEX_DIGITS = 6


def _resolve(match: "re.Match[str]") -> str:
    entity = match.group(0)
    if entity in _NAMED_REVERSE:
        return _NAMED_REVERSE[entity]
    decimal, hexadecimal = match.groups()
    if decimal is not None:
        digits = decimal.lstrip("0")
        if len(digits) > _MAX_DECIMAL_DIGITS:
            return entity
        code_point = int(digits or "0")
    else:
        digits = hexadecimal.lstrip("0")
        if len(digits) > _MAX_HEX_DIGITS:
            return entity
        code_point = int(digits or "0", 16)
    if code_point > _MAX_CODE_POINT:
        return entity
    return chr(code_point)


def decode_html(text: str) -> CanonicalText:
    """Replace known entities; anything unrecognised passes through. Never fails."""
    return to_units(_ENTITY.sub(_resolve, text))


def encode_html(units: CanonicalText) -> str:
    return _MARKUP.sub(lambda match: NAMED_ENTITIES[match.group(0)], from_units(units))


HTML_ENTITIES = Codec(FormatId.HTML, decode_html, encode_html)
