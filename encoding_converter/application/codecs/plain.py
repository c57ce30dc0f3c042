"""Plain text codec: canonical text is the string itself."""
from __future__ import annotations

from ...domain.formats import CanonicalText, FormatId, from_units, to_units
from .base import Codec


def decode_text(text: str) -> CanonicalText:
    return to_units(text)


def encode_text(units: CanonicalText) -> str:
    return from_units(units)


PLAIN_TEXT = Codec(FormatId.TEXT, decode_text, encode_text)
