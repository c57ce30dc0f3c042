"""Codec interface shared by every format."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ...domain.formats import CanonicalText, FormatId

Decoder = Callable[[str], CanonicalText]
Encoder = Callable[[CanonicalText], str]


@dataclass(frozen=True)
class Codec:
    """Decode/encode pair for one format.

    ``decode`` turns a representation into canonical text and raises
    DecodeError on malformed input. ``encode`` turns canonical text into the
    representation and raises EncodeError when it cannot.
    """

    format: FormatId
    decode: Decoder
    encode: Encoder


def low_byte(unit: int) -> int:
    """Keep only the low 8 bits of a code unit (Latin-1 style truncation)."""
    return unit & 0xFF
