"""Domain models for the supported text encodings."""
from __future__ import annotations

from enum import Enum
from typing import List, Tuple

# A sequence of UTF-16 code units (0..0xFFFF).
CanonicalText = Tuple[int, ...]

_UTF16 = "utf-16-le"


class FormatId(Enum):
    """The nine text representations the converter understands."""

    TEXT = "text"
    BASE64 = "base64"
    HEX = "hex"
    BINARY = "binary"
    URI = "uri"
    URL = "url"
    ASCII = "ascii"
    UNICODE = "unicode"
    HTML = "html"

    @property
    def label(self) -> str:
        """Human readable name shown in format pickers."""
        return _LABELS[self]

    @classmethod
    def from_string(cls, value: str) -> "FormatId":
        """Convert string to FormatId."""
        value_lower = value.strip().lower()
        for format_id in cls:
            if format_id.value == value_lower:
                return format_id
        raise ValueError(f"Unknown format: {value}")

    @classmethod
    def all_types(cls) -> List["FormatId"]:
        """Get all formats in display order."""
        return list(cls)


_LABELS = {
    FormatId.TEXT: "Plain Text",
    FormatId.BASE64: "Base64",
    FormatId.HEX: "Hexadecimal",
    FormatId.BINARY: "Binary",
    FormatId.URI: "URI Component",
    FormatId.URL: "URL Encoded",
    FormatId.ASCII: "ASCII",
    FormatId.UNICODE: "Unicode",
    FormatId.HTML: "HTML Entities",
}


def to_units(text: str) -> CanonicalText:
    """Split a Python string into UTF-16 code units.

    Characters outside the BMP become surrogate pairs. Lone surrogates in
    ``text`` are kept as single units.
    """
    raw = text.encode(_UTF16, "surrogatepass")
    return tuple(int.from_bytes(raw[i:i + 2], "little") for i in range(0, len(raw), 2))


def from_units(units: CanonicalText) -> str:
    """Join UTF-16 code units back into a Python string.

    Valid surrogate pairs combine into one character; unpaired surrogates
    survive as lone surrogate characters.
    """
    raw = b"".join((unit & 0xFFFF).to_bytes(2, "little") for unit in units)
    return raw.decode(_UTF16, "surrogatepass")
