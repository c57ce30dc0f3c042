"""Percent-encoding codecs for URI components and whole URLs."""
from __future__ import annotations

import re
from typing import FrozenSet
from urllib.parse import quote

from ...domain.errors import DecodeError, EncodeError
from ...domain.formats import CanonicalText, FormatId, from_units, to_units
from .base import Codec

# quote() always leaves A-Z a-z 0-9 _ . - ~ alone; these extend it to the
# component-safe set used by browsers.
COMPONENT_SAFE = "!*'()"
STRUCTURAL_CHARACTERS = ":/?#[]@!$&'()*+,;="
URL_SAFE = COMPONENT_SAFE + STRUCTURAL_CHARACTERS
# Escapes for these stay encoded when decoding a whole URL, as decodeURI does.
URL_RESERVED = frozenset(";/?:@&=+$,#")

_ESCAPE_RUN = re.compile(r"(?:%[0-9A-Fa-f]{2})+")
_VALID_ESCAPE = re.compile(r"%[0-9A-Fa-f]{2}")


def _check_escapes(text: str, format_id: FormatId) -> None:
    position = text.find("%")
    while position != -1:
        if not _VALID_ESCAPE.match(text, position):
            fragment = text[position:position + 3]
            raise DecodeError(format_id, f"malformed escape {fragment!r} at position {position}")
        position = text.find("%", position + 3)


def percent_decode(text: str, format_id: FormatId, keep: FrozenSet[str] = frozenset()) -> str:
    """Decode ``%XX`` escapes as UTF-8.

    Escapes that decode to a character in ``keep`` stay as written.
    """
    _check_escapes(text, format_id)

    def replace(match: "re.Match[str]") -> str:
        run = match.group(0)
        raw = bytes.fromhex(run.replace("%", ""))
        try:
            decoded = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(
                format_id,
                f"escape sequence {run!r} at position {match.start()} is not valid UTF-8",
            ) from exc
        if not keep:
            return decoded
        pieces = []
        offset = 0
        for char in decoded:
            width = len(char.encode("utf-8")) * 3
            pieces.append(run[offset:offset + width] if char in keep else char)
            offset += width
        return "".join(pieces)

    return _ESCAPE_RUN.sub(replace, text)


def percent_encode(units: CanonicalText, format_id: FormatId, safe: str) -> str:
    text = from_units(units)
    try:
        return quote(text, safe=safe)
    except UnicodeEncodeError as exc:
        raise EncodeError(
            format_id,
            f"unpaired surrogate U+{ord(exc.object[exc.start]):04X} at position {exc.start} cannot be percent-encoded",
        ) from exc


def decode_uri_component(text: str) -> CanonicalText:
    return to_units(percent_decode(text, FormatId.URI))


def encode_uri_component(units: CanonicalText) -> str:
    return percent_encode(units, FormatId.URI, COMPONENT_SAFE)


def decode_url(text: str) -> CanonicalText:
    return to_units(percent_decode(text, FormatId.URL, URL_RESERVED))


def encode_url(units: CanonicalText) -> str:
    return percent_encode(units, FormatId.URL, URL_SAFE)


URI_COMPONENT = Codec(FormatId.URI, decode_uri_component, encode_uri_component)
URL = Codec(FormatId.URL, decode_url, encode_url)
