"""Format registry mapping every FormatId to its codec."""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping

from ...domain.formats import FormatId
from .base import Codec
from .bytewise import BASE64, BINARY, HEX
from .html_entities import HTML_ENTITIES
from .numeric import ASCII_DECIMAL, UNICODE_ESCAPE
from .percent import URI_COMPONENT, URL
from .plain import PLAIN_TEXT


class FormatRegistry:
    """Read-only lookup table of codecs."""

    def __init__(self, codecs: Iterable[Codec]):
        table = {}
        for codec in codecs:
            if codec.format in table:
                raise ValueError(f"Duplicate codec for format: {codec.format.value}")
            table[codec.format] = codec
        self._codecs: Mapping[FormatId, Codec] = MappingProxyType(table)

    def get_codec(self, format_id: FormatId) -> Codec:
        """
        Get codec for a format.

        Raises:
            KeyError: if no codec is registered; callers only ever pass
                known identifiers, so this is a programming error.
        """
        try:
            return self._codecs[format_id]
        except KeyError:
            raise KeyError(f"No codec registered for format: {format_id!r}") from None

    def list_formats(self) -> List[FormatId]:
        """List registered formats in registration order."""
        return list(self._codecs.keys())

    def is_supported(self, format_id: FormatId) -> bool:
        return format_id in self._codecs


# Global registry instance
DEFAULT_REGISTRY = FormatRegistry(
    [
        PLAIN_TEXT,
        BASE64,
        HEX,
        BINARY,
        URI_COMPONENT,
        URL,
        ASCII_DECIMAL,
        UNICODE_ESCAPE,
        HTML_ENTITIES,
    ]
)


def get_codec(format_id: FormatId) -> Codec:
    """Get codec from the global registry."""
    return DEFAULT_REGISTRY.get_codec(format_id)


def list_formats() -> List[FormatId]:
    """List formats available in the global registry."""
    return DEFAULT_REGISTRY.list_formats()
