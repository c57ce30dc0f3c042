"""Transcode engine: decode the source, re-encode into the target."""
from __future__ import annotations

import logging
from typing import Optional

from ..domain.errors import DecodeError, EncodeError
from ..domain.formats import FormatId
from ..domain.results import ConversionRequest, ConversionResult, Failure, Stage, Success
from .codecs.registry import DEFAULT_REGISTRY, FormatRegistry

logger = logging.getLogger(__name__)


class TranscodeEngine:
    """Engine for converting text between the registered formats.

    Both stages always run, even when source and target are the same format,
    so a same-format conversion validates the input. Codec errors come back as
    Failure values; nothing is raised for bad input.
    """

    def __init__(self, registry: Optional[FormatRegistry] = None):
        self._registry = registry or DEFAULT_REGISTRY

    def transcode(self, request: ConversionRequest) -> ConversionResult:
        source = self._registry.get_codec(request.source_format)
        target = self._registry.get_codec(request.target_format)
        logger.debug(
            "transcode %s -> %s (%d chars)",
            request.source_format.value,
            request.target_format.value,
            len(request.input),
        )

        try:
            canonical = source.decode(request.input)
        except DecodeError as exc:
            logger.info("decode failed for %s: %s", exc.format.value, exc.reason)
            return Failure(Stage.DECODE, request.source_format, exc.reason)

        try:
            output = target.encode(canonical)
        except EncodeError as exc:
            logger.info("encode failed for %s: %s", exc.format.value, exc.reason)
            return Failure(Stage.ENCODE, request.target_format, exc.reason)

        return Success(output)

    def convert(self, text: str, source: FormatId, target: FormatId) -> ConversionResult:
        """Shortcut for ``transcode`` without building the request by hand."""
        return self.transcode(ConversionRequest(text, source, target))


_default_engine = TranscodeEngine()


def transcode(request: ConversionRequest) -> ConversionResult:
    """Run ``request`` through the default engine."""
    return _default_engine.transcode(request)


def convert(text: str, source: FormatId, target: FormatId) -> ConversionResult:
    """Convert ``text`` from ``source`` to ``target`` with the default engine."""
    return _default_engine.convert(text, source, target)
