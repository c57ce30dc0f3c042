"""Encoding Converter.

Converts text between nine textual encodings (plain text, Base64, hex,
binary, URI component, URL, ASCII decimal codes, Unicode escapes and HTML
entities) by decoding into UTF-16 code units and re-encoding.
"""
from __future__ import annotations

__version__ = "0.1.0"

from encoding_converter.domain.errors import CodecError, DecodeError, EncodeError
from encoding_converter.domain.formats import CanonicalText, FormatId
from encoding_converter.domain.results import (
    ConversionRequest,
    ConversionResult,
    Failure,
    Stage,
    Success,
)
from encoding_converter.application.engine import TranscodeEngine, convert, transcode
from encoding_converter.application.session import ConverterSession

__all__ = [
    "CanonicalText",
    "CodecError",
    "ConversionRequest",
    "ConversionResult",
    "ConverterSession",
    "DecodeError",
    "EncodeError",
    "Failure",
    "FormatId",
    "Stage",
    "Success",
    "TranscodeEngine",
    "convert",
    "transcode",
]
