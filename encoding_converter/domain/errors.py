"""Codec error taxonomy.

Codecs raise DecodeError or EncodeError with a human readable reason. The
transcode engine is the only place that catches them and turns them into
Failure results.
"""
from __future__ import annotations

from dataclasses import dataclass

from .formats import FormatId


@dataclass
class CodecError(Exception):
    format: FormatId
    reason: str

    def __str__(self) -> str:
        return f"{self.format.label}: {self.reason}"


class DecodeError(CodecError):
    """Input is not a valid representation in the source format."""


class EncodeError(CodecError):
    """Canonical text cannot be represented in the target format."""


__all__ = [
    "CodecError",
    "DecodeError",
    "EncodeError",
]
