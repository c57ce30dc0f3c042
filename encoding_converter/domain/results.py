"""Request and result value objects for a single conversion."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .formats import FormatId


class Stage(Enum):
    """Conversion stage that produced a failure."""

    DECODE = "decode"
    ENCODE = "encode"


@dataclass(frozen=True)
class ConversionRequest:
    """Request to convert ``input`` from one format into another."""

    input: str
    source_format: FormatId
    target_format: FormatId

    def reversed(self, text: str) -> "ConversionRequest":
        """Request converting ``text`` back in the opposite direction."""
        return ConversionRequest(
            input=text,
            source_format=self.target_format,
            target_format=self.source_format,
        )


@dataclass(frozen=True)
class Success:
    output: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    stage: Stage
    format: FormatId
    message: str

    @property
    def ok(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{self.format.label} {self.stage.value} failed: {self.message}"


ConversionResult = Union[Success, Failure]
