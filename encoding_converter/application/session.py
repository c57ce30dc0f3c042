"""Caller-side converter state: the text boxes, format pickers and buttons.

The session re-runs the conversion whenever the input or a format changes,
the same way an interactive form would on every edit.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from ..domain.formats import FormatId
from ..domain.results import ConversionRequest, ConversionResult, Failure, Success
from .engine import TranscodeEngine
from .export import DEFAULT_EXPORT_NAME, render_export, write_export

logger = logging.getLogger(__name__)


class ConverterSession:
    """Holds one input/output pair and the selected formats."""

    def __init__(
        self,
        source_format: FormatId = FormatId.TEXT,
        target_format: FormatId = FormatId.BASE64,
        engine: Optional[TranscodeEngine] = None,
    ):
        self.engine = engine or TranscodeEngine()
        self.input = ""
        self.output = ""
        self.source_format = source_format
        self.target_format = target_format
        self.last_result: Optional[ConversionResult] = None

    def set_input(self, text: str) -> str:
        self.input = text
        return self.refresh()

    def set_source_format(self, format_id: FormatId) -> str:
        self.source_format = format_id
        return self.refresh()

    def set_target_format(self, format_id: FormatId) -> str:
        self.target_format = format_id
        return self.refresh()

    def refresh(self) -> str:
        """
        Convert the current input with the current formats.

        Empty input is not converted and leaves the output empty. A failure
        shows its message in the output; ``last_result`` keeps the structured
        result so callers can tell the two apart.

        Returns:
            The new output text
        """
        if not self.input:
            self.output = ""
            self.last_result = None
            return self.output

        request = ConversionRequest(self.input, self.source_format, self.target_format)
        result = self.engine.transcode(request)
        self.last_result = result
        if isinstance(result, Success):
            self.output = result.output
        else:
            self.output = result.message
        return self.output

    @property
    def failed(self) -> bool:
        return isinstance(self.last_result, Failure)

    def swap(self) -> str:
        """Exchange input with output and source with target, then convert again."""
        self.input, self.output = self.output, self.input
        self.source_format, self.target_format = self.target_format, self.source_format
        logger.debug("swapped to %s -> %s", self.source_format.value, self.target_format.value)
        return self.refresh()

    def clear_input(self) -> None:
        self.input = ""

    def clear_output(self) -> None:
        self.output = ""

    def export_text(self) -> str:
        return render_export(self.input, self.source_format, self.output, self.target_format)

    def export(self, path: Union[str, Path, None] = None, encoding: str = "utf-8") -> Path:
        """Write the export layout to ``path`` (default ``encoding-conversion.txt``)."""
        return write_export(self.export_text(), path or DEFAULT_EXPORT_NAME, encoding)
