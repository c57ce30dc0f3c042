"""Export layout for a finished conversion."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from ..domain.formats import FormatId

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_NAME = "encoding-conversion.txt"


def render_export(
    input_text: str,
    source_format: FormatId,
    output_text: str,
    target_format: FormatId,
) -> str:
    """Render the two-section export text. No trailing newline."""
    return (
        f"Input ({source_format.value}):\n{input_text}"
        f"\n\nOutput ({target_format.value}):\n{output_text}"
    )


def write_export(content: str, path: Union[str, Path], encoding: str = "utf-8") -> Path:
    """Write rendered export text exactly as given and return its path."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps "\n" as-is on every platform
    with output_path.open("w", encoding=encoding, newline="") as f:
        f.write(content)
    logger.info("export written to %s (%d chars)", output_path, len(content))
    return output_path
