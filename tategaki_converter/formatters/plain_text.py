"""Plain text formatter — the vertical blocks as they would be printed.

WHY: The main use of the converter is to paste vertical text somewhere.
This formatter is exactly the transposer output, nothing added.

HOW: Concatenates each result's rendered block. Consecutive blocks are
separated by one extra row terminator, which shows as a blank line.

RULES:
- A single result produces exactly its VerticalText.text
- Blocks are separated by the first result's row_terminator
- Output suffix: "-vertical.txt"; media type: "text/plain"
"""

from __future__ import annotations

from tategaki_converter.core.ir import VerticalText
from tategaki_converter.formatters.base import BaseFormatter, FormatterOutput


class PlainTextFormatter(BaseFormatter):
    """Formatter that writes the rendered vertical blocks."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def format(self, results: list[VerticalText]) -> list[FormatterOutput]:
        separator = results[0].options.row_terminator if results else ""
        content = separator.join(result.text for result in results)
        return [
            FormatterOutput(
                suffix="-vertical.txt",
                content=content,
                media_type="text/plain",
            )
        ]
