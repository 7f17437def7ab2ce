"""JSON formatter — structured conversion results.

WHY: Callers that post-process the layout (HTML tables, typesetting
scripts) want the lines, column order, and rows separately rather than
re-parsing the rendered block.

HOW: Maps every VerticalText into a VerticalResult pydantic model,
wraps them in a VerticalDocument, and serializes with model_dump_json().

RULES:
- Output validates against VerticalDocument.model_json_schema()
- Non-ASCII text is written as-is (UTF-8), not \\u-escaped
- Output suffix: "-vertical.json"; media type: "application/json"
"""

from __future__ import annotations

from tategaki_converter.core.ir import VerticalText
from tategaki_converter.formatters.base import BaseFormatter, FormatterOutput
from tategaki_converter.formatters.models import VerticalDocument, VerticalResult


class JSONFormatter(BaseFormatter):
    """Formatter that writes a VerticalDocument as JSON."""

    @property
    def name(self) -> str:
        return "JSON"

    def format(self, results: list[VerticalText]) -> list[FormatterOutput]:
        document = VerticalDocument(
            results=[VerticalResult.from_vertical_text(result) for result in results],
        )
        return [
            FormatterOutput(
                suffix="-vertical.json",
                content=document.model_dump_json(indent=2) + "\n",
                media_type="application/json",
            )
        ]
