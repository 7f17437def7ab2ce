"""Pydantic models for the JSON output format.

WHY: Tools consuming the JSON output (typesetting scripts, web front
ends) need a stable, documented schema. Pydantic models give typed
serialization and a JSON Schema from the same definition.

HOW: VerticalResult mirrors one VerticalText; VerticalDocument wraps the
list of results with a format version. from_vertical_text() maps the IR
dataclass into the model.

RULES:
- All fields use Field(description=...) so the JSON Schema is documented
- Enum values match the IR enums exactly ("rtl"/"ltr", "delimiter"/"particle")
- Bump DOCUMENT_VERSION on any incompatible schema change
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from tategaki_converter.core.ir import Direction, SegmentationStrategy, VerticalText

DOCUMENT_VERSION = "1.0"


class VerticalResult(BaseModel):
    """One converted sentence."""

    sentence: str = Field(description="The horizontally written input sentence.")
    strategy: SegmentationStrategy = Field(
        description="How the sentence was split: 'delimiter' or 'particle'.",
    )
    direction: Direction = Field(description="Column order: 'rtl' or 'ltr'.")
    column_separator: str = Field(description="String appended after each character slot.")
    char_separator: str = Field(description="String emitted after each row terminator.")
    row_terminator: str = Field(description="String ending each output row.")
    lines: list[str] = Field(description="Segmented lines in natural reading order.")
    columns: list[str] = Field(description="Lines in output column order.")
    rows: list[str] = Field(
        description="Output rows, one character per column, padding included.",
    )
    width: int = Field(ge=0, description="Number of output rows (longest line length).")
    text: str = Field(description="The rendered vertical block.")

    @classmethod
    def from_vertical_text(cls, result: VerticalText) -> "VerticalResult":
        options = result.options
        return cls(
            sentence=result.sentence,
            strategy=result.strategy,
            direction=options.direction,
            column_separator=options.column_separator,
            char_separator=options.char_separator,
            row_terminator=options.row_terminator,
            lines=list(result.lines),
            columns=list(result.columns),
            rows=list(result.rows),
            width=result.width,
            text=result.text,
        )


class VerticalDocument(BaseModel):
    """Top-level JSON document produced by the JSON formatter."""

    version: str = Field(default=DOCUMENT_VERSION, description="Document format version.")
    results: list[VerticalResult] = Field(
        default_factory=list,
        description="One entry per input sentence, in input order.",
    )
