"""Intermediate representation dataclasses for vertical writing.

WHY: The segmenter, the transposer, and the output formatters each need
the same handful of shapes: tokens from the analyzer, the writing
direction, the per-call layout options, and the finished conversion.
Defining them once decouples the algorithm from the formatters.

HOW: Five types:
  Token                — one morpheme (surface text + part-of-speech tag)
  Direction            — column order of the finished block
  SegmentationStrategy — which splitter produced the lines
  VerticalOptions      — immutable layout settings for one call
  VerticalText         — the complete result of converting one sentence

RULES:
- Token and VerticalOptions are frozen; derive variants with replace()
- Token.part_of_speech is a single string; multi-field tags are joined
  with "," ("助詞,係助詞,*,*,*,*")
- VerticalText.lines is always in natural reading order; columns holds
  the order after direction handling
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum

from tategaki_converter.core.errors import ConfigurationError

FULL_WIDTH_SPACE = "　"
"""Ideographic space: field delimiter in input, padding in output."""

DEFAULT_ROW_TERMINATOR = "\n"


@dataclass(frozen=True)
class Token:
    """One morpheme produced by a tokenizer.

    Attributes:
        surface: The text exactly as it appears in the sentence.
        part_of_speech: Grammatical category, e.g. "助詞" or
                        "名詞,普通名詞,一般,*,*,*".
    """

    surface: str
    part_of_speech: str


class Direction(str, Enum):
    """Column order of the vertical block.

    RULES:
    - RIGHT_TO_LEFT (default) puts the first line in the rightmost column,
      the way vertical Japanese is read
    - LEFT_TO_RIGHT keeps reading order from left to right
    """

    LEFT_TO_RIGHT = "ltr"
    RIGHT_TO_LEFT = "rtl"

    @classmethod
    def parse(cls, value: str | Direction) -> "Direction":
        """Coerce a string such as "rtl" or "left-to-right" to a Direction.

        Raises:
            ConfigurationError: If the value names no known direction.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
            synonyms = {
                "ltr": cls.LEFT_TO_RIGHT,
                "left_to_right": cls.LEFT_TO_RIGHT,
                "rtl": cls.RIGHT_TO_LEFT,
                "right_to_left": cls.RIGHT_TO_LEFT,
            }
            if normalized in synonyms:
                return synonyms[normalized]
        raise ConfigurationError(
            "Unknown direction {!r}. Use 'rtl' or 'ltr'.".format(value)
        )


class SegmentationStrategy(str, Enum):
    """How a sentence was split into lines."""

    DELIMITER = "delimiter"
    PARTICLE = "particle"


@dataclass(frozen=True)
class VerticalOptions:
    """Layout settings for one conversion.

    WHY: Separators and direction used to live as mutable fields on a
    long-lived converter object. A frozen value passed per call means a
    conversion can never observe settings changing underneath it.

    HOW: Plain frozen dataclass. __post_init__ coerces ``direction`` from
    a string and checks that every separator is a string. replace()
    returns a new snapshot with some fields changed.

    RULES:
    - column_separator is appended after every character slot
    - row_terminator ends every row; char_separator follows it
    - Defaults: RIGHT_TO_LEFT, U+3000, "", "\\n"
    """

    direction: Direction = Direction.RIGHT_TO_LEFT
    column_separator: str = FULL_WIDTH_SPACE
    char_separator: str = ""
    row_terminator: str = DEFAULT_ROW_TERMINATOR

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", Direction.parse(self.direction))
        for name in ("column_separator", "char_separator", "row_terminator"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigurationError(
                    "{} must be a string, got {}".format(name, type(value).__name__)
                )

    def replace(self, **changes) -> "VerticalOptions":
        """Return a copy of these options with ``changes`` applied."""
        return dataclasses.replace(self, **changes)


@dataclass
class VerticalText:
    """The complete result of converting one sentence.

    WHY: Formatters need more than the rendered block. The JSON output
    reports the lines, the column order, and the strategy used, so the
    converter hands them this container instead of a bare string.

    HOW: Built by VerticalWriter.convert() from the segmenter output and
    the transposer grid.

    RULES:
    - lines: natural reading order, exactly as segmented
    - columns: lines after direction handling (reversed for RTL)
    - rows: one string per output row, one character per column, padding
      included, separators excluded
    - text: the rendered block with separators and row terminators
    """

    sentence: str
    strategy: SegmentationStrategy
    lines: list[str]
    columns: list[str]
    options: VerticalOptions
    rows: list[str] = field(default_factory=list)
    text: str = ""

    @property
    def width(self) -> int:
        """Number of output rows (length of the longest line)."""
        return len(self.rows)

    @property
    def direction(self) -> Direction:
        return self.options.direction
