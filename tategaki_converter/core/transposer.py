"""Transposition of segmented lines into a vertical text block.

WHY: Vertical Japanese is read top to bottom, with columns running right
to left. Each segmented line becomes one column, so the block is built by
reading down every line one character at a time and emitting across.

HOW: Three steps, each a separate function so they can be tested alone:
  1. order_columns() — reverse the lines for right-to-left output
  2. transpose_grid() — build the character grid, padding short lines
  3. transpose() — render the grid with the configured separators

RULES:
- Work is character-indexed (code points), never byte-indexed
- Short lines are padded with a full-width space, never truncated
- Each character slot is followed by column_separator
- Each row ends with row_terminator followed by char_separator
- An empty line list raises EmptyInputError
- The caller's list is never mutated
"""

from __future__ import annotations

import logging
from typing import Sequence

from tategaki_converter.core.errors import EmptyInputError
from tategaki_converter.core.ir import FULL_WIDTH_SPACE, Direction, VerticalOptions

logger = logging.getLogger(__name__)

PADDING = FULL_WIDTH_SPACE


def order_columns(lines: Sequence[str], direction: Direction) -> list[str]:
    """Return the lines in column order for ``direction``.

    The first line of a right-to-left block is its rightmost column, so
    RIGHT_TO_LEFT returns a reversed copy. LEFT_TO_RIGHT returns a plain
    copy.
    """
    if Direction.parse(direction) == Direction.RIGHT_TO_LEFT:
        return list(reversed(lines))
    return list(lines)


def column_width(lines: Sequence[str]) -> int:
    """Return the length of the longest line.

    Raises:
        EmptyInputError: If ``lines`` is empty.
    """
    if not lines:
        raise EmptyInputError("Cannot transpose an empty list of lines")
    return max(len(line) for line in lines)


def transpose_grid(columns: Sequence[str]) -> list[list[str]]:
    """Build the character grid for already-ordered columns.

    Row ``i`` holds character ``i`` of every column, or PADDING where a
    column is shorter than ``i + 1``. The grid has column_width() rows.

    Raises:
        EmptyInputError: If ``columns`` is empty.
    """
    width = column_width(columns)
    grid: list[list[str]] = []
    for i in range(width):
        row = []
        for column in columns:
            row.append(column[i] if i < len(column) else PADDING)
        grid.append(row)
    return grid


def render_grid(grid: Sequence[Sequence[str]], options: VerticalOptions) -> str:
    """Render a character grid with the separators in ``options``."""
    parts: list[str] = []
    for row in grid:
        for char in row:
            parts.append(char)
            parts.append(options.column_separator)
        parts.append(options.row_terminator)
        parts.append(options.char_separator)
    return "".join(parts)


def transpose(lines: Sequence[str], options: VerticalOptions | None = None) -> str:
    """Convert ordered lines into a vertical text block.

    WHY: This is the transposition half of the converter. It is public so
    callers that segment text themselves (or bypass segmentation with
    hand-written columns) get the same layout.

    HOW: Orders the columns for the configured direction, builds the grid,
    and renders it.

    RULES:
    - Lines are given in natural reading order
    - Output has exactly column_width(lines) rows; [""] gives ""
    - Default options: right-to-left, U+3000 column separator, no char
      separator, "\\n" row terminator

    Example:
        >>> transpose(["ab", "c"], VerticalOptions(Direction.LEFT_TO_RIGHT, "-"))
        'a-c-\\nb-　-\\n'

    Args:
        lines: Lines in reading order, one per output column.
        options: Layout options. Defaults to VerticalOptions().

    Returns:
        The rendered vertical block.

    Raises:
        EmptyInputError: If ``lines`` is empty.
    """
    if options is None:
        options = VerticalOptions()
    if not lines:
        raise EmptyInputError("Cannot transpose an empty list of lines")

    columns = order_columns(lines, options.direction)
    grid = transpose_grid(columns)
    logger.debug(
        "Transposed %d columns into %d rows (%s)",
        len(columns), len(grid), options.direction.value,
    )
    return render_grid(grid, options)
