"""Sentence-to-vertical-text conversion pipeline.

WHY: Segmentation and transposition are useful on their own, but most
callers just want "give me this sentence written vertically". This module
runs both stages and packages the result for the formatters.

HOW: VerticalWriter holds a Segmenter and default VerticalOptions.
convert() segments the sentence, orders the columns for the direction,
builds the transposer grid once, and returns a VerticalText carrying the
lines, columns, rows, and rendered text. to_vertical_writing() is the
one-call shortcut returning only the text.

RULES:
- Options passed to a call override the writer's defaults for that call
  only; nothing on the writer is mutated
- The segmenter's line list is never reordered in place
- Errors from either stage propagate unchanged
"""

from __future__ import annotations

import logging
from typing import Iterable

from tategaki_converter.core.ir import VerticalOptions, VerticalText
from tategaki_converter.core.segmenter import Segmenter
from tategaki_converter.core.transposer import order_columns, render_grid, transpose_grid
from tategaki_converter.tokenizers import BaseTokenizer

logger = logging.getLogger(__name__)


class VerticalWriter:
    """Converts horizontally written sentences into vertical text blocks.

    Example:
        >>> writer = VerticalWriter()
        >>> writer.to_vertical_writing("あ　い　う")
        'う　い　あ　\\n'
    """

    def __init__(
        self,
        segmenter: Segmenter | None = None,
        options: VerticalOptions | None = None,
    ) -> None:
        self.segmenter = segmenter or Segmenter()
        self.options = options or VerticalOptions()

    def convert(
        self,
        sentence: str,
        options: VerticalOptions | None = None,
    ) -> VerticalText:
        """Segment and transpose one sentence.

        Args:
            sentence: The horizontally written input.
            options: Layout options for this call; defaults to the
                     writer's options.

        Returns:
            VerticalText with lines, columns, rows, and rendered text.

        Raises:
            CollaboratorError: If the tokenizer fails.
        """
        opts = options or self.options
        strategy, lines = self.segmenter.segment_with_strategy(sentence)
        columns = order_columns(lines, opts.direction)
        grid = transpose_grid(columns)

        result = VerticalText(
            sentence=sentence,
            strategy=strategy,
            lines=list(lines),
            columns=columns,
            options=opts,
            rows=["".join(row) for row in grid],
            text=render_grid(grid, opts),
        )
        logger.debug(
            "Converted %r: %d columns x %d rows", sentence, len(columns), result.width
        )
        return result

    def convert_many(
        self,
        sentences: Iterable[str],
        options: VerticalOptions | None = None,
    ) -> list[VerticalText]:
        """Convert several sentences with the same options."""
        return [self.convert(sentence, options) for sentence in sentences]

    def to_vertical_writing(
        self,
        sentence: str,
        options: VerticalOptions | None = None,
    ) -> str:
        """Return only the rendered vertical block for ``sentence``."""
        return self.convert(sentence, options).text


def to_vertical_writing(
    sentence: str,
    options: VerticalOptions | None = None,
    tokenizer: BaseTokenizer | None = None,
) -> str:
    """Write ``sentence`` vertically in one call.

    WHY: The simplest public entry point, with no writer object to manage.

    HOW: Builds a throwaway VerticalWriter around ``tokenizer`` (or the
    configured default) and converts the sentence.

    Args:
        sentence: The horizontally written input.
        options: Layout options. Defaults to VerticalOptions().
        tokenizer: Analyzer for particle segmentation. Defaults to the
                   tokenizer selected by configuration, loaded only if
                   the sentence needs it.

    Returns:
        The vertical text block.
    """
    writer = VerticalWriter(segmenter=Segmenter(tokenizer=tokenizer), options=options)
    return writer.to_vertical_writing(sentence)
