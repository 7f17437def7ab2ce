"""Sentence segmentation into pre-rotation lines.

WHY: Each line of the segmenter output becomes one column of vertical
text, so where a sentence is split decides how the block reads. Users
who pre-split a sentence with full-width spaces get exactly their fields;
everyone else gets natural phrase breaks right after each particle.

HOW: select_strategy() inspects the sentence and picks one of two
splitters:
  - split_by_delimiter(): str.split on U+3000
  - split_by_particle(): walk analyzer tokens and cut after every token
    the boundary predicate accepts
The Segmenter class ties the choice, the tokenizer, and the predicate
together behind one segment() call.

RULES:
- The empty sentence segments to [""] without calling the tokenizer
- Delimiter split keeps empty fields (leading, consecutive, trailing)
- Particle split emits the boundary token with the preceding tokens; a
  sentence without boundaries is one line
- Token surfaces must reproduce the sentence, else CollaboratorError
- Lines always concatenate (delimiter: joined with U+3000) to the input
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from tategaki_converter import config
from tategaki_converter.core.errors import CollaboratorError, ConfigurationError
from tategaki_converter.core.ir import FULL_WIDTH_SPACE, SegmentationStrategy, Token
from tategaki_converter.tokenizers import BaseTokenizer, default_tokenizer

logger = logging.getLogger(__name__)

DELIMITER = FULL_WIDTH_SPACE

BoundaryPredicate = Callable[[Token], bool]


def make_boundary_predicate(
    labels: Iterable[str] = config.DEFAULT_BOUNDARY_LABELS,
    match: str = "substring",
) -> BoundaryPredicate:
    """Build the "does this token end a phrase" test.

    WHY: Tag vocabularies differ between analyzers ("助詞" vs
    "助詞,格助詞,*,*" vs "ADP"), so the boundary test is a parameter
    rather than a hard-coded label.

    HOW: ``substring`` accepts a token whose part_of_speech contains any
    label anywhere. ``exact`` splits the tag on "," and accepts a token
    when any field equals a label.

    RULES:
    - Default: labels ("助詞",), substring match
    - "助動詞" (auxiliary verb) does not contain "助詞" and is no boundary
    - At least one label is required

    Raises:
        ConfigurationError: For an unknown match mode or no labels.
    """
    label_set = tuple(label for label in labels if label)
    if not label_set:
        raise ConfigurationError("At least one boundary label is required")

    if match == "substring":
        def is_boundary(token: Token) -> bool:
            return any(label in token.part_of_speech for label in label_set)
    elif match == "exact":
        exact = frozenset(label_set)

        def is_boundary(token: Token) -> bool:
            fields = (part.strip() for part in token.part_of_speech.split(","))
            return any(part in exact for part in fields)
    else:
        raise ConfigurationError(
            "Unknown boundary match mode {!r}. Use 'substring' or 'exact'.".format(match)
        )
    return is_boundary


is_particle = make_boundary_predicate()


def default_boundary_predicate() -> BoundaryPredicate:
    """Build the boundary test selected by the environment.

    Reads TATEGAKI_BOUNDARY_POS and TATEGAKI_BOUNDARY_MATCH; unset
    variables give the same test as ``is_particle``.
    """
    return make_boundary_predicate(
        config.load_boundary_labels(), config.load_boundary_match()
    )


def select_strategy(sentence: str) -> SegmentationStrategy:
    """Pick the splitter for ``sentence``.

    A sentence containing at least one full-width space is treated as
    pre-split fields; anything else is split at particles.
    """
    if DELIMITER in sentence:
        return SegmentationStrategy.DELIMITER
    return SegmentationStrategy.PARTICLE


def split_by_delimiter(sentence: str) -> list[str]:
    """Split on every full-width space, keeping empty fields.

    "あ　　い" gives ["あ", "", "い"]; the delimiters themselves are dropped.
    """
    return sentence.split(DELIMITER)


def index_of_boundary(
    tokens: Sequence[Token],
    is_boundary: BoundaryPredicate = is_particle,
    start: int = 0,
) -> int:
    """Return the index of the first boundary token at or after ``start``.

    Returns ``len(tokens)`` when no boundary remains.
    """
    for position in range(start, len(tokens)):
        if is_boundary(tokens[position]):
            return position
    return len(tokens)


def split_by_particle(
    tokens: Sequence[Token],
    is_boundary: BoundaryPredicate = is_particle,
) -> list[str]:
    """Group tokens into phrase lines ending at each boundary token.

    WHY: A Japanese phrase (bunsetsu) typically ends with a particle, so
    cutting right after each particle gives readable columns.

    HOW: From the current start, find the next boundary; emit the
    surfaces up to and including it as one line; continue after it. When
    no boundary remains, the rest of the tokens form the final line.

    Example:
        [今日/名詞, は/助詞, 晴れ/名詞, だ/助動詞] -> ["今日は", "晴れだ"]

    Returns:
        Lines in reading order. An empty token list gives [].
    """
    lines: list[str] = []
    start = 0
    while start < len(tokens):
        position = index_of_boundary(tokens, is_boundary, start)
        end = min(position + 1, len(tokens))
        lines.append("".join(token.surface for token in tokens[start:end]))
        start = end
    return lines


def _check_coverage(sentence: str, tokens: Sequence[Token]) -> None:
    joined = "".join(token.surface for token in tokens)
    if joined != sentence:
        raise CollaboratorError(
            "Tokenizer output does not reproduce the sentence: "
            "expected {!r}, got {!r}".format(sentence, joined)
        )


class Segmenter:
    """Splits sentences into lines, one per future column.

    WHY: Callers want one segment() call; which splitter runs is decided
    from the sentence itself.

    HOW: Holds an optional tokenizer and a boundary predicate. The
    tokenizer is built from configuration the first time a sentence
    actually needs particle segmentation, so delimiter-only use never
    loads an analyzer.

    RULES:
    - segment("") == [""]
    - The tokenizer is only consulted for the PARTICLE strategy
    - Tokenizer errors propagate as CollaboratorError, without retries
    - Without an explicit is_boundary, the boundary labels and match mode
      come from the environment, like the default tokenizer
    """

    def __init__(
        self,
        tokenizer: BaseTokenizer | None = None,
        is_boundary: BoundaryPredicate | None = None,
    ) -> None:
        self._tokenizer = tokenizer
        self.is_boundary = is_boundary or default_boundary_predicate()

    @property
    def tokenizer(self) -> BaseTokenizer:
        if self._tokenizer is None:
            self._tokenizer = default_tokenizer()
            logger.debug("Using %s tokenizer", self._tokenizer.name)
        return self._tokenizer

    def tokenize(self, sentence: str) -> list[Token]:
        """Tokenize ``sentence`` and verify the result covers it exactly."""
        tokens = list(self.tokenizer.tokenize(sentence))
        _check_coverage(sentence, tokens)
        return tokens

    def segment_with_strategy(
        self, sentence: str
    ) -> tuple[SegmentationStrategy, list[str]]:
        """Segment ``sentence`` and report which strategy was used.

        Returns:
            Tuple of (strategy, lines).
        """
        strategy = select_strategy(sentence)
        if not sentence:
            return strategy, [""]

        if strategy == SegmentationStrategy.DELIMITER:
            lines = split_by_delimiter(sentence)
        else:
            lines = split_by_particle(self.tokenize(sentence), self.is_boundary)

        logger.debug(
            "Segmented %r into %d lines (%s)", sentence, len(lines), strategy.value
        )
        return strategy, lines

    def segment(self, sentence: str) -> list[str]:
        """Split ``sentence`` into lines in reading order."""
        return self.segment_with_strategy(sentence)[1]


def segment(sentence: str, tokenizer: BaseTokenizer | None = None) -> list[str]:
    """Split ``sentence`` into lines using a one-off Segmenter."""
    return Segmenter(tokenizer=tokenizer).segment(sentence)
