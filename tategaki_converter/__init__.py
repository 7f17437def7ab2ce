"""Tategaki Converter — horizontal sentences to vertical Japanese text.

WHY: Traditional Japanese is typeset in columns read top to bottom and
right to left. Turning a horizontal sentence into that layout means
deciding where each column starts and then transposing the characters.

HOW: Two stages: segment (split at full-width spaces, or after each
particle found by a morphological analyzer), then transpose (read down
every line one character at a time, padding short columns). Results go
through pluggable formatters (plain text, JSON).

RULES:
- to_vertical_writing() is the one-call public API
- All layout settings travel in an immutable VerticalOptions per call
- The tokenizer is pluggable; SudachiPy is the default
"""

from tategaki_converter.core.converter import VerticalWriter, to_vertical_writing
from tategaki_converter.core.errors import (
    CollaboratorError,
    ConfigurationError,
    EmptyInputError,
    TategakiError,
)
from tategaki_converter.core.ir import (
    Direction,
    SegmentationStrategy,
    Token,
    VerticalOptions,
    VerticalText,
)
from tategaki_converter.core.segmenter import Segmenter, segment, select_strategy
from tategaki_converter.core.transposer import transpose

__version__ = "0.1.0"

__all__ = [
    "CollaboratorError",
    "ConfigurationError",
    "Direction",
    "EmptyInputError",
    "SegmentationStrategy",
    "Segmenter",
    "TategakiError",
    "Token",
    "VerticalOptions",
    "VerticalText",
    "VerticalWriter",
    "segment",
    "select_strategy",
    "to_vertical_writing",
    "transpose",
]
