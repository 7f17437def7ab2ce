"""Abstract base tokenizer.

WHY: Phrase segmentation needs a morphological analyzer, but the
segmentation algorithm must not care which one. Tests use an in-memory
fake, production uses SudachiPy, and another grammar could be plugged in
without touching the core.

HOW: BaseTokenizer is an ABC with two requirements: a ``name`` property
and a ``tokenize()`` method returning Token objects.

RULES:
- Subclasses MUST implement ``name`` and ``tokenize()``
- Token surfaces must concatenate to the input sentence exactly, in order
  (the segmenter checks this and raises CollaboratorError otherwise)
- Analyzer failures are raised as CollaboratorError, chained to the cause

To add a new tokenizer:
1. Create a new file in tokenizers/
2. Subclass BaseTokenizer
3. Implement tokenize() and name
4. Register in TOKENIZERS dict in tokenizers/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from tategaki_converter.core.ir import Token


class BaseTokenizer(ABC):
    """Abstract base for morphological analyzers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable analyzer name, e.g. 'SudachiPy'."""

    @abstractmethod
    def tokenize(self, sentence: str) -> list[Token]:
        """Split a sentence into tokens with part-of-speech tags.

        Args:
            sentence: The text to analyze.

        Returns:
            Tokens in reading order, covering the sentence with no gaps or
            overlaps.

        Raises:
            CollaboratorError: If the analyzer cannot process the text.
        """
