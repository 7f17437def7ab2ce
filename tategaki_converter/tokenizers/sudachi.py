"""SudachiPy-backed tokenizer.

WHY: Particle segmentation needs Japanese morphemes tagged with their
part of speech. SudachiPy ships a complete analyzer and dictionary as
ordinary Python packages, so no system library is required.

HOW: The sudachipy import and the dictionary load happen on the first
call to tokenize(), so importing this module (and running the delimiter
strategy) works without SudachiPy installed. Each morpheme becomes a
Token whose part_of_speech is Sudachi's six-field tag joined with ",".

RULES:
- split_mode is "A" (short units), "B" (middle) or "C" (named entities,
  default)
- dict_name selects an installed dictionary ("core", "small", "full");
  None means the SudachiPy default
- Missing packages and analyzer exceptions raise CollaboratorError
"""

from __future__ import annotations

import logging
from typing import Any

from tategaki_converter.config import DEFAULT_SPLIT_MODE
from tategaki_converter.core.errors import CollaboratorError, ConfigurationError
from tategaki_converter.core.ir import Token
from tategaki_converter.tokenizers.base import BaseTokenizer

logger = logging.getLogger(__name__)

SPLIT_MODES = ("A", "B", "C")


class SudachiTokenizer(BaseTokenizer):
    """Tokenizer using the SudachiPy morphological analyzer."""

    def __init__(
        self,
        split_mode: str = DEFAULT_SPLIT_MODE,
        dict_name: str | None = None,
        config_path: str | None = None,
    ) -> None:
        mode = (split_mode or "").strip().upper()
        if mode not in SPLIT_MODES:
            raise ConfigurationError(
                "Sudachi split mode must be one of {}, got {!r}".format(
                    ", ".join(SPLIT_MODES), split_mode
                )
            )
        self.split_mode = mode
        self.dict_name = dict_name
        self.config_path = config_path
        self._tokenizer: Any = None
        self._mode: Any = None

    @property
    def name(self) -> str:
        return "SudachiPy"

    def _ensure_loaded(self) -> None:
        """Import SudachiPy and build the analyzer on first use."""
        if self._tokenizer is not None:
            return

        try:
            from sudachipy import dictionary, tokenizer
        except ImportError as exc:
            raise CollaboratorError(
                "SudachiPy is not installed. Install it with "
                "'pip install sudachipy sudachidict_core'."
            ) from exc

        dict_args = {}
        if self.config_path:
            dict_args["config_path"] = self.config_path
        if self.dict_name:
            dict_args["dict"] = self.dict_name

        try:
            sudachi_dict = dictionary.Dictionary(**dict_args)
            # tokenizer() replaces the deprecated create() in newer SudachiPy
            factory = getattr(sudachi_dict, "tokenizer", None) or sudachi_dict.create
            self._tokenizer = factory()
        except Exception as exc:
            raise CollaboratorError(
                "Could not load the Sudachi dictionary: {}".format(exc)
            ) from exc
        self._mode = getattr(tokenizer.Tokenizer.SplitMode, self.split_mode)
        logger.debug(
            "Loaded Sudachi dictionary %s (split mode %s)",
            self.dict_name or "default", self.split_mode,
        )

    def tokenize(self, sentence: str) -> list[Token]:
        """Analyze ``sentence`` with SudachiPy.

        Raises:
            CollaboratorError: If SudachiPy is missing or fails on the input.
        """
        self._ensure_loaded()
        try:
            morphemes = self._tokenizer.tokenize(sentence, self._mode)
        except Exception as exc:
            raise CollaboratorError(
                "Sudachi failed to analyze {!r}: {}".format(sentence, exc)
            ) from exc

        tokens = [
            Token(
                surface=morpheme.surface(),
                part_of_speech=",".join(morpheme.part_of_speech()),
            )
            for morpheme in morphemes
        ]
        logger.debug("Sudachi produced %d tokens for %r", len(tokens), sentence)
        return tokens
