"""Tokenizer registry — pluggable morphological analyzers.

WHY: The converter, the CLI, and the configuration layer need a single
lookup to find an analyzer by name. A central dict makes it trivial to
add another grammar: create the tokenizer class, import it here, add one
line.

HOW: TOKENIZERS maps string keys to tokenizer *classes* (not instances).
get_tokenizer() instantiates one and reports unknown keys clearly.

RULES:
- Keys are snake_case identifiers (used in CLI flags and TATEGAKI_TOKENIZER)
- Values are BaseTokenizer subclasses (not instances)
- Every tokenizer listed here must be importable without its backing
  library installed (import lazily inside the class)
"""

from __future__ import annotations

from typing import Any

from tategaki_converter import config
from tategaki_converter.core.errors import ConfigurationError
from tategaki_converter.tokenizers.base import BaseTokenizer
from tategaki_converter.tokenizers.sudachi import SudachiTokenizer

TOKENIZERS: dict[str, type[BaseTokenizer]] = {
    "sudachi": SudachiTokenizer,
}


def get_tokenizer(key: str, **kwargs: Any) -> BaseTokenizer:
    """Instantiate the tokenizer registered under ``key``.

    Raises:
        ConfigurationError: If no tokenizer is registered under ``key``.
    """
    if key not in TOKENIZERS:
        raise ConfigurationError(
            "Unknown tokenizer '{}'. Available: {}".format(
                key, ", ".join(sorted(TOKENIZERS))
            )
        )
    return TOKENIZERS[key](**kwargs)


def default_tokenizer() -> BaseTokenizer:
    """Build the tokenizer selected by the environment configuration.

    Reads TATEGAKI_TOKENIZER, and for SudachiPy also
    TATEGAKI_SUDACHI_SPLIT_MODE and TATEGAKI_SUDACHI_DICT.
    """
    key = config.load_tokenizer_name()
    if key == "sudachi":
        return get_tokenizer(
            key,
            split_mode=config.load_split_mode(),
            dict_name=config.load_sudachi_dict(),
        )
    return get_tokenizer(key)


__all__ = ["BaseTokenizer", "SudachiTokenizer", "TOKENIZERS", "default_tokenizer", "get_tokenizer"]
