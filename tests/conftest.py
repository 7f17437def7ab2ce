"""Shared test fixtures for the tategaki_converter test suite.

WHY: Particle segmentation depends on a morphological analyzer. Running
the real SudachiPy dictionary in every unit test would make the suite
slow and tie expected output to a dictionary release. Tests instead use
a fake tokenizer driven by a table of verified token sequences.

HOW: FakeTokenizer looks sentences up in VERIFIED_TOKENS and falls back
to one noun per character for anything else. It counts its calls so
tests can assert when the analyzer is (not) consulted. An autouse fixture
clears TATEGAKI_* environment variables so a developer's .env file never
changes test results.

RULES:
- Token tags follow the Sudachi/UniDic vocabulary (名詞, 助詞, 助動詞, ...)
- Every table entry's surfaces concatenate to its sentence exactly
"""

from __future__ import annotations

import pytest

from tategaki_converter.core.converter import VerticalWriter
from tategaki_converter.core.ir import Token
from tategaki_converter.core.segmenter import Segmenter
from tategaki_converter.tokenizers.base import BaseTokenizer


# ---------------------------------------------------------------------------
# Verified token sequences
# ---------------------------------------------------------------------------

VERIFIED_TOKENS: dict[str, list[Token]] = {
    "今日は晴れだ": [
        Token("今日", "名詞"),
        Token("は", "助詞"),
        Token("晴れ", "名詞"),
        Token("だ", "助動詞"),
    ],
    "古池や蛙飛び込む水の音": [
        Token("古池", "名詞,普通名詞,一般,*,*,*"),
        Token("や", "助詞,副助詞,*,*,*,*"),
        Token("蛙", "名詞,普通名詞,一般,*,*,*"),
        Token("飛び込む", "動詞,一般,*,*,五段-マ行,終止形-一般"),
        Token("水", "名詞,普通名詞,一般,*,*,*"),
        Token("の", "助詞,格助詞,*,*,*,*"),
        Token("音", "名詞,普通名詞,一般,*,*,*"),
    ],
    "吾輩は猫である": [
        Token("吾輩", "代名詞,*,*,*,*,*"),
        Token("は", "助詞,係助詞,*,*,*,*"),
        Token("猫", "名詞,普通名詞,一般,*,*,*"),
        Token("で", "助動詞,*,*,*,助動詞-ダ,連用形-一般"),
        Token("ある", "動詞,非自立可能,*,*,五段-ラ行,終止形-一般"),
    ],
    "東京タワー": [
        Token("東京", "名詞,固有名詞,地名,一般,*,*"),
        Token("タワー", "名詞,普通名詞,一般,*,*,*"),
    ],
}


class FakeTokenizer(BaseTokenizer):
    """In-memory tokenizer backed by VERIFIED_TOKENS."""

    def __init__(self, table: dict[str, list[Token]] | None = None) -> None:
        self.table = VERIFIED_TOKENS if table is None else table
        self.calls: list[str] = []

    @property
    def name(self) -> str:
        return "Fake"

    def tokenize(self, sentence: str) -> list[Token]:
        self.calls.append(sentence)
        if sentence in self.table:
            return list(self.table[sentence])
        return [Token(char, "名詞") for char in sentence]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    """Remove TATEGAKI_* variables so defaults are deterministic."""
    for name in (
        "TATEGAKI_DIRECTION",
        "TATEGAKI_COLUMN_SEPARATOR",
        "TATEGAKI_CHAR_SEPARATOR",
        "TATEGAKI_ROW_TERMINATOR",
        "TATEGAKI_TOKENIZER",
        "TATEGAKI_SUDACHI_SPLIT_MODE",
        "TATEGAKI_SUDACHI_DICT",
        "TATEGAKI_BOUNDARY_POS",
        "TATEGAKI_BOUNDARY_MATCH",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_tokenizer():
    """A fresh FakeTokenizer with an empty call log."""
    return FakeTokenizer()


@pytest.fixture
def segmenter(fake_tokenizer):
    """Segmenter wired to the fake tokenizer."""
    return Segmenter(tokenizer=fake_tokenizer)


@pytest.fixture
def writer(segmenter):
    """VerticalWriter with default options and the fake tokenizer."""
    return VerticalWriter(segmenter=segmenter)
