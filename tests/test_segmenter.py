"""Unit tests for the segmenter module.

WHY: Segmentation decides which characters share a column. A lost or
duplicated token, or a line break one token too early, changes the
vertical text the reader sees.

HOW: Tests cover each segmentation rule:
  - Strategy selection by full-width space
  - Delimiter split with empty fields kept
  - Particle split (boundary inclusive, remainder as final line)
  - Configurable boundary predicate (substring vs exact)
  - Empty sentence, lazy tokenizer use, round trip, collaborator errors

RULES:
- Particle tests use FakeTokenizer from conftest.py, never SudachiPy
"""

import pytest

from tategaki_converter.core import segmenter as segmenter_module
from tategaki_converter.core.errors import CollaboratorError, ConfigurationError
from tategaki_converter.core.ir import SegmentationStrategy, Token
from tategaki_converter.core.segmenter import (
    Segmenter,
    index_of_boundary,
    is_particle,
    make_boundary_predicate,
    segment,
    select_strategy,
    split_by_delimiter,
    split_by_particle,
)
from tategaki_converter.tokenizers.base import BaseTokenizer

from conftest import VERIFIED_TOKENS, FakeTokenizer


class TestSelectStrategy:
    """A full-width space anywhere selects delimiter segmentation."""

    def test_full_width_space_selects_delimiter(self):
        assert select_strategy("あ　い") == SegmentationStrategy.DELIMITER

    def test_leading_full_width_space_selects_delimiter(self):
        assert select_strategy("　あ") == SegmentationStrategy.DELIMITER

    def test_plain_sentence_selects_particle(self):
        assert select_strategy("今日は晴れだ") == SegmentationStrategy.PARTICLE

    def test_ascii_space_does_not_select_delimiter(self):
        assert select_strategy("今日は 晴れだ") == SegmentationStrategy.PARTICLE

    def test_empty_sentence_selects_particle(self):
        assert select_strategy("") == SegmentationStrategy.PARTICLE


class TestSplitByDelimiter:
    """str.split semantics on U+3000; delimiters dropped, empties kept."""

    def test_three_fields(self):
        assert split_by_delimiter("あ　い　う") == ["あ", "い", "う"]

    def test_consecutive_delimiters_keep_empty_field(self):
        assert split_by_delimiter("a　　b") == ["a", "", "b"]

    def test_leading_and_trailing_delimiters_keep_empty_fields(self):
        assert split_by_delimiter("　あ　") == ["", "あ", ""]

    def test_delimiter_not_carried_into_lines(self):
        assert all("　" not in line for line in split_by_delimiter("春　夏　秋"))


class TestSplitByParticle:
    """Lines end right after each particle token."""

    def test_split_after_particle(self):
        tokens = VERIFIED_TOKENS["今日は晴れだ"]
        assert split_by_particle(tokens) == ["今日は", "晴れだ"]

    def test_auxiliary_verb_is_not_a_particle(self):
        assert not is_particle(Token("だ", "助動詞"))
        assert is_particle(Token("は", "助詞"))

    def test_multiple_particles(self):
        tokens = VERIFIED_TOKENS["古池や蛙飛び込む水の音"]
        assert split_by_particle(tokens) == ["古池や", "蛙飛び込む水の", "音"]

    def test_no_particle_gives_one_line(self):
        tokens = VERIFIED_TOKENS["東京タワー"]
        assert split_by_particle(tokens) == ["東京タワー"]

    def test_trailing_particle_gives_no_empty_line(self):
        tokens = [Token("猫", "名詞"), Token("が", "助詞")]
        assert split_by_particle(tokens) == ["猫が"]

    def test_consecutive_particles_each_end_a_line(self):
        tokens = [Token("ここ", "代名詞"), Token("に", "助詞"), Token("は", "助詞")]
        assert split_by_particle(tokens) == ["ここに", "は"]

    def test_leading_particle_is_its_own_line(self):
        tokens = [Token("で", "助詞,接続助詞"), Token("終わり", "名詞")]
        assert split_by_particle(tokens) == ["で", "終わり"]

    def test_empty_tokens_give_no_lines(self):
        assert split_by_particle([]) == []

    def test_index_of_boundary(self):
        tokens = VERIFIED_TOKENS["古池や蛙飛び込む水の音"]
        assert index_of_boundary(tokens) == 1
        assert index_of_boundary(tokens, start=2) == 5
        assert index_of_boundary(tokens, start=6) == len(tokens)


class TestBoundaryPredicate:
    """The particle test is configurable."""

    def test_substring_matches_detailed_tag(self):
        predicate = make_boundary_predicate(["助詞"], "substring")
        assert predicate(Token("の", "助詞,格助詞,*,*,*,*"))

    def test_exact_matches_any_tag_field(self):
        predicate = make_boundary_predicate(["係助詞"], "exact")
        assert predicate(Token("は", "助詞,係助詞,*,*,*,*"))
        assert not predicate(Token("の", "助詞,格助詞,*,*,*,*"))

    def test_exact_does_not_match_partial_field(self):
        predicate = make_boundary_predicate(["助"], "exact")
        assert not predicate(Token("は", "助詞,係助詞"))

    def test_multiple_labels(self):
        predicate = make_boundary_predicate(["助詞", "補助記号"])
        assert predicate(Token("、", "補助記号,読点,*,*,*,*"))

    def test_custom_predicate_changes_lines(self):
        predicate = make_boundary_predicate(["ADP"], "exact")
        tokens = [Token("今日", "NOUN"), Token("は", "ADP"), Token("晴れ", "NOUN")]
        assert split_by_particle(tokens, predicate) == ["今日は", "晴れ"]

    def test_unknown_match_mode_raises(self):
        with pytest.raises(ConfigurationError, match="match mode"):
            make_boundary_predicate(["助詞"], "regex")

    def test_no_labels_raises(self):
        with pytest.raises(ConfigurationError):
            make_boundary_predicate([], "substring")


class TestSegmenter:
    """Segmenter dispatch, tokenizer use, and the round-trip property."""

    def test_particle_scenario(self, segmenter, fake_tokenizer):
        assert segmenter.segment("今日は晴れだ") == ["今日は", "晴れだ"]
        assert fake_tokenizer.calls == ["今日は晴れだ"]

    def test_delimiter_does_not_call_tokenizer(self, segmenter, fake_tokenizer):
        assert segmenter.segment("あ　い　う") == ["あ", "い", "う"]
        assert fake_tokenizer.calls == []

    def test_empty_sentence_gives_one_empty_line(self, segmenter, fake_tokenizer):
        assert segmenter.segment("") == [""]
        assert fake_tokenizer.calls == []

    def test_segment_with_strategy(self, segmenter):
        strategy, lines = segmenter.segment_with_strategy("吾輩は猫である")
        assert strategy == SegmentationStrategy.PARTICLE
        assert lines == ["吾輩は", "猫である"]

    @pytest.mark.parametrize("sentence", [
        "今日は晴れだ",
        "古池や蛙飛び込む水の音",
        "吾輩は猫である",
        "東京タワー",
        "見知らぬ文章",
    ])
    def test_particle_lines_reproduce_sentence(self, segmenter, sentence):
        assert "".join(segmenter.segment(sentence)) == sentence

    @pytest.mark.parametrize("sentence", ["あ　い　う", "a　　b", "　x　"])
    def test_delimiter_lines_rejoin_to_sentence(self, segmenter, sentence):
        assert "　".join(segmenter.segment(sentence)) == sentence

    def test_custom_predicate(self, fake_tokenizer):
        seg = Segmenter(
            tokenizer=fake_tokenizer,
            is_boundary=make_boundary_predicate(["格助詞"], "exact"),
        )
        assert seg.segment("古池や蛙飛び込む水の音") == ["古池や蛙飛び込む水の", "音"]

    def test_module_level_segment(self, fake_tokenizer):
        assert segment("今日は晴れだ", tokenizer=fake_tokenizer) == ["今日は", "晴れだ"]

    def test_boundary_settings_from_environment(self, monkeypatch, fake_tokenizer):
        monkeypatch.setenv("TATEGAKI_BOUNDARY_POS", "格助詞")
        monkeypatch.setenv("TATEGAKI_BOUNDARY_MATCH", "exact")
        seg = Segmenter(tokenizer=fake_tokenizer)
        assert seg.segment("古池や蛙飛び込む水の音") == ["古池や蛙飛び込む水の", "音"]

    def test_explicit_predicate_wins_over_environment(self, monkeypatch, fake_tokenizer):
        monkeypatch.setenv("TATEGAKI_BOUNDARY_POS", "格助詞")
        monkeypatch.setenv("TATEGAKI_BOUNDARY_MATCH", "exact")
        seg = Segmenter(tokenizer=fake_tokenizer, is_boundary=is_particle)
        assert seg.segment("古池や蛙飛び込む水の音") == ["古池や", "蛙飛び込む水の", "音"]

    def test_invalid_boundary_environment_raises(self, monkeypatch, fake_tokenizer):
        monkeypatch.setenv("TATEGAKI_BOUNDARY_MATCH", "fuzzy")
        with pytest.raises(ConfigurationError):
            Segmenter(tokenizer=fake_tokenizer)

    def test_default_tokenizer_is_loaded_lazily(self, monkeypatch):
        created = []

        def _factory():
            tokenizer = FakeTokenizer()
            created.append(tokenizer)
            return tokenizer

        monkeypatch.setattr(segmenter_module, "default_tokenizer", _factory)
        seg = Segmenter()
        seg.segment("あ　い")
        assert created == []
        seg.segment("今日は晴れだ")
        seg.segment("吾輩は猫である")
        assert len(created) == 1


class TestCollaboratorErrors:
    """Tokenizer failures surface as CollaboratorError."""

    def test_tokenizer_error_propagates(self):
        class _Broken(BaseTokenizer):
            @property
            def name(self):
                return "Broken"

            def tokenize(self, sentence):
                raise CollaboratorError("analyzer crashed")

        with pytest.raises(CollaboratorError, match="analyzer crashed"):
            Segmenter(tokenizer=_Broken()).segment("今日は晴れだ")

    def test_tokens_not_covering_sentence_raise(self):
        tokenizer = FakeTokenizer({"今日は": [Token("今日", "名詞")]})
        with pytest.raises(CollaboratorError, match="does not reproduce"):
            Segmenter(tokenizer=tokenizer).segment("今日は")

    def test_reordered_tokens_raise(self):
        tokenizer = FakeTokenizer({"今日は": [Token("は", "助詞"), Token("今日", "名詞")]})
        with pytest.raises(CollaboratorError):
            Segmenter(tokenizer=tokenizer).segment("今日は")
