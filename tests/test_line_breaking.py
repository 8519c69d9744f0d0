"""Tests for measurement and line breaking."""

import pytest

from ogpgen.utils.dimensions import DEFAULT_END_PROHIBITED, DEFAULT_START_PROHIBITED
from ogpgen.utils.text import (
    LineBreaker,
    find_word_boundary,
    is_word_char,
    measure_text_width,
    split_text,
)

from conftest import FakeFont


@pytest.fixture
def breaker() -> LineBreaker:
    return LineBreaker(DEFAULT_START_PROHIBITED, DEFAULT_END_PROHIBITED)


# ============================================================================
# Measurement
# ============================================================================

def test_measure_empty_text_is_zero(fake_font):
    assert measure_text_width("", fake_font) == 0
    assert measure_text_width("", fake_font, letter_spacing=10) == 0


def test_measure_sums_per_character_advances(fake_font):
    assert measure_text_width("ab", fake_font) == 20
    assert measure_text_width("日本", fake_font) == 40
    assert measure_text_width("a日", fake_font) == 30


def test_measure_adds_spacing_between_characters_only(fake_font):
    assert measure_text_width("a", fake_font, letter_spacing=5) == 10
    assert measure_text_width("abc", fake_font, letter_spacing=3) == 36
    assert measure_text_width("abc", fake_font, letter_spacing=-2) == 26


def test_measure_truncates_each_character():
    font = FakeFont(15.0)  # Latin advance 7.5
    assert measure_text_width("ab", font) == 14


# ============================================================================
# Word boundaries
# ============================================================================

@pytest.mark.parametrize("char", ["a", "z", "A", "Z", "0", "9", "_", "-"])
def test_word_chars(char):
    assert is_word_char(char)


@pytest.mark.parametrize("char", [" ", ".", "(", "。", "あ", "日", "é"])
def test_non_word_chars(char):
    assert not is_word_char(char)


def test_find_word_boundary_in_middle():
    assert find_word_boundary(list("hello world"), 8) == 5


def test_find_word_boundary_word_from_start():
    assert find_word_boundary(list("abc"), 2) == 2


def test_find_word_boundary_non_word_at_max_pos():
    assert find_word_boundary(list("hello world"), 5) == 5


def test_find_word_boundary_clamps_max_pos():
    assert find_word_boundary(list("abcd"), 10) == 3


# ============================================================================
# Splitting
# ============================================================================

def test_empty_text_yields_no_lines(breaker, fake_font):
    assert breaker.split("", fake_font, 100) == []


def test_japanese_period_never_starts_a_line(breaker, fake_font):
    lines = breaker.split("これは日本語のテスト。改行されます", fake_font, 200)

    assert len(lines) >= 2
    assert not any(line.startswith("。") for line in lines)
    assert lines == ["これは日本語のテスト。", "改行されます"]


def test_manual_breaks_are_kept(breaker, fake_font):
    lines = breaker.split("第一行\n第二行\n第三行", fake_font, 1000)
    assert lines == ["第一行", "第二行", "第三行"]


def test_manual_segments_wrap_independently(breaker, fake_font):
    assert breaker.split("aaaa\nbb", fake_font, 30) == ["aaa", "a", "bb"]


def test_empty_manual_segments_add_no_lines(breaker, fake_font):
    assert breaker.split("上\n\n下", fake_font, 100) == ["上", "下"]


def test_english_words_move_whole(breaker, fake_font):
    assert breaker.split("hello world", fake_font, 100) == ["hello ", "world"]


def test_word_longer_than_line_breaks_at_width(breaker, fake_font):
    assert breaker.split("abcdefghijkl", fake_font, 50) == ["abcde", "fghij", "kl"]


def test_consecutive_start_prohibited_characters_are_forced(breaker, fake_font):
    assert breaker.split("あいう。。え", fake_font, 60) == ["あいう。。", "え"]


def test_end_prohibited_character_moves_to_next_line(breaker, fake_font):
    assert breaker.split("あい「う", fake_font, 60) == ["あい", "「う"]


def test_single_end_prohibited_character_breaks_anyway(breaker, fake_font):
    assert breaker.split("「あ", fake_font, 20) == ["「", "あ"]


def test_run_of_opening_brackets_never_ends_a_longer_line(breaker, fake_font):
    assert breaker.split("「「「あ", fake_font, 40) == ["「", "「", "「あ"]
    assert breaker.split("x「「「「y", fake_font, 60) == ["x", "「", "「", "「「y"]


def test_opening_bracket_travels_with_following_word(breaker, fake_font):
    assert breaker.split("see (link)", fake_font, 80) == ["see ", "(link)"]


def test_character_wider_than_line_is_kept(breaker, fake_font):
    assert breaker.split("日", fake_font, 5) == ["日"]
    assert breaker.split("日本", fake_font, 5) == ["日", "本"]


def test_letter_spacing_narrows_lines(fake_font):
    plain = split_text("abcdef", fake_font, 60)
    spaced = split_text("abcdef", fake_font, 60, letter_spacing=5)

    assert plain == ["abcdef"]
    assert spaced == ["abcd", "ef"]


def test_no_rules_breaks_anywhere(fake_font):
    assert split_text("あいう。", fake_font, 60) == ["あいう", "。"]


MIXED_TEXT = "Pythonで「禁則処理」を実装する。テスト（試験）です！hello-world_snake 123"
NESTED_BRACKETS = "x「「「「y」」。see (((link)))「（『引用』）」です"


@pytest.mark.parametrize("text", [MIXED_TEXT, NESTED_BRACKETS])
@pytest.mark.parametrize("max_width", [15, 25, 40, 60, 100, 150, 300, 2000])
def test_line_breaking_invariants(breaker, fake_font, text, max_width):
    lines = breaker.split(text, fake_font, max_width)

    # Nothing dropped or duplicated
    assert "".join(lines) == text
    assert all(lines)

    for line in lines[1:]:
        assert line[0] not in breaker.start_prohibited

    for line in lines[:-1]:
        if len(line) > 1:
            assert line[-1] not in breaker.end_prohibited
