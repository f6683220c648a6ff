import logging

import pytest

from text_aligner.config import InvalidConfigError
from text_aligner.linebreaking import build_lines, iter_lines
from text_aligner.tokenization import tokenize_words


def _texts(lines):
    return [line.text for line in lines]


def test_build_lines_packs_greedily():
    lines = build_lines(tokenize_words("the quick brown fox jumps"), 11)

    assert _texts(lines) == ["the quick", "brown fox", "jumps"]
    assert [line.slack for line in lines] == [2, 2, 6]
    assert [line.terminal for line in lines] == [False, False, True]


def test_build_lines_fills_exact_width():
    lines = build_lines(tokenize_words("My name is Roben"), 10)

    assert _texts(lines) == ["My name is", "Roben"]
    assert lines[0].slack == 0
    assert lines[0].content_width == 10


def test_overlong_word_sits_alone():
    """A word wider than the line is kept whole on its own line."""
    lines = build_lines(tokenize_words("a verylongwordhere b"), 5)

    assert _texts(lines) == ["a", "verylongwordhere", "b"]
    assert lines[1].overflows
    assert lines[1].slack == 0
    assert not lines[1].terminal
    assert lines[2].terminal


def test_single_line_is_terminal():
    lines = build_lines(tokenize_words("short text"), 40)

    assert len(lines) == 1
    assert lines[0].terminal


def test_no_words_yield_no_lines():
    assert build_lines([], 10) == []


def test_iter_lines_rejects_non_positive_width():
    with pytest.raises(InvalidConfigError):
        list(iter_lines(tokenize_words("word"), 0))
    with pytest.raises(InvalidConfigError):
        build_lines(tokenize_words("word"), -3)


def test_iter_lines_checks_width_before_iterating():
    """A bad width is rejected as soon as iter_lines is called."""
    with pytest.raises(InvalidConfigError):
        iter_lines([], 0)


def test_overlong_word_is_logged_with_offsets(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger="text_aligner.linebreaking")

    build_lines(tokenize_words("a verylongwordhere b"), 5)

    assert "characters 2-18 is 16 wide" in caplog.text
