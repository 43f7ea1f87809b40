"""Tests for single-skip ELS search."""

import pytest

from elsfinder import Direction, EmptyKeywordError, InvalidSkipError, search
from elsfinder._searcher import resolve_skip


def test_forward_skip_one():
    assert search("אבגאבג", "אב", 1) == [[0, 1], [3, 4]]


def test_forward_skip_two():
    assert [0, 2] in search("אבגאבג", "אג", 2)


def test_backward_scans_from_right_end():
    assert search("אבגאבג", "אב", 1, Direction.BACKWARD) == [[3, 4], [0, 1]]


def test_backward_reverses_forward_start_order():
    text = "בראשיתבראאלהימאתהשמימואתהארצ"
    for skip in range(1, 6):
        fwd = search(text, "את", skip, "forward")
        back = search(text, "את", skip, "backward")
        assert back == fwd[::-1]
        for seq in back:
            assert seq == sorted(seq)


def test_negative_skip_flips_direction():
    assert search("אבגאבג", "אב", -1) == [[3, 4], [0, 1]]
    assert search("אבגאבג", "אב", -1, "backward") == [[0, 1], [3, 4]]


def test_zero_skip():
    with pytest.raises(InvalidSkipError):
        search("אבג", "א", 0)


def test_empty_keyword():
    with pytest.raises(EmptyKeywordError):
        search("אבג", "", 1)


def test_keyword_longer_than_text():
    assert search("אב", "אבג", 1) == []
    assert search("אבג", "אג", 5) == []


def test_single_letter_keyword():
    assert search("אבא", "א", 3) == [[0], [2]]


def test_sequence_properties():
    text = "אבגדאבגדאבגד"
    for skip in range(1, 5):
        for seq in search(text, "אג", skip):
            assert all(0 <= i < len(text) for i in seq)
            assert seq[1] - seq[0] == skip
            assert "".join(text[i] for i in seq) == "אג"


def test_resolve_skip():
    assert resolve_skip(3, "forward") == (3, Direction.FORWARD)
    assert resolve_skip(-3, Direction.FORWARD) == (3, Direction.BACKWARD)
    assert resolve_skip(-2, Direction.BACKWARD) == (2, Direction.FORWARD)
    with pytest.raises(InvalidSkipError):
        resolve_skip(0, Direction.FORWARD)
