"""Tests for letter-value methods."""

import pytest

from elsfinder._gematria import reduced


def test_standard(engine):
    assert engine.weigh("משה") == 345
    assert engine.weigh("שָׁלוֹם") == 376
    assert engine.weigh("אמת!") == 441
    assert engine.weigh("") == 0


def test_final_forms_weigh_as_base(engine):
    assert engine.weigh("ך") == engine.weigh("כ") == 20


def test_ordinal(engine):
    assert engine.ordinal("אבג") == 6
    assert engine.ordinal("ת") == 22


@pytest.mark.parametrize("value,expected", [
    (0, 0),
    (9, 9),
    (345, 3),
    (376, 7),
    (29, 11),
    (11, 11),
    (22, 22),
    (688, 22),
    (1999, 1),
])
def test_reduced(value, expected):
    assert reduced(value) == expected


def test_engine_reduced(engine):
    assert engine.reduced("משה") == 3


def test_full_value(engine):
    assert engine.full_value("א") == 111
    assert engine.full_value("ב") == 412
    assert engine.full_value("אב") == 523


def test_atbash(engine):
    assert engine.atbash("אב") == "תש"
    assert engine.atbash(engine.atbash("שלום")) == "שלומ"
    assert engine.atbash_value("אב") == 700
