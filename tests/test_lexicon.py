"""Tests for the word lexicon and affix lists."""

from elsfinder import Lexicon


def _lex():
    return Lexicon(["שלומ", "אמת", "ביתאל"], prefixes=["ה", "וה"], suffixes=["ימ", "י"])


def test_contains():
    lex = _lex()
    assert "שלומ" in lex
    assert "שלו" not in lex
    assert len(lex) == 3


def test_scan():
    lex = _lex()
    assert lex.scan("השלומ") == [(1, 5, "שלומ")]
    assert lex.scan("ביתאלאמת") == [(0, 5, "ביתאל"), (5, 8, "אמת")]


def test_covering():
    lex = _lex()
    assert lex.covering("השלומ", 1, 5) == ["שלומ"]
    assert lex.covering("השלומ", 2, 4) == ["שלומ"]
    assert lex.covering("השלומ", 0, 5) == []


def test_affixes():
    lex = _lex()
    assert lex.has_prefix("וה")
    assert lex.has_prefix("אה")
    assert not lex.has_prefix("אב")
    assert lex.has_suffix("ימא")
    assert lex.has_suffix("יב")
    assert not lex.has_suffix("אי")
    assert lex.prefixes == {"ה", "וה"}


def test_empty_lexicon():
    lex = Lexicon([])
    assert len(lex) == 0
    assert lex.scan("שלומ") == []
    assert not lex.has_prefix("ה")


def test_bundled_lexicon_normalized(engine):
    lex = engine.lexicon
    assert "שלומ" in lex
    assert "ביתאל" in lex
    assert "שלום" not in lex
    assert "ימ" in lex.suffixes
