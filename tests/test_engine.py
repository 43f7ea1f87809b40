"""Tests for the ElsEngine public API."""

import logging

import pytest

import elsfinder
from elsfinder import Direction, InvalidSkipError, SweepBudget

GENESIS_1_1 = "בְּרֵאשִׁית בָּרָא אֱלֹהִים אֵת הַשָּׁמַיִם וְאֵת הָאָרֶץ"


def test_find_spec_example(engine):
    matches = engine.find("אבגאבג", "אב", skip=1, direction="forward")
    assert [m.original_positions for m in matches] == [(0, 1), (3, 4)]
    assert all(m.keyword == "אב" for m in matches)


def test_find_maps_to_original_positions(engine):
    (match,) = engine.find("א-ב, ג", "אג", skip=2, direction=Direction.FORWARD)
    assert match.original_positions == (0, 5)


def test_negative_skip(engine):
    matches = engine.find("אבגאבג", "אב", skip=-1, direction="forward")
    assert [m.original_positions for m in matches] == [(3, 4), (0, 1)]
    assert all(m.direction is Direction.BACKWARD and m.skip == 1 for m in matches)


def test_skip_without_direction_searches_both(engine):
    matches = engine.find("אבגאבג", "אג", skip=2)
    assert [(m.direction, m.original_positions) for m in matches] == [
        (Direction.FORWARD, (0, 2)),
        (Direction.FORWARD, (3, 5)),
        (Direction.BACKWARD, (3, 5)),
        (Direction.BACKWARD, (0, 2)),
    ]


def test_zero_skip(engine):
    with pytest.raises(InvalidSkipError):
        engine.find("אבג", "אב", skip=0)


def test_skip_and_seed(engine):
    with pytest.raises(ValueError, match="either skip or seed"):
        engine.find("אבג", "אב", skip=1, seed="א")


def test_empty_keyword_warns(engine, caplog):
    with caplog.at_level(logging.WARNING, logger="elsfinder"):
        assert engine.find("אבג", "!!!") == []
        assert engine.analyze("אבג", "abc") == []
    assert any("no letters" in r.message for r in caplog.records)


def test_zero_seed_warns(engine, caplog):
    with caplog.at_level(logging.WARNING, logger="elsfinder"):
        assert engine.find("אבג", "אב", seed="...") == []
    assert any("weighs 0" in r.message for r in caplog.records)


def test_pointed_text(engine):
    result = engine.sweep(GENESIS_1_1, "את")
    assert len(result) > 0
    for match in result.matches:
        spelled = "".join(
            engine.normalizer.fold(GENESIS_1_1[p]) for p in match.original_positions
        )
        assert spelled == "את"


def test_sweep_budget(engine):
    result = engine.sweep(GENESIS_1_1 * 3, "את", budget=SweepBudget(max_matches=2))
    assert result.truncated


def test_max_skip(engine):
    result = engine.sweep(GENESIS_1_1, "את", max_skip=4)
    assert result.max_skip == 4
    assert all(skip <= 4 for skip in result.by_skip)


def test_with_constants_shares_graph(engine):
    other = engine.with_constants(engine.constants.replace(high_frequency=10))
    assert other.graph is engine.graph
    assert other.constants.high_frequency == 10
    assert engine.constants.high_frequency == 3


def test_package_exports():
    for name in elsfinder.__all__:
        assert hasattr(elsfinder, name)
    with pytest.raises(AttributeError):
        elsfinder.NoSuchThing


def test_load_from_env(monkeypatch, tmp_path):
    from elsfinder._loader import DATA_DIR_ENV

    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path))
    with pytest.raises(elsfinder.ElsDataError, match="manifest.json not found"):
        elsfinder.load()
