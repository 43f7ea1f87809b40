"""Benchmark suite for the elsfinder search engine.

Run:  pytest tests/test_benchmarks.py --benchmark-enable
Skip: pytest tests/ -m "not benchmark"
"""

from __future__ import annotations

import pytest

import elsfinder
from elsfinder import Direction, search

pytestmark = pytest.mark.benchmark

# ---------------------------------------------------------------------------
# Sample texts
# ---------------------------------------------------------------------------

VERSE = "בְּרֵאשִׁית בָּרָא אֱלֹהִים אֵת הַשָּׁמַיִם וְאֵת הָאָרֶץ"

PARAGRAPH = " ".join([VERSE] * 10)

CHAPTER = " ".join([PARAGRAPH] * 10)

SAMPLE_TEXTS = {
    "verse": VERSE,
    "paragraph": PARAGRAPH,
    "chapter": CHAPTER,
}


# ---------------------------------------------------------------------------
# 1. Startup
# ---------------------------------------------------------------------------


def test_bench_startup(benchmark):
    """Measure elsfinder.load() time, manifest checks included."""
    benchmark.pedantic(elsfinder.load, rounds=5, iterations=1, warmup_rounds=0)


# ---------------------------------------------------------------------------
# 2. Normalization and single-skip search
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("text_key", list(SAMPLE_TEXTS))
def test_bench_normalize(benchmark, engine, text_key):
    text = SAMPLE_TEXTS[text_key]
    benchmark.extra_info["n_chars"] = len(text)
    benchmark(engine.normalize, text)


@pytest.mark.parametrize("direction", list(Direction))
def test_bench_search_single_skip(benchmark, engine, direction):
    letters = engine.normalize(CHAPTER).letters
    benchmark.extra_info["n_letters"] = len(letters)
    benchmark(search, letters, "תורה", 7, direction)


# ---------------------------------------------------------------------------
# 3. Full sweeps
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("text_key", ["verse", "paragraph"])
def test_bench_sweep(benchmark, engine, text_key):
    """Every skip up to half the letter count, both directions."""
    benchmark.extra_info["text_key"] = text_key
    benchmark(engine.sweep, SAMPLE_TEXTS[text_key], "את")


@pytest.mark.parametrize("workers", [1, 4])
def test_bench_sweep_workers(benchmark, engine, workers):
    benchmark.extra_info["workers"] = workers
    benchmark.pedantic(
        engine.sweep, args=(CHAPTER, "אלהים"), kwargs={"workers": workers},
        rounds=3, iterations=1,
    )


# ---------------------------------------------------------------------------
# 4. Scoring
# ---------------------------------------------------------------------------


def test_bench_analyze(benchmark, engine):
    """Sweep plus tagging and ranking."""
    benchmark(engine.analyze, PARAGRAPH, "את")


def test_bench_islands(benchmark, graph):
    """Graph build plus connected components (the island cache starts empty)."""
    symbols = list(graph)

    def build():
        return elsfinder.LetterGraph.load(symbols).islands()

    benchmark.pedantic(build, rounds=100, iterations=1)


# ---------------------------------------------------------------------------
# 5. Micro-benchmarks
# ---------------------------------------------------------------------------


def test_bench_weigh(benchmark, engine):
    benchmark.pedantic(
        engine.weigh, args=("ירושלים",), rounds=1000, iterations=100,
    )


def test_bench_lexicon_scan(benchmark, engine):
    letters = engine.normalize(PARAGRAPH).letters
    benchmark(engine.lexicon.scan, letters)
