"""Shared fixtures for elsfinder tests."""

import pytest

import elsfinder


@pytest.fixture(scope="session")
def engine():
    """Load the engine once for all tests."""
    return elsfinder.load()


@pytest.fixture(scope="session")
def graph(engine):
    return engine.graph
