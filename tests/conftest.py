"""Shared fixtures for the Langton's ant test suite."""

from __future__ import annotations

import pytest

from langtons_ant.rules.pattern import TurnPattern
from langtons_ant.simulation.config import SimulationConfig
from langtons_ant.simulation.engine import SimulationEngine
from langtons_ant.world.grid import Grid


@pytest.fixture
def empty_grid() -> Grid:
    """A grid with every cell at colour 0."""
    return Grid()


@pytest.fixture
def classic_pattern() -> TurnPattern:
    """The two-colour RL rule."""
    return TurnPattern.default()


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default simulation config (no YAML file needed)."""
    return SimulationConfig()


@pytest.fixture
def classic_engine(default_config: SimulationConfig) -> SimulationEngine:
    """An engine running the classic rule from an empty grid."""
    return SimulationEngine(config=default_config)
