"""Tests for langtons_ant.simulation — step, engine and config loading."""

from collections import Counter
from pathlib import Path

import numpy as np
import pytest

from langtons_ant.agent.ant import Ant
from langtons_ant.errors import (
    ConfigError,
    EmptyPattern,
    InvalidPatternCharacter,
    InvalidRate,
)
from langtons_ant.rules.pattern import TurnPattern
from langtons_ant.simulation.config import SimulationConfig, parse_rate
from langtons_ant.simulation.engine import SimulationEngine
from langtons_ant.simulation.step import advance
from langtons_ant.world.direction import Direction
from langtons_ant.world.grid import Grid

# The classic ant settles into its highway well before this many ticks.
_HIGHWAY_WARMUP = 12_000
_HIGHWAY_PERIOD = 104


def _engine(pattern: str) -> SimulationEngine:
    return SimulationEngine(config=SimulationConfig(pattern=pattern))


class TestParseRate:
    """Tests for tick-rate validation."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(1, 1), (60, 60), ("30", 30), (" 7 ", 7), ("+8", 8)],
    )
    def test_valid(self, raw: object, expected: int) -> None:
        assert parse_rate(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [0, -1, "0", "-5", "abc", "", "1.5", "++5", "\u00b2", "\uff15"]
        + [2.0, True, None],
    )
    def test_invalid(self, raw: object) -> None:
        with pytest.raises(InvalidRate):
            parse_rate(raw)

    def test_message_names_value(self) -> None:
        with pytest.raises(InvalidRate, match="'abc'"):
            parse_rate("abc")


class TestSimulationConfig:
    """Tests for defaults, YAML loading and overrides."""

    def test_defaults(self) -> None:
        cfg = SimulationConfig()
        assert cfg.rate == 60
        assert cfg.pattern == "RL"

    def test_from_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "test.yaml"
        yaml_file.write_text("rate: 120\npattern: LLRR\n")
        cfg = SimulationConfig.from_yaml(yaml_file)
        assert cfg.rate == 120
        assert cfg.pattern == "LLRR"

    def test_from_yaml_partial(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "test.yaml"
        yaml_file.write_text("pattern: RRL\n")
        cfg = SimulationConfig.from_yaml(yaml_file)
        assert cfg.rate == 60
        assert cfg.pattern == "RRL"

    def test_from_yaml_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert SimulationConfig.from_yaml(yaml_file) == SimulationConfig()

    def test_from_yaml_not_a_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError):
            SimulationConfig.from_yaml(yaml_file)

    def test_from_yaml_bad_rate(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text("rate: -3\n")
        with pytest.raises(InvalidRate):
            SimulationConfig.from_yaml(yaml_file)

    @pytest.mark.parametrize("value", ["null", "no", "42", "[R, L]"])
    def test_from_yaml_pattern_must_be_text(self, tmp_path: Path, value: str) -> None:
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text(f"pattern: {value}\n")
        with pytest.raises(ConfigError, match="pattern must be a string"):
            SimulationConfig.from_yaml(yaml_file)

    def test_from_yaml_quoted_pattern(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "quoted.yaml"
        yaml_file.write_text("pattern: \"LR\"\n")
        assert SimulationConfig.from_yaml(yaml_file).pattern == "LR"

    def test_from_yaml_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            SimulationConfig.from_yaml(tmp_path / "nope.yaml")

    def test_merged_overrides(self) -> None:
        base = SimulationConfig(rate=10, pattern="LLRR")
        assert base.merged(rate="25") == SimulationConfig(rate=25, pattern="LLRR")
        assert base.merged(pattern="R") == SimulationConfig(rate=10, pattern="R")
        assert base.merged() == base

    def test_merged_rejects_bad_rate(self) -> None:
        with pytest.raises(InvalidRate):
            SimulationConfig().merged(rate="0")

    def test_validate_returns_pattern(self) -> None:
        assert SimulationConfig(pattern="LR").validate() == TurnPattern.parse("LR")

    def test_validate_bad_pattern(self) -> None:
        with pytest.raises(InvalidPatternCharacter):
            SimulationConfig(pattern="RXL").validate()
        with pytest.raises(EmptyPattern):
            SimulationConfig(pattern="").validate()

    def test_validate_bad_rate(self) -> None:
        with pytest.raises(InvalidRate):
            SimulationConfig(rate=0).validate()


class TestAdvance:
    """Tests for the one-tick transition function."""

    def test_single_tick(self, empty_grid: Grid, classic_pattern: TurnPattern) -> None:
        ant = Ant((0, 0), Direction.NORTH)
        changed = advance(empty_grid, ant, classic_pattern)
        assert changed == (0, 0)
        assert empty_grid.get((0, 0)) == 1
        assert ant.heading is Direction.EAST
        assert ant.position == (1, 0)

    def test_second_tick(self, empty_grid: Grid, classic_pattern: TurnPattern) -> None:
        ant = Ant((0, 0), Direction.NORTH)
        advance(empty_grid, ant, classic_pattern)
        changed = advance(empty_grid, ant, classic_pattern)
        assert changed == (1, 0)
        assert empty_grid.get((1, 0)) == 1
        assert ant.heading is Direction.SOUTH
        assert ant.position == (1, -1)

    def test_coloured_cell_turns_left(
        self,
        empty_grid: Grid,
        classic_pattern: TurnPattern,
    ) -> None:
        empty_grid.set((0, 0), 1)
        ant = Ant((0, 0), Direction.NORTH)
        advance(empty_grid, ant, classic_pattern)
        assert ant.heading is Direction.WEST
        assert ant.position == (-1, 0)
        assert empty_grid.get((0, 0)) == 0

    def test_single_right_circles(self, empty_grid: Grid) -> None:
        pattern = TurnPattern.parse("R")
        ant = Ant()
        visited = []
        for _ in range(8):
            visited.append(advance(empty_grid, ant, pattern))
        assert visited[:4] == [(0, 0), (1, 0), (1, -1), (0, -1)]
        assert visited[4:] == visited[:4]
        assert ant == Ant()
        assert len(empty_grid) == 0
        assert all(empty_grid.get(cell) == 0 for cell in visited)


class TestSimulationEngine:
    """Tests for the tick loop."""

    def test_engine_initialises(self, classic_engine: SimulationEngine) -> None:
        assert classic_engine.tick == 0
        assert len(classic_engine.grid) == 0
        assert classic_engine.ant == Ant((0, 0), Direction.NORTH)
        assert classic_engine.pattern == TurnPattern.default()

    def test_default_config(self) -> None:
        assert SimulationEngine().config == SimulationConfig()

    def test_invalid_config_rejected(self) -> None:
        with pytest.raises(EmptyPattern):
            SimulationEngine(config=SimulationConfig(pattern=""))
        with pytest.raises(InvalidRate):
            SimulationEngine(config=SimulationConfig(rate=-1))

    def test_step_advances_tick(self, classic_engine: SimulationEngine) -> None:
        assert classic_engine.step() == (0, 0)
        assert classic_engine.tick == 1

    def test_run_multiple_ticks(self, classic_engine: SimulationEngine) -> None:
        classic_engine.run(ticks=10)
        assert classic_engine.tick == 10

    def test_single_tick_scenario(self, classic_engine: SimulationEngine) -> None:
        classic_engine.step()
        assert classic_engine.grid.get((0, 0)) == 1
        assert classic_engine.ant.heading is Direction.EAST
        assert classic_engine.ant.position == (1, 0)
        classic_engine.step()
        assert classic_engine.grid.get((1, 0)) == 1
        assert classic_engine.ant.heading is Direction.SOUTH
        assert classic_engine.ant.position == (1, -1)

    def test_reset(self) -> None:
        engine = _engine("LLRR")
        engine.run(ticks=500)
        engine.reset()
        assert engine.tick == 0
        assert len(engine.grid) == 0
        assert engine.ant == Ant((0, 0), Direction.NORTH)
        assert str(engine.pattern) == "LLRR"

    def test_reset_replays_identically(self) -> None:
        engine = _engine("RRLLLRLLLRRR")
        engine.run(ticks=300)
        first = dict(engine.grid.items())
        engine.reset()
        engine.run(ticks=300)
        assert dict(engine.grid.items()) == first

    def test_determinism(self) -> None:
        """Same pattern must produce identical state after N ticks."""
        engine_a = _engine("RRLLLRLLLRRR")
        engine_b = _engine("RRLLLRLLLRRR")
        engine_a.run(ticks=5_000)
        engine_b.run(ticks=5_000)

        assert engine_a.ant == engine_b.ant
        assert dict(engine_a.grid.items()) == dict(engine_b.grid.items())
        assert np.array_equal(engine_a.grid.to_array(), engine_b.grid.to_array())

    @pytest.mark.parametrize("text", ["RL", "LLRR", "RRLLLRLLLRRR", "L"])
    def test_colour_cycles_with_visits(self, text: str) -> None:
        """A cell visited m times holds colour m mod N."""
        engine = _engine(text)
        visits: Counter[tuple[int, int]] = Counter()
        for _ in range(2_000):
            visits[engine.ant.position] += 1
            engine.step()

        n = len(engine.pattern)
        for cell, count in visits.items():
            assert engine.grid.get(cell) == count % n
        assert set(dict(engine.grid.items())) <= set(visits)

    def test_classic_highway(self, classic_engine: SimulationEngine) -> None:
        """After its chaotic phase the classic ant repeats every 104 ticks."""
        classic_engine.run(ticks=_HIGHWAY_WARMUP)
        positions = [classic_engine.ant.position]
        headings = [classic_engine.ant.heading]
        for _ in range(3):
            classic_engine.run(ticks=_HIGHWAY_PERIOD)
            positions.append(classic_engine.ant.position)
            headings.append(classic_engine.ant.heading)

        shifts = {
            (bx - ax, by - ay) for (ax, ay), (bx, by) in zip(positions, positions[1:])
        }
        assert len(shifts) == 1
        dx, dy = shifts.pop()
        assert abs(dx) == 2
        assert abs(dy) == 2
        assert len(set(headings)) == 1
