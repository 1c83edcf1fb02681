"""SimulationEngine — owns the simulation state and advances it.

The engine holds the grid, the ant, the parsed turn pattern and the
tick counter.  Drivers call ``step`` once per tick and read the state
back for drawing; nothing else mutates it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from langtons_ant.agent.ant import ORIGIN, Ant
from langtons_ant.rules.pattern import TurnPattern
from langtons_ant.simulation.config import SimulationConfig
from langtons_ant.simulation.step import advance
from langtons_ant.world.direction import Direction
from langtons_ant.world.grid import Coord, Grid

logger = logging.getLogger(__name__)

START_HEADING = Direction.NORTH


@dataclass
class SimulationEngine:
    """Drives the simulation forward tick by tick.

    Attributes:
        config: Validated simulation configuration.
        pattern: Turn pattern parsed from ``config.pattern``.
        grid: Cell colours.
        ant: The ant.
        tick: Number of ticks applied since start or the last reset.
    """

    config: SimulationConfig = field(default_factory=SimulationConfig)
    pattern: TurnPattern = field(init=False)
    grid: Grid = field(init=False)
    ant: Ant = field(init=False)
    tick: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        """Parse the pattern and place the ant on an empty grid.

        Raises:
            ConfigError: If the configuration does not validate.
        """
        self.pattern = self.config.validate()
        self.grid = Grid()
        self.ant = Ant(ORIGIN, START_HEADING)

    def step(self) -> Coord:
        """Advance the simulation by one tick.

        Returns:
            The coordinate whose colour changed.
        """
        changed = advance(self.grid, self.ant, self.pattern)
        self.tick += 1
        return changed

    def run(self, ticks: int) -> None:
        """Run the simulation for a fixed number of ticks.

        Args:
            ticks: Number of ticks to advance.
        """
        for _ in range(ticks):
            self.step()

    def reset(self) -> None:
        """Clear the grid and return the ant to the origin.

        The turn pattern is kept.
        """
        logger.info(
            "Resetting after %d ticks (%d coloured cells)",
            self.tick,
            len(self.grid),
        )
        self.grid.clear()
        self.ant = Ant(ORIGIN, START_HEADING)
        self.tick = 0
