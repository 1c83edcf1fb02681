"""Ant — the single agent walking the grid.

The ant only knows where it is and which way it faces.  It never reads
the grid itself; ``simulation.step.advance`` decides how it turns and
is the only caller of ``turn`` and ``forward``.
"""

from __future__ import annotations

from langtons_ant.rules.pattern import Turn
from langtons_ant.world.direction import Direction
from langtons_ant.world.grid import Coord

ORIGIN: Coord = (0, 0)


class Ant:
    """Position and heading of the ant.

    Read ``position`` and ``heading`` freely; state changes go through
    the step function.
    """

    __slots__ = ("_x", "_y", "_heading")

    def __init__(
        self,
        position: Coord = ORIGIN,
        heading: Direction = Direction.NORTH,
    ) -> None:
        """Place an ant.

        Args:
            position: Starting ``(x, y)``.
            heading: Starting direction.
        """
        self._x, self._y = position
        self._heading = heading

    @property
    def position(self) -> Coord:
        """Current ``(x, y)`` cell."""
        return (self._x, self._y)

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def heading(self) -> Direction:
        """Direction the ant will move on its next ``forward``."""
        return self._heading

    def turn(self, instruction: Turn) -> None:
        """Rotate the heading according to ``instruction``."""
        match instruction:
            case Turn.LEFT:
                self._heading = self._heading.turn_left()
            case Turn.RIGHT:
                self._heading = self._heading.turn_right()

    def forward(self) -> None:
        """Move one cell along the current heading."""
        dx, dy = self._heading.step_vector()
        self._x += dx
        self._y += dy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ant):
            return NotImplemented
        return self.position == other.position and self.heading == other.heading

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Ant(position={self.position!r}, heading={self.heading.name})"
