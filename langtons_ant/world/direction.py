"""Direction — the ant's compass heading.

Four headings in clockwise order.  Turning right moves one step forward
through the cycle, turning left one step back, so four turns in the
same direction always return to the start.

Coordinates use a y-up convention: NORTH increases y.  Renderers that
draw with y growing downwards must flip the sign themselves.
"""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """Compass heading, valued by its clockwise position."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def turn_right(self) -> Direction:
        """Return the heading 90 degrees clockwise."""
        return Direction((self.value + 1) % 4)

    def turn_left(self) -> Direction:
        """Return the heading 90 degrees counter-clockwise."""
        return Direction((self.value - 1) % 4)

    def step_vector(self) -> tuple[int, int]:
        """Return the unit ``(dx, dy)`` displacement for this heading."""
        return _VECTORS[self]


_VECTORS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}
