"""One tick of Langton's ant.

The order of operations is fixed:

1. Read the colour under the ant.
2. Look up the turn for that colour.
3. Turn the ant.
4. Advance the colour of the cell the ant is standing on.
5. Move the ant forward along its new heading.

Any other ordering produces a different automaton.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from langtons_ant.agent.ant import Ant
    from langtons_ant.rules.pattern import TurnPattern
    from langtons_ant.world.grid import Coord, Grid


def advance(grid: Grid, ant: Ant, pattern: TurnPattern) -> Coord:
    """Apply one tick to ``grid`` and ``ant`` in place.

    Args:
        grid: Cell colours, updated at the ant's pre-move position.
        ant: The ant, turned and moved one cell.
        pattern: Turn rule, indexed by cell colour.

    Returns:
        The coordinate whose colour changed.
    """
    cell = ant.position
    colour = grid.get(cell)
    ant.turn(pattern.instruction_at(colour))
    grid.set(cell, (colour + 1) % len(pattern))
    ant.forward()
    return cell
