"""Grid — the unbounded plane of coloured cells the ant walks on.

Only cells with a non-zero colour are stored.  Every other coordinate
implicitly holds colour 0, so the grid is conceptually infinite and
memory grows with the number of coloured cells rather than with the
area the ant has wandered over.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

Coord = tuple[int, int]
Bounds = tuple[int, int, int, int]


@dataclass
class Grid:
    """Sparse mapping from ``(x, y)`` to colour index.

    Attributes:
        cells: Stored colours, keyed by coordinate.  Never holds zeros.
    """

    cells: dict[Coord, int] = field(default_factory=dict, repr=False)

    def get(self, coord: Coord) -> int:
        """Return the colour at ``coord`` (0 if never written)."""
        return self.cells.get(coord, 0)

    def set(self, coord: Coord, colour: int) -> None:
        """Store ``colour`` at ``coord``.

        Writing 0 removes the entry.  Range checking against the turn
        pattern length is the caller's job.

        Args:
            coord: Cell coordinate.
            colour: Colour index to store.
        """
        if colour:
            self.cells[coord] = colour
        else:
            self.cells.pop(coord, None)

    def toggle(self, coord: Coord) -> int:
        """Flip a cell between colours 0 and 1 and return the new colour."""
        colour = 0 if self.get(coord) else 1
        self.set(coord, colour)
        return colour

    def clear(self) -> None:
        """Reset every cell to colour 0."""
        self.cells.clear()

    def items(self) -> Iterator[tuple[Coord, int]]:
        """Iterate over ``(coord, colour)`` for every non-zero cell."""
        return iter(self.cells.items())

    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, coord: object) -> bool:
        return coord in self.cells

    def bounds(self) -> Bounds | None:
        """Return ``(min_x, min_y, max_x, max_y)`` of coloured cells.

        Returns:
            The inclusive bounding box, or None if every cell is 0.
        """
        if not self.cells:
            return None
        xs = [x for x, _ in self.cells]
        ys = [y for _, y in self.cells]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_array(self, bounds: Bounds | None = None) -> NDArray[np.int64]:
        """Return a dense snapshot of a rectangular region.

        Row 0 of the result is the lowest ``y`` in the region, column 0
        the lowest ``x``; index as ``array[y - min_y, x - min_x]``.

        Args:
            bounds: Inclusive ``(min_x, min_y, max_x, max_y)``.  Defaults
                to the bounding box of the coloured cells.

        Returns:
            2D integer array of colours (empty if there is nothing to show).
        """
        if bounds is None:
            bounds = self.bounds()
            if bounds is None:
                return np.zeros((0, 0), dtype=np.int64)

        min_x, min_y, max_x, max_y = bounds
        out = np.zeros((max_y - min_y + 1, max_x - min_x + 1), dtype=np.int64)
        for (x, y), colour in self.cells.items():
            if min_x <= x <= max_x and min_y <= y <= max_y:
                out[y - min_y, x - min_x] = colour
        return out
