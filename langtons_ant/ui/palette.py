"""Palette — one display colour per cell colour index."""

from __future__ import annotations

import numpy as np

RGB = tuple[int, int, int]

BACKGROUND: RGB = (255, 255, 255)

# Channel range for generated colours, as a fraction of 255
_LO = 0.2
_HI = 0.8


def build_palette(size: int, seed: int | None = None) -> list[RGB]:
    """Return ``size`` colours for a pattern of that length.

    Index 0 is the white background.  The rest are random mid-tone
    colours so that no cell colour disappears into the background or
    the ant.

    Args:
        size: Number of colours (the turn pattern length).
        seed: RNG seed; the same seed always gives the same palette.

    Returns:
        List of ``(r, g, b)`` tuples.
    """
    rng = np.random.default_rng(seed)
    palette = [BACKGROUND]
    if size > 1:
        channels = rng.uniform(_LO, _HI, size=(size - 1, 3)) * 255
        palette += [
            (int(r), int(g), int(b)) for r, g, b in channels.round().astype(int)
        ]
    return palette[:size]
