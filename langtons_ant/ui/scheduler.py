"""TickScheduler — turns elapsed wall-clock time into simulation ticks.

The display refreshes at its own frame rate; the simulation runs at
``rate`` ticks per second.  Each frame the driver reports how much time
passed and gets back how many ticks to run.  Fractional ticks carry
over to the next frame so the long-run average matches ``rate``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Highest rate honoured; larger ones run at this speed.
MAX_RATE = 1_000_000_000


@dataclass
class TickScheduler:
    """Rate accumulator with a pause flag.

    Attributes:
        rate: Simulation ticks per second, capped at ``MAX_RATE``.
        paused: When True, no ticks are due and no time accumulates.
        max_ticks_per_frame: Upper bound on ticks returned by one
            ``advance`` call; ticks beyond it are dropped.
    """

    rate: float
    paused: bool = False
    max_ticks_per_frame: int = 10_000
    _accumulator: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        self.rate = min(self.rate, MAX_RATE)

    def advance(self, dt: float) -> int:
        """Account for ``dt`` seconds of wall time.

        Args:
            dt: Seconds since the previous call.

        Returns:
            Number of ticks the driver should run now.
        """
        if self.paused:
            return 0
        self._accumulator += self.rate * dt
        steps = int(self._accumulator)
        self._accumulator -= steps
        if steps > self.max_ticks_per_frame:
            steps = self.max_ticks_per_frame
        return steps

    def toggle_pause(self) -> bool:
        """Flip the pause flag and return the new value."""
        self.paused = not self.paused
        return self.paused
