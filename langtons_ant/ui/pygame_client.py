"""Pygame 2D visualization for Langton's ant.

Draws the coloured cells and the ant in a pannable, zoomable window.
The simulation steps at the configured tick rate while the display
refreshes at the Pygame frame rate.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from langtons_ant.simulation.engine import SimulationEngine

from langtons_ant.ui.palette import BACKGROUND, build_palette
from langtons_ant.ui.scheduler import TickScheduler
from langtons_ant.world.direction import Direction

logger = logging.getLogger(__name__)

# Colour palette
_ANT = (200, 30, 30)
_PANEL_BG = (30, 30, 30)
_PANEL_TEXT = (200, 200, 200)

_MIN_CELL = 1
_MAX_CELL = 64
_PAN_STEP = 5  # cells per arrow-key press

# Triangle vertices for the ant, in cell units relative to the cell centre
# with y pointing down the screen.
_ANT_SHAPES: dict[Direction, tuple[tuple[float, float], ...]] = {
    Direction.NORTH: ((0.0, -0.4), (-0.3, 0.3), (0.3, 0.3)),
    Direction.EAST: ((0.4, 0.0), (-0.3, -0.3), (-0.3, 0.3)),
    Direction.SOUTH: ((0.0, 0.4), (0.3, -0.3), (-0.3, -0.3)),
    Direction.WEST: ((-0.4, 0.0), (0.3, 0.3), (0.3, -0.3)),
}


class PygameRenderer:
    """Renders a SimulationEngine state into a Pygame window.

    Attributes:
        engine: The simulation engine to visualise.
        scheduler: Converts frame time into simulation ticks.
        cell_size: Current zoom, in pixels per cell.
        screen: The Pygame display surface.
    """

    def __init__(
        self,
        engine: SimulationEngine,
        cell_size: int = 8,
        size: tuple[int, int] = (800, 600),
        palette_seed: int | None = None,
    ) -> None:
        """Initialise the renderer.

        Args:
            engine: The simulation engine to render.
            cell_size: Initial pixel width/height per cell.
            size: Drawing area in pixels, excluding the side panel.
            palette_seed: Seed for the cell colour palette.
        """
        self.engine = engine
        self.scheduler = TickScheduler(rate=engine.config.rate)
        self.cell_size = cell_size
        self.palette = build_palette(len(engine.pattern), palette_seed)
        self._camera = (0.0, 0.0)
        self._dragging = False

        self._view_w, self._view_h = size
        self._panel_width = 220
        self._win_w = self._view_w + self._panel_width
        self._win_h = self._view_h

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("Langton's ant")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True

    def run(self, fps: int = 60) -> None:
        """Main loop: handle events, step sim, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            dt = self.clock.tick(fps) / 1000.0  # seconds elapsed
            self._handle_events()
            for _ in range(self.scheduler.advance(dt)):
                self.engine.step()
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self._handle_key(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._dragging = True
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self._dragging = False
            elif event.type == pygame.MOUSEMOTION and self._dragging:
                dx, dy = event.rel
                self._pan(-dx / self.cell_size, dy / self.cell_size)
            elif event.type == pygame.MOUSEWHEEL:
                self._zoom(event.y)

    def _handle_key(self, key: int) -> None:
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_SPACE:
            paused = self.scheduler.toggle_pause()
            logger.info(
                "%s at tick %d",
                "Paused" if paused else "Resumed",
                self.engine.tick,
            )
        elif key == pygame.K_r:
            self.engine.reset()
            self._camera = (0.0, 0.0)
        elif key == pygame.K_c:
            self._camera = (float(self.engine.ant.x), float(self.engine.ant.y))
        elif key == pygame.K_LEFT:
            self._pan(-_PAN_STEP, 0)
        elif key == pygame.K_RIGHT:
            self._pan(_PAN_STEP, 0)
        elif key == pygame.K_UP:
            self._pan(0, _PAN_STEP)
        elif key == pygame.K_DOWN:
            self._pan(0, -_PAN_STEP)

    def _pan(self, dx: float, dy: float) -> None:
        """Move the camera by ``(dx, dy)`` cells (y up)."""
        cx, cy = self._camera
        self._camera = (cx + dx, cy + dy)

    def _zoom(self, clicks: int) -> None:
        """Double or halve the cell size per wheel click, within limits."""
        size = self.cell_size
        if clicks > 0:
            size <<= clicks
        elif clicks < 0:
            size >>= -clicks
        self.cell_size = max(_MIN_CELL, min(_MAX_CELL, size))

    def _to_screen(self, x: int, y: int) -> tuple[int, int]:
        """Return the top-left pixel of cell ``(x, y)``."""
        cs = self.cell_size
        cx, cy = self._camera
        sx = self._view_w / 2 + (x - cx - 0.5) * cs
        sy = self._view_h / 2 - (y - cy + 0.5) * cs
        return int(sx), int(sy)

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(BACKGROUND)
        self._draw_cells()
        self._draw_ant()
        self._draw_info_panel()
        pygame.display.flip()

    def _draw_cells(self) -> None:
        """Draw every coloured cell that falls inside the view."""
        cs = self.cell_size
        for (x, y), colour in self.engine.grid.items():
            sx, sy = self._to_screen(x, y)
            if -cs < sx < self._view_w and -cs < sy < self._view_h:
                pygame.draw.rect(
                    self.screen,
                    self.palette[colour],
                    (sx, sy, cs, cs),
                )

    def _draw_ant(self) -> None:
        """Draw the ant as a triangle pointing along its heading."""
        cs = self.cell_size
        ant = self.engine.ant
        sx, sy = self._to_screen(ant.x, ant.y)
        cx = sx + cs / 2
        cy = sy + cs / 2
        if cs < 4:
            side = max(cs, 2)
            pygame.draw.rect(self.screen, _ANT, (sx, sy, side, side))
            return
        points = [(cx + px * cs, cy + py * cs) for px, py in _ANT_SHAPES[ant.heading]]
        pygame.draw.polygon(self.screen, _ANT, points)

    def _draw_info_panel(self) -> None:
        """Draw a stats panel on the right side of the window."""
        panel_x = self._view_w
        pygame.draw.rect(
            self.screen,
            _PANEL_BG,
            (panel_x, 0, self._panel_width, self._win_h),
        )
        engine = self.engine
        lines = [
            f"Tick: {engine.tick}",
            f"Rate: {self.scheduler.rate} t/s",
            f"{'PAUSED' if self.scheduler.paused else 'RUNNING'}",
            "",
            f"Pattern: {engine.pattern}",
            f"Cells: {len(engine.grid)}",
            f"Ant: {engine.ant.position}",
            f"Heading: {engine.ant.heading.name}",
            "",
            "--- Controls ---",
            "SPACE: pause",
            "R: reset",
            "C: centre on ant",
            "Arrows/drag: pan",
            "Wheel: zoom",
            "ESC: quit",
        ]

        y = 10
        for line in lines:
            surf = self.font.render(line, True, _PANEL_TEXT)
            self.screen.blit(surf, (panel_x + 10, y))
            y += 18
