"""Pygame 2D visualization of a frog path search.

Draws the pond as pointy-top hexagons coloured by terrain, shades cells
by traversal state and overlays the current path.  The search steps at a
configurable rate while the display refreshes at the Pygame frame rate.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, ClassVar

import numpy as np
import pygame

from frogpath.pond.cell import Terrain, TraversalState

if TYPE_CHECKING:
    from frogpath.pond.cell import Cell
    from frogpath.search.controller import FrogPath

# Colour palette
_BG = (12, 28, 40)
_OUTLINE = (20, 45, 60)
_TEXT = (200, 200, 200)
_PATH = (255, 220, 60)
_FROG = (90, 230, 90)

_TERRAIN_COLOURS: dict[Terrain, tuple[int, int, int]] = {
    Terrain.WATER: (40, 110, 170),
    Terrain.MUD: (110, 80, 50),
    Terrain.REEDS: (120, 150, 60),
    Terrain.LILY_PAD: (60, 170, 90),
    Terrain.ALLIGATOR: (170, 50, 50),
    Terrain.FOOD: (210, 160, 60),
}

# Retired cells fade toward grey
_RETIRED_TINT = np.array([70, 70, 70], dtype=np.float64)
_SQRT3 = math.sqrt(3.0)


class PygameRenderer:
    """Renders a FrogPath search into a Pygame window.

    Attributes:
        controller: The search to animate.
        cell_size: Hexagon radius in pixels.
        screen: The Pygame display surface.
    """

    # Speed presets: search steps per second
    _SPEED_STEPS: ClassVar[list[float]] = [0.5, 1.0, 2.0, 4.0, 8.0, 15.0, 30.0, 60.0]

    def __init__(
        self,
        controller: FrogPath,
        cell_size: int = 28,
        steps_per_second: float = 4.0,
    ) -> None:
        """Initialise the renderer.

        Args:
            controller: The search to render.
            cell_size: Hexagon radius in pixels.
            steps_per_second: Search steps per real-time second.

        Raises:
            ValueError: If the pond has no grid layout to draw.
        """
        pond = controller.pond
        if not pond.positions:
            msg = "pond has no grid layout to draw"
            raise ValueError(msg)

        self.controller = controller
        self.cell_size = cell_size
        self.steps_per_second = steps_per_second
        self._speed_index = self._nearest_speed(steps_per_second)
        self._step_accumulator = 0.0

        w = int(_SQRT3 * cell_size * (pond.width + 0.5)) + cell_size
        h = int(1.5 * cell_size * pond.height + cell_size)
        self._panel_width = 220
        self._win_w = w + self._panel_width
        self._win_h = max(h, 320)
        self._map_width = w

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("frogpath")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.small_font = pygame.font.SysFont("monospace", max(9, cell_size // 3))
        self.running = True
        self.paused = False

    def _nearest_speed(self, sps: float) -> int:
        """Return the index of the closest speed preset."""
        diffs = [abs(s - sps) for s in self._SPEED_STEPS]
        return diffs.index(min(diffs))

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events, step the search, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            dt = self.clock.tick(fps) / 1000.0
            self._handle_events()
            if not self.paused:
                self._step_accumulator += self.steps_per_second * dt
                steps = int(self._step_accumulator)
                self._step_accumulator -= steps
                for _ in range(steps):
                    self.controller.step()
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key == pygame.K_n and self.paused:
                    self.controller.step()
                elif event.key == pygame.K_r:
                    self.controller.reset()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._speed_index = min(
                        len(self._SPEED_STEPS) - 1,
                        self._speed_index + 1,
                    )
                    self.steps_per_second = self._SPEED_STEPS[self._speed_index]
                elif event.key == pygame.K_MINUS:
                    self._speed_index = max(0, self._speed_index - 1)
                    self.steps_per_second = self._SPEED_STEPS[self._speed_index]

    def _centre(self, cell: Cell) -> tuple[float, float]:
        """Pixel centre of a cell in odd-r offset layout."""
        col, row = self.controller.pond.positions[cell]
        cs = self.cell_size
        x = _SQRT3 * cs * (col + 0.5 * (row & 1)) + cs
        y = 1.5 * cs * row + cs
        return x, y

    def _corners(self, cx: float, cy: float) -> list[tuple[float, float]]:
        """Corners of a pointy-top hexagon centred at ``(cx, cy)``."""
        angles = np.radians(np.arange(6) * 60.0 - 30.0)
        r = self.cell_size - 1
        xs = cx + r * np.cos(angles)
        ys = cy + r * np.sin(angles)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_cells()
        self._draw_path()
        self._draw_info_panel()
        pygame.display.flip()

    def _draw_cells(self) -> None:
        """Draw every hexagon, tinted by traversal state."""
        for cell in self.controller.pond.cells:
            cx, cy = self._centre(cell)
            colour = np.array(_TERRAIN_COLOURS[cell.terrain], dtype=np.float64)
            if cell.state is TraversalState.RETIRED:
                colour = 0.4 * colour + 0.6 * _RETIRED_TINT
            corners = self._corners(cx, cy)
            pygame.draw.polygon(self.screen, colour.astype(int).tolist(), corners)
            pygame.draw.polygon(self.screen, _OUTLINE, corners, width=1)

            label = str(cell.cell_id)
            if cell.is_start:
                label = "S"
            elif cell.is_end:
                label = "E"
            else:
                food = cell.as_food()
                if food is not None:
                    label = f"{cell.cell_id}:{food.flies}"
            surf = self.small_font.render(label, True, _TEXT)
            self.screen.blit(surf, surf.get_rect(center=(cx, cy)))

    def _draw_path(self) -> None:
        """Draw the current start-to-frog path and the frog itself."""
        points = [self._centre(cell) for cell in self.controller.path]
        if len(points) > 1:
            pygame.draw.lines(self.screen, _PATH, False, points, width=3)
        if points:
            fx, fy = points[-1]
            pygame.draw.circle(
                self.screen,
                _FROG,
                (int(fx), int(fy)),
                max(3, self.cell_size // 3),
            )

    def _draw_info_panel(self) -> None:
        """Draw a stats panel on the right side of the window."""
        panel_x = self._map_width + 10
        y = 10
        ctl = self.controller
        status = ctl.state.name.replace("_", " ")

        lines = [
            f"Step: {ctl.iterations}",
            f"Speed: {self.steps_per_second:.1f} st/s",
            f"{'PAUSED' if self.paused else 'RUNNING'}",
            "",
            "--- Search ---",
            status,
            f"Path length: {len(ctl.path)}",
            f"Flies eaten: {ctl.flies_eaten}",
            f"Trace: {len(ctl.trace)} cells",
            "",
            "--- Controls ---",
            "SPACE: pause",
            "N: step (paused)",
            "R: restart",
            "+/-: speed",
            "ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, _TEXT)
            self.screen.blit(surf, (panel_x, y))
            y += 18
