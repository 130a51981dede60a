from __future__ import annotations

from typing import List, Tuple

import pygame

from .coordinate import Coordinate
from .grid import Grid
from .orientation import Orientation
from .rover import Rover


# Dark theme palette
THEME = {
    "bg": (18, 22, 32),
    "cell": (28, 34, 48),
    "grid": (45, 52, 70),
    "obstacle_fill": (120, 72, 60),
    "obstacle_edge": (160, 96, 80),
    "failure": (255, 90, 90),
    "rover_fill": (100, 220, 255),
    "rover_outline": (40, 140, 200),
    "trail": (60, 160, 200),
    "hud_bg": (28, 34, 48),
    "hud_border": (55, 65, 88),
    "hud_text": (200, 220, 255),
}


class GridRenderer:
    """Top-down view of the grid, obstacles and rover.

    Coordinates:
    - Cell (0,0) is drawn at the bottom-left of the window.
    - Row index is flipped so that grid +y is up while screen y increases downward.
    """

    def __init__(self, grid: Grid, cell_size: int = 96, show_trail: bool = True) -> None:
        pygame.init()
        pygame.display.set_caption("Mars Rover")
        self.grid = grid
        self.cell_size = cell_size
        self.window_width = grid.width * cell_size
        self.window_height = grid.height * cell_size
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        self.clock = pygame.time.Clock()
        self.show_trail = show_trail
        self.trail: List[Coordinate] = []

    # ------------------------------------------------------------------
    # Coordinate transforms
    # ------------------------------------------------------------------
    def _cell_rect(self, c: Coordinate) -> pygame.Rect:
        sx = c.x * self.cell_size
        sy = self.window_height - (c.y + 1) * self.cell_size
        return pygame.Rect(sx, sy, self.cell_size, self.cell_size)

    def _cell_center(self, c: Coordinate) -> Tuple[int, int]:
        return self._cell_rect(c).center

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def draw(self, rover: Rover, label: str = "") -> None:
        """Render one frame."""
        self.screen.fill(THEME["bg"])

        for y in range(self.grid.height):
            for x in range(self.grid.width):
                c = Coordinate(x, y)
                rect = self._cell_rect(c)
                if self.grid.is_obstacle(c):
                    pygame.draw.rect(self.screen, THEME["obstacle_fill"], rect)
                    pygame.draw.rect(self.screen, THEME["obstacle_edge"], rect, 2)
                else:
                    pygame.draw.rect(self.screen, THEME["cell"], rect)
                pygame.draw.rect(self.screen, THEME["grid"], rect, 1)

        position = rover.current_position()
        if self.show_trail:
            if not self.trail or self.trail[-1] != position:
                self.trail.append(position)
            if len(self.trail) >= 2:
                pts = [self._cell_center(p) for p in self.trail]
                pygame.draw.lines(self.screen, THEME["trail"], False, pts, 2)

        failure = rover.last_failure_position()
        if failure is not None:
            rect = self._cell_rect(failure).inflate(-self.cell_size // 4, -self.cell_size // 4)
            pygame.draw.line(self.screen, THEME["failure"], rect.topleft, rect.bottomright, 4)
            pygame.draw.line(self.screen, THEME["failure"], rect.topright, rect.bottomleft, 4)

        self._draw_rover(position, rover.current_orientation())
        self._draw_hud(rover, label)
        pygame.display.flip()

    def _draw_rover(self, position: Coordinate, heading: Orientation) -> None:
        cx, cy = self._cell_center(position)
        half = self.cell_size // 3
        dx, dy = heading.delta
        # Screen y is flipped
        tip = (cx + dx * half, cy - dy * half)
        left = (cx - dy * half // 2 - dx * half // 2, cy - dx * half // 2 + dy * half // 2)
        right = (cx + dy * half // 2 - dx * half // 2, cy + dx * half // 2 + dy * half // 2)
        tri = [tip, left, right]
        pygame.draw.polygon(self.screen, THEME["rover_fill"], tri)
        pygame.draw.polygon(self.screen, THEME["rover_outline"], tri, 2)

    def _draw_hud(self, rover: Rover, label: str) -> None:
        pad = 6
        font = pygame.font.SysFont("monospace", 13)
        text = f" {rover.current_position()} {rover.current_orientation().letter} {label} "
        surf = font.render(text, True, THEME["hud_text"])
        r = surf.get_rect(topleft=(pad, pad))
        panel = r.inflate(pad, pad)
        pygame.draw.rect(self.screen, THEME["hud_bg"], panel)
        pygame.draw.rect(self.screen, THEME["hud_border"], panel, 1)
        self.screen.blit(surf, (panel.x + 3, panel.y + 3))

    def pump(self) -> bool:
        """Process window events; False once the window was closed."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
        return True

    def tick(self, target_fps: int) -> float:
        """Cap frame rate and return achieved FPS."""
        fps = self.clock.get_fps()
        self.clock.tick(target_fps)
        return fps

    def close(self) -> None:
        pygame.quit()
