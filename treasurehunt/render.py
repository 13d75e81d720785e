"""Drawing the map in a window and running the event loop."""

from __future__ import annotations

import os
from typing import List, Sequence, Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from treasurehunt.game import (  # noqa: E402
    IMG_SIZE,
    TITLE,
    XK_DOWN,
    XK_ESCAPE,
    XK_LEFT,
    XK_RIGHT,
    XK_UP,
    Game,
)

TILE_COLOURS = {
    "1": (92, 64, 51),
    "0": (194, 178, 128),
    "P": (40, 120, 220),
    "E": (150, 90, 30),
    "C": (240, 200, 40),
}

_KEYS = {
    pygame.K_UP: XK_UP,
    pygame.K_DOWN: XK_DOWN,
    pygame.K_LEFT: XK_LEFT,
    pygame.K_RIGHT: XK_RIGHT,
    pygame.K_ESCAPE: XK_ESCAPE,
}


def tile_layout(grid: Sequence[str]) -> List[Tuple[int, int, str]]:
    """Pixel position and tile for every drawable tile of ``grid``."""
    return [
        (col * IMG_SIZE, row * IMG_SIZE, tile)
        for row, line in enumerate(grid)
        for col, tile in enumerate(line)
        if tile in TILE_COLOURS
    ]


class Renderer:
    """A window showing a game and feeding it key presses."""

    def __init__(self, game: Game) -> None:
        self.game = game
        pygame.display.init()
        self.screen = pygame.display.set_mode(game.window_size())
        pygame.display.set_caption(TITLE)
        self._clock = pygame.time.Clock()

    def draw(self) -> None:
        """Paint every tile of the current map."""
        for x, y, tile in tile_layout(self.game.rows):
            self.screen.fill(TILE_COLOURS[tile], (x, y, IMG_SIZE, IMG_SIZE))

    def run(self) -> None:
        """Loop until the game stops, then close the window."""
        try:
            while self.game.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.game.close()
                    elif event.type == pygame.KEYDOWN:
                        self.game.handle_key(_KEYS.get(event.key, event.key))
                if not self.game.running:
                    break
                self.draw()
                pygame.display.flip()
                self._clock.tick(60)
        finally:
            pygame.display.quit()