"""Game state: the grid, the player and the rules for moving around it."""

from __future__ import annotations

import sys
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from treasurehunt.validate import count_chars

IMG_SIZE = 48
TITLE = "Treasure"

PEACH = "\033[38;5;217m"
RESET = "\033[0m"
CLEAR_SCREEN = "\033[H\033[2J"

XK_ESCAPE = 65307
XK_LEFT = 65361
XK_UP = 65362
XK_RIGHT = 65363
XK_DOWN = 65364

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COIN = "C"


class Direction(Enum):
    """A step the player can take, named by its key."""

    UP = "w"
    LEFT = "a"
    DOWN = "s"
    RIGHT = "d"

    @property
    def delta(self) -> Tuple[int, int]:
        """Row and column offsets of one step in this direction."""
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.LEFT: (0, -1),
    Direction.DOWN: (1, 0),
    Direction.RIGHT: (0, 1),
}

_ARROWS = {
    XK_UP: Direction.UP,
    XK_DOWN: Direction.DOWN,
    XK_RIGHT: Direction.RIGHT,
    XK_LEFT: Direction.LEFT,
}


def key_to_direction(key: Union[int, str]) -> Optional[Direction]:
    """Direction for an arrow keysym or a w/a/s/d key, else None."""
    if isinstance(key, int):
        if key in _ARROWS:
            return _ARROWS[key]
        if not 0 <= key < 0x110000:
            return None
        key = chr(key)
    try:
        return Direction(key)
    except ValueError:
        return None


def move_message(steps: int) -> str:
    """Screen-clearing, coloured line reporting the move count."""
    return f"{CLEAR_SCREEN}{PEACH}Moves counter : {steps}\n{RESET}"


class Game:
    """A running game on a validated map."""

    def __init__(self, grid: Sequence[str]) -> None:
        self._grid: List[List[str]] = [list(row) for row in grid]
        if not self._grid:
            raise ValueError("the map is empty")
        position = None
        for row_index, row in enumerate(self._grid):
            for col_index, tile in enumerate(row):
                if tile == PLAYER:
                    position = (row_index, col_index)
        if position is None:
            raise ValueError("the map has no player")
        self.player: Tuple[int, int] = position
        self.collectibles = count_chars(grid).collectibles
        self.collected = 0
        self.steps = 0
        self.can_exit = False
        self.running = True
        self.won = False

    @property
    def rows(self) -> Tuple[str, ...]:
        """The current map, one string per row."""
        return tuple("".join(row) for row in self._grid)

    def window_size(self) -> Tuple[int, int]:
        """Width and height in pixels of a window showing the map."""
        return len(self._grid[0]) * IMG_SIZE, len(self._grid) * IMG_SIZE

    def _target(self, direction: Direction) -> Optional[Tuple[int, int]]:
        d_row, d_col = direction.delta
        row, col = self.player[0] + d_row, self.player[1] + d_col
        if 0 <= row < len(self._grid) and 0 <= col < len(self._grid[row]):
            return row, col
        return None

    def check_next_tile(self, direction: Direction, tile: str) -> bool:
        """True when the tile next to the player in ``direction`` is ``tile``."""
        target = self._target(direction)
        if target is None:
            return False
        return self._grid[target[0]][target[1]] == tile

    def move(self, direction: Direction) -> bool:
        """Try to step the player; return whether the step was taken."""
        target = self._target(direction)
        if target is None:
            return False
        if self.check_next_tile(direction, WALL) or (
            not self.can_exit and self.check_next_tile(direction, EXIT)
        ):
            return False
        self.steps += 1
        if self.check_next_tile(direction, COIN):
            self.collected += 1
        if self.collected == self.collectibles:
            self.can_exit = True
        row, col = self.player
        self._grid[row][col] = FLOOR
        self.player = target
        sys.stdout.write(move_message(self.steps))
        row, col = target
        if self.can_exit and self._grid[row][col] == EXIT:
            self.won = True
            self.close()
        self._grid[row][col] = PLAYER
        return True

    def handle_key(self, key: Union[int, str]) -> None:
        """React to a key: Escape closes the game, movement keys move."""
        if key == XK_ESCAPE:
            self.close()
            return
        direction = key_to_direction(key)
        if direction is not None:
            self.move(direction)

    def close(self) -> None:
        """Stop the game."""
        self.running = False