"""Checks that a loaded map is playable."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from treasurehunt.errors import (
    ERRCHARS,
    ERREDGES,
    ERROTHER,
    ERRPLAYER,
    ERRREC,
    MapError,
)

VALID_TILES = frozenset("01CEP")


@dataclass(frozen=True)
class MapCounts:
    """How many players, exits and collectibles a map holds."""

    players: int = 0
    exits: int = 0
    collectibles: int = 0


def count_chars(grid: Sequence[str]) -> MapCounts:
    """Count the player, exit and collectible tiles of ``grid``."""
    text = "".join(grid)
    return MapCounts(
        players=text.count("P"),
        exits=text.count("E"),
        collectibles=text.count("C"),
    )


def check_top_bot(row: str) -> bool:
    """True when ``row`` is made only of walls."""
    return all(tile == "1" for tile in row)


def check_edges(grid: Sequence[str]) -> bool:
    """True when the map is enclosed by walls."""
    if not grid:
        return False
    if not (check_top_bot(grid[0]) and check_top_bot(grid[-1])):
        return False
    width = len(grid[0])
    return all(
        row[:1] == "1" and row[width - 1:width] == "1" for row in grid[1:-1]
    )


def check_rectangle(grid: Sequence[str]) -> bool:
    """True when every row is as long as the first."""
    if not grid:
        return False
    width = len(grid[0])
    return all(len(row) == width for row in grid)


def check_map(grid: Sequence[str]) -> MapCounts:
    """Validate ``grid`` and return its tile counts.

    Raises MapError with the message of the first rule that fails.
    """
    if any(tile not in VALID_TILES for row in grid for tile in row):
        raise MapError(ERROTHER)
    counts = count_chars(grid)
    if not (counts.collectibles and counts.exits and counts.players):
        raise MapError(ERRCHARS)
    if counts.players > 1:
        raise MapError(ERRPLAYER)
    if not check_rectangle(grid):
        raise MapError(ERRREC)
    if not check_edges(grid):
        raise MapError(ERREDGES)
    return counts