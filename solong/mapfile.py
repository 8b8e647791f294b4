"""Map files: loading, shape and content validation, reachability."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

Position = tuple[int, int]
PathLike = Union[str, "os.PathLike[str]"]

MAP_EXTENSION = ".ber"


class MapError(Exception):
    """A map that cannot be played; the message says why."""


class Tile(str, Enum):
    """The characters a map is made of."""

    WALL = "1"
    FLOOR = "0"
    PLAYER = "P"
    COLLECTIBLE = "C"
    EXIT = "E"


_VALID_TILES = frozenset(tile.value for tile in Tile)


@dataclass(frozen=True)
class GameMap:
    """A validated map: its rows, the player's start and the number of collectibles."""

    rows: tuple[str, ...]
    player: Position
    collectibles: int

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def tile(self, row: int, col: int) -> Tile:
        """The tile at (row, col); raises IndexError outside the map."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"position ({row}, {col}) is outside the map")
        return Tile(self.rows[row][col])


def check_ber(path: PathLike) -> str:
    """Return path as a string if it names a .ber file; raise MapError otherwise."""
    name = os.fsdecode(path)
    if not name.endswith(MAP_EXTENSION):
        raise MapError("Please provide a .ber file")
    return name


def count_lines(path: PathLike) -> int:
    """Number of newline characters in the file at path."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapError("Please provide a valid map") from exc
    return data.count(b"\n")


def _is_wall_row(line: str) -> bool:
    return bool(line) and set(line) == {Tile.WALL.value}


def _is_rectangular(lines: list[str], last_index: int) -> bool:
    width = len(lines[0])
    for index, line in enumerate(lines):
        if not line or len(line) != width:
            return False
        if index in (0, last_index):
            if not _is_wall_row(line):
                return False
        elif line[0] != Tile.WALL.value or line[-1] != Tile.WALL.value:
            return False
    return True


def parse_map(text: str) -> list[str]:
    """Split map text into rows and check its shape.

    The map needs at least three lines, walls all round, rows of equal length
    and no newline after the last row.
    """
    newlines = text.count("\n")
    if newlines <= 1:
        raise MapError("Map is too small")
    pieces = text.split("\n")
    has_last_line = pieces[-1] != ""
    lines = pieces if has_last_line else pieces[:-1]
    if not _is_rectangular(lines, newlines):
        raise MapError("Map is not a rectangle")
    if not has_last_line:
        raise MapError("last line is null")
    return lines


def count_elements(rows: list[str] | tuple[str, ...]) -> tuple[Position, int]:
    """Check every tile and the object counts; return the player position and collectible count."""
    players = collectibles = exits = 0
    player: Position = (0, 0)
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch not in _VALID_TILES:
                raise MapError("Invalid element in map")
            if ch == Tile.PLAYER.value:
                players += 1
                player = (r, c)
            elif ch == Tile.COLLECTIBLE.value:
                collectibles += 1
            elif ch == Tile.EXIT.value:
                exits += 1
    if players > 1:
        raise MapError("Too many players")
    if players == 0:
        raise MapError("No player")
    if collectibles == 0:
        raise MapError("No collectable")
    if exits == 0:
        raise MapError("No exit")
    if exits > 1:
        raise MapError("Too many exits")
    return player, collectibles


def check_reachable(
    rows: list[str] | tuple[str, ...], start: Position, collectibles: int
) -> frozenset[Position]:
    """Flood the map from start through non-wall tiles.

    Raises MapError unless every collectible and exactly one exit are reached.
    Returns the set of reached positions.
    """
    reached: set[Position] = set()
    stack = [start]
    while stack:
        r, c = stack.pop()
        if (r, c) in reached or not 0 <= r < len(rows) or not 0 <= c < len(rows[r]):
            continue
        if rows[r][c] == Tile.WALL.value:
            continue
        reached.add((r, c))
        stack.extend(((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)))
    found_collectibles = sum(rows[r][c] == Tile.COLLECTIBLE.value for r, c in reached)
    found_exits = sum(rows[r][c] == Tile.EXIT.value for r, c in reached)
    if found_collectibles != collectibles and found_exits != 1:
        raise MapError("Collectable and Exit is not reachable")
    if found_collectibles != collectibles:
        raise MapError("Collectable is not reachable")
    if found_exits != 1:
        raise MapError("Exit is not reachable")
    return frozenset(reached)


def load_map(path: PathLike) -> GameMap:
    """Read, validate and return the map stored at path."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapError("Cannot open file") from exc
    rows = parse_map(data.decode("latin-1"))
    player, collectibles = count_elements(rows)
    check_reachable(rows, player, collectibles)
    return GameMap(tuple(rows), player, collectibles)