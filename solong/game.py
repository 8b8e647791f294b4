"""Game state and player movement on a validated map."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from solong.mapfile import GameMap, Position, Tile


class Direction(Enum):
    """A step of one tile, as a (row, column) offset."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta_row(self) -> int:
        return self.value[0]

    @property
    def delta_col(self) -> int:
        return self.value[1]


_KEY_DIRECTIONS = {
    "w": Direction.UP,
    "up": Direction.UP,
    "s": Direction.DOWN,
    "down": Direction.DOWN,
    "a": Direction.LEFT,
    "left": Direction.LEFT,
    "d": Direction.RIGHT,
    "right": Direction.RIGHT,
}


def direction_for_key(key: str) -> Direction | None:
    """The direction bound to a key name (W/A/S/D or an arrow), or None."""
    return _KEY_DIRECTIONS.get(key.lower())


@dataclass(frozen=True)
class MoveResult:
    """What a single move attempt did."""

    moved: bool
    start: Position
    end: Position
    moves: int
    picked_up: bool = False
    collected: int = 0
    won: bool = False


class Game:
    """A running game: the tiles, the player's position and the counters."""

    def __init__(self, game_map: GameMap) -> None:
        self._tiles = [list(row) for row in game_map.rows]
        self.position: Position = game_map.player
        self.collectibles = game_map.collectibles
        self.collected = 0
        self.moves = 0
        self.won = False

    @property
    def rows(self) -> tuple[str, ...]:
        """The current tiles, one string per row."""
        return tuple("".join(row) for row in self._tiles)

    @property
    def remaining(self) -> int:
        """Collectibles not yet picked up."""
        return self.collectibles - self.collected

    def tile(self, row: int, col: int) -> Tile:
        """The tile currently at (row, col)."""
        if not (0 <= row < len(self._tiles) and 0 <= col < len(self._tiles[row])):
            raise IndexError(f"position ({row}, {col}) is outside the map")
        return Tile(self._tiles[row][col])

    def move(self, direction: Direction) -> MoveResult:
        """Try to step the player one tile; walls block, and nothing moves once the game is won."""
        start = self.position
        if self.won:
            return MoveResult(False, start, start, self.moves, collected=self.collected, won=True)
        row = start[0] + direction.delta_row
        col = start[1] + direction.delta_col
        target = self.tile(row, col)
        if target is Tile.WALL:
            return MoveResult(False, start, start, self.moves, collected=self.collected)
        self.position = (row, col)
        picked_up = False
        if target is Tile.COLLECTIBLE:
            self._tiles[row][col] = Tile.FLOOR.value
            self.collected += 1
            picked_up = True
        if target is Tile.EXIT and self.collected == self.collectibles:
            self.won = True
        self.moves += 1
        return MoveResult(
            True, start, self.position, self.moves, picked_up, self.collected, self.won
        )