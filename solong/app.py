"""The windowed game: drawing the map and running the event loop."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.game import Game, MoveResult, direction_for_key  # noqa: E402
from solong.mapfile import MapError, PathLike, Tile, check_ber, load_map  # noqa: E402
from solong.output import print_formatted  # noqa: E402

PROG = "so_long"
TILE_SIZE = 64
FPS = 60
DEFAULT_ASSETS_DIR = Path("content")

FLOOR_FILE = "grass.png"
PLAYER_FILE = "Player.png"
WALL_FILE = "wall.png"
COLLECTIBLE_FILE = "Collectable.png"
EXIT_FILE = "exit.png"

_KEY_NAMES = {
    pygame.K_w: "w",
    pygame.K_UP: "up",
    pygame.K_s: "s",
    pygame.K_DOWN: "down",
    pygame.K_a: "a",
    pygame.K_LEFT: "left",
    pygame.K_d: "d",
    pygame.K_RIGHT: "right",
}


def _load(path: Path) -> pygame.Surface:
    return pygame.image.load(str(path))


class Renderer:
    """Draws a game's tiles and player onto a surface, one 64-pixel square per tile."""

    def __init__(self, game: Game, assets_dir: PathLike = DEFAULT_ASSETS_DIR) -> None:
        self.game = game
        base = Path(assets_dir)
        self._floor = _load(base / FLOOR_FILE)
        self._player = _load(base / PLAYER_FILE)
        self._objects = {
            Tile.WALL: _load(base / WALL_FILE),
            Tile.COLLECTIBLE: _load(base / COLLECTIBLE_FILE),
            Tile.EXIT: _load(base / EXIT_FILE),
        }

    @property
    def size(self) -> tuple[int, int]:
        """Window size in pixels for the game's map."""
        rows = self.game.rows
        width = len(rows[0]) if rows else 0
        return width * TILE_SIZE, len(rows) * TILE_SIZE

    def draw(self, surface: pygame.Surface) -> None:
        """Draw floor everywhere, then walls, collectibles and the exit, then the player."""
        rows = self.game.rows
        for r, row in enumerate(rows):
            for c in range(len(row)):
                surface.blit(self._floor, (c * TILE_SIZE, r * TILE_SIZE))
        for r, row in enumerate(rows):
            for c, ch in enumerate(row):
                image = self._objects.get(Tile(ch))
                if image is not None:
                    surface.blit(image, (c * TILE_SIZE, r * TILE_SIZE))
        row, col = self.game.position
        surface.blit(self._player, (col * TILE_SIZE, row * TILE_SIZE))


def _report(result: MoveResult) -> None:
    if result.picked_up:
        print_formatted("Collected: %d\n", result.collected)
    if result.won:
        print_formatted("Congratulations! You win!\n")
    if result.moved:
        print_formatted("Moves: %d\n", result.moves)


def _handle_key(game: Game, key: int) -> bool:
    """Apply a key press; return False when the window should close."""
    if key == pygame.K_ESCAPE:
        return False
    name = _KEY_NAMES.get(key)
    direction = direction_for_key(name) if name else None
    if direction is None:
        return True
    result = game.move(direction)
    _report(result)
    return not result.won


def run(path: PathLike, assets_dir: PathLike = DEFAULT_ASSETS_DIR) -> Game:
    """Load the map at path, play it in a window until it is closed or won; return the game."""
    game_map = load_map(check_ber(path))
    game = Game(game_map)
    pygame.init()
    try:
        renderer = Renderer(game, assets_dir)
        screen = pygame.display.set_mode(renderer.size)
        pygame.display.set_caption(PROG)
        renderer.draw(screen)
        print_formatted("%s", "".join(game_map.rows))
        print_formatted("\nCollectibles: %d\n", game_map.collectibles)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and not _handle_key(game, event.key):
                    running = False
            renderer.draw(screen)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return game


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: play the .ber map named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print_formatted("Usage: %s <map_file>\n", PROG)
        return 1
    try:
        run(args[0])
    except MapError as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return 1
    except (OSError, pygame.error) as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())