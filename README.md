# solong

A small top-down maze game. The player walks across a grid of tiles, picks up
every collectible, and then steps onto the exit to win. Maps are plain text
files with the `.ber` extension.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
solong path/to/level.ber
```

Called with anything other than exactly one argument, the command prints
`Usage: so_long <map_file>` and exits with status 1.

On start the map rows and the number of collectibles are printed, and a window
opens with one 64-pixel square per tile. Move with `W`, `A`, `S`, `D` or the
arrow keys; press `Escape` or close the window to quit. Every move is counted
and printed (`Moves: N`), as is every collectible picked up
(`Collected: N`). Walls block movement. Stepping onto the exit after all
collectibles have been collected prints `Congratulations! You win!` and closes
the window.

Tile images are loaded from a `content` directory relative to the directory
the game is started in: `grass.png`, `Player.png`, `wall.png`,
`Collectable.png` and `exit.png`.

## Map format

A map is a rectangle of characters, one row per line:

| Character | Meaning          |
|-----------|------------------|
| `1`       | wall             |
| `0`       | floor            |
| `P`       | player start     |
| `C`       | collectible      |
| `E`       | exit             |

Example:

```
1111111
1P0C0E1
1111111
```

A map is rejected, with a message printed after a line `Error` and exit
status 1, when:

- the file name does not end in `.ber`, or the file cannot be opened;
- it has fewer than three lines;
- a row is empty, or the rows are not all the same length;
- the first or last row is not made only of walls, or a middle row does not
  start and end with a wall;
- the file ends with a newline after the last row;
- it holds a character other than those above;
- there is not exactly one player and exactly one exit, or no collectible;
- some collectible or the exit cannot be reached from the player's start.

## Using it as a library

```python
from solong.mapfile import load_map, MapError
from solong.game import Game, Direction

try:
    game_map = load_map("level.ber")
except MapError as err:
    print(err)
else:
    game = Game(game_map)
    result = game.move(Direction.RIGHT)
    print(result.moved, result.moves, game.remaining)
```

- `solong.mapfile` — `load_map`, `parse_map` (validates map text without
  touching the file system), `count_elements`, `check_reachable`,
  `check_ber`, `count_lines`, and the `GameMap`, `Tile` and `MapError` types.
- `solong.game` — `Game`, whose `move` returns a `MoveResult`; `Direction`;
  and `direction_for_key`, which maps `w`/`a`/`s`/`d` and arrow key names to
  directions.
- `solong.app` — `Renderer`, which draws a game onto a pygame surface, and
  `run`, which opens the game window for a map path.

Small helper modules are included as well: `solong.chars` (character tests,
case conversion, `atol`, `itoa`), `solong.strings` (C-style string helpers),
`solong.memory` (byte-buffer helpers), `solong.output` (a printf-style
formatter with `%c %s %p %x %X %d %i %u`) and `solong.linereader`
(`LineReader`, reading a stream line by line in fixed-size chunks).