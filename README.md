# solong

A small top-down puzzle game. You walk a character around a walled map,
pick up every key, and then step onto the door to win. The step count is
printed after each move.

## Installing

```
pip install .
```

The game window is drawn with pygame.

## Playing

```
so_long path/to/level.ber
```

The command takes exactly one argument, and it must be the name of a file
that ends in `.ber`. Anything else prints a usage message and exits with
status 1.

Before the window opens, the map is loaded and checked, and the messages
`Collectibles are reacheable` and `Exit is reacheable` are printed.

Controls:

| Key   | Action     |
|-------|------------|
| W     | move up    |
| A     | move left  |
| S     | move down  |
| D     | move right |
| Esc   | quit       |

Closing the window also quits. Walls block you. The door cannot be entered
until every key has been collected; stepping onto it after that ends the game
with a `Good Job! You won with N steps` message and exit status 0.

## Map files

A map is a plain text file with one row per line. It uses these characters:

| Char | Meaning           |
|------|-------------------|
| `1`  | wall              |
| `0`  | floor             |
| `P`  | player start      |
| `E`  | exit (door)       |
| `C`  | collectible (key) |

For a map to load, it must meet all of these rules, checked in this order:

- it is not empty;
- it uses only the characters above;
- it has exactly one `P`, exactly one `E` and at least one `C`;
- it is a rectangle, so every row has the same length;
- it is closed in by walls on all four sides;
- the player can reach every collectible without passing through the exit,
  and can reach the exit.

Example:

```
1111111
1P0C0E1
1111111
```

If a rule is broken, or the file cannot be opened, the game prints `ERROR`
and a short reason, then exits with status 1.

## Assets

Sprites are loaded from an `assets/` directory in the current working
directory, holding `character.xpm`, `door.xpm`, `floor.xpm`, `key.xpm` and
`wall.xpm`. Each tile is drawn 64 pixels apart. The paths of any missing
files are printed at startup; if a sprite cannot be loaded the game prints
`Error: Failed to load one or more textures` and exits with status 1.

## Using it as a library

The map and game logic can be used without opening a window:

```python
from solong.mapfile import load_map
from solong.pathing import check_reachability
from solong.game import Game, Direction, MoveOutcome

game_map = load_map("level.ber")      # raises solong.mapfile.MapError
check_reachability(game_map)          # raises MapError if something is cut off
game = Game(game_map)
outcome = game.move(Direction.RIGHT)  # MoveOutcome.BLOCKED, MOVED or WON
```

- `solong.mapfile`: `is_ber_file`, `read_grid`, `load_map`, `MapError` and
  `GameMap` (a grid indexed as `grid[y][x]`, with `validate`, `find_player`,
  `count` and `copy`).
- `solong.pathing`: `flood_fill(grid, start, target)` counts reachable
  tiles of a kind; `check_reachability(game_map)` runs both map checks.
- `solong.game`: `Direction` (with `from_key("w")` and so on), `MoveOutcome`
  and `Game` (`position`, `steps`, `collectibles_left`, `won`, `move`).
  Moves print the step count to standard output.
- `solong.display`: `missing_assets`, `load_sprites`, `SpriteSet`,
  `draw(surface, game_map, sprites)` and `run(game, asset_dir)`.
- `solong.cli`: `main(argv=None)`, the function behind `so_long`.

The package also carries small helper modules: `solong.charclass` (ASCII
classification, `atoi`, `itoa`), `solong.memory` (byte-buffer operations),
`solong.strings` (C-style string functions on Python strings),
`solong.linkedlist` (`LinkedList`, `Node`), `solong.output` (`printf`,
`format_printf` and `put_*` writers) and `solong.linereader` (`LineReader`,
`read_lines`).

## Running the tests

```
pip install .[test]
pytest
```