"""Loading and validating ``.ber`` map files."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike

from solong.linereader import read_lines

TILE_SIZE = 64

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
TILES = WALL + FLOOR + COLLECTIBLE + EXIT + PLAYER

MAP_EXTENSION = ".ber"


class MapError(Exception):
    """A map file that cannot be played."""


def is_ber_file(filename: str | None) -> bool:
    """True when ``filename`` ends in ``.ber``."""
    if filename is None or len(filename) < len(MAP_EXTENSION):
        return False
    return filename.endswith(MAP_EXTENSION)


def read_grid(path: str | PathLike[str]) -> list[str]:
    """Read the rows of a map file, without their line endings."""
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise MapError(f"Cannot open map file: {exc}") from exc
    return [line[:-1] if line.endswith("\n") else line for line in lines]


@dataclass
class GameMap:
    """A rectangular grid of tiles, indexed as ``grid[y][x]``."""

    grid: list[list[str]] = field(default_factory=list)

    def validate(self) -> None:
        """Raise :class:`MapError` unless the map is playable."""
        if not self.grid or not self.grid[0]:
            raise MapError("Map grid is empty or invalid")
        if any(tile not in TILES for row in self.grid for tile in row):
            raise MapError("Cant find 01CEP")
        if (
            self.count(PLAYER) != 1
            or self.count(EXIT) != 1
            or self.count(COLLECTIBLE) == 0
        ):
            raise MapError("Map need to have PEC")
        width = len(self.grid[0])
        if any(len(row) != width for row in self.grid):
            raise MapError("Map has to be a rectangle")
        top, bottom = self.grid[0], self.grid[-1]
        if any(tile != WALL for tile in (*top, *bottom)) or any(
            row[0] != WALL or row[-1] != WALL for row in self.grid
        ):
            raise MapError("Map has to be surrounded by walls")

    def find_player(self) -> tuple[int, int] | None:
        """The ``(x, y)`` of the player; the last one found wins."""
        position = None
        for y, row in enumerate(self.grid):
            for x, tile in enumerate(row):
                if tile == PLAYER:
                    position = (x, y)
        return position

    def count(self, tile: str) -> int:
        """How many cells hold ``tile``."""
        return sum(row.count(tile) for row in self.grid)

    def copy(self) -> GameMap:
        """An independent copy of the map."""
        return GameMap([list(row) for row in self.grid])


def load_map(path: str | PathLike[str]) -> GameMap:
    """Read and validate the map at ``path``."""
    game_map = GameMap([list(row) for row in read_grid(path)])
    game_map.validate()
    return game_map