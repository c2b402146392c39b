"""Game state and player movement."""

from __future__ import annotations

from enum import Enum

from solong.mapfile import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap, MapError
from solong.output import printf

_RED = "\033[1;31m"


class Direction(Enum):
    """A step on the grid and the key that triggers it."""

    UP = (0, -1, "w")
    DOWN = (0, 1, "s")
    LEFT = (-1, 0, "a")
    RIGHT = (1, 0, "d")

    def __init__(self, dx: int, dy: int, key: str) -> None:
        self.dx = dx
        self.dy = dy
        self.key = key

    @classmethod
    def from_key(cls, key: str) -> Direction | None:
        """The direction bound to ``key``, or ``None``."""
        return next((direction for direction in cls if direction.key == key), None)


class MoveOutcome(Enum):
    """What a move attempt did."""

    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"


class Game:
    """A running game on a map: player position, steps taken, items left."""

    def __init__(self, game_map: GameMap) -> None:
        position = game_map.find_player()
        if position is None:
            raise MapError("Map need to have PEC")
        self.game_map = game_map
        self.x, self.y = position
        self.steps = 0
        self.collectibles_left = game_map.count(COLLECTIBLE)
        self.won = False

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def move(self, direction: Direction) -> MoveOutcome:
        """Try to move the player one tile in ``direction``."""
        grid = self.game_map.grid
        new_x, new_y = self.x + direction.dx, self.y + direction.dy
        target = grid[new_y][new_x]
        if target == EXIT and self.collectibles_left > 0:
            return MoveOutcome.BLOCKED
        if target == COLLECTIBLE:
            self.collectibles_left -= 1
            grid[new_y][new_x] = FLOOR
        if target == EXIT and self.collectibles_left == 0:
            self.won = True
            printf(_RED + "Good Job! You won with %d steps\n", self.steps)
            return MoveOutcome.WON
        if grid[new_y][new_x] == WALL:
            return MoveOutcome.BLOCKED
        if grid[self.y][self.x] != EXIT:
            grid[self.y][self.x] = FLOOR
        if grid[new_y][new_x] != EXIT:
            grid[new_y][new_x] = PLAYER
        self.x, self.y = new_x, new_y
        self.steps += 1
        printf("Steps: %d\n", self.steps)
        return MoveOutcome.MOVED