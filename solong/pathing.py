"""Reachability checks on a map by flood fill."""

from __future__ import annotations

from collections.abc import Sequence

from solong.mapfile import COLLECTIBLE, EXIT, WALL, GameMap, MapError
from solong.output import printf

_VISITED = "V"


def flood_fill(grid: Sequence[Sequence[str]], start: tuple[int, int], target: str) -> int:
    """Count the ``target`` tiles reachable from ``start`` without crossing walls.

    When looking for collectibles the exit blocks the way. ``grid`` is left
    untouched; stepping off the grid raises :class:`MapError`.
    """
    cells = [list(row) for row in grid]
    found = 0
    pending = [start]
    while pending:
        x, y = pending.pop()
        if x < 0 or y < 0 or y >= len(cells) or x >= len(cells[y]):
            raise MapError("Out of borders")
        tile = cells[y][x]
        if tile == EXIT and target == COLLECTIBLE:
            continue
        if tile == target:
            found += 1
        if tile in (WALL, _VISITED):
            continue
        cells[y][x] = _VISITED
        pending.extend(((x, y + 1), (x, y - 1), (x + 1, y), (x - 1, y)))
    return found


def check_reachability(game_map: GameMap) -> None:
    """Raise :class:`MapError` unless every collectible and the exit can be reached."""
    start = game_map.find_player()
    if start is None:
        raise MapError("Map need to have PEC")
    reached = flood_fill(game_map.grid, start, COLLECTIBLE)
    if reached != game_map.count(COLLECTIBLE):
        raise MapError("Collectibles are not reacheable")
    printf("Collectibles are reacheable\n")
    if flood_fill(game_map.grid, start, EXIT) <= 0:
        raise MapError("Error : Exit is not reacheable")
    printf("Exit is reacheable\n")