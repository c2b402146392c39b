"""Sprites, drawing and the interactive window."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from dataclasses import dataclass  # noqa: E402
from pathlib import Path  # noqa: E402

import pygame  # noqa: E402

from solong.game import Direction, Game, MoveOutcome  # noqa: E402
from solong.mapfile import (  # noqa: E402
    COLLECTIBLE,
    EXIT,
    FLOOR,
    PLAYER,
    TILE_SIZE,
    WALL,
    GameMap,
)

ASSET_FILES = ("character.xpm", "door.xpm", "floor.xpm", "key.xpm", "wall.xpm")
WINDOW_TITLE = "So_long"

_KEYS = {
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}


@dataclass
class SpriteSet:
    """One image per kind of tile."""

    player: pygame.Surface
    wall: pygame.Surface
    exit: pygame.Surface
    floor: pygame.Surface
    collectible: pygame.Surface

    def for_tile(self, tile: str) -> pygame.Surface | None:
        return {
            WALL: self.wall,
            FLOOR: self.floor,
            PLAYER: self.player,
            EXIT: self.exit,
            COLLECTIBLE: self.collectible,
        }.get(tile)


def missing_assets(asset_dir: str | os.PathLike[str] = "assets") -> list[Path]:
    """The sprite files that cannot be found in ``asset_dir``."""
    base = Path(asset_dir)
    return [base / name for name in ASSET_FILES if not (base / name).is_file()]


def load_sprites(asset_dir: str | os.PathLike[str] = "assets") -> SpriteSet:
    """Load every sprite from ``asset_dir``."""
    base = Path(asset_dir)
    try:
        player, door, floor, key, wall = (
            pygame.image.load(str(base / name)) for name in ASSET_FILES
        )
    except (pygame.error, OSError) as exc:
        raise RuntimeError("Failed to load one or more textures") from exc
    return SpriteSet(player=player, wall=wall, exit=door, floor=floor, collectible=key)


def draw(surface: pygame.Surface, game_map: GameMap, sprites: SpriteSet) -> None:
    """Blit every tile of the map onto ``surface``."""
    for y, row in enumerate(game_map.grid):
        for x, tile in enumerate(row):
            sprite = sprites.for_tile(tile)
            if sprite is not None:
                surface.blit(sprite, (x * TILE_SIZE, y * TILE_SIZE))


def run(game: Game, asset_dir: str | os.PathLike[str] = "assets") -> bool:
    """Open a window and play until the player wins or quits; True on a win."""
    sprites = load_sprites(asset_dir)
    grid = game.game_map.grid
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (len(grid[0]) * TILE_SIZE, len(grid) * TILE_SIZE)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return False
                if event.type != pygame.KEYDOWN:
                    continue
                if event.key == pygame.K_ESCAPE:
                    return False
                direction = _KEYS.get(event.key)
                if direction is not None and game.move(direction) is MoveOutcome.WON:
                    return True
            draw(screen, game.game_map, sprites)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()