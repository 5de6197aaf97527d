"""Drawing the game grid in a window and running the event loop."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from os import PathLike
from pathlib import Path

import pygame

from solong.game import KEY_ESC, Game
from solong.validation import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL
from solong.xpm import TRANSPARENT, XpmError, XpmImage, read_xpm

TILE_SIZE = 32
WINDOW_TITLE = "solong"
DEFAULT_TEXTURE_DIR = "./textures"

#: Texture file names, keyed by the tile they draw.
TEXTURE_FILES = {
    WALL: "wall.xpm",
    COLLECTIBLE: "coin.xpm",
    PLAYER: "player.xpm",
    EXIT: "shotgun.xpm",
    FLOOR: "floor.xpm",
}


def window_size(grid: Sequence[str]) -> tuple[int, int]:
    """Window (width, height) in pixels for a grid of 32-pixel tiles."""
    if not grid:
        return (0, 0)
    return (TILE_SIZE * len(grid[0]), TILE_SIZE * len(grid))


def xpm_to_surface(image: XpmImage) -> pygame.Surface:
    """Build a surface with per-pixel alpha from a decoded XPM image."""
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA)
    for y, row in enumerate(image.pixels):
        for x, value in enumerate(row):
            if value == TRANSPARENT:
                color = (0, 0, 0, 0)
            else:
                color = ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 255)
            surface.set_at((x, y), color)
    return surface


def load_textures(
    texture_dir: str | PathLike[str] = DEFAULT_TEXTURE_DIR,
) -> dict[str, pygame.Surface]:
    """Load every tile texture from ``texture_dir``; raise XpmError if one fails."""
    base = Path(texture_dir)
    textures: dict[str, pygame.Surface] = {}
    for tile, filename in TEXTURE_FILES.items():
        try:
            textures[tile] = xpm_to_surface(read_xpm(base / filename))
        except XpmError as exc:
            raise XpmError(f"Sprite: {filename}") from exc
    return textures


class Renderer:
    """Draws a game's grid with one texture per tile kind."""

    def __init__(self, game: Game, textures: Mapping[str, pygame.Surface]) -> None:
        self.game = game
        self.textures = dict(textures)

    def draw(self, surface: pygame.Surface) -> pygame.Surface:
        """Blit every known tile of the grid onto ``surface`` and return it."""
        for i, row in enumerate(self.game.rows()):
            for j, tile in enumerate(row):
                texture = self.textures.get(tile)
                if texture is not None:
                    surface.blit(texture, (j * TILE_SIZE, i * TILE_SIZE))
        return surface


def _keycode(key: int) -> int:
    return KEY_ESC if key == pygame.K_ESCAPE else key


def run(game: Game, texture_dir: str | PathLike[str] = DEFAULT_TEXTURE_DIR) -> Game:
    """Open the window and play until the game ends or the window closes."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size(game.rows()))
        pygame.display.set_caption(WINDOW_TITLE)
        renderer = Renderer(game, load_textures(texture_dir))
        renderer.draw(screen)
        pygame.display.flip()
        running = True
        while running and not game.finished:
            for event in pygame.event.wait(), *pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                if event.type == pygame.KEYUP:
                    if not game.handle_key(_keycode(event.key)):
                        running = False
                        break
                    renderer.draw(screen)
                    pygame.display.flip()
    finally:
        pygame.quit()
    return game