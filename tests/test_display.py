import pygame
import pytest

from solong.display import (
    TILE_SIZE,
    Renderer,
    load_textures,
    window_size,
    xpm_to_surface,
)
from solong.game import Game
from solong.xpm import XpmError, parse_xpm

GRID = ["1111111", "1P0C0E1", "1111111"]

COLORS = {
    "wall.xpm": ("FF0000", (255, 0, 0, 255)),
    "coin.xpm": ("00FF00", (0, 255, 0, 255)),
    "player.xpm": ("0000FF", (0, 0, 255, 255)),
    "shotgun.xpm": ("FFFF00", (255, 255, 0, 255)),
    "floor.xpm": ("00FFFF", (0, 255, 255, 255)),
}


def _solid_xpm(hex_color):
    return (
        "/* XPM */\nstatic char *img[] = {\n"
        '"2 2 1 1",\n'
        f'"a c #{hex_color}",\n'
        '"aa",\n"aa"\n};\n'
    )


def _solid(color):
    surface = pygame.Surface((TILE_SIZE, TILE_SIZE), pygame.SRCALPHA)
    surface.fill(color)
    return surface


def test_window_size_uses_32_pixel_tiles():
    assert window_size(GRID) == (32 * 7, 32 * 3)


def test_window_size_scales_with_grid():
    wide = window_size(["1" * 10] * 2)
    narrow = window_size(["1" * 5] * 2)
    assert wide[0] == 2 * narrow[0]
    assert wide[1] == narrow[1]


def test_xpm_to_surface_colors_and_transparency():
    image = parse_xpm('"2 1 2 1",\n"a c #FF0000",\n"b c None",\n"ab"\n')
    surface = xpm_to_surface(image)
    assert surface.get_size() == (2, 1)
    assert tuple(surface.get_at((0, 0))) == (255, 0, 0, 255)
    assert surface.get_at((1, 0)).a == 0


def test_load_textures_reads_every_tile(tmp_path):
    for name, (hex_color, _) in COLORS.items():
        (tmp_path / name).write_text(_solid_xpm(hex_color))
    textures = load_textures(tmp_path)
    assert set(textures) == {"1", "0", "P", "E", "C"}
    assert tuple(textures["1"].get_at((0, 0))) == COLORS["wall.xpm"][1]
    assert tuple(textures["E"].get_at((1, 1))) == COLORS["shotgun.xpm"][1]
    assert tuple(textures["C"].get_at((0, 1))) == COLORS["coin.xpm"][1]


def test_load_textures_missing_file_raises(tmp_path):
    (tmp_path / "wall.xpm").write_text(_solid_xpm("FF0000"))
    with pytest.raises(XpmError, match="Sprite"):
        load_textures(tmp_path)


def test_renderer_draws_each_tile_in_place():
    textures = {
        "1": _solid((255, 0, 0, 255)),
        "0": _solid((0, 255, 255, 255)),
        "P": _solid((0, 0, 255, 255)),
        "E": _solid((255, 255, 0, 255)),
        "C": _solid((0, 255, 0, 255)),
    }
    game = Game(GRID)
    screen = pygame.Surface(window_size(GRID), pygame.SRCALPHA)
    result = Renderer(game, textures).draw(screen)
    assert result is screen
    for i, row in enumerate(GRID):
        for j, tile in enumerate(row):
            pixel = tuple(screen.get_at((j * TILE_SIZE + 5, i * TILE_SIZE + 5)))
            assert pixel == tuple(textures[tile].get_at((0, 0)))


def test_renderer_follows_player_moves():
    textures = {"P": _solid((0, 0, 255, 255)), "0": _solid((0, 255, 255, 255))}
    game = Game(GRID)
    game.handle_key(100)
    screen = pygame.Surface(window_size(GRID), pygame.SRCALPHA)
    Renderer(game, textures).draw(screen)
    assert tuple(screen.get_at((2 * TILE_SIZE, TILE_SIZE))) == (0, 0, 255, 255)
    assert tuple(screen.get_at((1 * TILE_SIZE, TILE_SIZE))) == (0, 255, 255, 255)