# solong

A small top-down tile game. You walk a player around a walled map, pick up
every coin and then step onto the exit. Each move that counts prints the
running total as `nb mouvements = N` on standard output.

## Installing

```
pip install .
```

## Playing

```
so_long path/to/level.ber
```

The same entry point can be started with `python -m solong.cli level.ber`.

The game loads its tiles from a folder `textures/` in the working
directory. That folder must hold `wall.xpm`, `coin.xpm`, `player.xpm`,
`shotgun.xpm` (the exit) and `floor.xpm`. Tiles are placed on a 32-pixel
grid, so each image should be 32×32. The window is 32 pixels per map
column wide and 32 pixels per map row tall.

Controls (acted on when the key is released):

| Key | Action     |
|-----|------------|
| W   | move up    |
| A   | move left  |
| S   | move down  |
| D   | move right |
| Esc | quit       |

Closing the window also ends the game. Walls block the player. While coins
remain, the exit blocks the player like a wall. Once every coin has been
collected, stepping onto the exit counts the move, prints it and ends the
game.

## Map files

A map is a text file whose name ends in `.ber`. It is made of these
characters:

- `1` wall
- `0` floor
- `C` coin (at least one)
- `E` exit (exactly one)
- `P` player start (exactly one)

A map is accepted only if it meets all of these rules:

- It is a rectangle, and it is wider than it is tall.
- It is enclosed by walls on every side.
- It does not start with a blank line and contains no blank lines.
- Every coin and the exit can be reached from the start.

For example:

```
1111111111
1P0C00C0E1
1111111111
```

If the arguments or the map are rejected, the program writes `Error`, then
a newline, then the reason to standard error, and exits with status 1.

The reasons are:

- `arg non valide`: not exactly one argument was given.
- `no .BER`: the file name does not end in `.ber`.
- `Fichier inexistant`: the file cannot be opened.
- `MAP vide`: the file is empty.
- `Ligne vide` or `trop despaces`: the map has blank lines.
- `Trop ou pas assez de PEC`: the number of players, exits or coins is wrong.
- `Map pas rectangle`: the map is not a rectangle wider than it is tall.
- `Wall`: the map is not enclosed by walls.
- `Caracter invalide`: the map contains an unknown character.
- `Pas de chemin`: a coin or the exit cannot be reached.

It reports `Sprite` when a texture cannot be loaded, and `Path` when the
window cannot be opened.

## Using it as a library

```python
from solong.mapfile import load_map
from solong.validation import validate_map, check_path
from solong.game import Game, Direction

grid = load_map("level.ber")
validate_map(grid)
check_path(grid)

game = Game(grid)
game.move(Direction.RIGHT)
print(game.player_position(), game.collectibles_left(), game.moves)
```

The package is split into these modules:

- `solong.mapfile` reads map text and splits it into rows: `load_map`,
  `read_map_text`, `check_blank_lines` and `split_rows`. Its errors are
  raised as `MapError`.
- `solong.validation` checks the arguments, the file and the grid:
  `check_arguments`, `check_readable`, `validate_map`, `is_rectangular`,
  `is_walled`, `has_valid_characters` and `count_tiles`. It also finds the
  player and checks that coins and the exit can be reached, with
  `find_player`, `flood_fill` and `check_path`.
- `solong.game` holds the game state. `Game` has `move`, `handle_key`,
  `rows`, `player_position`, `collectibles_left`, and the attributes
  `moves`, `won`, `quit` and `finished`. `Direction` gives the moves `UP`,
  `DOWN`, `LEFT` and `RIGHT`.
- `solong.xpm` decodes XPM images: `read_xpm`, `parse_xpm`,
  `parse_xpm_lines`, `strip_comments`, `quoted_lines` and `split_words`.
  It returns `XpmImage` objects with `width`, `height`, `pixels` and
  `pixel(x, y)`. A pixel whose colour is `None` is stored as `TRANSPARENT`.
  Errors are raised as `XpmError`.
- `solong.colors` resolves X11 colour names, ignoring case:
  `lookup_color`, and `text_to_rgb` for XPM colour words such as `#ff0000`
  or `red`.
- `solong.display` draws the game with pygame: `window_size`,
  `xpm_to_surface`, `load_textures`, `Renderer` and `run`.
- `solong.cli` puts it together: `prepare_game` and `main`.

## What it does not do

No texture images come with the package. You must supply the five `.xpm`
files yourself in `textures/`.

The move count is printed to the terminal, not drawn in the window.

There is only one map per run, with no level sequence and no saved
progress.

## Running the tests

```
pip install .[test]
pytest
```