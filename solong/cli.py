"""Command line entry point: check the map, then play it."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import pygame

from solong.display import DEFAULT_TEXTURE_DIR, run
from solong.game import Game
from solong.mapfile import MapError, load_map
from solong.validation import check_arguments, check_path, check_readable, validate_map
from solong.xpm import XpmError


def prepare_game(args: Sequence[str]) -> Game:
    """Check the arguments and the map file, and return a ready game."""
    path = check_arguments(args)
    check_readable(path)
    grid = load_map(path)
    validate_map(grid)
    check_path(grid)
    return Game(grid)


def _fail(message: str) -> int:
    sys.stderr.write(f"Error\n{message}")
    sys.stderr.flush()
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        game = prepare_game(args)
    except MapError as exc:
        return _fail(str(exc))
    try:
        run(game, DEFAULT_TEXTURE_DIR)
    except XpmError:
        return _fail("Sprite")
    except pygame.error:
        return _fail("Path")
    return 0


if __name__ == "__main__":
    sys.exit(main())