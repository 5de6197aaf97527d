"""Checks applied to the command line, the map file and the map grid."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from os import PathLike

from solong.mapfile import MapError

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
VISITED = "X"

VALID_TILES = frozenset({WALL, FLOOR, COLLECTIBLE, EXIT, PLAYER, "\n"})
_BLOCKING = frozenset({VISITED, WALL, EXIT})


def has_ber_extension(path: str | PathLike[str]) -> bool:
    """Tell whether ``path`` ends with ``.ber``."""
    return str(path).endswith(".ber")


def check_arguments(args: Sequence[str]) -> str:
    """Check that exactly one ``.ber`` map path was given and return it."""
    if len(args) != 1:
        raise MapError("arg non valide")
    path = args[0]
    if not has_ber_extension(path):
        raise MapError("no .BER")
    return path


def check_readable(path: str | PathLike[str]) -> str | PathLike[str]:
    """Check that ``path`` can be opened and is not empty; return it."""
    try:
        with open(path, "rb") as handle:
            first = handle.read(1)
    except OSError as exc:
        raise MapError("Fichier inexistant") from exc
    if not first:
        raise MapError("MAP vide")
    return path


def count_tiles(grid: Sequence[str]) -> Counter[str]:
    """Count every tile character in the grid."""
    return Counter(ch for row in grid for ch in row)


def _counts_ok(grid: Sequence[str]) -> bool:
    counts = count_tiles(grid)
    return counts[PLAYER] == 1 and counts[EXIT] == 1 and counts[COLLECTIBLE] >= 1


def has_valid_characters(grid: Sequence[str]) -> bool:
    """Tell whether the grid holds only known tile characters."""
    return all(ch in VALID_TILES for row in grid for ch in row)


def is_rectangular(grid: Sequence[str]) -> bool:
    """Tell whether all rows share one length, wider than the row count."""
    if not grid:
        return False
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        return False
    return width > len(grid)


def is_walled(grid: Sequence[str]) -> bool:
    """Tell whether the map is closed by walls on all four sides."""
    if not grid or any(not row for row in grid):
        return False
    top, bottom = grid[0], grid[-1]
    if any(ch != WALL for ch in top):
        return False
    if len(bottom) < len(top) or any(bottom[i] != WALL for i in range(len(top))):
        return False
    return all(row[0] == WALL and row[-1] == WALL for row in grid)


def _first_problem(grid: Sequence[str]) -> str | None:
    """Scan tiles in order: an unknown tile or wrong tile counts, whichever
    is noticed at the first tile examined that decides it."""
    counts_ok = _counts_ok(grid)
    for row in grid:
        for ch in row:
            if ch not in VALID_TILES:
                return "invalid"
            if not counts_ok:
                return "counts"
    return None


def validate_map(grid: Sequence[str]) -> Sequence[str]:
    """Check the map's contents, shape and walls; return the grid."""
    if not grid:
        raise MapError("empty map")
    problem = _first_problem(grid)
    if problem == "counts":
        raise MapError("Trop ou pas assez de PEC")
    if not is_rectangular(grid):
        raise MapError("Map pas rectangle")
    if not is_walled(grid):
        raise MapError("Wall")
    if problem == "invalid":
        raise MapError("Caracter invalide")
    return grid


def find_player(grid: Sequence[str]) -> tuple[int, int]:
    """Return (row, column) of the player; the last one found wins."""
    found = None
    for r, row in enumerate(grid):
        for c, ch in enumerate(row):
            if ch == PLAYER:
                found = (r, c)
    if found is None:
        raise MapError("no player on the map")
    return found


def flood_fill(grid: Sequence[str], row: int, col: int) -> list[str]:
    """Mark with ``X`` every tile reachable from (row, col).

    Walls, exits and already marked tiles stop the fill; row 0 and column 0
    are never entered. Returns a filled copy of the grid.
    """
    cells = [list(line) for line in grid]
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        if r <= 0 or c <= 0 or r >= len(cells) or c >= len(cells[r]):
            continue
        if cells[r][c] in _BLOCKING:
            continue
        cells[r][c] = VISITED
        stack.extend(((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)))
    return ["".join(line) for line in cells]


def _tile(cells: Sequence[str], r: int, c: int) -> str:
    if 0 <= r < len(cells) and 0 <= c < len(cells[r]):
        return cells[r][c]
    return WALL


def check_path(grid: Sequence[str]) -> list[str]:
    """Check that every collectible and the exit can be reached.

    Returns the flood-filled copy of the grid; raises MapError otherwise.
    """
    filled = flood_fill(grid, *find_player(grid))
    for r, row in enumerate(filled):
        for c, ch in enumerate(row):
            if ch == COLLECTIBLE:
                raise MapError("Pas de chemin")
            if ch == EXIT and all(
                _tile(filled, r + dr, c + dc) != VISITED
                for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1))
            ):
                raise MapError("Pas de chemin")
    return filled