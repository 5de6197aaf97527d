"""Game state: the grid, the player's moves and the keys that drive them."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from solong.validation import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, find_player

KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_ESC = 65307


class Direction(Enum):
    """A move on the grid as (row step, column step)."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    def __init__(self, drow: int, dcol: int) -> None:
        self.drow = drow
        self.dcol = dcol


_KEYS = {
    KEY_W: Direction.UP,
    KEY_S: Direction.DOWN,
    KEY_A: Direction.LEFT,
    KEY_D: Direction.RIGHT,
}


class Game:
    """A running game on a validated map."""

    def __init__(self, grid: Sequence[str]) -> None:
        self._grid = [list(row) for row in grid]
        self.moves = 0
        self.won = False
        self.quit = False

    @property
    def finished(self) -> bool:
        """True once the player has won or asked to quit."""
        return self.won or self.quit

    def rows(self) -> list[str]:
        """The current grid as strings."""
        return ["".join(row) for row in self._grid]

    def player_position(self) -> tuple[int, int]:
        """Return (row, column) of the player."""
        return find_player(self.rows())

    def collectibles_left(self) -> int:
        """Number of collectibles still on the map."""
        return sum(row.count(COLLECTIBLE) for row in self._grid)

    def _tile(self, row: int, col: int) -> str:
        if 0 <= row < len(self._grid) and 0 <= col < len(self._grid[row]):
            return self._grid[row][col]
        return WALL

    def _count_move(self) -> None:
        self.moves += 1
        print(f"nb mouvements = {self.moves}")

    def move(self, direction: Direction) -> bool:
        """Try to move the player; return True when a move was counted.

        Stepping on the exit wins only once every collectible is taken;
        until then the exit blocks like a wall.
        """
        if self.finished:
            return False
        row, col = self.player_position()
        trow, tcol = row + direction.drow, col + direction.dcol
        target = self._tile(trow, tcol)
        if target == EXIT and not self.collectibles_left():
            self._count_move()
            self.won = True
            return True
        if target in (WALL, EXIT):
            return False
        self._grid[row][col] = FLOOR
        self._grid[trow][tcol] = PLAYER
        self._count_move()
        return True

    def handle_key(self, keycode: int) -> bool:
        """React to a key press; return True while the game goes on."""
        if keycode == KEY_ESC:
            self.quit = True
        elif keycode in _KEYS:
            self.move(_KEYS[keycode])
        return not self.finished