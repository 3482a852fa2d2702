"""Board model for a 3x3 game of noughts and crosses."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Iterator

SCREEN_WIDTH = 600
SCREEN_HEIGHT = 600
GRID_SIZE = 3
CELL_SIZE = SCREEN_WIDTH // GRID_SIZE


class Mark(IntEnum):
    """Content of a cell; X and O double as the players."""

    EMPTY = 0
    X = 1
    O = 2  # noqa: E741

    def opponent(self) -> "Mark":
        """Return the player who moves after this one."""
        if self is Mark.EMPTY:
            raise ValueError("an empty cell has no opponent")
        return Mark.O if self is Mark.X else Mark.X


class GameState(IntEnum):
    """Phase of a game session."""

    MENU = -1
    PLAYING = 0
    X_WINS = 1
    O_WINS = 2
    DRAW = 3
    QUIT = 4

    @property
    def is_over(self) -> bool:
        """True once the game has a winner or is drawn."""
        return self in (GameState.X_WINS, GameState.O_WINS, GameState.DRAW)


class WinLine(Enum):
    """Kind of line that completed a win."""

    NONE = "none"
    ROW = "row"
    COLUMN = "column"
    DIAG_MAIN = "diag_main"
    DIAG_ANTI = "diag_anti"


def _winner_state(mark: Mark) -> GameState:
    return GameState.X_WINS if mark is Mark.X else GameState.O_WINS


class Board:
    """A square grid of marks with win and draw detection."""

    def __init__(self) -> None:
        self._cells: list[list[Mark]] = [
            [Mark.EMPTY] * GRID_SIZE for _ in range(GRID_SIZE)
        ]
        self.win_line = WinLine.NONE
        self.win_index = -1

    @staticmethod
    def _in_range(row: int, col: int) -> bool:
        return 0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE

    def place(self, row: int, col: int, mark: Mark) -> bool:
        """Put a mark in an empty cell; return False if the cell is off the board or taken."""
        if mark is Mark.EMPTY:
            raise ValueError("cannot place an empty mark")
        if not self._in_range(row, col) or self._cells[row][col] is not Mark.EMPTY:
            return False
        self._cells[row][col] = Mark(mark)
        return True

    def check_win(self) -> GameState:
        """Return the winning state, or PLAYING if no line is complete.

        Rows are checked first, then columns, then the main and the anti
        diagonal. The completed line is recorded in ``win_line`` and
        ``win_index``.
        """
        self.win_line = WinLine.NONE
        self.win_index = -1
        cells = self._cells

        candidates: list[tuple[WinLine, int, list[Mark]]] = []
        candidates.extend((WinLine.ROW, i, list(row)) for i, row in enumerate(cells))
        candidates.extend(
            (WinLine.COLUMN, j, [row[j] for row in cells]) for j in range(GRID_SIZE)
        )
        candidates.append(
            (WinLine.DIAG_MAIN, 0, [cells[k][k] for k in range(GRID_SIZE)])
        )
        candidates.append(
            (
                WinLine.DIAG_ANTI,
                1,
                [cells[k][GRID_SIZE - 1 - k] for k in range(GRID_SIZE)],
            )
        )

        for kind, index, line in candidates:
            first = line[0]
            if first is not Mark.EMPTY and all(cell is first for cell in line):
                self.win_line = kind
                self.win_index = index
                return _winner_state(first)
        return GameState.PLAYING

    def is_full(self) -> bool:
        """True when no cell is empty."""
        return all(cell is not Mark.EMPTY for row in self._cells for cell in row)

    def clear(self) -> None:
        """Empty every cell and forget the last winning line."""
        for row in self._cells:
            row[:] = [Mark.EMPTY] * GRID_SIZE
        self.win_line = WinLine.NONE
        self.win_index = -1

    def __getitem__(self, pos: tuple[int, int]) -> Mark:
        row, col = pos
        if not self._in_range(row, col):
            raise IndexError(f"cell {pos!r} is off the board")
        return self._cells[row][col]

    def __iter__(self) -> Iterator[tuple[Mark, ...]]:
        """Yield the rows, top to bottom, as tuples of marks."""
        for row in self._cells:
            yield tuple(row)