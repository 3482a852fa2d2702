"""Game session: turn order, menu buttons and the state machine driven by clicks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from tictactoe.board import (
    CELL_SIZE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Board,
    GameState,
    Mark,
)

log = logging.getLogger(__name__)

BUTTON_WIDTH = 200
BUTTON_HEIGHT = 60
BUTTON_GAP = 15
PLAY_AGAIN_MESSAGE = "Click to Play Again"


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in screen pixels."""

    x: int
    y: int
    w: int
    h: int

    def contains(self, x: int, y: int) -> bool:
        """True if the point lies inside; the right and bottom edges are excluded."""
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def cell_at(x: int, y: int) -> tuple[int, int]:
    """Map a screen point to the (row, col) of the grid cell under it."""
    return _trunc_div(y, CELL_SIZE), _trunc_div(x, CELL_SIZE)


def _play_button() -> Rect:
    return Rect(
        (SCREEN_WIDTH - BUTTON_WIDTH) // 2,
        SCREEN_HEIGHT // 2 - BUTTON_HEIGHT - BUTTON_GAP,
        BUTTON_WIDTH,
        BUTTON_HEIGHT,
    )


def _quit_button() -> Rect:
    return Rect(
        (SCREEN_WIDTH - BUTTON_WIDTH) // 2,
        SCREEN_HEIGHT // 2 + BUTTON_GAP,
        BUTTON_WIDTH,
        BUTTON_HEIGHT,
    )


@dataclass
class Session:
    """The state of one running game, independent of any display.

    With ``with_menu`` set the session opens on the menu and returns there
    after a finished game; without it play starts at once and a click on a
    finished game starts a new one.
    """

    with_menu: bool = True
    board: Board = field(default_factory=Board)
    current_player: Mark = Mark.X
    state: GameState = field(init=False)
    running: bool = True
    play_button: Rect = field(default_factory=_play_button)
    quit_button: Rect = field(default_factory=_quit_button)

    def __post_init__(self) -> None:
        self.state = GameState.MENU if self.with_menu else GameState.PLAYING

    def handle_click(self, x: int, y: int) -> GameState:
        """Apply a mouse click at (x, y) and return the resulting state."""
        if self.state is GameState.MENU:
            if self.play_button.contains(x, y):
                log.info("Play button clicked")
                self.reset()
                self.state = GameState.PLAYING
            elif self.quit_button.contains(x, y):
                log.info("Quit button clicked")
                self.quit()
        elif self.state is GameState.PLAYING:
            row, col = cell_at(x, y)
            if self.place_mark(row, col):
                result = self.check_win()
                if result is not GameState.PLAYING:
                    self.state = result
                elif self.check_draw():
                    self.state = GameState.DRAW
                else:
                    self.switch_player()
        elif self.state.is_over:
            if self.with_menu:
                log.info("Game over clicked, returning to menu")
                self.state = GameState.MENU
            else:
                self.reset()
                self.state = GameState.PLAYING
        return self.state

    def place_mark(self, row: int, col: int) -> bool:
        """Place the current player's mark; False if the cell is invalid or taken."""
        return self.board.place(row, col, self.current_player)

    def check_win(self) -> GameState:
        """Return X_WINS, O_WINS, or PLAYING when no line is complete."""
        return self.board.check_win()

    def check_draw(self) -> bool:
        """True when nobody has won and every cell is filled."""
        if self.state in (GameState.X_WINS, GameState.O_WINS):
            return False
        return self.board.is_full()

    def switch_player(self) -> None:
        """Hand the turn to the other player."""
        self.current_player = self.current_player.opponent()

    def reset(self) -> None:
        """Clear the board and give the first move to X."""
        self.board.clear()
        self.current_player = Mark.X
        log.info("Game reset")

    def quit(self) -> None:
        """Stop the session."""
        self.running = False
        self.state = GameState.QUIT

    def status_message(self) -> str | None:
        """Text describing the game: whose turn, who won, or None when there is none."""
        if self.state is GameState.X_WINS:
            return "X Wins!"
        if self.state is GameState.O_WINS:
            return "O Wins!"
        if self.state is GameState.DRAW:
            return "Draw!"
        if self.state is GameState.PLAYING:
            return (
                "Player X's Turn"
                if self.current_player is Mark.X
                else "Player O's Turn"
            )
        return None