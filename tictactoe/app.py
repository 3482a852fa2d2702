"""Windowed front end: a pygame window that drives a game session."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Sequence

import pygame

from tictactoe.board import CELL_SIZE, SCREEN_HEIGHT, SCREEN_WIDTH, GameState, Mark
from tictactoe.session import PLAY_AGAIN_MESSAGE, Session
from tictactoe.textures import TextureError, draw, draw_region, load_texture

log = logging.getLogger(__name__)

TITLE = "Tic Tac Toe "
FONT_SIZE = 36
FRAME_RATE = 60

BACKGROUND = (0xFF, 0xFF, 0xFF)
MENU_BACKGROUND = (200, 200, 255)
TEXT_COLOUR = (0, 0, 0)
END_TEXT_COLOUR = (200, 0, 0)
PLAY_AGAIN_COLOUR = (50, 50, 50)


class AppInitError(RuntimeError):
    """Raised when the window or its media cannot be set up."""


class App:
    """Owns the window, the loaded media and the main loop."""

    def __init__(
        self,
        assets_dir: str | os.PathLike[str] = "assets",
        with_menu: bool = True,
    ) -> None:
        self.assets_dir = Path(assets_dir)
        self.session = Session(with_menu=with_menu)
        self.screen: pygame.Surface | None = None
        self.font: pygame.font.Font | None = None
        self.grid: pygame.Surface | None = None
        self.x_mark: pygame.Surface | None = None
        self.o_mark: pygame.Surface | None = None
        self.play_button: pygame.Surface | None = None
        self.quit_button: pygame.Surface | None = None

    def __enter__(self) -> "App":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def init(self, title: str, width: int, height: int) -> None:
        """Open the window and load every image and the font."""
        try:
            pygame.display.init()
            pygame.font.init()
            self.screen = pygame.display.set_mode((width, height))
            pygame.display.set_caption(title)
        except pygame.error as err:
            log.error("Window could not be created! %s", err)
            self.close()
            raise AppInitError(f"window could not be created: {err}") from err
        self.screen.fill(BACKGROUND)
        try:
            self._load_media()
        except (TextureError, OSError, pygame.error) as err:
            log.error("Failed to load one or more textures!")
            self.close()
            raise AppInitError(f"failed to load media: {err}") from err
        self.session.running = True

    def _load_media(self) -> None:
        assets = self.assets_dir
        self.grid = load_texture(assets / "grid.png")
        self.x_mark = load_texture(assets / "x.png")
        self.o_mark = load_texture(assets / "o.png")
        self.play_button = load_texture(assets / "play_button.png")
        self.quit_button = load_texture(assets / "quit_button.png")
        self.font = pygame.font.Font(str(assets / "fonts" / "times.ttf"), FONT_SIZE)

    def run(self) -> None:
        """Process input and redraw until the session stops."""
        clock = pygame.time.Clock()
        while self.session.running:
            self.handle_events()
            self.render()
            clock.tick(FRAME_RATE)

    def handle_events(self) -> None:
        """Feed pending window events to the session."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.session.quit()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                self.session.handle_click(x, y)

    def render(self) -> None:
        """Draw the current frame and show it."""
        if self.screen is None:
            raise RuntimeError("the window is not open")
        self.screen.fill(BACKGROUND)
        if self.session.state is GameState.MENU:
            self._render_menu()
        else:
            if self.grid is not None:
                draw(self.screen, self.grid, 0, 0)
            self._render_board()
            self._render_status()
        pygame.display.flip()

    def _render_menu(self) -> None:
        assert self.screen is not None
        self.screen.fill(MENU_BACKGROUND)
        buttons = (
            (self.play_button, self.session.play_button),
            (self.quit_button, self.session.quit_button),
        )
        for texture, rect in buttons:
            if texture is not None:
                draw_region(self.screen, texture, texture.get_rect(), rect)

    def _render_board(self) -> None:
        assert self.screen is not None
        textures = {Mark.X: self.x_mark, Mark.O: self.o_mark}
        for i, row in enumerate(self.session.board):
            for j, mark in enumerate(row):
                texture = textures.get(mark)
                if texture is None:
                    continue
                w, h = texture.get_size()
                x = j * CELL_SIZE + (CELL_SIZE - w) // 2
                y = i * CELL_SIZE + (CELL_SIZE - h) // 2
                draw(self.screen, texture, x, y)

    def _render_status(self) -> None:
        assert self.screen is not None
        if self.font is None:
            log.warning("No font loaded; cannot render text")
            return
        message = self.session.status_message()
        game_over = self.session.state.is_over
        if message:
            colour = END_TEXT_COLOUR if game_over else TEXT_COLOUR
            text = self.font.render(message, False, colour)
            if game_over:
                position = (
                    (SCREEN_WIDTH - text.get_width()) // 2,
                    (SCREEN_HEIGHT - text.get_height()) // 2,
                )
            else:
                position = (10, 10)
            self.screen.blit(text, position)
        if game_over:
            again = self.font.render(PLAY_AGAIN_MESSAGE, False, PLAY_AGAIN_COLOUR)
            self.screen.blit(
                again,
                ((SCREEN_WIDTH - again.get_width()) // 2, SCREEN_HEIGHT // 2 + 30),
            )

    def close(self) -> None:
        """Release media and shut the window; safe to call more than once."""
        self.grid = self.x_mark = self.o_mark = None
        self.play_button = self.quit_button = None
        self.font = None
        self.screen = None
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="tictactoe", description="Play noughts and crosses.")
    parser.add_argument("--assets", default="assets", help="directory holding images and fonts")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    app = App(assets_dir=args.assets)
    try:
        app.init(TITLE, SCREEN_WIDTH, SCREEN_HEIGHT)
    except AppInitError:
        log.error("Failed to initialize the game!")
    else:
        app.run()
    finally:
        app.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())