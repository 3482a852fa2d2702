# tictactoe

A two-player Tic Tac Toe game for one screen. The game opens on a menu with
**Play** and **Quit** buttons. Players then take turns clicking the 3×3 grid,
and X always moves first. A game ends when one player fills a row, a column or
a diagonal, or when the board is full with no winner, which is a draw. A click
after the game has ended returns you to the menu.

## Installing

```
pip install .
```

This also installs `pygame`.

## Playing

```
tictactoe
```

This opens a 600×600 window titled "Tic Tac Toe". The game reads its images
and font from the `assets` directory in the current working directory. Use
`--assets DIR` to read them from another directory:

```
tictactoe --assets path/to/assets
```

The directory must contain:

- `grid.png`: the board grid, drawn at the top-left corner
- `x.png` and `o.png`: the marks, centred in each 200×200 cell
- `play_button.png` and `quit_button.png`: the menu buttons, scaled to 200×60
- `fonts/times.ttf`: the font for status messages, at size 36

If the window cannot be opened or any of these files cannot be loaded, the
game logs "Failed to initialize the game!" and exits. Progress messages, such
as button clicks and game resets, are logged to the console.

During play, the top-left corner shows whose turn it is ("Player X's Turn" or
"Player O's Turn"). When the game ends, "X Wins!", "O Wins!" or "Draw!"
appears in red in the middle of the window, with "Click to Play Again" below
it. Closing the window or clicking **Quit** ends the program.

## Using the game logic

The rules do not need a window. `tictactoe.board` provides the grid:

```python
from tictactoe.board import Board, GameState, Mark, WinLine

board = Board()
board.place(0, 0, Mark.X)        # True; off-board or taken cells give False
board.place(1, 1, Mark.X)
board.place(2, 2, Mark.X)
assert board.check_win() is GameState.X_WINS
assert board.win_line is WinLine.DIAG_MAIN
print(board[1, 1])               # Mark.X
for row in board:                # rows as tuples of marks
    print(row)
board.clear()
```

`check_win` tests the rows, then the columns, then the two diagonals. It
records the completed line in `win_line` and `win_index`. `is_full` reports
whether any cell is still empty.

`tictactoe.session` drives a game from screen clicks:

```python
from tictactoe.session import Session

session = Session()
session.handle_click(300, 250)   # the Play button on the menu
session.handle_click(50, 50)     # X takes the top-left cell
print(session.status_message())  # "Player O's Turn"
```

`Session(with_menu=False)` skips the menu. Play starts at once, and a click on
a finished game starts a new game straight away. `cell_at(x, y)` maps a screen
point to its `(row, col)`. `session.quit()` stops the session.

`tictactoe.textures` offers `load_texture(path)`, which raises `TextureError`
when the image cannot be read, `draw(target, texture, x, y)` and
`draw_region(target, texture, src, dest)`, which scales the `src` part of a
texture to fill `dest`. `tictactoe.app.App` is the window itself, and it can
be used as a context manager so that it closes on exit.

## What it does not do

There is no computer opponent and no network play. Both players share the
same mouse. Scores are not kept between games, and nothing is saved. The
package ships no image or font files. You must supply the `assets` directory
yourself.

## Running the tests

```
pip install ".[test]"
pytest
```