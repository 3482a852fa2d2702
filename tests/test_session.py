import pytest

from tictactoe.board import CELL_SIZE, GameState, Mark
from tictactoe.session import Rect, Session, cell_at


def centre(row, col):
    return col * CELL_SIZE + CELL_SIZE // 2, row * CELL_SIZE + CELL_SIZE // 2


def click_cell(session, row, col):
    x, y = centre(row, col)
    return session.handle_click(x, y)


def started():
    session = Session()
    b = session.play_button
    session.handle_click(b.x + 1, b.y + 1)
    return session


def test_rect_contains_edges():
    r = Rect(10, 20, 5, 5)
    assert r.contains(10, 20)
    assert r.contains(14, 24)
    assert not r.contains(15, 20)
    assert not r.contains(10, 25)
    assert not r.contains(9, 22)


def test_cell_at_maps_cell_centres():
    for row in range(3):
        for col in range(3):
            assert cell_at(*centre(row, col)) == (row, col)


def test_cell_at_truncates_toward_zero():
    assert cell_at(-1, -1) == (0, 0)


def test_buttons_are_centred_and_disjoint():
    s = Session()
    for button in (s.play_button, s.quit_button):
        assert button.x * 2 + button.w == 600
    assert s.play_button.y + s.play_button.h < s.quit_button.y


def test_starts_on_menu_with_x():
    s = Session()
    assert s.state is GameState.MENU
    assert s.current_player is Mark.X
    assert s.status_message() is None


def test_play_button_starts_game():
    s = started()
    assert s.state is GameState.PLAYING
    assert s.status_message() == "Player X's Turn"


def test_quit_button_stops_session():
    s = Session()
    q = s.quit_button
    assert s.handle_click(q.x, q.y) is GameState.QUIT
    assert s.running is False


def test_menu_click_outside_buttons_does_nothing():
    s = Session()
    assert s.handle_click(0, 0) is GameState.MENU
    assert s.running


def test_turns_alternate():
    s = started()
    click_cell(s, 0, 0)
    assert s.board[0, 0] is Mark.X
    assert s.current_player is Mark.O
    assert s.status_message() == "Player O's Turn"
    click_cell(s, 1, 1)
    assert s.board[1, 1] is Mark.O
    assert s.current_player is Mark.X


def test_click_on_taken_cell_keeps_turn():
    s = started()
    click_cell(s, 0, 0)
    click_cell(s, 0, 0)
    assert s.current_player is Mark.O
    assert s.board[0, 0] is Mark.X


def test_x_wins_on_row():
    s = started()
    for cell in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
        click_cell(s, *cell)
    assert s.state is GameState.X_WINS
    assert s.status_message() == "X Wins!"


def test_o_wins_on_column():
    s = started()
    for cell in [(0, 0), (0, 1), (2, 2), (1, 1), (1, 0), (2, 1)]:
        click_cell(s, *cell)
    assert s.state is GameState.O_WINS
    assert s.status_message() == "O Wins!"


def test_draw():
    s = started()
    moves = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]
    for cell in moves:
        click_cell(s, *cell)
    assert s.state is GameState.DRAW
    assert s.status_message() == "Draw!"
    assert s.board.is_full()


def test_finished_game_ignores_moves_and_returns_to_menu():
    s = started()
    for cell in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
        click_cell(s, *cell)
    assert click_cell(s, 2, 2) is GameState.MENU
    assert s.board[2, 2] is Mark.EMPTY


def test_play_again_from_menu_clears_board():
    s = started()
    for cell in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
        click_cell(s, *cell)
    click_cell(s, 2, 2)
    b = s.play_button
    s.handle_click(b.x, b.y)
    assert s.state is GameState.PLAYING
    assert all(cell is Mark.EMPTY for row in s.board for cell in row)
    assert s.current_player is Mark.X


def test_without_menu_starts_playing_and_restarts_on_click():
    s = Session(with_menu=False)
    assert s.state is GameState.PLAYING
    for cell in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
        click_cell(s, *cell)
    assert s.state is GameState.X_WINS
    assert s.handle_click(0, 0) is GameState.PLAYING
    assert s.board[0, 0] is Mark.EMPTY
    assert s.current_player is Mark.X


def test_check_draw_false_after_win_state():
    s = started()
    s.state = GameState.X_WINS
    for row in range(3):
        for col in range(3):
            s.board.place(row, col, Mark.X)
    assert s.check_draw() is False


def test_place_mark_off_board():
    s = started()
    assert s.place_mark(3, 0) is False
    assert s.place_mark(0, -1) is False


def test_switch_player_round_trip():
    s = Session()
    s.switch_player()
    s.switch_player()
    assert s.current_player is Mark.X


def test_quit_from_playing():
    s = started()
    s.quit()
    assert s.state is GameState.QUIT
    assert s.status_message() is None
    assert s.handle_click(0, 0) is GameState.QUIT


@pytest.mark.parametrize("cell", [(0, 0), (2, 2)])
def test_check_win_without_line_is_playing(cell):
    s = started()
    click_cell(s, *cell)
    assert s.check_win() is GameState.PLAYING