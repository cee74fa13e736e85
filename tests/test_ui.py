"""
Tests for the Qt front end driving the engine.
"""

import pytest

from tictactoe.game_logic import Cell, GameEngine, Outcome, Player

TOP_ROW_WIN = [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]
DRAW = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]


def click_all(win, moves):
    for r, c in moves:
        win.board_widget.cell_clicked.emit(r, c)


@pytest.fixture
def board(qapp):
    from tictactoe.ui.board_widget import BoardWidget

    widget = BoardWidget(GameEngine())
    widget.resize(300, 300)
    yield widget
    widget.deleteLater()


class TestBoardWidget:

    @pytest.mark.parametrize("x,y,expected", [
        (10, 10, (0, 0)),
        (150, 50, (0, 1)),
        (299, 299, (2, 2)),
        (50, 250, (2, 0)),
    ])
    def test_cell_at(self, board, x, y, expected):
        assert board.cell_at(x, y) == expected

    def test_cell_at_outside_grid(self, board):
        board.resize(400, 300)
        # 50px margins left and right of the square grid
        assert board.cell_at(20, 100) is None
        assert board.cell_at(60, 10) == (0, 0)

    def test_paints_marks_and_winner(self, board):
        for r, c in TOP_ROW_WIN:
            board.engine.attempt_move(r, c)
        assert not board.grab().isNull()


class TestWindowFlow:

    def test_initial_message(self, window):
        assert window.message_label.text() == "player X's turn"
        assert window.board_widget.accepts_clicks()

    def test_turn_message_after_move(self, window):
        click_all(window, [(1, 1)])
        assert window.engine.cell(1, 1) is Cell.X
        assert window.message_label.text() == "player O's turn"

    def test_occupied_cell_message(self, window):
        click_all(window, [(1, 1), (1, 1)])
        assert window.message_label.text() == "cell taken"
        assert window.engine.current_player is Player.O

    def test_win_then_play_again(self, window):
        window.answers.append(True)
        click_all(window, TOP_ROW_WIN)
        assert window.prompts == ["Player X wins! Do you want to play again?"]
        state = window.engine.current_state()
        assert state.status.outcome is Outcome.IN_PROGRESS
        assert all(cell is Cell.EMPTY for row in state.board for cell in row)
        assert window.board_widget.accepts_clicks()

    def test_draw_then_exit(self, window):
        exits = []
        window.exit_requested.connect(lambda: exits.append(True))
        window.answers.append(False)
        click_all(window, DRAW)
        assert window.prompts == ["It's a tie! Do you want to play again?"]
        assert exits == [True]
        assert window.engine.status.outcome is Outcome.DRAW
        assert window.message_label.text() == "it's a draw!"
        assert not window.board_widget.accepts_clicks()

    def test_click_after_declined_game_is_rejected(self, window):
        window.answers.append(False)
        click_all(window, TOP_ROW_WIN)
        click_all(window, [(2, 2)])
        assert window.message_label.text() == "game is over"
        assert window.engine.cell(2, 2) is Cell.EMPTY

    def test_reset_button(self, window):
        click_all(window, [(0, 0), (2, 2)])
        window.reset_button.click()
        assert window.engine.current_state() == GameEngine().current_state()
        assert window.message_label.text() == "new game, player X's turn"
