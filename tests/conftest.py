"""
Pytest fixtures for the Qt front end.
"""

import os

import pytest

# no display needed for widget tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication shared by all widget tests."""
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def window(qapp):
    """Main window whose game-over dialog is answered by `answers`."""
    from tictactoe.ui.main_window import TicTacToeWindow

    win = TicTacToeWindow()
    win.answers = []
    win.prompts = []

    def ask_play_again(message):
        win.prompts.append(message)
        return win.answers.pop(0)

    win.ask_play_again = ask_play_again
    yield win
    win.close()
    win.deleteLater()
