import logging

from ..game_logic import GameEngine, Outcome, RejectReason
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QMessageBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Signal, Slot

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Tic-Tac-Toe"
WINDOW_SIZE = (300, 300)

REJECT_MESSAGES = {
    RejectReason.CELL_OCCUPIED: "cell taken",
    RejectReason.GAME_ALREADY_OVER: "game is over",
}


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow

    forwards clicks to the engine and renders its results; declining a
    rematch emits exit_requested, the host decides what that means
    """
    exit_requested = Signal()

    def __init__(self, engine=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.engine = engine if engine is not None else GameEngine()
        self.board_widget = BoardWidget(self.engine, parent=self)
        self._setup_ui()
        self._update_message(self._turn_text(), is_turn=True)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*WINDOW_SIZE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + reset
        self.main_layout.addWidget(self.controls_bottom_widget)
        self.board_widget.set_accept_clicks(True)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.exit_requested)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.reset_button)
        self.bottom_layout = hl

    @Slot(str)
    def _update_message(self, text, is_error=False,
                        is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_error:   style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:    style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _turn_text(self):
        return f"player {self.engine.current_player.value}'s turn"

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        result = self.engine.attempt_move(r, c)
        if not result.accepted:
            logger.debug("move (%d, %d) rejected: %s", r, c, result.reason.value)
            self._update_message(REJECT_MESSAGES[result.reason], is_error=True)
            return
        logger.debug("player %s played (%d, %d)", result.player.value, r, c)
        self.board_widget.update()
        status = result.status
        if status.outcome is Outcome.WON:
            p = status.winner.value
            self._handle_game_over(f"player {p} wins!",
                                   f"Player {p} wins! Do you want to play again?")
        elif status.outcome is Outcome.DRAW:
            self._handle_game_over("it's a draw!",
                                   "It's a tie! Do you want to play again?")
        else:
            self._update_message(self._turn_text(), is_turn=True)

    def _handle_game_over(self, msg, prompt):
        # end game UI updates, then offer a rematch
        logger.info("game over: %s", msg)
        self._update_message(msg, is_success=True)
        self.board_widget.set_accept_clicks(False)
        if self.ask_play_again(prompt):
            self.reset_game()
        else:
            logger.info("rematch declined")
            self.exit_requested.emit()

    def ask_play_again(self, message):
        """
        modal "Play Again" / "Exit" choice, True to play again
        """
        box = QMessageBox(self)
        box.setWindowTitle("Game Over")
        box.setIcon(QMessageBox.Information)
        box.setText(message)
        again = box.addButton("Play Again", QMessageBox.YesRole)
        box.addButton("Exit", QMessageBox.NoRole)
        box.setDefaultButton(again)
        box.exec()
        return box.clickedButton() == again

    @Slot()
    def reset_game(self):
        # fresh engine state, X to move
        self.engine.reset()
        self.board_widget.set_accept_clicks(True); self.board_widget.update()
        self._update_message(f"new game, {self._turn_text()}", is_turn=True)
