from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

BOARD_SIZE = 3  # fixed 3x3 grid


class Cell(Enum):
    EMPTY = ""
    X = "X"
    O = "O"


class Player(Enum):
    """
    the two sides, X always opens
    """
    X = "X"
    O = "O"

    def opposite(self):
        return Player.O if self is Player.X else Player.X

    @property
    def mark(self):
        # cell value this player places
        return Cell(self.value)


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    in progress, won by a player, or drawn
    """
    outcome: Outcome
    winner: Optional[Player] = None

    @classmethod
    def in_progress(cls):
        return cls(Outcome.IN_PROGRESS)

    @classmethod
    def won(cls, player):
        return cls(Outcome.WON, player)

    @classmethod
    def draw(cls):
        return cls(Outcome.DRAW)

    @property
    def is_over(self):
        return self.outcome is not Outcome.IN_PROGRESS


class RejectReason(Enum):
    GAME_ALREADY_OVER = "game_already_over"
    CELL_OCCUPIED = "cell_occupied"


@dataclass(frozen=True)
class MoveAccepted:
    status: GameStatus
    player: Player  # who just moved
    accepted = True


@dataclass(frozen=True)
class MoveRejected:
    reason: RejectReason
    accepted = False


MoveResult = Union[MoveAccepted, MoveRejected]


@dataclass(frozen=True)
class GameSnapshot:
    """
    read-only copy of board, turn and status
    """
    board: Tuple[Tuple[Cell, ...], ...]
    current_player: Player
    status: GameStatus


class InvalidPosition(ValueError):
    """
    coordinates outside the board, always a caller bug
    """
    def __init__(self, row, col):
        super().__init__(f"position ({row}, {col}) is outside the "
                         f"{BOARD_SIZE}x{BOARD_SIZE} board")
        self.row = row
        self.col = col


class GameEngine:
    """
    tic-tac-toe rules and state

    owns the board and turn; the ui only reads snapshots and submits moves
    """
    def __init__(self):
        """
        empty board, X to move
        """
        self._board = self._empty_board()
        self._current_player = Player.X
        self._status = GameStatus.in_progress()

    @staticmethod
    def _empty_board():
        return [[Cell.EMPTY for _ in range(BOARD_SIZE)]
                for _ in range(BOARD_SIZE)]

    @property
    def current_player(self):
        return self._current_player

    @property
    def status(self):
        return self._status

    def cell(self, row, col):
        self._check_position(row, col)
        return self._board[row][col]

    def attempt_move(self, row, col) -> MoveResult:
        """
        place the current player's mark at (row, col)

        raises InvalidPosition for off-board coordinates; a finished game or
        an occupied cell gives a MoveRejected and leaves state untouched
        """
        self._check_position(row, col)
        if self._status.is_over:
            return MoveRejected(RejectReason.GAME_ALREADY_OVER)
        if self._board[row][col] is not Cell.EMPTY:
            return MoveRejected(RejectReason.CELL_OCCUPIED)

        player = self._current_player
        self._board[row][col] = player.mark
        # win is checked before draw, a full winning board is a win
        if self._check_win(row, col, player.mark):
            self._status = GameStatus.won(player)
        elif self._is_full():
            self._status = GameStatus.draw()
        else:
            self._current_player = player.opposite()
        return MoveAccepted(self._status, player)

    def reset(self):
        """
        clear board and reset turn/status
        """
        self._board = self._empty_board()
        self._current_player = Player.X
        self._status = GameStatus.in_progress()

    def current_state(self):
        board = tuple(tuple(row) for row in self._board)
        return GameSnapshot(board, self._current_player, self._status)

    def _check_win(self, row, col, mark):
        """
        row and column through the move, plus both diagonals every time
        """
        b = self._board; n = BOARD_SIZE
        row_win = all(b[row][j] is mark for j in range(n))
        col_win = all(b[i][col] is mark for i in range(n))
        # diagonals are not gated on (row, col) lying on them
        main_diag = all(b[i][i] is mark for i in range(n))
        anti_diag = all(b[i][n - 1 - i] is mark for i in range(n))
        return row_win or col_win or main_diag or anti_diag

    def _is_full(self):
        return all(cell is not Cell.EMPTY for r in self._board for cell in r)

    @staticmethod
    def _check_position(row, col):
        # bool is an int subclass but never a valid coordinate
        for v in (row, col):
            if not isinstance(v, int) or isinstance(v, bool) \
               or not 0 <= v < BOARD_SIZE:
                raise InvalidPosition(row, col)
