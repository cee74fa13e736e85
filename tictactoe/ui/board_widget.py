from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRect
from PySide6.QtGui import QPainter, QColor, QPen, QFont

from ..game_logic import BOARD_SIZE, Cell, Outcome

BACKGROUND_COLOR = "#333"
GRID_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
MIN_BOARD_PX = 150


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board

    paints whatever engine.current_state() reports, holds no marks itself
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine  # authoritative game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(MIN_BOARD_PX, MIN_BOARD_PX))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _board_geometry(self):
        # square side and top-left offset inside the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return side, (w - side) / 2, (h - side) / 2

    def cell_at(self, x, y):
        """
        map widget coords to (row, col), None outside the grid
        """
        side, ox, oy = self._board_geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE - 1))
        col = max(0, min(col, BOARD_SIZE - 1))
        return row, col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight winner
        """
        snapshot = self.engine.current_state()
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            side, offset_x, offset_y = self._board_geometry()
            painter.fillRect(self.rect(), QColor(BACKGROUND_COLOR))
            cell_size = side / BOARD_SIZE
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), 2))
            for i in range(1, BOARD_SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # draw marks
            for r, row in enumerate(snapshot.board):
                for c, mark in enumerate(row):
                    if mark is Cell.EMPTY: continue
                    cx = offset_x + c*cell_size + cell_size/2
                    cy = offset_y + r*cell_size + cell_size/2
                    rad = cell_size/2 * 0.7
                    if mark is Cell.X:
                        painter.setPen(QPen(QColor(X_COLOR), 4))
                        # two crossing lines
                        painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                        painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                    else:
                        painter.setPen(QPen(QColor(O_COLOR), 4))
                        painter.drawEllipse(QPointF(cx, cy), rad, rad)
            # if won, draw winner in center
            status = snapshot.status
            if status.outcome is Outcome.WON:
                win = status.winner.value
                font = QFont("Arial", max(1, int(side*0.6)), QFont.Bold)
                painter.setFont(font)
                color = QColor(X_COLOR) if win == 'X' else QColor(O_COLOR)
                painter.setPen(QPen(color, 10, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
                rect = QRect(int(offset_x), int(offset_y), int(side), int(side))
                painter.drawText(rect, Qt.AlignCenter, win)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or self.engine.status.is_over:
            return
        pos = event.position()
        hit = self.cell_at(pos.x(), pos.y())
        if hit is None:
            return
        self.cell_clicked.emit(*hit)  # notify main window
