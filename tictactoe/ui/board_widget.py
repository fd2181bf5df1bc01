import logging

from PySide6.QtWidgets import QWidget, QSizePolicy, QToolTip
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF, QEvent
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE, CELL_COUNT, Cell, GameState

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = "#333"
GRID_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WIN_HIGHLIGHT_COLOR = "#3f6b3f"
FOCUS_COLOR = "#aaa"


def cell_label(index, cell):
    """
    'Cell 5 - X' style label, 1-based
    """
    state = cell.value if cell is not Cell.EMPTY else 'empty'
    return f"Cell {index + 1} - {state}"


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits row-major index on click

    def __init__(self, parent=None):
        super().__init__(parent)
        self.state = GameState()       # last pushed state
        self.focus_index = 4           # keyboard cursor, starts center
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self.setFocusPolicy(Qt.StrongFocus)
        self.setAccessibleName("Tic Tac Toe Board")

    def set_state(self, state):
        # redraw from a new state value
        self.state = state
        self.update()

    def accepts_clicks(self):
        return not self.state.is_finished

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square board centered in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_rect(self, index):
        ox, oy, side = self._geometry()
        cell = side / BOARD_SIZE
        row, col = divmod(index, BOARD_SIZE)
        return QRectF(ox + col * cell, oy + row * cell, cell, cell)

    def index_at(self, x, y):
        """
        map widget coords to a cell index, -1 if outside the board
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return -1
        cell = side / BOARD_SIZE
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE - 1)); col = max(0, min(col, BOARD_SIZE - 1))
        return row * BOARD_SIZE + col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            painter.fillRect(self.rect(), QColor(BACKGROUND_COLOR))
            cell_size = side / BOARD_SIZE
            # winning cells first so marks sit on top
            for i in self.state.winning_line:
                painter.fillRect(self.cell_rect(i), QColor(WIN_HIGHLIGHT_COLOR))
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i * cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy + side))
                y = oy + i * cell_size
                painter.drawLine(int(ox), int(y), int(ox + side), int(y))
            # marks
            for i, sym in enumerate(self.state.grid):
                if sym is Cell.EMPTY:
                    continue
                center = self.cell_rect(i).center()
                cx, cy = center.x(), center.y()
                rad = cell_size / 2 * 0.7
                if sym is Cell.X:
                    painter.setPen(QPen(QColor(X_COLOR), 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                    painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                else:
                    painter.setPen(QPen(QColor(O_COLOR), 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
            # keyboard cursor
            if self.hasFocus() and self.accepts_clicks():
                painter.setPen(QPen(QColor(FOCUS_COLOR), 2, Qt.DashLine))
                painter.drawRect(self.cell_rect(self.focus_index).adjusted(4, 4, -4, -4))
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self.accepts_clicks():
            return
        pos = event.position()
        index = self.index_at(pos.x(), pos.y())
        if index < 0 or not self.state.is_cell_playable(index):
            return
        self.focus_index = index
        self.cell_clicked.emit(index)  # notify main window

    def keyPressEvent(self, event):
        """
        arrows move the cursor, space/enter plays it
        """
        row, col = divmod(self.focus_index, BOARD_SIZE)
        key = event.key()
        if key == Qt.Key_Left: col = (col - 1) % BOARD_SIZE
        elif key == Qt.Key_Right: col = (col + 1) % BOARD_SIZE
        elif key == Qt.Key_Up: row = (row - 1) % BOARD_SIZE
        elif key == Qt.Key_Down: row = (row + 1) % BOARD_SIZE
        elif key in (Qt.Key_Space, Qt.Key_Return, Qt.Key_Enter):
            if self.accepts_clicks() and self.state.is_cell_playable(self.focus_index):
                self.cell_clicked.emit(self.focus_index)
            return
        else:
            super().keyPressEvent(event)
            return
        self.focus_index = row * BOARD_SIZE + col
        self.update()

    def tooltip_at(self, x, y):
        """
        cell label under widget coords, None outside the board
        """
        index = self.index_at(x, y)
        if not 0 <= index < CELL_COUNT:
            return None
        return cell_label(index, self.state.grid[index])

    def event(self, event):
        # per-cell tooltip with the accessible label
        if event.type() == QEvent.ToolTip:
            pos = event.pos()
            text = self.tooltip_at(pos.x(), pos.y())
            if text is not None:
                QToolTip.showText(event.globalPos(), text, self)
            else:
                QToolTip.hideText()
                event.ignore()
            return True
        return super().event(event)
