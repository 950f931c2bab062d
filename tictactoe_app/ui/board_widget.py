from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QPen

from ..game_logic import BOARD_SIZE, Player
from ..theme import Theme
from .palette import colors_for


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index 0-8 on click

    def __init__(self, game_logic, theme=Theme.LIGHT, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # read-only use of engine state
        self.theme = theme
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self.setAccessibleName("Board")
        self.setMouseTracking(True)     # hover names the cell

    @staticmethod
    def cell_label(index):
        # 1-based, like the cell buttons' labels
        return f"Cell {index + 1}"

    def describe_at(self, x, y):
        """
        name the cell under (x, y) in tooltip + accessible description
        """
        idx = self.index_at(x, y)
        text = "" if idx is None else self.cell_label(idx)
        self.setToolTip(text)
        self.setAccessibleDescription(text)
        return idx

    def set_theme(self, theme):
        self.theme = theme
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square drawing area centred in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_rect(self, index):
        ox, oy, side = self._geometry()
        cell = side / BOARD_SIZE
        r, c = divmod(index, BOARD_SIZE)
        return QRectF(ox + c * cell, oy + r * cell, cell, cell)

    def index_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE - 1)); col = max(0, min(col, BOARD_SIZE - 1))
        return row * BOARD_SIZE + col

    def paintEvent(self, event):
        """
        draw cells, grid, X/O marks and the winning line
        """
        colors = colors_for(self.theme).board
        board = self.game_logic.board
        win_line = self.game_logic.winning_line or ()
        game_over = self.game_logic.is_over

        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            painter.fillRect(self.rect(), colors.background)
            cell_size = side / BOARD_SIZE

            # cell backgrounds: winning line highlighted, finished board dimmed
            for idx in range(len(board)):
                if idx in win_line:
                    painter.fillRect(self.cell_rect(idx), colors.win_cell)
                elif game_over:
                    painter.fillRect(self.cell_rect(idx), colors.disabled_cell)

            # grid lines
            painter.setPen(QPen(colors.grid, 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i * cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy + side))
                y = oy + i * cell_size
                painter.drawLine(int(ox), int(y), int(ox + side), int(y))

            # marks
            rad = cell_size / 2 * 0.6
            for idx, sym in enumerate(board):
                if sym is None: continue
                center = self.cell_rect(idx).center()
                cx, cy = center.x(), center.y()
                if sym is Player.X:
                    painter.setPen(QPen(colors.x_mark, 4, Qt.SolidLine, Qt.RoundCap))
                    # two crossing lines
                    painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                    painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                else:
                    painter.setPen(QPen(colors.o_mark, 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseMoveEvent(self, event):
        pos = event.position()
        self.describe_at(pos.x(), pos.y())
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        """
        handle clicks: only playable cells are forwarded
        """
        if event.button() != Qt.LeftButton:
            return
        pos = event.position()
        idx = self.index_at(pos.x(), pos.y())
        if idx is None or not self.game_logic.is_cell_playable(idx):
            return  # disabled cell
        self.cell_clicked.emit(idx)  # notify main window
