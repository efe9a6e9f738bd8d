from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE, Mark

X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
GRID_COLOR = QColor("#555")
BACKGROUND_COLOR = QColor("#333")
HOVER_COLOR = QColor(255, 255, 255, 18)
WIN_LINE_COLOR = QColor("lime")


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index 0-8 on click

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session   # read-only: draws from its snapshot
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self.setMouseTracking(True)
        self._hover_index = None

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square board area centred in the widget: offset x, offset y, cell size
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side / BOARD_SIZE

    def cell_at(self, x, y):
        """
        cell index under widget coords, or None outside the grid
        """
        ox, oy, cell = self._geometry()
        if cell <= 0:
            return None
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            return None
        return row * BOARD_SIZE + col

    def _cell_center(self, index):
        ox, oy, cell = self._geometry()
        row, col = divmod(index, BOARD_SIZE)
        return QPointF(ox + col*cell + cell/2, oy + row*cell + cell/2)

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight winning line
        """
        snap = self.session.snapshot()
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, cell = self._geometry()
            side = cell * BOARD_SIZE
            painter.fillRect(self.rect(), BACKGROUND_COLOR)

            # hover hint on playable cells
            if self._hover_index is not None and snap.clickable[self._hover_index]:
                row, col = divmod(self._hover_index, BOARD_SIZE)
                painter.fillRect(int(ox + col*cell), int(oy + row*cell),
                                 int(cell), int(cell), HOVER_COLOR)

            # grid lines
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i*cell
                painter.drawLine(int(x), int(oy), int(x), int(oy+side))
                y = oy + i*cell
                painter.drawLine(int(ox), int(y), int(ox+side), int(y))

            # marks
            rad = cell/2 * 0.7
            for index, mark in enumerate(snap.board):
                if mark is Mark.EMPTY:
                    continue
                c = self._cell_center(index)
                if mark is Mark.X:
                    painter.setPen(QPen(X_COLOR, 4))
                    # two crossing lines
                    painter.drawLine(QPointF(c.x()-rad, c.y()-rad), QPointF(c.x()+rad, c.y()+rad))
                    painter.drawLine(QPointF(c.x()+rad, c.y()-rad), QPointF(c.x()-rad, c.y()+rad))
                else:
                    painter.setPen(QPen(O_COLOR, 4))
                    painter.drawEllipse(c, rad, rad)

            # strike through the winning line
            if snap.winning_line:
                first, _, last = snap.winning_line
                painter.setPen(QPen(WIN_LINE_COLOR, 6, Qt.SolidLine, Qt.RoundCap))
                painter.drawLine(self._cell_center(first), self._cell_center(last))
        finally:
            painter.end()

    def mouseMoveEvent(self, event):
        index = self.cell_at(event.position().x(), event.position().y())
        if index != self._hover_index:
            self._hover_index = index
            self.update()

    def leaveEvent(self, event):
        self._hover_index = None
        self.update()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if event.button() != Qt.LeftButton:
            return
        index = self.cell_at(event.position().x(), event.position().y())
        # only playable cells; the session ignores the rest anyway
        if index is None or not self.session.snapshot().clickable[index]:
            return
        self.cell_clicked.emit(index)  # notify main window
