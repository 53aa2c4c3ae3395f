"""Board rendering: the block grid and the target pattern strip."""

from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from colorchain.core.colors import Color
from colorchain.core.levels import Level
from colorchain.ui.colors import BLOCK_COLORS, BLOCK_COLORS_LIGHT, Palette, block_hex


class BoardWidget(QWidget):
    """Square cells for every block, with the current selection drawn as a line."""

    block_clicked = Signal(int)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._level: Optional[Level] = None
        self._selection: List[int] = []
        self._hint: Optional[int] = None
        self.setMinimumSize(240, 240)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setCursor(Qt.PointingHandCursor)

    @property
    def level(self) -> Optional[Level]:
        return self._level

    def set_level(self, level: Optional[Level]) -> None:
        self._level = level
        self._selection = []
        self._hint = None
        self.update()

    def set_selection(self, block_ids: List[int]) -> None:
        self._selection = list(block_ids)
        self._hint = None
        self.update()

    def set_hint(self, block_id: Optional[int]) -> None:
        self._hint = block_id
        self.update()

    def _geometry(self) -> tuple[float, float, float]:
        """Cell size and top-left offset that center the board in the widget."""
        assert self._level is not None
        margin = 12
        cell = min(
            (self.width() - 2 * margin) / self._level.width,
            (self.height() - 2 * margin) / self._level.height,
        )
        left = (self.width() - cell * self._level.width) / 2
        top = (self.height() - cell * self._level.height) / 2
        return cell, left, top

    def _cell_center(self, block_id: int) -> QPointF:
        cell, left, top = self._geometry()
        pos = self._level.blocks[block_id].position
        return QPointF(left + (pos.x + 0.5) * cell, top + (pos.y + 0.5) * cell)

    def mousePressEvent(self, event) -> None:
        if self._level is None or event.button() != Qt.LeftButton:
            return super().mousePressEvent(event)
        cell, left, top = self._geometry()
        point = event.position()
        x = int((point.x() - left) // cell)
        y = int((point.y() - top) // cell)
        if 0 <= x < self._level.width and 0 <= y < self._level.height:
            self.block_clicked.emit(y * self._level.width + x)

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.fillRect(self.rect(), QColor(Palette.BOARD_BG))
        if self._level is None:
            return

        cell, left, top = self._geometry()
        gap = max(2.0, cell * 0.06)
        radius = cell * 0.18
        for block in self._level.blocks:
            rect = QRectF(
                left + block.position.x * cell + gap,
                top + block.position.y * cell + gap,
                cell - 2 * gap,
                cell - 2 * gap,
            )
            painter.setBrush(QColor(block_hex(block.color, block.selected)))
            if block.id == self._hint:
                painter.setPen(QPen(QColor(Palette.HINT), max(3.0, cell * 0.08)))
            else:
                painter.setPen(QPen(QColor(Palette.CELL_BORDER), 1))
            painter.drawRoundedRect(rect, radius, radius)

        if self._selection:
            pen = QPen(QColor(Palette.SELECTION_LINE), max(3.0, cell * 0.1))
            pen.setCapStyle(Qt.RoundCap)
            pen.setJoinStyle(Qt.RoundJoin)
            painter.setPen(pen)
            points = [self._cell_center(i) for i in self._selection]
            for a, b in zip(points, points[1:]):
                painter.drawLine(a, b)
            painter.setBrush(QColor(Palette.SELECTION_LINE))
            painter.drawEllipse(points[0], cell * 0.1, cell * 0.1)


class PatternStrip(QWidget):
    """Row of swatches for the target pattern; matched entries are ticked."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._pattern: List[Color] = []
        self._selected: List[Color] = []
        self.setFixedHeight(56)
        self.setMinimumWidth(200)

    def set_pattern(self, pattern: List[Color]) -> None:
        self._pattern = list(pattern)
        self._selected = []
        self.update()

    def set_selected(self, selected: List[Color]) -> None:
        self._selected = list(selected)
        self.update()

    def _matched(self) -> int:
        count = 0
        for want, got in zip(self._pattern, self._selected):
            if want != got:
                break
            count += 1
        return count

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        if not self._pattern:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        spacing = 6
        box = min(36, max(12, (self.width() - spacing * (len(self._pattern) - 1)) // len(self._pattern)))
        total = len(self._pattern) * (box + spacing) - spacing
        x = max(0, (self.width() - total) // 2)
        y = (self.height() - box) // 2
        matched = self._matched()
        for i, color in enumerate(self._pattern):
            done = i < matched
            painter.setBrush(QColor(BLOCK_COLORS_LIGHT[color] if done else BLOCK_COLORS[color]))
            painter.setPen(QPen(QColor(Palette.TEXT_PRIMARY if done else Palette.CELL_BORDER), 2 if done else 1))
            painter.drawRoundedRect(x, y, box, box, 6, 6)
            if done:
                painter.setPen(QColor(Palette.BOARD_BG))
                painter.drawText(x, y, box, box, Qt.AlignCenter, "✓")
            x += box + spacing
