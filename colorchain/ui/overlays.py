"""In-window overlays shown on top of the board."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QEvent, Qt, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from colorchain.ui.colors import Palette


def _card(object_name: str) -> QFrame:
    card = QFrame()
    card.setObjectName(object_name)
    card.setMinimumWidth(360)
    card.setMaximumWidth(440)
    card.setStyleSheet(
        f"""
        QFrame#{object_name} {{
            background: {Palette.BG_TOP};
            border: 1px solid {Palette.CELL_BORDER};
            border-radius: 18px;
        }}
        """
    )
    shadow = QGraphicsDropShadowEffect(card)
    shadow.setBlurRadius(24)
    shadow.setOffset(0, 8)
    shadow.setColor(QColor(0, 0, 0, 90))
    card.setGraphicsEffect(shadow)
    return card


def _dimmer(parent: QWidget, on_click: Callable[[], None]) -> QWidget:
    dim = QWidget(parent)
    dim.setStyleSheet("background: rgba(0, 0, 0, 0.45);")
    dim.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
    dim.setMinimumSize(1, 1)
    dim.mousePressEvent = lambda e: on_click()
    return dim


def button_style(primary: bool) -> str:
    background = Palette.PRIMARY if primary else "transparent"
    color = Palette.BOARD_BG if primary else Palette.TEXT_PRIMARY
    return f"""
        QPushButton {{
            background: {background};
            color: {color};
            padding: 9px 16px;
            border: 1px solid {Palette.PRIMARY};
            border-radius: 10px;
            font-weight: 700;
            font-size: 13px;
        }}
        QPushButton:hover {{ background: {Palette.PRIMARY_DARK}; color: {Palette.TEXT_PRIMARY}; }}
        QPushButton:disabled {{ border-color: {Palette.CELL_BORDER}; color: {Palette.TEXT_MUTED}; }}
    """


class LevelCompletedOverlay(QWidget):
    """Shown after a board is solved. ``closed`` carries True when the player wants the next level."""

    closed = Signal(bool)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QGridLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setRowStretch(0, 1)
        layout.setColumnStretch(0, 1)
        layout.addWidget(_dimmer(self, lambda: self._finish(False)), 0, 0)

        card = _card("levelCompletedCard")
        content = QVBoxLayout(card)
        content.setContentsMargins(26, 22, 26, 22)
        content.setSpacing(16)

        self._title = QLabel("Level complete")
        self._title.setStyleSheet(f"color: {Palette.PRIMARY}; font-size: 20px; font-weight: 800;")
        content.addWidget(self._title)

        self._message = QLabel("")
        self._message.setStyleSheet(f"color: {Palette.TEXT_PRIMARY}; font-size: 14px;")
        self._message.setWordWrap(True)
        content.addWidget(self._message)

        buttons = QHBoxLayout()
        buttons.setSpacing(10)
        stay_btn = QPushButton("Stay")
        stay_btn.setStyleSheet(button_style(primary=False))
        stay_btn.clicked.connect(lambda: self._finish(False))
        buttons.addWidget(stay_btn, 1)

        self._next_btn = QPushButton("Next level")
        self._next_btn.setStyleSheet(button_style(primary=True))
        self._next_btn.clicked.connect(lambda: self._finish(True))
        buttons.addWidget(self._next_btn, 1)
        content.addLayout(buttons)

        layout.addWidget(card, 0, 0, 1, 1, Qt.AlignCenter)
        self.hide()

    def show_for(self, level_id: int, has_next: bool) -> None:
        if has_next:
            self._title.setText("Level complete")
            self._message.setText(f"You traced the full pattern on level {level_id}.")
        else:
            self._title.setText("All levels complete")
            self._message.setText("That was the last board. Well played!")
        self._next_btn.setVisible(has_next)
        self.show()
        self.raise_()

    def _finish(self, go_next: bool) -> None:
        self.hide()
        self.closed.emit(go_next)

    def _sync_geometry(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())

    def eventFilter(self, obj: QWidget, event: QEvent) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self._sync_geometry()
        return super().eventFilter(obj, event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._sync_geometry()
        parent = self.parentWidget()
        if parent is not None:
            parent.installEventFilter(self)

    def hideEvent(self, event) -> None:
        parent = self.parentWidget()
        if parent is not None:
            parent.removeEventFilter(self)
        super().hideEvent(event)
