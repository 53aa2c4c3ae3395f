from __future__ import annotations

import logging
import os
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QStandardItemModel
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from colorchain.core.progress import ProgressStore
from colorchain.core.session import GameSession, GameState
from colorchain.core.settings import SettingsStore
from colorchain.core.solver import find_solution
from colorchain.ui.board_widgets import BoardWidget, PatternStrip
from colorchain.ui.colors import Palette
from colorchain.ui.models import board_status, build_level_states
from colorchain.ui.overlays import LevelCompletedOverlay, button_style

logger = logging.getLogger(__name__)

HINT_STEP_LIMIT = 50_000


class MainWindow(QMainWindow):
    """Single-screen game window: header controls, pattern strip and board.

    Board clicks select the block, or truncate the selection back to it when
    it is already selected. The prevent-mistakes setting is read from the
    settings store on every click.
    """

    def __init__(
        self,
        session: GameSession,
        progress_store: ProgressStore,
        settings_store: SettingsStore,
    ) -> None:
        super().__init__()
        self._session = session
        self._progress_store = progress_store
        self._settings_store = settings_store
        self._unlock_all_levels = os.environ.get("COLORCHAIN_UNLOCK_ALL") == "1"
        self._updating_picker = False

        self._level_picker: Optional[QComboBox] = None
        self._prevent_checkbox: Optional[QCheckBox] = None
        self._status_label: Optional[QLabel] = None
        self._reset_button: Optional[QPushButton] = None
        self._board: Optional[BoardWidget] = None
        self._pattern_strip: Optional[PatternStrip] = None
        self._completed_overlay: Optional[LevelCompletedOverlay] = None

        self.setWindowTitle("Color Chain")
        self._build_ui()
        self._unsubscribe = self._session.subscribe(self._on_state_changed)
        self._on_state_changed(self._session.get_state())

    def _build_ui(self) -> None:
        root = QWidget()
        root.setObjectName("root")
        root.setStyleSheet(
            f"""
            QWidget#root {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {Palette.BG_TOP}, stop:1 {Palette.BG_BOTTOM});
            }}
            QLabel, QCheckBox {{ color: {Palette.TEXT_PRIMARY}; font-size: 13px; }}
            QComboBox {{ padding: 6px 10px; border-radius: 8px; min-width: 150px; }}
            """
        )
        layout = QVBoxLayout(root)
        layout.setContentsMargins(18, 14, 18, 18)
        layout.setSpacing(12)

        header = QHBoxLayout()
        header.setSpacing(10)
        self._level_picker = QComboBox()
        self._level_picker.currentIndexChanged.connect(self._on_level_picked)
        header.addWidget(self._level_picker)

        self._prevent_checkbox = QCheckBox("Prevent mistakes")
        self._prevent_checkbox.setChecked(self._settings_store.prevent_mistakes)
        self._prevent_checkbox.toggled.connect(self._settings_store.set_prevent_mistakes)
        header.addWidget(self._prevent_checkbox)
        header.addStretch(1)

        for text, handler in (
            ("Hint", self._show_hint),
            ("Reset", self._session.reset_level),
            ("New board", self._session.new_level),
        ):
            btn = QPushButton(text)
            btn.setStyleSheet(button_style(primary=text == "Hint"))
            btn.setCursor(Qt.PointingHandCursor)
            btn.clicked.connect(lambda _checked=False, h=handler: h())
            header.addWidget(btn)
            if text == "Reset":
                self._reset_button = btn
        layout.addLayout(header)

        self._pattern_strip = PatternStrip()
        layout.addWidget(self._pattern_strip)

        self._board = BoardWidget()
        self._board.block_clicked.connect(self._on_block_clicked)
        layout.addWidget(self._board, 1)

        self._status_label = QLabel("")
        self._status_label.setStyleSheet(f"color: {Palette.TEXT_MUTED};")
        self._status_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self._status_label)

        self.setCentralWidget(root)
        self._completed_overlay = LevelCompletedOverlay(root)
        self._completed_overlay.closed.connect(self._on_completed_closed)

    # ------------------------------------------------------------------
    # Session plumbing
    # ------------------------------------------------------------------

    def _on_state_changed(self, state: GameState) -> None:
        level = self._session.level
        if level is None:
            return
        if self._board.level is not level:
            self._board.set_level(level)
            self._pattern_strip.set_pattern(level.pattern)
        self._board.set_selection(state.selected_blocks)
        self._pattern_strip.set_selected(state.selected_pattern)
        self._refresh_level_picker(state)
        self._reset_button.setEnabled(not level.is_completed)
        self._status_label.setText(
            board_status(
                state.current_level,
                level.width,
                level.height,
                len(state.selected_blocks),
                len(level.blocks),
                completed=level.is_completed,
            )
        )

    def _refresh_level_picker(self, state: GameState) -> None:
        states = build_level_states(
            self._session.max_levels,
            state.current_level,
            state.highest_unlocked_level,
            unlock_all=self._unlock_all_levels,
        )
        self._updating_picker = True
        try:
            self._level_picker.clear()
            model = self._level_picker.model()
            for entry in states:
                self._level_picker.addItem(entry.label, entry.level_id)
                if isinstance(model, QStandardItemModel):
                    model.item(self._level_picker.count() - 1).setEnabled(entry.unlocked)
            self._level_picker.setCurrentIndex(state.current_level - 1)
        finally:
            self._updating_picker = False

    def _on_level_picked(self, index: int) -> None:
        if self._updating_picker or index < 0:
            return
        level_id = self._level_picker.itemData(index)
        if level_id is None or level_id == self._session.get_state().current_level:
            return
        if self._unlock_all_levels:
            self._session.unlock_level(level_id)
        self._session.load_level(level_id)

    def _on_block_clicked(self, block_id: int) -> None:
        level = self._session.level
        if level is None or level.is_completed:
            return
        block = level.block(block_id)
        if block is None:
            return
        if block.selected:
            self._session.deselect_block(block_id)
            return

        prevent_mistakes = self._settings_store.prevent_mistakes
        if not self._session.select_block(block_id, prevent_mistakes=prevent_mistakes):
            self._status_label.setText("That block can't extend the chain")
            return
        if self._session.is_level_solved():
            self._session.complete_level()
            state = self._session.get_state()
            self._completed_overlay.show_for(state.current_level, has_next=state.current_level < self._session.max_levels)

    def _on_completed_closed(self, go_next: bool) -> None:
        if go_next:
            self._session.load_level(self._session.get_state().current_level + 1)

    def _show_hint(self) -> None:
        level = self._session.level
        if level is None or level.is_completed:
            return
        prefix = self._session.get_state().selected_blocks
        solution = find_solution(level, prefix=prefix, step_limit=HINT_STEP_LIMIT)
        if solution is None:
            logger.info("No solution reachable from the current selection on level %d", level.id)
            self._status_label.setText("No solution from here, try stepping back")
            return
        self._board.set_hint(solution[len(prefix)])

    def closeEvent(self, event: QCloseEvent) -> None:
        self._unsubscribe()
        self._progress_store.save_game_state(self._session.get_state())
        super().closeEvent(event)
