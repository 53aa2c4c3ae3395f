from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from colorchain.core.session import GameState

logger = logging.getLogger(__name__)


def _positive_int(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number >= 1 else default


class ProgressStore:
    """Persists level progress across app restarts.

    File: ~/.colorchain/progress.json. Only the level counters and the game
    completion flag are stored; selections belong to a single board and are
    not kept.
    """

    def __init__(self, file_path: Optional[Path] = None) -> None:
        self._file_path = Path(file_path) if file_path is not None else Path.home() / ".colorchain" / "progress.json"
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load_game_state(self) -> GameState:
        """Saved progress merged over defaults. Never raises for bad files."""
        state = GameState()
        payload = self._read()
        if payload is None:
            return state

        state.current_level = _positive_int(payload.get("current_level"), state.current_level)
        state.highest_unlocked_level = _positive_int(
            payload.get("highest_unlocked_level"), state.highest_unlocked_level
        )
        state.is_game_complete = bool(payload.get("is_game_complete", False))
        return state

    def save_game_state(self, state: GameState) -> None:
        payload = {
            "current_level": int(state.current_level),
            "highest_unlocked_level": int(state.highest_unlocked_level),
            "is_game_complete": bool(state.is_game_complete),
        }
        self._write(payload)

    def reset(self) -> None:
        """Forget all progress. Only called when the user asks for it."""
        self._write({})

    def _read(self) -> Optional[Dict[str, Any]]:
        if not self._file_path.exists():
            return None
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load progress from %s: %s", self._file_path, e)
            return None
        if not isinstance(payload, dict):
            logger.warning("Ignoring malformed progress file %s", self._file_path)
            return None
        return payload

    def _write(self, payload: Dict[str, Any]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            self._file_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save progress to %s: %s", self._file_path, e)
