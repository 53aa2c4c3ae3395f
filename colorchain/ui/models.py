"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass
class LevelState:
    """UI state for one entry of the level picker."""

    level_id: int
    unlocked: bool
    completed: bool
    is_current: bool = False

    @property
    def label(self) -> str:
        if not self.unlocked:
            return f"Level {self.level_id} (locked)"
        if self.completed:
            return f"Level {self.level_id} ✓"
        return f"Level {self.level_id}"


def build_level_states(max_levels: int, current: int, highest_unlocked: int, unlock_all: bool = False) -> List[LevelState]:
    """Picker entries for levels 1..max_levels. Levels below the highest unlocked one count as completed."""
    return [
        LevelState(
            level_id=level_id,
            unlocked=unlock_all or level_id <= highest_unlocked,
            completed=level_id < highest_unlocked,
            is_current=level_id == current,
        )
        for level_id in range(1, max_levels + 1)
    ]


def board_status(level_id: int, width: int, height: int, selected: int, total: int, completed: bool = False) -> str:
    """Status line under the board. A completed board only takes new input after "New board"."""
    if completed:
        return f"Level {level_id} complete · press New board to play it again"
    return f"Level {level_id} · {width}×{height} · {selected}/{total} blocks"
