from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

from colorchain.core.colors import Color
from colorchain.core.grid import adjacent
from colorchain.core.levels import Block, Level, LevelFactory
from colorchain.core.pattern import collapse_runs, extend_pattern, is_pattern_complete, is_valid_next_color

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """Progress of a play session plus the selection on the active level.

    ``selected_blocks`` holds block ids of the active level in selection order;
    ``selected_pattern`` is always ``collapse_runs`` of their colors.
    """

    current_level: int = 1
    highest_unlocked_level: int = 1
    selected_blocks: List[int] = field(default_factory=list)
    selected_pattern: List[Color] = field(default_factory=list)
    is_game_complete: bool = False


@dataclass(frozen=True)
class SelectBlock:
    block_id: int


@dataclass(frozen=True)
class DeselectBlock:
    block_id: int


@dataclass(frozen=True)
class ResetLevel:
    pass


@dataclass(frozen=True)
class CompleteLevel:
    pass


@dataclass(frozen=True)
class UnlockLevel:
    level: int


@dataclass(frozen=True)
class LoadGame:
    state: GameState


@dataclass(frozen=True)
class SaveGame:
    pass


Action = Union[SelectBlock, DeselectBlock, ResetLevel, CompleteLevel, UnlockLevel, LoadGame, SaveGame]
Listener = Callable[[GameState], None]


class GameSession:
    """Applies player actions to the active level and reports the resulting state.

    Rejected moves leave everything untouched; subscribers are notified after
    every action either way so the view can react. Listeners get a copy of the
    state and must not call back into the session while being notified.
    """

    def __init__(
        self,
        factory: LevelFactory,
        state: Optional[GameState] = None,
        on_save: Optional[Callable[[GameState], None]] = None,
    ) -> None:
        self._factory = factory
        self._state = state if state is not None else GameState()
        self._level: Optional[Level] = None
        self._listeners: List[Listener] = []
        self._on_save = on_save

    @property
    def level(self) -> Optional[Level]:
        """The active level, or None before the first ``load_level``."""
        return self._level

    @property
    def max_levels(self) -> int:
        return self._factory.config.max_levels

    def get_state(self) -> GameState:
        """Snapshot of the current state, safe to keep or modify."""
        return copy.deepcopy(self._state)

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.get_state())

    # ------------------------------------------------------------------
    # Level lifecycle
    # ------------------------------------------------------------------

    def load_level(self, level_id: int) -> bool:
        """Generate and activate ``level_id`` if it is unlocked."""
        if level_id < 1 or level_id > self._state.highest_unlocked_level:
            logger.warning("Level %d is not unlocked yet", level_id)
            return False

        self._level = self._factory.create_level(level_id)
        self._state.current_level = level_id
        self._state.selected_blocks = []
        self._state.selected_pattern = []
        logger.info(
            "Loaded level %d (%dx%d, pattern length %d)",
            level_id,
            self._level.width,
            self._level.height,
            len(self._level.pattern),
        )
        self._notify()
        return True

    def new_level(self) -> bool:
        """Replace the active level with a freshly generated board of the same id."""
        return self.load_level(self._state.current_level)

    def is_level_solved(self) -> bool:
        """All blocks selected and the selected pattern equals the target exactly."""
        if self._level is None:
            return False
        if len(self._state.selected_blocks) != len(self._level.blocks):
            return False
        return is_pattern_complete(self._state.selected_pattern, self._level.pattern)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def dispatch(self, action: Action, prevent_mistakes: bool = False) -> bool:
        if isinstance(action, SelectBlock):
            return self.select_block(action.block_id, prevent_mistakes=prevent_mistakes)
        if isinstance(action, DeselectBlock):
            return self.deselect_block(action.block_id)
        if isinstance(action, ResetLevel):
            return self.reset_level()
        if isinstance(action, CompleteLevel):
            return self.complete_level()
        if isinstance(action, UnlockLevel):
            return self.unlock_level(action.level)
        if isinstance(action, LoadGame):
            return self.load_game(action.state)
        if isinstance(action, SaveGame):
            return self.save_game()
        raise TypeError(f"Unknown action: {action!r}")

    def can_select(self, block_id: int, prevent_mistakes: bool = False) -> bool:
        """Whether ``select_block`` would accept ``block_id`` right now."""
        if self._level is None:
            return False
        block = self._level.block(block_id)
        if block is None or block.selected:
            return False
        last = self._last_selected()
        if last is not None and not adjacent(block.position, last.position):
            return False
        if prevent_mistakes:
            return is_valid_next_color(self._state.selected_pattern, self._level.pattern, block.color)
        return True

    def select_block(self, block_id: int, prevent_mistakes: bool = False) -> bool:
        """Append a block to the selection if it is adjacent to the last one.

        With ``prevent_mistakes`` the block's color must also continue the
        target pattern.
        """
        if self._level is None:
            return False
        if not self.can_select(block_id, prevent_mistakes):
            logger.debug("Rejected selection of block %d", block_id)
            self._notify()
            return False

        block = self._level.blocks[block_id]
        block.selected = True
        self._state.selected_blocks.append(block_id)
        self._state.selected_pattern = extend_pattern(self._state.selected_pattern, block.color)
        self._notify()
        return True

    def deselect_block(self, block_id: int) -> bool:
        """Truncate the selection so that ``block_id`` becomes its last entry."""
        if self._level is None:
            return False
        if block_id not in self._state.selected_blocks:
            self._notify()
            return False

        index = self._state.selected_blocks.index(block_id)
        if index == len(self._state.selected_blocks) - 1:
            self._notify()
            return False

        dropped = self._state.selected_blocks[index + 1:]
        self._state.selected_blocks = self._state.selected_blocks[: index + 1]
        for dropped_block in self._blocks(dropped):
            dropped_block.selected = False
        self._state.selected_pattern = collapse_runs(
            [b.color for b in self._blocks(self._state.selected_blocks)]
        )
        self._notify()
        return True

    def reset_level(self) -> bool:
        if self._level is None:
            return False
        for block in self._level.blocks:
            block.selected = False
        self._state.selected_blocks = []
        self._state.selected_pattern = []
        self._notify()
        return True

    def complete_level(self) -> bool:
        """Mark the active level completed and unlock the next one.

        Callers check ``is_level_solved`` first. Triggers the save callback.
        """
        if self._level is None:
            return False

        self._level.is_completed = True
        next_level = self._state.current_level + 1
        if next_level > self._state.highest_unlocked_level:
            self._state.highest_unlocked_level = next_level
        if self._state.current_level >= self.max_levels:
            self._state.is_game_complete = True
        logger.info("Level %d completed", self._state.current_level)

        self.save_game()
        self._notify()
        return True

    def unlock_level(self, level: int) -> bool:
        changed = level > self._state.highest_unlocked_level
        if changed:
            self._state.highest_unlocked_level = level
        self._notify()
        return changed

    def load_game(self, state: GameState) -> bool:
        """Adopt ``state`` wholesale. Consistency is the loader's concern."""
        self._state = copy.deepcopy(state)
        if self._level is not None:
            chosen = set(self._state.selected_blocks)
            for block in self._level.blocks:
                block.selected = block.id in chosen
        self._notify()
        return True

    def save_game(self) -> bool:
        if self._on_save is None:
            return False
        self._on_save(self.get_state())
        return True

    # A loaded state may name ids the active level doesn't have; those are skipped.

    def _blocks(self, block_ids: List[int]) -> List[Block]:
        found = (self._level.block(i) for i in block_ids)
        return [b for b in found if b is not None]

    def _last_selected(self) -> Optional[Block]:
        if not self._state.selected_blocks:
            return None
        return self._level.block(self._state.selected_blocks[-1])
