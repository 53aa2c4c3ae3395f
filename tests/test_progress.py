"""Tests for colorchain.core.progress – progress persistence."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from colorchain.core.progress import ProgressStore
from colorchain.core.session import GameState


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def progress_file(tmp_path: Path) -> Path:
    return tmp_path / "nested" / "progress.json"


@pytest.fixture()
def store(progress_file: Path) -> ProgressStore:
    """ProgressStore backed by a temp file so tests don't touch ~/.colorchain."""
    return ProgressStore(file_path=progress_file)


# ---------------------------------------------------------------------------
# Fresh state
# ---------------------------------------------------------------------------

class TestProgressStoreFresh:
    def test_no_file_returns_defaults(self, store: ProgressStore):
        assert store.load_game_state() == GameState()

    def test_creates_parent_dir(self, store: ProgressStore, progress_file: Path):
        assert progress_file.parent.is_dir()

    def test_default_location(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setattr(Path, "home", lambda: tmp_path)
        assert ProgressStore().file_path == tmp_path / ".colorchain" / "progress.json"


# ---------------------------------------------------------------------------
# Save / load
# ---------------------------------------------------------------------------

class TestSaveLoad:
    def test_round_trip(self, store: ProgressStore):
        store.save_game_state(GameState(current_level=4, highest_unlocked_level=6, is_game_complete=True))
        state = store.load_game_state()
        assert state.current_level == 4
        assert state.highest_unlocked_level == 6
        assert state.is_game_complete is True

    def test_selection_not_persisted(self, store: ProgressStore, progress_file: Path):
        store.save_game_state(GameState(selected_blocks=[0, 1], selected_pattern=[]))
        payload = json.loads(progress_file.read_text(encoding="utf-8"))
        assert "selected_blocks" not in payload
        assert store.load_game_state().selected_blocks == []

    def test_survives_new_instance(self, progress_file: Path):
        ProgressStore(file_path=progress_file).save_game_state(GameState(highest_unlocked_level=9))
        assert ProgressStore(file_path=progress_file).load_game_state().highest_unlocked_level == 9

    def test_reset(self, store: ProgressStore):
        store.save_game_state(GameState(highest_unlocked_level=9))
        store.reset()
        assert store.load_game_state() == GameState()


# ---------------------------------------------------------------------------
# Malformed files
# ---------------------------------------------------------------------------

class TestMalformed:
    def test_bad_json(self, store: ProgressStore, progress_file: Path, caplog: pytest.LogCaptureFixture):
        progress_file.write_text("{not json", encoding="utf-8")
        assert store.load_game_state() == GameState()
        assert "Could not load progress" in caplog.text

    def test_not_an_object(self, store: ProgressStore, progress_file: Path):
        progress_file.write_text("[1, 2]", encoding="utf-8")
        assert store.load_game_state() == GameState()

    @pytest.mark.parametrize("value", ["abc", 0, -4, None, [3]])
    def test_bad_field_falls_back(self, store: ProgressStore, progress_file: Path, value):
        progress_file.write_text(
            json.dumps({"current_level": value, "highest_unlocked_level": 5}),
            encoding="utf-8",
        )
        state = store.load_game_state()
        assert state.current_level == 1
        assert state.highest_unlocked_level == 5

    def test_missing_fields_use_defaults(self, store: ProgressStore, progress_file: Path):
        progress_file.write_text(json.dumps({"highest_unlocked_level": 3}), encoding="utf-8")
        state = store.load_game_state()
        assert state.current_level == 1
        assert state.highest_unlocked_level == 3
        assert state.is_game_complete is False

    def test_inconsistent_levels_kept(self, store: ProgressStore, progress_file: Path):
        progress_file.write_text(
            json.dumps({"current_level": 8, "highest_unlocked_level": 2}),
            encoding="utf-8",
        )
        state = store.load_game_state()
        assert (state.current_level, state.highest_unlocked_level) == (8, 2)
