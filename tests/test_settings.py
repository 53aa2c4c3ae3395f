"""Tests for colorchain.core.settings – user preferences."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from colorchain.core.settings import Settings, SettingsStore


@pytest.fixture()
def settings_file(tmp_path: Path) -> Path:
    return tmp_path / "settings.json"


class TestSettings:
    def test_default_is_permissive(self):
        assert Settings().prevent_mistakes is False


class TestSettingsStore:
    def test_defaults_without_file(self, settings_file: Path):
        store = SettingsStore(file_path=settings_file)
        assert store.settings == Settings()
        assert store.prevent_mistakes is False

    def test_toggle_persists(self, settings_file: Path):
        SettingsStore(file_path=settings_file).set_prevent_mistakes(True)
        assert json.loads(settings_file.read_text(encoding="utf-8")) == {"prevent_mistakes": True}
        assert SettingsStore(file_path=settings_file).prevent_mistakes is True

    def test_toggle_visible_immediately(self, settings_file: Path):
        store = SettingsStore(file_path=settings_file)
        store.set_prevent_mistakes(True)
        assert store.prevent_mistakes is True
        store.set_prevent_mistakes(False)
        assert store.prevent_mistakes is False

    def test_bad_json(self, settings_file: Path, caplog: pytest.LogCaptureFixture):
        settings_file.write_text("{{", encoding="utf-8")
        assert SettingsStore(file_path=settings_file).settings == Settings()
        assert "Could not load settings" in caplog.text

    def test_not_an_object(self, settings_file: Path):
        settings_file.write_text('"yes"', encoding="utf-8")
        assert SettingsStore(file_path=settings_file).prevent_mistakes is False

    def test_clear(self, settings_file: Path):
        store = SettingsStore(file_path=settings_file)
        store.set_prevent_mistakes(True)
        store.clear()
        assert not settings_file.exists()
        assert store.prevent_mistakes is False

    def test_clear_without_file(self, settings_file: Path):
        SettingsStore(file_path=settings_file).clear()
        assert not settings_file.exists()
