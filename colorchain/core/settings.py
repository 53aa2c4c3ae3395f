from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    prevent_mistakes: bool = False


class SettingsStore:
    """User preferences stored in ~/.colorchain/settings.json."""

    def __init__(self, file_path: Optional[Path] = None) -> None:
        self._file_path = Path(file_path) if file_path is not None else Path.home() / ".colorchain" / "settings.json"
        self._settings = self.load()

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def prevent_mistakes(self) -> bool:
        return self._settings.prevent_mistakes

    def load(self) -> Settings:
        if not self._file_path.exists():
            return Settings()
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load settings from %s: %s", self._file_path, e)
            return Settings()
        if not isinstance(payload, dict):
            return Settings()
        return Settings(prevent_mistakes=bool(payload.get("prevent_mistakes", False)))

    def save(self, settings: Settings) -> None:
        self._settings = settings
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            self._file_path.write_text(json.dumps(asdict(settings), indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save settings to %s: %s", self._file_path, e)

    def set_prevent_mistakes(self, enabled: bool) -> None:
        self.save(Settings(prevent_mistakes=bool(enabled)))

    def clear(self) -> None:
        self._settings = Settings()
        try:
            self._file_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove settings file %s: %s", self._file_path, e)
