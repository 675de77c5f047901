"""
Display preference persistence — a small JSON file next to the data.
"""
from __future__ import annotations

import json
from pathlib import Path

from catalogo.config import PREFERENCES_FILE, THEMES, DEFAULT_THEME
from catalogo.data.loader import write_json_atomic


class PreferenceStore:
    """Theme choice, read at start and written on change."""

    def __init__(self, path: Path = PREFERENCES_FILE) -> None:
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return payload if isinstance(payload, dict) else {}

    def get_theme(self) -> str:
        theme = self._read().get("theme")
        return theme if theme in THEMES else DEFAULT_THEME

    def set_theme(self, theme: str) -> str:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme!r}. Valid: {list(THEMES)}")
        payload = self._read()
        payload["theme"] = theme
        write_json_atomic(payload, self.path, indent=None)
        return theme
