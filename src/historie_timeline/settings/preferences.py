"""
Preference Repositories

Key/value stores satisfying the PreferencesRepository protocol.
"""
import json
from pathlib import Path
from typing import Any, Dict, Optional

from ..utils.message import Log


class InMemoryPreferencesRepository:
    """Preferences held in a dict; nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._store: Dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._store.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._store[key] = value


class JsonPreferencesRepository:
    """
    Preferences persisted to a single JSON file.

    The file is read once on construction and rewritten on every set().
    A missing or unreadable file starts an empty store.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._store: Dict[str, Any] = {}

        if self._path.exists():
            try:
                data = json.loads(self._path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as e:
                Log.warning(f"JsonPreferencesRepository: could not read {self._path}: {e}")
                data = {}
            if isinstance(data, dict):
                self._store = data

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        return self._store.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._store[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(self._store, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
