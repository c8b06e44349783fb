"""JSON-file preference store.

The file holds the full mapping and is rewritten after every change. Writes go
through a temporary file and an atomic rename, so the file on disk is always
either the previous mapping or the new one.

Usage:
    store = JsonPreferenceStore(Path("data/BarricadeToWall.json"), default=False)
    store.load()
    store.set(76561198000000001, True)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from barricadewall.core.identity import validate_player_id
from barricadewall.preferences.models import StoredData
from barricadewall.storage.files import atomic_write_text

logger = logging.getLogger(__name__)


class PreferenceStoreError(ValueError):
    """Data file exists but cannot be read or validated."""


class JsonPreferenceStore:
    """PreferenceStore persisted as one JSON document.

    Args:
        path: Data file location. Missing files load as an empty mapping.
        default: Value for players without an entry.
    """

    def __init__(self, path: Path, default: bool = False) -> None:
        self._path = Path(path)
        self._default = default
        self._data = StoredData()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def default(self) -> bool:
        return self._default

    @default.setter
    def default(self, value: bool) -> None:
        self._default = value

    def load(self) -> None:
        """Replace in-memory state with the file's contents.

        Raises:
            PreferenceStoreError: If the file is unreadable or malformed.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            self._data = StoredData()
            return
        except OSError as e:
            raise PreferenceStoreError(f"Cannot read data file {self._path}: {e}") from e

        if not raw.strip():
            self._data = StoredData()
            return

        try:
            self._data = StoredData.model_validate_json(raw)
        except ValidationError as e:
            raise PreferenceStoreError(f"Invalid data file {self._path}: {e}") from e

    def save(self) -> None:
        atomic_write_text(self._path, self._data.to_json() + "\n")
        logger.debug("Saved %d player preference(s) to %s", len(self), self._path)

    def get(self, player_id: int) -> bool:
        return self._data.barricade_enabled.get(player_id, self._default)

    def set(self, player_id: int, value: bool) -> None:
        """Store a player's value and persist it.

        If the write fails the in-memory value is restored before the error
        propagates, so memory never holds a value the file does not.
        """
        flags = self._data.barricade_enabled
        key = validate_player_id(player_id)
        had_previous = key in flags
        previous = flags.get(key)
        flags[key] = bool(value)
        try:
            self.save()
        except OSError:
            if had_previous:
                flags[key] = previous
            else:
                del flags[key]
            raise

    def toggle(self, player_id: int) -> bool:
        """Flip a player's value, persist it, and return the new value."""
        new_state = not self.get(player_id)
        self.set(player_id, new_state)
        return new_state

    def items(self) -> Iterator[tuple[int, bool]]:
        return iter(list(self._data.barricade_enabled.items()))

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._data.barricade_enabled

    def __len__(self) -> int:
        return len(self._data.barricade_enabled)
