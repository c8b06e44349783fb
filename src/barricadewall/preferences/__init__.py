"""Per-player enablement store."""

from barricadewall.preferences.json_store import JsonPreferenceStore, PreferenceStoreError
from barricadewall.preferences.models import StoredData
from barricadewall.preferences.protocol import PreferenceStore

__all__ = [
    "PreferenceStore",
    "JsonPreferenceStore",
    "PreferenceStoreError",
    "StoredData",
]
