"""Tests for JsonPreferenceStore.

Critical Invariants:
- Players without an entry read as the configured default
- Every set() is on disk before it returns
- Toggling twice restores the original state
"""

import json

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from barricadewall.core import MAX_PLAYER_ID
from barricadewall.preferences import JsonPreferenceStore, PreferenceStore, PreferenceStoreError

player_ids = st.integers(min_value=0, max_value=MAX_PLAYER_ID)


@pytest.fixture
def data_path(tmp_path):
    return tmp_path / "data" / "BarricadeToWall.json"


def test_store_satisfies_protocol(data_path):
    assert isinstance(JsonPreferenceStore(data_path), PreferenceStore)


@given(player_id=player_ids, default=st.booleans())
def test_unknown_player_reads_default(player_id, default):
    store = JsonPreferenceStore(path="never-written.json", default=default)
    assert store.get(player_id) is default
    assert player_id not in store


def test_missing_file_loads_empty(data_path):
    store = JsonPreferenceStore(data_path)
    store.load()

    assert len(store) == 0
    assert not data_path.exists()


def test_set_persists_immediately_and_round_trips(data_path):
    store = JsonPreferenceStore(data_path, default=False)
    store.set(76561198000000001, True)

    on_disk = json.loads(data_path.read_text(encoding="utf-8"))
    assert on_disk == {"Barricade Enabled": {"76561198000000001": True}}

    reloaded = JsonPreferenceStore(data_path, default=False)
    reloaded.load()
    assert reloaded.get(76561198000000001) is True


def test_stored_value_wins_over_default(data_path):
    store = JsonPreferenceStore(data_path, default=True)
    store.set(5, False)

    assert store.get(5) is False
    assert store.get(6) is True


@settings(deadline=None, max_examples=25)
@given(player_id=player_ids, default=st.booleans(), start=st.booleans())
def test_toggle_twice_is_identity(tmp_path_factory, player_id, default, start):
    path = tmp_path_factory.mktemp("prefs") / "data.json"
    store = JsonPreferenceStore(path, default=default)
    store.set(player_id, start)

    store.toggle(player_id)
    store.toggle(player_id)

    assert store.get(player_id) is start


def test_toggle_unknown_player_flips_default(data_path):
    store = JsonPreferenceStore(data_path, default=True)
    assert store.toggle(1) is False
    assert store.toggle(1) is True


def test_largest_player_id_round_trips(data_path):
    store = JsonPreferenceStore(data_path)
    store.set(MAX_PLAYER_ID, True)

    reloaded = JsonPreferenceStore(data_path)
    reloaded.load()
    assert dict(reloaded.items()) == {MAX_PLAYER_ID: True}


def test_set_rejects_out_of_range_ids(data_path):
    store = JsonPreferenceStore(data_path)
    with pytest.raises(ValueError):
        store.set(-1, True)
    with pytest.raises(ValueError):
        store.set(MAX_PLAYER_ID + 1, True)


@pytest.mark.parametrize(
    "content",
    [
        "{broken",
        json.dumps({"Barricade Enabled": {"not-a-number": True}}),
        json.dumps({"Barricade Enabled": {"-5": True}}),
        json.dumps({"Barricade Enabled": {"1": "maybe"}}),
    ],
    ids=["malformed", "non-numeric-key", "negative-key", "non-bool"],
)
def test_invalid_data_file_raises(data_path, content):
    data_path.parent.mkdir(parents=True)
    data_path.write_text(content, encoding="utf-8")

    store = JsonPreferenceStore(data_path)
    with pytest.raises(PreferenceStoreError):
        store.load()


def test_rewrite_leaves_no_temp_files(data_path):
    store = JsonPreferenceStore(data_path)
    for player_id in range(5):
        store.set(player_id, player_id % 2 == 0)

    assert [p.name for p in data_path.parent.iterdir()] == [data_path.name]
    assert len(json.loads(data_path.read_text(encoding="utf-8"))["Barricade Enabled"]) == 5


def test_failed_write_leaves_memory_unchanged(tmp_path):
    blocked = tmp_path / "data"
    blocked.write_text("not a directory", encoding="utf-8")
    store = JsonPreferenceStore(blocked / "BarricadeToWall.json", default=False)

    with pytest.raises(OSError):
        store.set(1, True)

    assert store.get(1) is False
    assert 1 not in store


def test_failed_write_restores_previous_value(data_path):
    store = JsonPreferenceStore(data_path, default=False)
    store.set(1, True)

    data_path.parent.rename(data_path.parent.with_name("moved"))
    data_path.parent.write_text("not a directory", encoding="utf-8")

    with pytest.raises(OSError):
        store.toggle(1)

    assert store.get(1) is True
