"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from barricadewall import BarricadeToWall, HostServices, Planner, Player, PluginSettings
from barricadewall.config import default_replacements
from barricadewall.plugin import USE

WOOD_BARRICADE = "assets/prefabs/deployable/barricades/barricade.cover.wood_double.prefab"
STONE_BARRICADE = "assets/prefabs/deployable/barricades/barricade.stone.prefab"
WOOD_WALL = "assets/prefabs/building/wall.external.high.wood/wall.external.high.wood.prefab"
STONE_WALL = "assets/prefabs/building/wall.external.high.stone/wall.external.high.stone.prefab"
SANDBAG_BARRICADE = "assets/prefabs/deployable/barricades/barricade.sandbags.prefab"

PLAYER_ID = 76561198000000001


@pytest.fixture
def player():
    return Player(user_id=PLAYER_ID, display_name="builder")


@pytest.fixture
def planner(player):
    return Planner(owner=player)


@pytest.fixture
def host():
    """In-memory host whose prefab catalog knows the default barricades and walls."""
    prefabs = set(default_replacements()) | set(default_replacements().values())
    prefabs.add(SANDBAG_BARRICADE)
    return HostServices.in_memory(prefabs=prefabs)


@pytest.fixture
def settings(tmp_path):
    return PluginSettings(config_dir=tmp_path / "config", data_dir=tmp_path / "data")


@pytest.fixture
def plugin(host, settings):
    """Loaded plugin. Nobody holds the use permission yet."""
    instance = BarricadeToWall(host, settings)
    instance.init()
    yield instance
    instance.unload()


@pytest.fixture
def allowed_player(plugin, player):
    """The default player, granted the use permission."""
    plugin.host.permissions.grant(player.user_id, USE)
    return player
