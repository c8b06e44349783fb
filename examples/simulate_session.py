"""Play a short server session against the in-memory host.

A handful of players join, some opt in with the chat command, and everyone
places barricades. The world is printed after the tick loop has run.

Usage:
    python simulate_session.py                  # Default session
    python simulate_session.py --players 5      # More players
    python simulate_session.py --data-dir /tmp  # Keep config and data elsewhere
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import tempfile
from pathlib import Path

from barricadewall import (
    BarricadeToWall,
    EntityBuilt,
    HostServices,
    Planner,
    Player,
    PluginSettings,
    Vector3,
)
from barricadewall.config import default_replacements
from barricadewall.plugin import USE

FIRST_PLAYER_ID = 76561198000000001


def create_session(settings: PluginSettings) -> tuple[BarricadeToWall, HostServices]:
    prefabs = set(default_replacements()) | set(default_replacements().values())
    host = HostServices.in_memory(prefabs=prefabs, tick_rate=settings.tick_rate)
    plugin = BarricadeToWall(host, settings)
    plugin.init()
    return plugin, host


async def play(host: HostServices, players: list[Player], ticks: int) -> None:
    barricades = sorted(default_replacements())
    for i, player in enumerate(players):
        host.permissions.grant(player.user_id, USE)
        # Every other player opts in
        if i % 2 == 0:
            host.commands.dispatch(player, "/barricade")
            print(f"{player.display_name}: {host.chat.last(player.user_id)}")

        prefab = barricades[i % len(barricades)]
        entity = host.world.build(prefab, Vector3(10.0 * i, 0.0, 0.0), owner_id=player.user_id)
        host.bus.emit(EntityBuilt(Planner(owner=player), entity))

    await host.tick_loop.run(ticks=ticks)


def report(host: HostServices) -> None:
    print()
    for entity in host.world.entities():
        name = host.world.prefab_name(entity).rsplit("/", 1)[-1]
        print(f"  {entity.index:>3}  {name:<45} owner={host.world.owner_id(entity)}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="simulate-session",
        description="Barricade To Wall - simulated server session",
    )
    parser.add_argument("--players", type=int, default=4, help="Number of players")
    parser.add_argument("--ticks", type=int, default=3, help="Ticks to run after building")
    parser.add_argument("--data-dir", type=Path, help="Config and data directory")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    with tempfile.TemporaryDirectory() as scratch:
        root = args.data_dir or Path(scratch)
        settings = PluginSettings(config_dir=root / "config", data_dir=root / "data")
        plugin, host = create_session(settings)

        players = [
            Player(user_id=FIRST_PLAYER_ID + i, display_name=f"player{i + 1}")
            for i in range(args.players)
        ]
        asyncio.run(play(host, players, args.ticks))
        report(host)
        plugin.unload()

    return 0


if __name__ == "__main__":
    sys.exit(main())
