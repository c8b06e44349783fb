"""Host-side settings using Pydantic Settings.

These describe where the plugin keeps its files and how the host drives it.
They are separate from the plugin config file, which server owners edit.

Usage:
    from barricadewall.config import PluginSettings

    # Load from environment variables (BARRICADEWALL_*)
    settings = PluginSettings()

    # Or override with explicit values
    settings = PluginSettings(config_dir=tmp_path, data_dir=tmp_path)
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PluginSettings(BaseSettings):
    """Settings for running the plugin inside a host.

    Attributes:
        plugin_name: Name used for the config and data file names.
        config_dir: Directory holding the plugin config file.
        data_dir: Directory holding the per-player data file.
        tick_rate: Host ticks per second.
        reannounce: Re-emit build and deploy events for replacement walls.

    Environment Variables:
        BARRICADEWALL_PLUGIN_NAME
        BARRICADEWALL_CONFIG_DIR
        BARRICADEWALL_DATA_DIR
        BARRICADEWALL_TICK_RATE
        BARRICADEWALL_REANNOUNCE
    """

    model_config = SettingsConfigDict(
        env_prefix="BARRICADEWALL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    plugin_name: str = "BarricadeToWall"
    config_dir: Path = Path("config")
    data_dir: Path = Path("data")
    tick_rate: float = Field(default=30.0, gt=0)
    reannounce: bool = True

    @property
    def config_path(self) -> Path:
        return self.config_dir / f"{self.plugin_name}.json"

    @property
    def data_path(self) -> Path:
        return self.data_dir / f"{self.plugin_name}.json"
