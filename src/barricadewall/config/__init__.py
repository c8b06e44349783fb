"""Configuration: the plugin's JSON config file and host settings.

Usage:
    from barricadewall.config import PluginSettings, load_config

    settings = PluginSettings()
    config = load_config(settings.config_path)
"""

from barricadewall.config.loader import (
    ConfigError,
    load_config,
    parse_version,
    read_config,
    save_config,
    update_config,
    version_less_than,
)
from barricadewall.config.models import (
    DEFAULT_CHAT_COMMAND,
    DEFAULT_ENABLE_BY_DEFAULT,
    PLUGIN_VERSION,
    Configuration,
    default_replacements,
)
from barricadewall.config.settings import PluginSettings

__all__ = [
    "Configuration",
    "PluginSettings",
    "ConfigError",
    "PLUGIN_VERSION",
    "DEFAULT_CHAT_COMMAND",
    "DEFAULT_ENABLE_BY_DEFAULT",
    "default_replacements",
    "load_config",
    "read_config",
    "save_config",
    "update_config",
    "parse_version",
    "version_less_than",
]
