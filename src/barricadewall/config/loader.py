"""Loading, migrating and saving the plugin config file.

Usage:
    config = load_config(settings.config_path)
    save_config(settings.config_path, config)
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from barricadewall.config.models import PLUGIN_VERSION, Configuration
from barricadewall.storage.files import atomic_write_text

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Config file exists but cannot be read or validated."""


def parse_version(value: str | None) -> tuple[int, ...]:
    """Split a dotted version into integers.

    Missing or non-numeric versions parse to (), which sorts before any real
    version so such files are treated as the oldest possible config.
    """
    if not value:
        return ()
    parts: list[int] = []
    for piece in value.strip().split("."):
        if not piece.isdigit():
            return ()
        parts.append(int(piece))
    return tuple(parts)


def version_less_than(left: str | None, right: str | None) -> bool:
    a, b = parse_version(left), parse_version(right)
    if not a or not b:
        return bool(b) and not a
    width = max(len(a), len(b))
    return a + (0,) * (width - len(a)) < b + (0,) * (width - len(b))


def update_config(config: Configuration, current_version: str = PLUGIN_VERSION) -> Configuration:
    """Bring an older config forward to `current_version`.

    Before 1.0.0 the whole file is replaced by defaults. Before 1.1.0 only the
    chat command and the default toggle state are reset, since both changed
    meaning in that release.
    """
    logger.warning("Config changes detected! Updating...")

    defaults = Configuration.default(current_version)
    previous = config.version

    if version_less_than(config.version, "1.0.0"):
        config = defaults.model_copy(update={"version": previous})

    if version_less_than(config.version, "1.1.0"):
        config = config.model_copy(
            update={
                "chat_command": defaults.chat_command,
                "enable_by_default": defaults.enable_by_default,
            }
        )

    logger.warning(
        "Config update complete! Updated from version %s to %s", previous, current_version
    )
    return config.model_copy(update={"version": current_version})


def read_config(path: Path) -> Configuration | None:
    """Parse a config file. Returns None if it is missing or blank.

    Raises:
        ConfigError: If the file cannot be read or does not validate.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if not raw.strip():
        return None

    try:
        return Configuration.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e


def save_config(path: Path, config: Configuration) -> None:
    atomic_write_text(path, config.to_json() + "\n")


def load_config(path: Path, current_version: str = PLUGIN_VERSION) -> Configuration:
    """Load the config, creating or migrating it, and write the result back.

    Args:
        path: Location of the JSON config file.
        current_version: Version of the running plugin.

    Returns:
        The configuration now on disk.

    Raises:
        ConfigError: If an existing file is unreadable or invalid.
    """
    config = read_config(path)
    if config is None:
        logger.info("Creating default config at %s", path)
        config = Configuration.default(current_version)
    elif version_less_than(config.version, current_version):
        config = update_config(config, current_version)

    save_config(path, config)
    return config
