"""Plugin configuration file model.

The JSON keys are the human-readable names server owners edit by hand, so
fields are aliased and written back with `by_alias=True`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

PLUGIN_VERSION = "1.1.0"

DEFAULT_CHAT_COMMAND = "barricade"
DEFAULT_ENABLE_BY_DEFAULT = False


def default_replacements() -> dict[str, str]:
    return {
        "assets/prefabs/deployable/barricades/barricade.cover.wood_double.prefab": (
            "assets/prefabs/building/wall.external.high.wood/wall.external.high.wood.prefab"
        ),
        "assets/prefabs/deployable/barricades/barricade.stone.prefab": (
            "assets/prefabs/building/wall.external.high.stone/wall.external.high.stone.prefab"
        ),
    }


class Configuration(BaseModel):
    """Contents of the plugin's JSON config file.

    Attributes:
        version: Plugin version that last wrote the file. None when absent.
        enable_by_default: Conversion state for players who never toggled.
        chat_command: Name of the toggle chat command, without the slash.
        barricade_replacements: Source prefab -> destination prefab.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    version: str | None = Field(default=None, alias="Version")
    enable_by_default: bool = Field(default=DEFAULT_ENABLE_BY_DEFAULT, alias="Enable By Default")
    chat_command: str = Field(default=DEFAULT_CHAT_COMMAND, alias="Chat Command")
    barricade_replacements: dict[str, str] = Field(
        default_factory=default_replacements, alias="Barricade Replacements"
    )

    @field_validator("chat_command")
    @classmethod
    def _check_chat_command(cls, value: str) -> str:
        value = value.strip().lstrip("/")
        if not value or any(c.isspace() for c in value):
            raise ValueError(f"chat command must be a single word, got {value!r}")
        return value

    @field_validator("barricade_replacements")
    @classmethod
    def _check_replacements(cls, value: dict[str, str]) -> dict[str, str]:
        for source, dest in value.items():
            if not source.strip() or not dest.strip():
                raise ValueError("replacement prefab names must not be empty")
        return value

    @classmethod
    def default(cls, version: str = PLUGIN_VERSION) -> Configuration:
        return cls(version=version)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)
