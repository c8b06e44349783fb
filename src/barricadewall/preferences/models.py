"""Persisted per-player data."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from barricadewall.core.identity import MAX_PLAYER_ID

PlayerIdKey = Annotated[int, Field(ge=0, le=MAX_PLAYER_ID)]


class StoredData(BaseModel):
    """Contents of the plugin data file.

    JSON object keys are strings, so player ids round-trip as decimal text.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    barricade_enabled: dict[PlayerIdKey, bool] = Field(
        default_factory=dict, alias="Barricade Enabled"
    )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)
