from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from .exchanges.protocol import Exchange


class NormalizationSettings(BaseModel):
    on_malformed: Literal["raise", "skip"] = "raise"

    model_config = {"extra": "forbid"}


class OutputSettings(BaseModel):
    format: Literal["table", "json"] = "table"

    model_config = {"extra": "forbid"}


class Settings(BaseModel):
    env: str = "dev"
    exchanges: list[Exchange] = Field(default_factory=lambda: list(Exchange))
    normalization: NormalizationSettings = Field(default_factory=NormalizationSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)

    model_config = {"extra": "forbid"}

    def is_enabled(self, exchange: Exchange) -> bool:
        return exchange in self.exchanges

    def summary(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
