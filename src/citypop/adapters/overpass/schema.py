"""Pydantic models describing Overpass JSON payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OverpassBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class OverpassElement(OverpassBaseModel):
    type: str
    id: int
    tags: dict[str, object] | None = None


class OverpassResponse(OverpassBaseModel):
    elements: list[OverpassElement] = Field(default_factory=list[OverpassElement])
    remark: str | None = None
