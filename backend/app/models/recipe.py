from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    yield_: int = Field(alias="yield")
    ingredients: List[str] = []

    @field_validator("ingredients", mode="before")
    @classmethod
    def _none_means_empty(cls, value: Optional[List[str]]) -> List[str]:
        return [] if value is None else value
