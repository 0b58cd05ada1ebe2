"""Relationships: named outputs a processor routes flow files to."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Relationship(BaseModel):
    """A named output. Hashable so it can key transfer maps."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""

    def __str__(self) -> str:
        return self.name
