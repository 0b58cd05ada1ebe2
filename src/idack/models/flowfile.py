"""Flow file model: the unit of work handed to the processor by the host."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field


class FlowFile(BaseModel):
    """Immutable flow file. Attribute updates produce a new instance with the same uuid."""

    model_config = ConfigDict(frozen=True)

    uuid: str = Field(default_factory=lambda: str(uuid.uuid4()))
    attributes: dict[str, str] = Field(default_factory=dict)
    content: bytes = b""

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def with_attribute(self, name: str, value: str) -> "FlowFile":
        return self.model_copy(update={"attributes": {**self.attributes, name: value}})
