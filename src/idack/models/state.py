"""Persisted processor state: the raw state map and the typed IdAck record."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

STATE_LAST_SENT_ID = "lastSentId"
STATE_LAST_SENT_TIME = "lastSentTime"
STATE_LAST_ACK_ID = "lastAcknowledgedId"
STATE_LAST_ACK_TIME = "lastAcknowledgedTime"


class Scope(StrEnum):
    LOCAL = "local"
    CLUSTER = "cluster"


class StateMap(BaseModel):
    """Snapshot of a component's state as stored, plus its version (-1 if never written)."""

    model_config = ConfigDict(frozen=True)

    values: dict[str, str] = Field(default_factory=dict)
    version: int = -1

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def to_dict(self) -> dict[str, str]:
        return dict(self.values)


class IdAckState(BaseModel):
    """Last sent and last acknowledged identifiers with their timestamps.

    Field aliases are the keys used in the state map. Absent keys load as
    ``None`` and are never written back as empty values.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    last_sent_id: Optional[str] = Field(default=None, alias=STATE_LAST_SENT_ID)
    last_sent_time: Optional[str] = Field(default=None, alias=STATE_LAST_SENT_TIME)
    last_acknowledged_id: Optional[str] = Field(default=None, alias=STATE_LAST_ACK_ID)
    last_acknowledged_time: Optional[str] = Field(default=None, alias=STATE_LAST_ACK_TIME)

    @classmethod
    def from_state_map(cls, state: StateMap | Mapping[str, str]) -> "IdAckState":
        values = state.values if isinstance(state, StateMap) else state
        return cls.model_validate({
            key: values[key]
            for key in (STATE_LAST_SENT_ID, STATE_LAST_SENT_TIME, STATE_LAST_ACK_ID, STATE_LAST_ACK_TIME)
            if key in values
        })

    @property
    def is_fully_acknowledged(self) -> bool:
        return self.last_sent_id is None or self.last_sent_id == self.last_acknowledged_id

    def to_state_values(self) -> dict[str, str]:
        return self.model_dump(by_alias=True, exclude_none=True)

    def merged_into(self, state: StateMap | Mapping[str, str]) -> dict[str, str]:
        """Return the prior map with this record's keys overlaid; unrelated keys are kept."""
        values = state.values if isinstance(state, StateMap) else state
        merged = dict(values)
        merged.update(self.to_state_values())
        return merged
