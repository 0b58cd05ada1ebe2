"""Issue / acknowledge / other decision against the persisted IdAck state.

Pure given a state snapshot: identifier generation and the clock are injected.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from idack.core.types import Clock, IdFactory
from idack.models.state import IdAckState


class Outcome(StrEnum):
    ISSUE = "ISSUE"
    ACKNOWLEDGE = "ACKNOWLEDGE"
    OTHER = "OTHER"


class Classification(BaseModel):
    """Result of classifying one flow file."""

    model_config = ConfigDict(frozen=True)

    outcome: Outcome
    state: IdAckState
    issued_id: Optional[str] = None  # attribute value to attach, ISSUE only

    @property
    def changes_state(self) -> bool:
        return self.outcome is not Outcome.OTHER


def new_identifier() -> str:
    return str(uuid.uuid4())


def utc_now() -> str:
    """Current instant as fixed-width ISO-8601 UTC, e.g. ``2024-05-01T10:15:30.123456Z``."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def classify(
    state: IdAckState,
    correlation_id: str | None,
    *,
    id_factory: IdFactory = new_identifier,
    clock: Clock = utc_now,
) -> Classification:
    if correlation_id is None and state.is_fully_acknowledged:
        issued_id = id_factory()
        updated = state.model_copy(update={"last_sent_id": issued_id, "last_sent_time": clock()})
        return Classification(outcome=Outcome.ISSUE, state=updated, issued_id=issued_id)

    if correlation_id is not None and correlation_id == state.last_sent_id:
        updated = state.model_copy(
            update={"last_acknowledged_id": correlation_id, "last_acknowledged_time": clock()}
        )
        return Classification(outcome=Outcome.ACKNOWLEDGE, state=updated)

    # Stale or foreign id, or an issued id still waiting for its ack.
    return Classification(outcome=Outcome.OTHER, state=state)
