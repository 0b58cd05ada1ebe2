"""Trigger result: what one invocation of a processor did."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from idack.models.flowfile import FlowFile
from idack.models.relationship import Relationship
from idack.processor.classifier import Outcome


class TriggerStatus(StrEnum):
    IDLE = "IDLE"
    TRANSFERRED = "TRANSFERRED"
    FAILED = "FAILED"


class TriggerResult(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: TriggerStatus
    flow_file: Optional[FlowFile] = None
    relationship: Optional[Relationship] = None
    outcome: Optional[Outcome] = None
    error: Optional[Exception] = None

    @classmethod
    def idle(cls) -> "TriggerResult":
        return cls(status=TriggerStatus.IDLE)

    @classmethod
    def transferred(cls, flow_file: FlowFile, relationship: Relationship, outcome: Outcome) -> "TriggerResult":
        return cls(
            status=TriggerStatus.TRANSFERRED,
            flow_file=flow_file,
            relationship=relationship,
            outcome=outcome,
        )

    @classmethod
    def failed(cls, flow_file: FlowFile, error: Exception) -> "TriggerResult":
        return cls(status=TriggerStatus.FAILED, flow_file=flow_file, error=error)

    @property
    def ok(self) -> bool:
        return self.status is not TriggerStatus.FAILED
