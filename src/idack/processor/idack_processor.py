"""IdAck processor: tags outbound flow files with an id and records its acknowledgment."""

from __future__ import annotations

import logging

from idack.core.exceptions import StateStoreError
from idack.core.protocols import IProcessSession
from idack.core.types import Clock, IdFactory
from idack.host.context import ProcessContext
from idack.models.relationship import Relationship
from idack.models.state import IdAckState, Scope
from idack.processor.classifier import Outcome, classify, new_identifier, utc_now
from idack.processor.result import TriggerResult

logger = logging.getLogger(__name__)


class IdAckProcessor:
    """Tracks ids and timestamps of sent and acknowledged flow files, keeping them in state.

    A flow file without an id gets a fresh one and goes to ``success``, but only
    when no earlier id is still waiting for its acknowledgment. A flow file
    carrying the last sent id records the acknowledgment and goes to ``ack``.
    Everything else goes to ``other`` and leaves the state alone.
    """

    REL_SUCCESS = Relationship(name="success", description="FlowFiles with a new ID added.")
    REL_ACK = Relationship(name="ack", description="FlowFiles with acknowledged IDs.")
    REL_OTHER = Relationship(name="other", description="All other FlowFiles.")

    tags = ("id", "acknowledgment", "state", "timestamp")
    capability_description = (
        "Tracks IDs and timestamps of sent and acknowledged FlowFiles, maintaining state."
    )
    stateful_scopes = (Scope.CLUSTER,)
    trigger_serially = True

    _ROUTES = {
        Outcome.ISSUE: REL_SUCCESS,
        Outcome.ACKNOWLEDGE: REL_ACK,
        Outcome.OTHER: REL_OTHER,
    }

    def __init__(self, *, id_factory: IdFactory = new_identifier, clock: Clock = utc_now) -> None:
        self._id_factory = id_factory
        self._clock = clock

    @property
    def relationships(self) -> frozenset[Relationship]:
        return frozenset(self._ROUTES.values())

    def on_trigger(self, context: ProcessContext, session: IProcessSession) -> TriggerResult:
        flow_file = session.get()
        if flow_file is None:
            return TriggerResult.idle()

        attribute = context.config.attribute_name
        scope = context.scope
        try:
            state_map = context.state_manager.get_state(scope)
            result = classify(
                IdAckState.from_state_map(state_map),
                flow_file.get_attribute(attribute),
                id_factory=self._id_factory,
                clock=self._clock,
            )

            if result.issued_id is not None:
                flow_file = session.put_attribute(flow_file, attribute, result.issued_id)
            if result.changes_state:
                context.state_manager.set_state(result.state.merged_into(state_map), scope)

            relationship = self._ROUTES[result.outcome]
            session.transfer(flow_file, relationship)
        except StateStoreError as exc:
            logger.error("Error processing flow file %s: %s", flow_file.uuid, exc, exc_info=True)
            session.rollback()
            return TriggerResult.failed(flow_file, exc)
        except Exception:
            session.rollback()
            raise

        logger.debug(
            "Routed flow file %s to %s",
            flow_file.uuid,
            relationship.name,
            extra={"outcome": result.outcome.value, "idack": flow_file.get_attribute(attribute)},
        )
        return TriggerResult.transferred(flow_file, relationship, result.outcome)
