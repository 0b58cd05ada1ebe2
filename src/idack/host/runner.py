"""Drives a processor against an in-memory session and state manager."""

from __future__ import annotations

from collections.abc import Mapping

from idack.core.config import ProcessorConfig
from idack.core.exceptions import ProcessorFailedError
from idack.core.protocols import IStateManager
from idack.host.context import ProcessContext
from idack.host.session import InMemoryProcessSession
from idack.models.flowfile import FlowFile
from idack.models.relationship import Relationship
from idack.models.state import Scope, StateMap
from idack.persistence.memory_backend import MemoryStateManager
from idack.processor.idack_processor import IdAckProcessor
from idack.processor.result import TriggerResult


class ProcessorRunner:
    """Enqueue flow files, run triggers, inspect transfers and state.

    Each successful trigger is committed; a failed trigger has already rolled
    its session back, so the flow file is waiting at the head of the queue.
    """

    def __init__(
        self,
        processor: IdAckProcessor | None = None,
        *,
        state_manager: IStateManager | None = None,
        config: ProcessorConfig | None = None,
    ) -> None:
        self.processor = processor if processor is not None else IdAckProcessor()
        self.state_manager = state_manager if state_manager is not None else MemoryStateManager()
        self.context = ProcessContext(state_manager=self.state_manager, config=config)
        self.session = InMemoryProcessSession(relationships=self.processor.relationships)

    def enqueue(self, content: bytes | str = b"", attributes: Mapping[str, str] | None = None) -> FlowFile:
        if isinstance(content, str):
            content = content.encode()
        flow_file = FlowFile(content=content, attributes=dict(attributes or {}))
        self.session.enqueue(flow_file)
        return flow_file

    def run(self, iterations: int = 1) -> list[TriggerResult]:
        results: list[TriggerResult] = []
        for _ in range(iterations):
            result = self.processor.on_trigger(self.context, self.session)
            if result.ok:
                self.session.commit()
            results.append(result)
        return results

    def run_once(self) -> TriggerResult:
        """Run one trigger and raise if it failed."""
        result = self.run()[0]
        if not result.ok:
            raise ProcessorFailedError(str(result.error), cause=result.error)
        return result

    # ---- state ----

    def get_state(self, scope: Scope | None = None) -> StateMap:
        return self.state_manager.get_state(scope or self.context.scope)

    def set_state(self, values: Mapping[str, str], scope: Scope | None = None) -> None:
        self.state_manager.set_state(values, scope or self.context.scope)

    # ---- transfers ----

    @property
    def queue_size(self) -> int:
        return self.session.queue_size

    def flow_files_for(self, relationship: Relationship | str) -> list[FlowFile]:
        return self.session.transferred(relationship)

    def assert_transfer_count(self, relationship: Relationship, count: int) -> None:
        actual = len(self.flow_files_for(relationship))
        assert actual == count, f"Expected {count} flow files on {relationship.name!r}, got {actual}"

    def assert_all_transferred(self, relationship: Relationship, count: int) -> None:
        counts = self.session.transfer_counts()
        others = {name: n for name, n in counts.items() if name != relationship.name and n}
        assert not others, f"Expected all flow files on {relationship.name!r}, also found {others}"
        self.assert_transfer_count(relationship, count)
