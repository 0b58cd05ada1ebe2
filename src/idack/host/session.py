"""In-memory process session: a FIFO queue with commit/rollback over transfers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from idack.core.exceptions import SessionError
from idack.models.flowfile import FlowFile
from idack.models.relationship import Relationship


class InMemoryProcessSession:
    """IProcessSession over a local queue.

    Attribute changes and transfers stay pending until ``commit()``.
    ``rollback()`` discards them and puts the acquired flow files back at the
    head of the queue in their original order.
    """

    def __init__(self, relationships: Iterable[Relationship] | None = None) -> None:
        self._relationships = frozenset(relationships) if relationships is not None else None
        self._queue: deque[FlowFile] = deque()
        self._acquired: dict[str, FlowFile] = {}
        self._current: dict[str, FlowFile] = {}
        self._pending: dict[str, Relationship] = {}
        self._transferred: dict[str, list[FlowFile]] = {}
        self.commit_count = 0
        self.rollback_count = 0

    # ---- queue ----

    def enqueue(self, flow_file: FlowFile) -> None:
        self._queue.append(flow_file)

    def remove(self, uuid: str) -> bool:
        """Drop a queued flow file. Returns False if it is not in the queue."""
        for flow_file in self._queue:
            if flow_file.uuid == uuid:
                self._queue.remove(flow_file)
                return True
        return False

    @property
    def queue_size(self) -> int:
        return len(self._queue)

    # ---- IProcessSession methods ----

    def get(self) -> FlowFile | None:
        if not self._queue:
            return None
        flow_file = self._queue.popleft()
        self._acquired[flow_file.uuid] = flow_file
        self._current[flow_file.uuid] = flow_file
        return flow_file

    def put_attribute(self, flow_file: FlowFile, name: str, value: str) -> FlowFile:
        self._check_current(flow_file)
        updated = flow_file.with_attribute(name, value)
        self._current[flow_file.uuid] = updated
        return updated

    def transfer(self, flow_file: FlowFile, relationship: Relationship) -> None:
        self._check_current(flow_file)
        if self._relationships is not None and relationship not in self._relationships:
            raise SessionError(f"Unknown relationship {relationship.name!r}")
        self._pending[flow_file.uuid] = relationship

    def commit(self) -> None:
        untransferred = [uid for uid in self._acquired if uid not in self._pending]
        if untransferred:
            raise SessionError(f"Flow files not transferred before commit: {untransferred}")
        for uid, relationship in self._pending.items():
            self._transferred.setdefault(relationship.name, []).append(self._current[uid])
        self._reset()
        self.commit_count += 1

    def rollback(self) -> None:
        self._queue.extendleft(reversed(list(self._acquired.values())))
        self._reset()
        self.rollback_count += 1

    # ---- inspection ----

    def transferred(self, relationship: Relationship | str) -> list[FlowFile]:
        name = relationship if isinstance(relationship, str) else relationship.name
        return list(self._transferred.get(name, []))

    def transfer_counts(self) -> dict[str, int]:
        return {name: len(files) for name, files in self._transferred.items()}

    def clear_transferred(self) -> None:
        self._transferred.clear()

    def _check_current(self, flow_file: FlowFile) -> None:
        current = self._current.get(flow_file.uuid)
        if current is None:
            raise SessionError(f"Flow file {flow_file.uuid} does not belong to this session")
        if current != flow_file:
            raise SessionError(f"Flow file {flow_file.uuid} is not the most recent version")

    def _reset(self) -> None:
        self._acquired.clear()
        self._current.clear()
        self._pending.clear()
