"""Protocol interfaces for the collaborators a processor consumes from its host.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from idack.models.flowfile import FlowFile
from idack.models.relationship import Relationship
from idack.models.state import Scope, StateMap


# ---------------------------------------------------------------------------
# State Manager
# ---------------------------------------------------------------------------

@runtime_checkable
class IStateManager(Protocol):
    """Scoped key-value state for one component.

    Implementations raise ``StateStoreError`` subclasses on any access fault.
    """

    def get_state(self, scope: Scope) -> StateMap: ...

    def set_state(self, values: Mapping[str, str], scope: Scope) -> None: ...

    def clear(self, scope: Scope) -> None: ...


# ---------------------------------------------------------------------------
# Process Session
# ---------------------------------------------------------------------------

@runtime_checkable
class IProcessSession(Protocol):
    """Transactional unit of work over the host's flow file queue."""

    def get(self) -> FlowFile | None: ...

    def put_attribute(self, flow_file: FlowFile, name: str, value: str) -> FlowFile: ...

    def transfer(self, flow_file: FlowFile, relationship: Relationship) -> None: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
