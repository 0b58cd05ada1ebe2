"""In-memory state manager: dict-backed, per scope, versioned."""

from __future__ import annotations

from collections.abc import Mapping

from idack.core.exceptions import StateReadError, StateWriteError
from idack.models.state import Scope, StateMap


class MemoryStateManager:
    """Dict-backed IStateManager for local runs and unit tests.

    ``fail_on_get`` / ``fail_on_set`` make the next accesses raise, to
    exercise rollback paths.
    """

    def __init__(self) -> None:
        self._states: dict[Scope, StateMap] = {}
        self.fail_on_get = False
        self.fail_on_set = False
        self.get_count = 0
        self.set_count = 0

    def get_state(self, scope: Scope) -> StateMap:
        if self.fail_on_get:
            raise StateReadError(f"State unavailable for scope={scope.value!r}", scope=scope.value)
        self.get_count += 1
        return self._states.get(scope, StateMap())

    def set_state(self, values: Mapping[str, str], scope: Scope) -> None:
        if self.fail_on_set:
            raise StateWriteError(f"State write rejected for scope={scope.value!r}", scope=scope.value)
        self.set_count += 1
        version = max(self._states.get(scope, StateMap()).version, 0) + 1
        self._states[scope] = StateMap(values=dict(values), version=version)

    def clear(self, scope: Scope) -> None:
        if self.fail_on_set:
            raise StateWriteError(f"State clear rejected for scope={scope.value!r}", scope=scope.value)
        version = max(self._states.get(scope, StateMap()).version, 0) + 1
        self._states[scope] = StateMap(values={}, version=version)
