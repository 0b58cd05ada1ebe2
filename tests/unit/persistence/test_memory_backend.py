"""Unit tests for MemoryStateManager."""

from __future__ import annotations

import pytest

from idack.core.exceptions import StateReadError, StateWriteError
from idack.core.protocols import IStateManager
from idack.models.state import Scope
from tests.fakes import MemoryStateManager


@pytest.fixture
def manager():
    return MemoryStateManager()


def test_satisfies_protocol(manager):
    assert isinstance(manager, IStateManager)


def test_missing_state_is_empty_with_unset_version(manager):
    state = manager.get_state(Scope.CLUSTER)
    assert state.to_dict() == {}
    assert state.version == -1


def test_set_replaces_and_bumps_version(manager):
    manager.set_state({"a": "1", "b": "2"}, Scope.CLUSTER)
    manager.set_state({"a": "3"}, Scope.CLUSTER)
    state = manager.get_state(Scope.CLUSTER)
    assert state.to_dict() == {"a": "3"}
    assert state.version == 2


def test_scopes_are_independent(manager):
    manager.set_state({"a": "1"}, Scope.LOCAL)
    assert manager.get_state(Scope.CLUSTER).to_dict() == {}


def test_clear_empties_state(manager):
    manager.set_state({"a": "1"}, Scope.CLUSTER)
    manager.clear(Scope.CLUSTER)
    assert manager.get_state(Scope.CLUSTER).to_dict() == {}


def test_failure_switches(manager):
    manager.fail_on_get = True
    with pytest.raises(StateReadError):
        manager.get_state(Scope.CLUSTER)
    manager.fail_on_set = True
    with pytest.raises(StateWriteError):
        manager.set_state({}, Scope.CLUSTER)


def test_first_write_is_version_one(manager):
    manager.set_state({"a": "1"}, Scope.CLUSTER)
    assert manager.get_state(Scope.CLUSTER).version == 1


def test_clear_bumps_version(manager):
    manager.clear(Scope.CLUSTER)
    assert manager.get_state(Scope.CLUSTER).version == 1
