"""Unit tests for RedisStateManager using fakeredis."""

from __future__ import annotations

from unittest.mock import patch

import fakeredis
import pytest
import redis

from idack.core.exceptions import StateReadError, StateWriteError
from idack.models.state import Scope
from idack.persistence.redis_backend import RedisStateManager


@pytest.fixture
def fake_server():
    return fakeredis.FakeServer()


@pytest.fixture
def client(fake_server):
    return fakeredis.FakeRedis(server=fake_server, decode_responses=True)


@pytest.fixture
def manager(client):
    with patch("redis.Redis", return_value=client):
        return RedisStateManager("proc-1", key_prefix="test:")


class TestGetState:
    def test_missing_state_is_empty(self, manager):
        state = manager.get_state(Scope.CLUSTER)
        assert state.to_dict() == {}
        assert state.version == -1

    def test_reads_back_written_values(self, manager):
        manager.set_state({"lastSentId": "abc", "lastSentTime": "T1"}, Scope.CLUSTER)
        state = manager.get_state(Scope.CLUSTER)
        assert state.to_dict() == {"lastSentId": "abc", "lastSentTime": "T1"}
        assert state.version == 1


class TestSetState:
    def test_replaces_whole_map(self, manager):
        manager.set_state({"a": "1", "b": "2"}, Scope.CLUSTER)
        manager.set_state({"a": "3"}, Scope.CLUSTER)
        assert manager.get_state(Scope.CLUSTER).to_dict() == {"a": "3"}
        assert manager.get_state(Scope.CLUSTER).version == 2

    def test_uses_component_and_scope_key(self, manager, client):
        manager.set_state({"a": "1"}, Scope.LOCAL)
        assert client.hgetall("test:proc-1:local") == {"a": "1"}
        assert manager.get_state(Scope.CLUSTER).to_dict() == {}

    def test_clear_keeps_version_moving(self, manager):
        manager.set_state({"a": "1"}, Scope.CLUSTER)
        manager.clear(Scope.CLUSTER)
        state = manager.get_state(Scope.CLUSTER)
        assert state.to_dict() == {}
        assert state.version == 2


class TestErrorWrapping:
    def test_get_wraps_redis_error(self):
        m = RedisStateManager.__new__(RedisStateManager)
        m._component_id = "p"
        m._key_prefix = ""
        m._client = None  # will cause AttributeError -> StateReadError
        with pytest.raises(StateReadError):
            m.get_state(Scope.CLUSTER)

    def test_set_wraps_connection_error(self, manager):
        with patch.object(manager._client, "pipeline", side_effect=redis.ConnectionError("down")):
            with pytest.raises(StateWriteError):
                manager.set_state({"a": "1"}, Scope.CLUSTER)
