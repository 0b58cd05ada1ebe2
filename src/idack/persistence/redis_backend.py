"""Redis state manager: one hash per component and scope plus a version counter."""

from __future__ import annotations

from collections.abc import Mapping

import redis

from idack.core.exceptions import StateReadError, StateWriteError
from idack.models.state import Scope, StateMap


class RedisStateManager:
    """Production IStateManager backed by Redis."""

    def __init__(self, component_id: str, host: str = "localhost", port: int = 6379,
                 db: int = 0, key_prefix: str = "idack:state:") -> None:
        self._component_id = component_id
        self._key_prefix = key_prefix
        self._client = redis.Redis(
            host=host, port=port, db=db, decode_responses=True,
        )

    def _key(self, scope: Scope) -> str:
        return f"{self._key_prefix}{self._component_id}:{scope.value}"

    def _version_key(self, scope: Scope) -> str:
        return f"{self._key(scope)}:version"

    def get_state(self, scope: Scope) -> StateMap:
        try:
            pipe = self._client.pipeline(transaction=True)
            pipe.hgetall(self._key(scope))
            pipe.get(self._version_key(scope))
            values, version = pipe.execute()
        except Exception as exc:
            raise StateReadError(
                f"Redis state read failed for scope={scope.value!r}: {exc}", scope=scope.value
            ) from exc
        return StateMap(values=values or {}, version=int(version) if version is not None else -1)

    def set_state(self, values: Mapping[str, str], scope: Scope) -> None:
        try:
            pipe = self._client.pipeline(transaction=True)
            pipe.delete(self._key(scope))
            if values:
                pipe.hset(self._key(scope), mapping=dict(values))
            pipe.incr(self._version_key(scope))
            pipe.execute()
        except Exception as exc:
            raise StateWriteError(
                f"Redis state write failed for scope={scope.value!r}: {exc}", scope=scope.value
            ) from exc

    def clear(self, scope: Scope) -> None:
        self.set_state({}, scope)
