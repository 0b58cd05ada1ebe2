"""Pluggable state managers behind the IStateManager protocol."""

from __future__ import annotations

from idack.core.config import AppSettings
from idack.core.protocols import IStateManager
from idack.persistence.dynamodb_backend import DynamoDBStateManager
from idack.persistence.memory_backend import MemoryStateManager
from idack.persistence.redis_backend import RedisStateManager


def create_state_manager(settings: AppSettings | None = None) -> IStateManager:
    """Create the state manager selected by ``settings.state.backend``."""
    if settings is None:
        settings = AppSettings()

    component_id = settings.processor.component_id
    backend = settings.state.backend

    if backend == "redis":
        return RedisStateManager(
            component_id,
            host=settings.redis.host,
            port=settings.redis.port,
            db=settings.redis.db,
            key_prefix=settings.redis.key_prefix,
        )

    if backend == "dynamodb":
        return DynamoDBStateManager(
            component_id,
            table_name=settings.dynamodb.table_name,
            table_suffix=settings.dynamodb.table_suffix,
            region=settings.dynamodb.region,
            endpoint_url=settings.dynamodb.endpoint_url,
        )

    return MemoryStateManager()


__all__ = [
    "DynamoDBStateManager",
    "MemoryStateManager",
    "RedisStateManager",
    "create_state_manager",
]
