"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class ProcessorConfig(BaseSettings):
    """IdAck processor configuration."""

    model_config = {"env_prefix": "IDACK_PROCESSOR_"}

    component_id: str = "idack-processor"  # state record key
    attribute_name: str = "idack"
    state_scope: Literal["cluster", "local"] = "cluster"


class StateConfig(BaseSettings):
    """State store backend selection."""

    model_config = {"env_prefix": "IDACK_STATE_"}

    backend: Literal["memory", "redis", "dynamodb"] = "memory"


class RedisConfig(BaseSettings):
    """Redis state store configuration."""

    model_config = {"env_prefix": "IDACK_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    key_prefix: str = "idack:state:"


class DynamoDBConfig(BaseSettings):
    """DynamoDB state store configuration."""

    model_config = {"env_prefix": "IDACK_DYNAMO_"}

    table_name: str = "idack-processor-state"
    table_suffix: str = ""  # "-dev", "-uat", or "" for prod
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "IDACK_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"

    processor: ProcessorConfig = ProcessorConfig()
    state: StateConfig = StateConfig()
    redis: RedisConfig = RedisConfig()
    dynamodb: DynamoDBConfig = DynamoDBConfig()
