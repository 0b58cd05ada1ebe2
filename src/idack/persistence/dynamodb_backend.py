"""DynamoDB state manager: one item per component and scope."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from idack.core.exceptions import StateReadError, StateWriteError
from idack.models.state import Scope, StateMap


def _decode_version(value: Any) -> int:
    if isinstance(value, Decimal):
        return int(value)
    return int(value) if value is not None else -1


class DynamoDBStateManager:
    """Production IStateManager backed by a DynamoDB table with PK/SK keys.

    Reads are strongly consistent so each trigger sees the previous write.
    """

    def __init__(self, component_id: str, table_name: str = "idack-processor-state",
                 table_suffix: str = "", region: str = "us-east-1",
                 endpoint_url: str | None = None) -> None:
        self._component_id = component_id
        self._table_name = f"{table_name}{table_suffix}"
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._ddb = boto3.resource("dynamodb", **kwargs)

    def _table(self):
        return self._ddb.Table(self._table_name)

    def _key(self, scope: Scope) -> dict[str, str]:
        return {"PK": f"COMPONENT#{self._component_id}", "SK": f"SCOPE#{scope.value}"}

    def get_state(self, scope: Scope) -> StateMap:
        try:
            resp = self._table().get_item(Key=self._key(scope), ConsistentRead=True)
        except (ClientError, BotoCoreError) as exc:
            raise StateReadError(
                f"DynamoDB state read failed for scope={scope.value!r}: {exc}", scope=scope.value
            ) from exc
        item = resp.get("Item")
        if item is None:
            return StateMap()
        return StateMap(
            values={k: str(v) for k, v in item.get("state", {}).items()},
            version=_decode_version(item.get("version")),
        )

    def set_state(self, values: Mapping[str, str], scope: Scope) -> None:
        try:
            self._table().update_item(
                Key=self._key(scope),
                UpdateExpression="SET #state = :state ADD #version :one",
                ExpressionAttributeNames={"#state": "state", "#version": "version"},
                ExpressionAttributeValues={":state": dict(values), ":one": 1},
            )
        except (ClientError, BotoCoreError) as exc:
            raise StateWriteError(
                f"DynamoDB state write failed for scope={scope.value!r}: {exc}", scope=scope.value
            ) from exc

    def clear(self, scope: Scope) -> None:
        self.set_state({}, scope)
