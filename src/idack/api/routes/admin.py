"""Admin endpoints: inspect and clear processor state, push a flow file through."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from idack.core.exceptions import StateStoreError
from idack.host.runner import ProcessorRunner
from idack.models.state import IdAckState

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin"])


class FlowFileRequest(BaseModel):
    attributes: dict[str, str] = Field(default_factory=dict)
    content: str = ""


class FlowFileResponse(BaseModel):
    uuid: str
    relationship: str
    outcome: str
    attributes: dict[str, str]


def _runner(request: Request) -> ProcessorRunner:
    return request.app.state.runner


@router.get("/state")
async def get_state(request: Request) -> dict:
    """Return the processor's tracked ids and timestamps."""
    try:
        state_map = _runner(request).get_state()
    except StateStoreError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return {
        "state": IdAckState.from_state_map(state_map).to_state_values(),
        "version": state_map.version,
    }


@router.delete("/state")
async def clear_state(request: Request) -> dict[str, str]:
    """Forget the last sent and acknowledged ids so the next flow file gets a new one."""
    runner = _runner(request)
    try:
        runner.state_manager.clear(runner.context.scope)
    except StateStoreError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    logger.info("Cleared processor state", extra={"scope": runner.context.scope.value})
    return {"status": "cleared"}


@router.post("/flowfiles")
async def submit_flow_file(body: FlowFileRequest, request: Request) -> FlowFileResponse:
    runner = _runner(request)
    flow_file = runner.enqueue(body.content, body.attributes)
    try:
        result = runner.run()[0]
    except Exception as exc:
        # Rolled back onto the queue; drop it so the next request does not pick it up.
        runner.session.remove(flow_file.uuid)
        logger.exception("Trigger failed for flow file %s", flow_file.uuid)
        raise HTTPException(status_code=500, detail=f"Trigger failed: {exc}") from exc
    if not result.ok:
        runner.session.remove(flow_file.uuid)
        raise HTTPException(status_code=503, detail=str(result.error))
    if result.flow_file is None or result.flow_file.uuid != flow_file.uuid:
        raise HTTPException(status_code=500, detail="Trigger processed a different flow file")
    return FlowFileResponse(
        uuid=result.flow_file.uuid,
        relationship=result.relationship.name,
        outcome=result.outcome.value,
        attributes=result.flow_file.attributes,
    )
