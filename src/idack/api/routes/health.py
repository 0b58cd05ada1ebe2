"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from idack.core.exceptions import StateStoreError

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
async def ready(request: Request) -> dict[str, str]:
    runner = request.app.state.runner
    try:
        runner.get_state()
    except StateStoreError as exc:
        raise HTTPException(status_code=503, detail=f"State store unavailable: {exc}") from exc
    return {"status": "ready"}
