"""Endpoints that forward tool invocations to the external runner."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, HTTPException, status

from toolbridge.runner import (
    PathResolutionError,
    SerializationError,
    ToolBridge,
    ToolBridgeError,
)


router = APIRouter(prefix="/tools", tags=["tools"])
tool_bridge = ToolBridge()


@router.get("/runner", summary="Report which runner binary and script would be used")
def runner_status() -> dict[str, Any]:
    """Resolve the runner without spawning it."""

    try:
        located = tool_bridge.locate()
    except PathResolutionError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
        ) from exc
    return {
        "binary": located.binary,
        "script_path": str(located.script_path),
        "candidates": [str(candidate) for candidate in located.candidates],
    }


@router.post("/{tool}", summary="Invoke a tool through the external runner")
async def invoke_tool(tool: str, payload: Any = Body(default=None)) -> Any:
    """Run *tool* with the request body as payload and return its JSON result."""

    try:
        return await tool_bridge.invoke_async(tool, payload)
    except PathResolutionError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
        ) from exc
    except SerializationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    except ToolBridgeError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc


__all__ = ["router", "tool_bridge"]
