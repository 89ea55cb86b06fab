"""FastAPI router exposing the MCP JSON-RPC endpoint."""

from __future__ import annotations

import json
from typing import Any

import structlog
from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from .dispatcher import Dispatcher
from .envelope import error_envelope
from .errors import ParseError

logger = structlog.get_logger(__name__)


class MCPJSONResponse(JSONResponse):
    """JSON response that escapes non-ASCII, so lone surrogates survive encoding."""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=True,
            allow_nan=True,
            separators=(",", ":"),
        ).encode("utf-8")


def create_mcp_router(dispatcher: Dispatcher) -> APIRouter:
    """Create MCP router bound to a dispatcher."""

    if dispatcher is None:
        raise ValueError("dispatcher is required")

    router = APIRouter(tags=["mcp"])

    @router.post("/mcp")
    async def handle_mcp(request: Request) -> Response:
        try:
            payload = await request.json()
        except ValueError as exc:
            logger.warning("Rejected undecodable MCP body", error=str(exc))
            error = ParseError()
            return MCPJSONResponse(error_envelope(None, error), status_code=error.http_status)

        outcome = await dispatcher.dispatch(payload)
        if not outcome.has_body:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return MCPJSONResponse(outcome.body, status_code=outcome.status_code)

    @router.get("/mcp")
    async def describe_mcp() -> dict:
        return {
            "message": "MCP Server is running",
            "note": "Use POST requests for MCP protocol communication",
        }

    return router
