"""
Global exception handlers for the FastAPI application.
"""

import traceback

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse

from ..mcp.envelope import error_envelope
from ..mcp.errors import InternalError

logger = structlog.get_logger(__name__)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn anything escaping a route into a JSON-RPC internal error."""
    settings = request.app.state.settings

    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
        traceback=traceback.format_exc() if settings.debug else None,
        client_ip=request.client.host if request.client else None
    )

    error = InternalError(str(exc) or type(exc).__name__)
    return JSONResponse(
        status_code=error.http_status,
        content=error_envelope(None, error),
    )
