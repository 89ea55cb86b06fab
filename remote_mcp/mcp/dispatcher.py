"""
Top-level request dispatcher.

Classifies a decoded request, routes calls and converts every failure into
an error envelope. Nothing raised below this point reaches the transport.
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import status

from .envelope import classify_request, error_envelope, result_envelope
from .errors import InternalError, InvalidRequestError, MCPError
from .notifications import NotificationHandler
from .protocol import DispatchOutcome, RequestKind
from .router import MethodRouter

logger = structlog.get_logger(__name__)


class Dispatcher:
    """Orchestrates classify, validate, route and respond."""

    def __init__(self, router: MethodRouter, notifications: NotificationHandler) -> None:
        self._router = router
        self._notifications = notifications

    async def dispatch(self, payload: Any) -> DispatchOutcome:
        try:
            request = classify_request(payload)
        except ValueError as exc:
            logger.warning("Unreadable MCP envelope", error=str(exc))
            return self._failure(None, InvalidRequestError())

        logger.info(
            "Received MCP request",
            kind=request.kind.value,
            method=request.method,
            request_id=request.id,
        )

        if request.kind is RequestKind.NOTIFICATION:
            self._notifications.handle(request.method, request.params)
            return DispatchOutcome(body=None, status_code=status.HTTP_204_NO_CONTENT)

        if request.kind is RequestKind.MALFORMED:
            return self._failure(request.id, InvalidRequestError())

        try:
            result = await self._router.route(request.method, request.params)
        except MCPError as exc:
            logger.warning(
                "MCP request failed",
                method=request.method,
                request_id=request.id,
                code=int(exc.code),
                error=exc.message,
            )
            return self._failure(request.id, exc)
        except Exception as exc:
            logger.error(
                "Error processing request",
                method=request.method,
                request_id=request.id,
                error=str(exc),
                exc_info=True,
            )
            return self._failure(request.id, InternalError(str(exc) or type(exc).__name__))

        return DispatchOutcome(
            body=result_envelope(request.id, result),
            status_code=status.HTTP_200_OK,
        )

    @staticmethod
    def _failure(request_id: Any, error: MCPError) -> DispatchOutcome:
        return DispatchOutcome(
            body=error_envelope(request_id, error),
            status_code=error.http_status,
        )
