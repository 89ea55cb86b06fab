"""Handling of id-less MCP notifications."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import structlog

logger = structlog.get_logger(__name__)


class NotificationHandler:
    """Accepts notifications; only logs, never produces a payload."""

    def __init__(self) -> None:
        self._handlers: Dict[str, Callable[[Dict[str, Any]], None]] = {
            "notifications/initialized": self._initialized,
            "notifications/cancelled": self._cancelled,
        }

    def handle(self, method: str, params: Optional[Dict[str, Any]] = None) -> None:
        logger.info("Handling notification", method=method)
        handler = self._handlers.get(method)
        if handler is None:
            logger.info("Unknown notification", method=method)
            return
        handler(params or {})

    @staticmethod
    def _initialized(params: Dict[str, Any]) -> None:
        logger.info("Client initialized")

    @staticmethod
    def _cancelled(params: Dict[str, Any]) -> None:
        logger.info(
            "Request cancelled",
            request_id=params.get("requestId"),
            reason=params.get("reason"),
        )
