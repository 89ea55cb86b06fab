"""
Tool invocation lifecycle.

Lookup, argument validation and execution run as hard gates: the first
failing step raises and nothing after it runs.
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional
from uuid import uuid4

import structlog

from .errors import InternalError, InvalidParamsError
from .protocol import ToolResult
from .registry import ToolRegistry
from .tool import ToolExecutionError

logger = structlog.get_logger(__name__)


class ToolInvoker:
    """Validates and executes tool calls against a registry."""

    def __init__(self, registry: ToolRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    async def invoke(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """
        Run one tool call.

        Raises:
            ToolNotFoundError: unknown tool name (-32601)
            InvalidParamsError: arguments violate the tool's specs (-32602)
            InternalError: execution failed (-32603)
        """
        tool = self._registry.resolve(name)

        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise InvalidParamsError("arguments must be an object")
        tool.validate_arguments(arguments)

        invocation_id = str(uuid4())
        start_time = time.time()
        logger.info("Tool invocation started", tool=name, invocation_id=invocation_id)

        try:
            text = await tool.execute(arguments)
        except ToolExecutionError as exc:
            logger.warning(
                "Tool invocation failed",
                tool=name,
                invocation_id=invocation_id,
                duration_ms=(time.time() - start_time) * 1000,
                error=str(exc),
            )
            raise InternalError(str(exc)) from exc
        except Exception as exc:
            logger.error(
                "Tool invocation crashed",
                tool=name,
                invocation_id=invocation_id,
                duration_ms=(time.time() - start_time) * 1000,
                error=str(exc),
                exc_info=True,
            )
            raise InternalError(str(exc) or type(exc).__name__) from exc

        logger.info(
            "Tool invocation succeeded",
            tool=name,
            invocation_id=invocation_id,
            duration_ms=(time.time() - start_time) * 1000,
        )
        return ToolResult.from_text(text)
