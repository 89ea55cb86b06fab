"""Immutable tool registry."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping

import structlog

from .errors import ToolNotFoundError
from .protocol import ToolDescriptor
from .tool import Tool

logger = structlog.get_logger(__name__)


class ToolRegistry:
    """Name-to-tool mapping built once and read-only afterwards.

    Iteration and ``list_tools`` follow registration order, which clients
    see through tools/list.
    """

    def __init__(self, tools: Iterable[Tool]) -> None:
        ordered: Dict[str, Tool] = {}
        for tool in tools:
            if tool.name in ordered:
                raise ValueError(f"Tool '{tool.name}' is already registered")
            ordered[tool.name] = tool
            logger.info(
                "Registered MCP tool",
                tool=tool.name,
                required=[spec.name for spec in tool.arguments if spec.required],
            )
        self._tools: Mapping[str, Tool] = MappingProxyType(ordered)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[Tool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def list_tools(self) -> List[ToolDescriptor]:
        """Return descriptors in registration order."""
        return [tool.descriptor() for tool in self._tools.values()]

    def resolve(self, name: str) -> Tool:
        """Return a tool implementation or raise ToolNotFoundError."""
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(name)
        return tool
