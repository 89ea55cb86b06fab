"""Method routing for JSON-RPC calls."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict

from .errors import InvalidParamsError, MethodNotFoundError
from .invoker import ToolInvoker
from .protocol import InitializeResult, ServerInfo, ToolListResult

MethodHandler = Callable[[Dict[str, Any]], Awaitable[Dict[str, Any]]]


class MethodRouter:
    """Maps a method name to exactly one handler; unknown names are not found."""

    def __init__(
        self,
        invoker: ToolInvoker,
        *,
        server_name: str,
        server_version: str,
        protocol_version: str,
    ) -> None:
        self._invoker = invoker
        self._initialize_result = InitializeResult(
            protocol_version=protocol_version,
            server_info=ServerInfo(name=server_name, version=server_version),
        )
        self._methods: Dict[str, MethodHandler] = {
            "initialize": self._initialize,
            "tools/list": self._tools_list,
            "tools/call": self._tools_call,
        }

    @property
    def methods(self) -> tuple:
        return tuple(self._methods)

    async def route(self, method: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Run the handler for ``method`` and return its result object."""
        handler = self._methods.get(method)
        if handler is None:
            raise MethodNotFoundError(method)
        return await handler(params)

    async def _initialize(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return self._initialize_result.model_dump(by_alias=True)

    async def _tools_list(self, params: Dict[str, Any]) -> Dict[str, Any]:
        result = ToolListResult(tools=self._invoker.registry.list_tools())
        return result.model_dump(by_alias=True)

    async def _tools_call(self, params: Dict[str, Any]) -> Dict[str, Any]:
        name = params.get("name")
        if not isinstance(name, str) or not name:
            raise InvalidParamsError("missing tool name")
        result = await self._invoker.invoke(name, params.get("arguments"))
        return result.as_payload()
