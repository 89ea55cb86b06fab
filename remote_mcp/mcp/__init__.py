"""Model Context Protocol (MCP) request handling core."""

from .dispatcher import Dispatcher
from .errors import (
    ErrorCode,
    InternalError,
    InvalidParamsError,
    InvalidRequestError,
    MCPError,
    MethodNotFoundError,
    ParseError,
    ToolNotFoundError,
)
from .invoker import ToolInvoker
from .notifications import NotificationHandler
from .protocol import DispatchOutcome, ToolDescriptor, ToolResult
from .registry import ToolRegistry
from .router import MethodRouter
from .tool import ArgumentKind, ArgumentSpec, Tool, ToolExecutionError

__all__ = [
    "ArgumentKind",
    "ArgumentSpec",
    "DispatchOutcome",
    "Dispatcher",
    "ErrorCode",
    "InternalError",
    "InvalidParamsError",
    "InvalidRequestError",
    "MCPError",
    "MethodNotFoundError",
    "MethodRouter",
    "NotificationHandler",
    "ParseError",
    "Tool",
    "ToolDescriptor",
    "ToolExecutionError",
    "ToolInvoker",
    "ToolNotFoundError",
    "ToolRegistry",
    "ToolResult",
]
