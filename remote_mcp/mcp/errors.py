"""
JSON-RPC error taxonomy.

Every failure the core can report maps to one of these exceptions. Each one
carries its JSON-RPC code and the HTTP status the transport answers with.
"""

from enum import IntEnum

from fastapi import status


class ErrorCode(IntEnum):
    """Reserved JSON-RPC 2.0 error codes used by the server."""
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class MCPError(Exception):
    """Base error rendered as a JSON-RPC error envelope."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_error_object(self) -> dict:
        return {"code": int(self.code), "message": self.message}


class ParseError(MCPError):
    """Request body is not valid JSON."""

    code = ErrorCode.PARSE_ERROR
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Parse error"):
        super().__init__(message)


class InvalidRequestError(MCPError):
    """Envelope is missing required fields."""

    code = ErrorCode.INVALID_REQUEST
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Invalid Request - missing required fields"):
        super().__init__(message)


class MethodNotFoundError(MCPError):
    """No handler is registered for the method."""

    code = ErrorCode.METHOD_NOT_FOUND
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Method not found: {method}")


class ToolNotFoundError(MCPError):
    """Requested tool does not exist in the registry."""

    code = ErrorCode.METHOD_NOT_FOUND
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidParamsError(MCPError):
    """Params or tool arguments violate a declared constraint."""

    code = ErrorCode.INVALID_PARAMS
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, constraint: str):
        self.constraint = constraint
        super().__init__(f"Invalid params - {constraint}")


class InternalError(MCPError):
    """Tool execution or collaborator failure."""

    code = ErrorCode.INTERNAL_ERROR
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
