"""
MCP Protocol - Type definitions and contracts.

Defines the JSON-RPC envelopes and MCP payloads exchanged on /mcp:
- JsonRpcErrorEnvelope: error response shape
- ToolDescriptor: tool advertisement returned by tools/list
- ToolResult: text content returned by tools/call
- InitializeResult: capability descriptor returned by initialize
"""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

JSONRPC_VERSION = "2.0"

JsonRpcId = Optional[Union[int, float, str]]


class RequestKind(str, Enum):
    """Classification of an incoming decoded request."""
    NOTIFICATION = "notification"
    CALL = "call"
    MALFORMED = "malformed"


class ClassifiedRequest(BaseModel):
    """Outcome of envelope validation."""
    kind: RequestKind
    method: Optional[str] = None
    id: JsonRpcId = Field(default=None, description="Request id, or the id to echo on malformed calls")
    params: Dict[str, Any] = Field(default_factory=dict)


class JsonRpcErrorObject(BaseModel):
    """The `error` member of an error envelope."""
    code: int
    message: str


class JsonRpcErrorEnvelope(BaseModel):
    """Failed JSON-RPC response."""
    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: JsonRpcId = None
    error: JsonRpcErrorObject


class TextContent(BaseModel):
    """A single text item of a tool result."""
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Payload of a successful tools/call."""
    content: List[TextContent]

    @classmethod
    def from_text(cls, text: str) -> "ToolResult":
        # text may hold lone surrogates (see reverse), which str validation rejects
        return cls.model_construct(content=[TextContent.model_construct(type="text", text=text)])

    def as_payload(self) -> Dict[str, Any]:
        return {"content": [{"type": item.type, "text": item.text} for item in self.content]}


class ToolDescriptor(BaseModel):
    """Public metadata describing a tool."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Unique tool identifier (e.g., 'add')")
    description: str = Field(..., description="Tool purpose and use cases")
    input_schema: Dict[str, Any] = Field(..., alias="inputSchema", description="JSON Schema for arguments")


class ToolListResult(BaseModel):
    """Payload of tools/list."""
    tools: List[ToolDescriptor]


class ServerInfo(BaseModel):
    name: str
    version: str


class ServerCapabilities(BaseModel):
    """Capabilities declared on initialize; tool invocation only."""
    tools: Dict[str, Any] = Field(default_factory=dict)


class InitializeResult(BaseModel):
    """Payload of initialize."""
    model_config = ConfigDict(populate_by_name=True)

    protocol_version: str = Field(..., alias="protocolVersion", min_length=1)
    capabilities: ServerCapabilities = Field(default_factory=ServerCapabilities)
    server_info: ServerInfo = Field(..., alias="serverInfo")


class DispatchOutcome(BaseModel):
    """What the transport must send back for one decoded request."""
    body: Optional[Dict[str, Any]] = Field(default=None, description="Envelope to serialize; None for notifications")
    status_code: int = Field(default=200, description="HTTP status for the response")

    @property
    def has_body(self) -> bool:
        return self.body is not None
