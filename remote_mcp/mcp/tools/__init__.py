"""Built-in MCP tools."""

from typing import List

from remote_mcp.clients.archive import ConversationArchiveClient
from remote_mcp.mcp.tool import Tool

from .add import AddTool
from .reverse import ReverseTool
from .save_conversation import SaveConversationTool


def builtin_tools(archive: ConversationArchiveClient) -> List[Tool]:
    """Tools in the order tools/list advertises them."""
    return [
        AddTool(),
        ReverseTool(),
        SaveConversationTool(archive),
    ]


__all__ = ["AddTool", "ReverseTool", "SaveConversationTool", "builtin_tools"]
