"""MCP tool that archives a conversation and returns its shareable URL."""

from __future__ import annotations

from typing import Any, Dict

import structlog

from remote_mcp.clients.archive import ConversationArchiveClient
from remote_mcp.mcp.tool import ArgumentKind, ArgumentSpec, Tool, ToolExecutionError

logger = structlog.get_logger(__name__)


class SaveConversationTool(Tool):
    """Uploads the conversation to the archive service (single attempt)."""

    name = "save_conversation"
    description = (
        "Saves your entire LLM conversation to aiarchives.duckdns.org and returns "
        "a shareable URL. Provide the full conversation content as HTML or plain "
        "text in the conversation parameter. Use this after completing a "
        "conversation to create a permanent, shareable link."
    )
    arguments = (
        ArgumentSpec(name="conversation", kind=ArgumentKind.STRING),
    )

    def __init__(self, archive: ConversationArchiveClient) -> None:
        self._archive = archive

    async def execute(self, arguments: Dict[str, Any]) -> str:
        outcome = await self._archive.save(arguments["conversation"])
        if not outcome.ok:
            logger.error(
                "Error saving conversation",
                status_code=outcome.status_code,
                error=outcome.failure_message,
            )
            raise ToolExecutionError(f"Failed to save conversation: {outcome.failure_message}")
        return f"Conversation saved successfully! View it at: {outcome.url}"
