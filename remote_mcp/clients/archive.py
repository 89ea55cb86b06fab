"""
Client for the conversation archive service.

The archive accepts a multipart upload of a conversation and answers with a
JSON body carrying the shareable ``url``. ``save`` never raises for
collaborator problems: every outcome, good or bad, comes back as an
``ArchiveOutcome`` for the caller to inspect.

Usage:
    async with httpx.AsyncClient() as http:
        client = ConversationArchiveClient(http, url=settings.archive_api_url)
        outcome = await client.save("<html>...</html>")
        if outcome.ok:
            print(outcome.url)
"""

from __future__ import annotations

from typing import Optional

import httpx
import structlog
from pydantic import BaseModel, Field

logger = structlog.get_logger(__name__)


class ArchiveOutcome(BaseModel):
    """Result of one archive call: a url, or a structured failure."""

    ok: bool
    url: Optional[str] = None
    status_code: Optional[int] = Field(default=None, description="HTTP status when a response arrived")
    reason: Optional[str] = Field(default=None, description="HTTP reason phrase")
    body: Optional[str] = Field(default=None, description="Response body text on non-2xx")
    error: Optional[str] = Field(default=None, description="Transport or decoding error message")

    @classmethod
    def success(cls, url: str, status_code: int) -> "ArchiveOutcome":
        return cls(ok=True, url=url, status_code=status_code)

    @classmethod
    def rejected(cls, status_code: int, reason: str, body: str) -> "ArchiveOutcome":
        return cls(ok=False, status_code=status_code, reason=reason, body=body)

    @classmethod
    def failed(cls, error: str, status_code: Optional[int] = None) -> "ArchiveOutcome":
        return cls(ok=False, error=error, status_code=status_code)

    @property
    def failure_message(self) -> str:
        if self.ok:
            return ""
        if self.error is not None:
            return self.error
        return f"API request failed: {self.status_code} {self.reason} - {self.body}"


class ConversationArchiveClient:
    """Posts conversations to the archive service, one attempt per call."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        url: str,
        model_label: str = "Claude (MCP)",
        timeout: Optional[float] = None,
    ) -> None:
        self._http = http_client
        self.url = url
        self.model_label = model_label
        self.timeout = timeout

    async def save(self, conversation: str) -> ArchiveOutcome:
        logger.info(
            "Saving conversation to archive",
            url=self.url,
            size_chars=len(conversation),
        )

        try:
            response = await self._http.post(
                self.url,
                data={"model": self.model_label, "skipScraping": "true"},
                files={
                    "htmlDoc": ("blob", conversation.encode("utf-8", "replace"), "text/plain"),
                },
                timeout=self.timeout,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("Archive request failed", url=self.url, error=str(exc))
            return ArchiveOutcome.failed(str(exc) or type(exc).__name__)

        if not response.is_success:
            logger.warning(
                "Archive rejected conversation",
                url=self.url,
                status_code=response.status_code,
            )
            return ArchiveOutcome.rejected(
                response.status_code,
                response.reason_phrase,
                response.text,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            logger.error("Archive returned malformed JSON", url=self.url, error=str(exc))
            return ArchiveOutcome.failed(str(exc), status_code=response.status_code)

        url = payload.get("url") if isinstance(payload, dict) else None
        if not isinstance(url, str) or not url:
            return ArchiveOutcome.failed(
                "Archive response did not include a url",
                status_code=response.status_code,
            )

        logger.info("Conversation archived", url=url)
        return ArchiveOutcome.success(url, response.status_code)
