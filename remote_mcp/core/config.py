"""
Configuration management for the remote MCP server.
"""

import json
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Host to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Application / MCP identity
    app_name: str = Field(default="Remote MCP Server", description="serverInfo.name reported on initialize")
    app_version: str = Field(default="0.1.0", description="serverInfo.version reported on initialize")
    protocol_version: str = Field(default="2025-06-18", description="MCP protocol revision spoken by the server")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # CORS - raw value, parsed by parsed_cors_origins
    cors_origins: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated or JSON array)"
    )

    # Conversation archive collaborator
    archive_api_url: str = Field(
        default="http://localhost:3000/api/conversation",
        description="Endpoint receiving save_conversation uploads",
    )
    archive_model_label: str = Field(
        default="Claude (MCP)",
        description="Value sent in the 'model' form field",
    )
    archive_timeout_seconds: Optional[float] = Field(
        default=None,
        description="Timeout for the archive call; None waits indefinitely",
    )

    @computed_field
    @property
    def parsed_cors_origins(self) -> List[str]:
        """Parse CORS origins supporting both JSON and CSV format."""
        cors_str = self.cors_origins.strip()

        if not cors_str:
            return []

        # Try parsing as JSON array first
        try:
            parsed = json.loads(cors_str)
            if isinstance(parsed, list):
                return parsed
        except (json.JSONDecodeError, ValueError):
            pass

        # Fallback: split by comma
        return [origin.strip() for origin in cors_str.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
