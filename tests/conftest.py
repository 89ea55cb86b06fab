"""
Pytest configuration and fixtures.

Provides:
- Settings pointing the archive at a fake host
- An httpx MockTransport standing in for the archive service
- Registry, invoker, router and dispatcher wired the way the app wires them
"""

import httpx
import pytest

from remote_mcp.clients.archive import ConversationArchiveClient
from remote_mcp.core.config import Settings
from remote_mcp.main import build_dispatcher
from remote_mcp.mcp.invoker import ToolInvoker
from remote_mcp.mcp.registry import ToolRegistry
from remote_mcp.mcp.router import MethodRouter
from remote_mcp.mcp.tools import builtin_tools
from tests.helpers import ARCHIVE_URL, ArchiveStub


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        archive_api_url=ARCHIVE_URL,
        app_name="Remote MCP Server",
        app_version="0.1.0",
        protocol_version="2025-06-18",
        log_level="WARNING",
    )


@pytest.fixture
def archive_stub():
    return ArchiveStub()


@pytest.fixture
def http_client(archive_stub):
    return httpx.AsyncClient(transport=httpx.MockTransport(archive_stub))


@pytest.fixture
def archive_client(http_client, settings):
    return ConversationArchiveClient(
        http_client,
        url=settings.archive_api_url,
        model_label=settings.archive_model_label,
    )


@pytest.fixture
def registry(archive_client):
    return ToolRegistry(builtin_tools(archive_client))


@pytest.fixture
def invoker(registry):
    return ToolInvoker(registry)


@pytest.fixture
def method_router(invoker, settings):
    return MethodRouter(
        invoker,
        server_name=settings.app_name,
        server_version=settings.app_version,
        protocol_version=settings.protocol_version,
    )


@pytest.fixture
def dispatcher(settings, http_client):
    return build_dispatcher(settings, http_client)
