"""
FastAPI application for the remote MCP server.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import httpx
import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .clients.archive import ConversationArchiveClient
from .core.config import Settings, get_settings
from .core.exceptions import general_exception_handler
from .core.logging import setup_logging
from .mcp.dispatcher import Dispatcher
from .mcp.invoker import ToolInvoker
from .mcp.notifications import NotificationHandler
from .mcp.registry import ToolRegistry
from .mcp.router import MethodRouter
from .mcp.routes import create_mcp_router
from .mcp.tools import builtin_tools
from .routers import health


def build_dispatcher(settings: Settings, http_client: httpx.AsyncClient) -> Dispatcher:
    """Wire registry, invoker, router and notification handler."""
    archive = ConversationArchiveClient(
        http_client,
        url=settings.archive_api_url,
        model_label=settings.archive_model_label,
        timeout=settings.archive_timeout_seconds,
    )
    registry = ToolRegistry(builtin_tools(archive))
    router = MethodRouter(
        ToolInvoker(registry),
        server_name=settings.app_name,
        server_version=settings.app_version,
        protocol_version=settings.protocol_version,
    )
    return Dispatcher(router, NotificationHandler())


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    app_settings: Settings = app.state.settings
    logger = structlog.get_logger()

    logger.info(
        "Starting Remote MCP Server",
        version=app.version,
        archive_url=app_settings.archive_api_url,
    )

    yield

    await app.state.http_client.aclose()
    logger.info("Shutting down Remote MCP Server")


def create_app(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, json_output=not settings.debug)

    app = FastAPI(
        title=settings.app_name,
        description="MCP server exposing tools over JSON-RPC",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.parsed_cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(Exception, general_exception_handler)
    app.dependency_overrides[get_settings] = lambda: settings

    app.state.settings = settings
    app.state.http_client = http_client or httpx.AsyncClient()
    app.state.dispatcher = build_dispatcher(settings, app.state.http_client)

    app.include_router(health.router, tags=["health"])
    app.include_router(create_mcp_router(app.state.dispatcher))

    return app


def run() -> None:
    """Console entry point."""
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
