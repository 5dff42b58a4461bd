"""FastAPI MCP server for the Svelte documentation (HTTP transport)."""

import asyncio
import contextlib
import json
import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import settings
from .engine.errors import ParseError
from .mcp import error_response
from .mcp.tool_defs import SERVER_DESCRIPTION, SERVER_NAME
from .mcp.transport import handle_payload
from .middleware import RequestLoggingMiddleware
from .models import HealthResponse, ReadyResponse
from .services import DocumentationStore

logger = logging.getLogger(__name__)


def create_app(store: DocumentationStore | None = None) -> FastAPI:
    """Build the FastAPI application around a documentation store.

    The documentation is loaded during startup unless the store already
    holds an index; a failed first load aborts startup.
    """
    store = store or DocumentationStore(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {SERVER_NAME} v{__version__}")

        if not settings.debug and settings.cors_allowed_origins == "*":
            logger.warning(
                "CORS is configured to allow all origins ('*'). "
                "Set SVELTE_DOCS_CORS_ALLOWED_ORIGINS to specific domains in production."
            )

        if not store.is_loaded:
            await store.load()

        refresh_task = None
        if settings.refresh_interval_seconds > 0:
            refresh_task = asyncio.create_task(store.refresh_forever(settings.refresh_interval_seconds))
            logger.info(f"Documentation refresh every {settings.refresh_interval_seconds}s")

        yield

        if refresh_task is not None:
            refresh_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await refresh_task

    app = FastAPI(
        title="Svelte Docs MCP Server",
        description=SERVER_DESCRIPTION,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # ============ EXCEPTION HANDLERS ============

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"success": False, "error": exc.detail})

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "An internal server error occurred. Please try again."},
        )

    # ============ HEALTH ENDPOINTS ============

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint (lightweight liveness check)."""
        return HealthResponse(status="healthy", version=__version__, timestamp=datetime.now(UTC))

    @app.get("/ready", tags=["Health"])
    async def readiness_check():
        """Readiness check - documentation must be loaded."""
        loaded = store.is_loaded
        response = ReadyResponse(
            status="ready" if loaded else "not_ready",
            version=__version__,
            checks={"documentation": loaded},
            sections=len(store.index) if loaded else 0,
            loaded_at=store.loaded_at,
        )
        return JSONResponse(content=response.model_dump(mode="json"), status_code=200 if loaded else 503)

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": SERVER_NAME,
            "version": __version__,
            "mcp": "/mcp",
            "health": "/health",
        }

    # ============ MCP ENDPOINT ============

    @app.post("/mcp", tags=["MCP"])
    async def mcp_endpoint(request: Request):
        """
        MCP endpoint (JSON-RPC 2.0, single or batch).

        Notifications are acknowledged with 204 No Content.
        """
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return JSONResponse(error_response(None, ParseError()), status_code=400)

        response = await handle_payload(body, store)
        return JSONResponse(response) if response else Response(status_code=204)

    return app


app = create_app()
