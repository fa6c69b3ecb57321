"""FastAPI application serving the MCP endpoint and a health check."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.responses import JSONResponse

from snippet_search import __version__
from snippet_search.context import ServiceContext, build_context, unhealthy_body
from snippet_search.serving.mcp_server import SERVER_NAME, create_mcp_server

logger = logging.getLogger(__name__)


# ── Application factory ───────────────────────────────────────────────
def create_app(context: ServiceContext | None = None) -> FastAPI:
    """Build the API.

    ``/health`` is served by FastAPI; every other path falls through to
    the MCP streamable-HTTP app, which answers on ``/mcp``.  When
    *context* is ``None`` the lifespan hook builds one from the global
    settings at startup (loading or ingesting the store).
    """
    mcp_server = create_mcp_server(lambda: getattr(app.state, "context", None))

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if getattr(app.state, "context", None) is None:
            from snippet_search.config import settings

            app.state.context = build_context(settings)
        async with mcp_server.session_manager.run():
            yield

    app = FastAPI(
        title=SERVER_NAME,
        version=__version__,
        description="Snippet search over a locally persisted vector store.",
        lifespan=lifespan,
    )
    app.state.context = context
    app.include_router(router)

    app.state.mcp = mcp_server
    # Mounted last so the FastAPI routes above take precedence.
    app.mount("/", mcp_server.streamable_http_app())
    return app


# ── Routes ────────────────────────────────────────────────────────────
router = APIRouter()


@router.get("/health")
def health(request: Request) -> JSONResponse:
    """Readiness check: healthy only once the store holds records."""
    context: ServiceContext | None = getattr(request.app.state, "context", None)
    if context is None:
        return JSONResponse(unhealthy_body(), status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    result = context.health()
    code = status.HTTP_200_OK if result.healthy else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(result.body, status_code=code)


app = create_app()
