"""MCP server registering the ``search_snippet`` tool.

The server speaks the MCP streamable-HTTP transport in stateless JSON
mode and is mounted on the FastAPI app (see :mod:`snippet_search.serving.app`)
so that ``/mcp`` and ``/health`` share one port.
"""

import logging
from collections.abc import Callable
from typing import Annotated, Optional

import anyio
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.server.transport_security import TransportSecuritySettings
from pydantic import Field

from snippet_search.context import ServiceContext
from snippet_search.ingestion.errors import EmbeddingError
from snippet_search.retrieval.errors import VectorStoreError

logger = logging.getLogger(__name__)

SERVER_NAME = "mcp-snippets-server"
MCP_PATH = "/mcp"


def create_mcp_server(resolve_context: Callable[[], Optional[ServiceContext]]) -> FastMCP:
    """Build the MCP server.

    Parameters
    ----------
    resolve_context:
        Returns the current :class:`ServiceContext`, or ``None`` while the
        store is not ready.  Looked up on every call so the context can be
        attached after the server is built.
    """
    mcp = FastMCP(
        SERVER_NAME,
        stateless_http=True,
        json_response=True,
        streamable_http_path=MCP_PATH,
        # Host checks belong to the deployment's ingress, not this process.
        transport_security=TransportSecuritySettings(enable_dns_rebinding_protection=False),
    )

    @mcp.tool(name="search_snippet", description="Find one or more snippets related to the topic.")
    async def search_snippet(
        topic: Annotated[str, Field(description="Search topic or question to find relevant snippets.")],
    ) -> str:
        context = resolve_context()
        if context is None:
            raise ToolError("vector store not initialized")
        if not topic.strip():
            raise ToolError("parameter 'topic' must not be blank")

        try:
            return await anyio.to_thread.run_sync(context.retriever.search_snippet, topic)
        except EmbeddingError as exc:
            logger.error("search_snippet failed to embed %r: %s", topic, exc)
            raise ToolError(f"could not embed topic: {exc}") from exc
        except VectorStoreError as exc:
            logger.error("search_snippet failed to search for %r: %s", topic, exc)
            raise ToolError(f"search failed: {exc}") from exc

    return mcp
