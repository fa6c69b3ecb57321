"""Process entry point: build the service context, then serve HTTP."""

from __future__ import annotations

import argparse
import logging
import sys

import uvicorn

from snippet_search.config import settings
from snippet_search.context import build_context
from snippet_search.ingestion.errors import IngestionError
from snippet_search.retrieval.errors import VectorStoreError
from snippet_search.serving.app import create_app

logger = logging.getLogger("snippet_search")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve the search_snippet tool.")
    parser.add_argument("--host", default=settings.http_host)
    parser.add_argument("--port", type=int, default=settings.http_port)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        context = build_context(settings)
    except (IngestionError, VectorStoreError) as exc:
        logger.critical("Startup aborted: %s", exc)
        return 1

    logger.info("MCP StreamableHTTP server is running on port %d (endpoint /mcp)", args.port)
    uvicorn.run(create_app(context), host=args.host, port=args.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
