"""Process-wide service context.

The store and the embedding provider live for the whole process.  They
are owned by a :class:`ServiceContext` built once at startup and handed
to the serving layer, instead of module-level globals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from snippet_search.ingestion.embedder import OpenAICompatibleEmbedder
from snippet_search.ingestion.pipeline import load_or_ingest
from snippet_search.retrieval.retriever import SnippetRetriever

if TYPE_CHECKING:
    from snippet_search.config import Settings
    from snippet_search.ingestion.embedder import EmbeddingProvider
    from snippet_search.retrieval.base import VectorStoreBase

logger = logging.getLogger(__name__)


@dataclass
class HealthStatus:
    healthy: bool
    body: dict[str, Any] = field(default_factory=dict)


@dataclass
class ServiceContext:
    """Owned references to everything a request handler needs."""

    settings: Settings
    store: VectorStoreBase
    embedder: EmbeddingProvider

    @property
    def retriever(self) -> SnippetRetriever:
        return SnippetRetriever(
            self.store,
            self.embedder,
            threshold=self.settings.similarity_threshold,
            top_n=self.settings.max_results,
        )

    def health(self) -> HealthStatus:
        """Report store readiness and size."""
        if not self.store.health_check():
            return HealthStatus(False, unhealthy_body())
        return HealthStatus(
            True,
            {
                "status": "healthy",
                "records": len(self.store),
                "embeddings_model": self.embedder.model_name,
            },
        )


def unhealthy_body(reason: str = "vector store not initialized") -> dict[str, Any]:
    return {"status": "unhealthy", "reason": reason}


def build_context(config: Settings) -> ServiceContext:
    """Create the embedder, load or ingest the store, and wire them together."""
    embedder = OpenAICompatibleEmbedder.from_settings(config)
    store = load_or_ingest(config, embedder)
    logger.info("Service context ready: %d records, model %s", len(store), embedder.model_name)
    return ServiceContext(settings=config, store=store, embedder=embedder)
