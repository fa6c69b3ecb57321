"""Snippet retriever — embeds a query and ranks stored chunks against it.

Usage::

    from snippet_search.retrieval.retriever import SnippetRetriever

    retriever = SnippetRetriever(store, embedder, threshold=0.6, top_n=2)
    print(retriever.search_snippet("How do I configure the port?"))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from snippet_search.retrieval.models import SimilarityResult, VectorRecord

if TYPE_CHECKING:
    from snippet_search.ingestion.embedder import EmbeddingProvider
    from snippet_search.retrieval.base import VectorStoreBase

logger = logging.getLogger(__name__)

SNIPPETS_PREAMBLE = "Documents:\n"


def format_snippets(results: list[SimilarityResult]) -> str:
    """Concatenate result texts, in rank order, behind the preamble label."""
    return SNIPPETS_PREAMBLE + "".join(r.text for r in results) + "\n"


class SnippetRetriever:
    """Read-only query side of the service.

    Parameters
    ----------
    store:
        A populated vector-store backend.
    embedder:
        Provider used to embed incoming queries.
    threshold:
        Minimum cosine similarity; results below it are discarded.
    top_n:
        Maximum number of results returned.
    """

    def __init__(
        self,
        store: VectorStoreBase,
        embedder: EmbeddingProvider,
        *,
        threshold: float = 0.6,
        top_n: int = 2,
    ) -> None:
        self._store = store
        self._embedder = embedder
        self.threshold = threshold
        self.top_n = top_n

    def search(self, query: str) -> list[SimilarityResult]:
        """Embed *query* and return the ranked similar records.

        Raises
        ------
        EmbeddingError
            The query could not be embedded.
        DimensionMismatchError
            The query vector does not match the store's dimension.
        """
        embedding = self._embedder.embed(query)
        query_record = VectorRecord(embedding=embedding)
        results = self._store.search_top_n_similarities(query_record, self.threshold, self.top_n)
        for r in results:
            logger.debug("Cosine similarity %.4f for chunk %s", r.score, r.id)
        logger.info("Similarities found for %r: %d", query, len(results))
        return results

    def search_snippet(self, topic: str) -> str:
        """Return the text payload of the ``search_snippet`` tool for *topic*."""
        if not topic or not topic.strip():
            raise ValueError("topic must be a non-empty string")
        logger.info("Searching for question: %r", topic)
        return format_snippets(self.search(topic))
