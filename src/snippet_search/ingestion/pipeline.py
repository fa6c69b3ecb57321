"""Cold-start ingestion: discover → chunk → embed → store → persist."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from snippet_search.ingestion.chunker import chunk_documents, determine_delimiter
from snippet_search.ingestion.errors import EmbeddingError
from snippet_search.ingestion.loader import discover_documents
from snippet_search.retrieval.errors import DimensionMismatchError, StoreNotFoundError
from snippet_search.retrieval.memory_store import MemoryVectorStore
from snippet_search.retrieval.models import VectorRecord

if TYPE_CHECKING:
    from langchain_core.documents import Document

    from snippet_search.config import Settings
    from snippet_search.ingestion.embedder import EmbeddingProvider
    from snippet_search.retrieval.base import VectorStoreBase

logger = logging.getLogger(__name__)


@dataclass
class IngestionReport:
    """Counters collected during one ingestion run."""

    documents: int = 0
    chunks: int = 0
    stored: int = 0
    skipped: int = 0


def ingest_documents(
    documents: list[Document],
    store: VectorStoreBase,
    embedder: EmbeddingProvider,
    *,
    min_delimiter: str,
    max_delimiter: str,
) -> IngestionReport:
    """Chunk and embed *documents* into *store*.

    Chunks are processed sequentially, in discovery order.  A chunk whose
    embedding fails (or does not fit the store's dimension) is logged and
    skipped; the rest of the batch carries on.
    """
    report = IngestionReport(documents=len(documents))

    for doc in documents:
        delimiter = determine_delimiter(min_delimiter, max_delimiter)
        source = doc.metadata.get("source", "?")
        logger.info("Chunking %s with delimiter %r (length: %d)", source, delimiter, len(delimiter))

        for chunk in chunk_documents([doc], delimiter):
            report.chunks += 1
            idx = chunk.metadata["chunk_index"]
            try:
                embedding = embedder.embed(chunk.page_content)
            except EmbeddingError as exc:
                logger.warning("Skipping chunk %d of %s: %s", idx, source, exc)
                report.skipped += 1
                continue

            try:
                record_id = store.save(VectorRecord(text=chunk.page_content, embedding=embedding))
            except DimensionMismatchError as exc:
                logger.error("Skipping chunk %d of %s: %s", idx, source, exc)
                report.skipped += 1
                continue

            report.stored += 1
            logger.debug("Chunk %d of %s saved as %s (dim=%d)", idx, source, record_id, len(embedding))

    logger.info(
        "Embeddings created: %d stored, %d skipped, from %d chunks in %d documents",
        report.stored,
        report.skipped,
        report.chunks,
        report.documents,
    )
    return report


def load_or_ingest(config: Settings, embedder: EmbeddingProvider) -> MemoryVectorStore:
    """Load the persisted store, or build and persist it when absent.

    Only a missing store file triggers ingestion.  A corrupt store, a
    discovery failure or a persist failure propagates to the caller and
    must stop the service from starting.

    An ingestion run that stores nothing (every chunk failed, or no
    content) is not persisted, so the next start tries again instead of
    loading an empty store.
    """
    store = MemoryVectorStore()
    try:
        store.load(config.json_store_file_path)
        return store
    except StoreNotFoundError:
        logger.info("No existing vector store found at %s, starting fresh.", config.json_store_file_path)

    documents = discover_documents(config.content_root, config.content_extension)
    report = ingest_documents(
        documents,
        store,
        embedder,
        min_delimiter=config.minimum_delimiter,
        max_delimiter=config.maximum_delimiter,
    )
    if report.stored == 0:
        logger.warning(
            "Ingestion stored no records (%d chunks, %d skipped); not persisting %s so the next start retries.",
            report.chunks,
            report.skipped,
            config.json_store_file_path,
        )
        return store

    store.persist(config.json_store_file_path)
    logger.info("Vector store initialized with %d records.", len(store))
    return store
