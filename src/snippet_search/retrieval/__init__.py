"""
Retrieval — vector storage, similarity search, and snippet assembly.

Public surface
--------------
- :class:`MemoryVectorStore` — JSON-persisted in-memory backend.
- :class:`VectorStoreBase` — abstract backend.
- :class:`SnippetRetriever` — query-side entry point.
- :class:`VectorRecord`, :class:`SimilarityResult` — data models.
- :func:`cosine_similarity` — similarity measure used for ranking.
"""

from snippet_search.retrieval.base import VectorStoreBase
from snippet_search.retrieval.errors import (
    DimensionMismatchError,
    DuplicateRecordError,
    StoreCorruptError,
    StoreNotFoundError,
    StorePersistError,
    VectorStoreError,
)
from snippet_search.retrieval.memory_store import MemoryVectorStore
from snippet_search.retrieval.models import SimilarityResult, VectorRecord
from snippet_search.retrieval.retriever import SnippetRetriever
from snippet_search.retrieval.similarity import cosine_similarity

__all__ = [
    "DimensionMismatchError",
    "DuplicateRecordError",
    "MemoryVectorStore",
    "SimilarityResult",
    "SnippetRetriever",
    "StoreCorruptError",
    "StoreNotFoundError",
    "StorePersistError",
    "VectorRecord",
    "VectorStoreBase",
    "VectorStoreError",
    "cosine_similarity",
]
