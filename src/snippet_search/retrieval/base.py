"""Abstract base class for vector-store backends.

A backend only has to implement record insertion, similarity search and
file persistence; the ingestion pipeline and the retriever are written
against this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from snippet_search.retrieval.models import SimilarityResult, VectorRecord


class VectorStoreBase(ABC):
    """Backend-agnostic vector-store interface."""

    # -- required overrides ---------------------------------------------------

    @abstractmethod
    def save(self, record: VectorRecord) -> str:
        """Insert *record* and return its id.

        An id is assigned when the record has none.

        Raises
        ------
        DuplicateRecordError
            The id is already taken.
        DimensionMismatchError
            The embedding is empty or its length differs from the store's.
        """
        ...

    @abstractmethod
    def search_top_n_similarities(
        self,
        query: VectorRecord,
        threshold: float,
        top_n: int,
    ) -> list[SimilarityResult]:
        """Return at most *top_n* records with similarity ``>= threshold``.

        Results are sorted by descending cosine similarity; ties keep the
        store's iteration order.
        """
        ...

    @abstractmethod
    def load(self, path: str | Path) -> None:
        """Replace the store content with the file at *path*.

        Raises
        ------
        StoreNotFoundError
            Nothing exists at *path*.
        StoreCorruptError
            The file exists but cannot be read or validated.
        """
        ...

    @abstractmethod
    def persist(self, path: str | Path) -> None:
        """Write every record to *path*, overwriting existing content."""
        ...

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def __iter__(self) -> Iterator[VectorRecord]: ...

    # -- optional overrides ---------------------------------------------------

    def health_check(self) -> bool:
        """Return ``True`` when the store holds at least one record."""
        return len(self) > 0
