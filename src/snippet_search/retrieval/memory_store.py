"""In-memory vector store persisted as a JSON file."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING
from uuid import uuid4

from pydantic import TypeAdapter, ValidationError

from snippet_search.retrieval.base import VectorStoreBase
from snippet_search.retrieval.errors import (
    DimensionMismatchError,
    DuplicateRecordError,
    StoreCorruptError,
    StoreNotFoundError,
    StorePersistError,
)
from snippet_search.retrieval.models import SimilarityResult, StoredRecord, VectorRecord
from snippet_search.retrieval.similarity import cosine_similarity

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

# File layout: {"<id>": {"text": "...", "embedding": [...]}, ...}
_STORE_FILE = TypeAdapter(dict[str, StoredRecord])


class MemoryVectorStore(VectorStoreBase):
    """Dict-backed store searched by brute-force cosine similarity.

    Records keep insertion order, which is also the tie-break order for
    equal similarity scores.
    """

    def __init__(self) -> None:
        self._records: dict[str, VectorRecord] = {}

    # -- introspection --------------------------------------------------------

    @property
    def dimension(self) -> int | None:
        """Embedding length shared by every record, ``None`` when empty."""
        first = next(iter(self._records.values()), None)
        return first.dimension if first is not None else None

    def get(self, record_id: str) -> VectorRecord | None:
        return self._records.get(record_id)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[VectorRecord]:
        return iter(self._records.values())

    # -- VectorStoreBase overrides --------------------------------------------

    def save(self, record: VectorRecord) -> str:
        self._check_dimension(record)

        record_id = record.id or uuid4().hex
        if record_id in self._records:
            raise DuplicateRecordError(f"Record id {record_id!r} already exists")
        if record.id != record_id:
            record = record.model_copy(update={"id": record_id})

        self._records[record_id] = record
        return record_id

    def search_top_n_similarities(
        self,
        query: VectorRecord,
        threshold: float,
        top_n: int,
    ) -> list[SimilarityResult]:
        if top_n <= 0 or not self._records:
            return []

        dimension = self.dimension
        if query.dimension != dimension:
            raise DimensionMismatchError(
                f"Query embedding has length {query.dimension}, store dimension is {dimension}"
            )

        results: list[SimilarityResult] = []
        for record in self._records.values():
            score = cosine_similarity(query.embedding, record.embedding)
            if score >= threshold:
                results.append(SimilarityResult(id=record.id, text=record.text, score=score))

        # list.sort is stable: equal scores keep insertion order.
        results.sort(key=lambda r: r.score, reverse=True)
        return results[:top_n]

    def load(self, path: str | Path) -> None:
        path = Path(path)
        try:
            raw = path.read_bytes()
        except (FileNotFoundError, NotADirectoryError) as exc:
            raise StoreNotFoundError(f"No vector store at {path}") from exc
        except OSError as exc:
            raise StoreCorruptError(f"Cannot read vector store {path}: {exc}") from exc

        try:
            stored = _STORE_FILE.validate_json(raw)
        except ValidationError as exc:
            raise StoreCorruptError(f"Invalid vector store file {path}: {exc}") from exc

        loaded = MemoryVectorStore()
        try:
            for record_id, item in stored.items():
                loaded.save(VectorRecord(id=record_id, text=item.text, embedding=item.embedding))
        except DimensionMismatchError as exc:
            raise StoreCorruptError(f"Inconsistent embeddings in {path}: {exc}") from exc

        self._records = loaded._records
        logger.info("Vector store loaded from %s, total records: %d", path, len(self))

    def persist(self, path: str | Path) -> None:
        path = Path(path)
        payload = {
            record.id: StoredRecord(text=record.text, embedding=record.embedding)
            for record in self._records.values()
        }
        data = _STORE_FILE.dump_json(payload, indent=2)

        # Temp file + rename: the target is either the old or the new store.
        tmp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise StorePersistError(f"Cannot write vector store to {path}: {exc}") from exc
        logger.info("Vector store saved to %s (%d records)", path, len(self))

    # -- internals ------------------------------------------------------------

    def _check_dimension(self, record: VectorRecord) -> None:
        if not record.embedding:
            raise DimensionMismatchError("Cannot store a record with an empty embedding")
        dimension = self.dimension
        if dimension is not None and record.dimension != dimension:
            raise DimensionMismatchError(
                f"Embedding has length {record.dimension}, store dimension is {dimension}"
            )
