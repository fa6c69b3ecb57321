"""Domain models for stored vectors and similarity results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class VectorRecord(BaseModel):
    """One embedded chunk.

    Attributes
    ----------
    id:
        Store-unique identifier.  Empty until the record is saved; the
        store assigns one on insertion.
    text:
        Original chunk content.
    embedding:
        Vector produced by the embedding provider, stored as a tuple so
        a saved record cannot change shape.  All records of a store share
        the same dimensionality.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    text: str = ""
    embedding: tuple[float, ...] = ()

    @property
    def dimension(self) -> int:
        return len(self.embedding)


class StoredRecord(BaseModel):
    """On-disk shape of a record; the id is the mapping key."""

    text: str
    embedding: list[float]


class SimilarityResult(BaseModel):
    """A record's text paired with its cosine similarity to a query."""

    id: str
    text: str
    score: float

    def __str__(self) -> str:  # noqa: D105
        return f"[{self.score:.4f}] {self.text[:120]}"
