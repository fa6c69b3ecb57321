"""Delimiter-based text chunking."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from langchain_core.documents import Document

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "-" * 10


def determine_delimiter(min_delimiter: str, max_delimiter: str) -> str:
    """Pick the delimiter used to split a document.

    When the minimum candidate is longer than the maximum one, the maximum
    wins.  Otherwise the minimum candidate is used: it always satisfies the
    length bounds.  An empty choice falls back to :data:`DEFAULT_DELIMITER`.
    """
    if len(min_delimiter) > len(max_delimiter):
        chosen = max_delimiter
    else:
        chosen = min_delimiter
    return chosen or DEFAULT_DELIMITER


def split_text_with_delimiter(text: str, delimiter: str) -> list[str]:
    """Split *text* on exact occurrences of *delimiter*.

    Each piece is stripped of surrounding whitespace and empty pieces are
    dropped, so an empty document yields no chunks and a document without
    the delimiter yields a single chunk.
    """
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")
    pieces = (piece.strip() for piece in text.split(delimiter))
    return [piece for piece in pieces if piece]


def chunk_documents(documents: Iterable[Document], delimiter: str) -> list[Document]:
    """Split *documents* into chunk documents ready for embedding.

    Parameters
    ----------
    documents:
        Source documents produced by a loader.
    delimiter:
        Separator string, usually from :func:`determine_delimiter`.

    Returns
    -------
    list[Document]
        One document per chunk.  The source metadata is copied and
        ``chunk_index`` / ``chunk_count`` are added.
    """
    chunks: list[Document] = []
    for doc in documents:
        pieces = split_text_with_delimiter(doc.page_content, delimiter)
        logger.debug("Split %s into %d chunks", doc.metadata.get("source", "?"), len(pieces))
        for idx, piece in enumerate(pieces):
            chunks.append(
                Document(
                    page_content=piece,
                    metadata={**doc.metadata, "chunk_index": idx, "chunk_count": len(pieces)},
                )
            )
    return chunks
