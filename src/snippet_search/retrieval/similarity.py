"""Vector similarity helpers."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from snippet_search.retrieval.errors import DimensionMismatchError


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Return ``dot(a, b) / (|a| * |b|)``.

    A zero-magnitude vector on either side gives ``0.0``.  Vectors of
    different lengths raise :class:`DimensionMismatchError`.
    """
    if len(a) != len(b):
        raise DimensionMismatchError(f"Cannot compare vectors of length {len(a)} and {len(b)}")

    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    norm = float(np.linalg.norm(va) * np.linalg.norm(vb))
    if norm == 0.0:
        return 0.0
    return float(np.dot(va, vb) / norm)
