"""Embedding provider backed by an OpenAI-compatible ``/v1/embeddings`` API.

Local model runners (Docker Model Runner, llama.cpp, vLLM, Ollama …)
expose the same endpoint as the OpenAI cloud, so ``OpenAIEmbeddings``
works unchanged once ``base_url`` points at them.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from langchain_openai import OpenAIEmbeddings

from snippet_search.config import Settings, settings
from snippet_search.ingestion.errors import EmbeddingError

logger = logging.getLogger(__name__)


@runtime_checkable
class EmbeddingProvider(Protocol):
    """Anything that maps a text to a fixed-length vector."""

    model_name: str

    def embed(self, text: str) -> list[float]:
        """Return the embedding of *text* or raise :class:`EmbeddingError`."""
        ...


class OpenAICompatibleEmbedder:
    """Blocking embedding client for a single model.

    Parameters
    ----------
    base_url:
        Root of the OpenAI-compatible API, e.g.
        ``http://localhost:12434/engines/llama.cpp/v1/``.
    model_name:
        Model identifier sent with every request.
    api_key:
        Key sent as bearer token; a dummy value is used when empty since
        the client refuses a blank key.
    """

    def __init__(self, base_url: str, model_name: str, *, api_key: str = "") -> None:
        self.model_name = model_name
        self._client = OpenAIEmbeddings(
            model=model_name,
            base_url=base_url,
            api_key=api_key or "EMPTY",
            # Non-OpenAI models: send raw strings, not tiktoken ids.
            check_embedding_ctx_length=False,
            max_retries=0,
        )

    @classmethod
    def from_settings(cls, config: Settings = settings) -> OpenAICompatibleEmbedder:
        logger.info("Using embeddings endpoint %s (model=%s)", config.model_runner_base_url, config.embedding_model)
        return cls(
            config.model_runner_base_url,
            config.embedding_model,
            api_key=config.openai_api_key,
        )

    def embed(self, text: str) -> list[float]:
        try:
            vector = self._client.embed_query(text)
        except Exception as exc:
            raise EmbeddingError(f"Embedding request to model {self.model_name!r} failed: {exc}") from exc
        if not vector:
            raise EmbeddingError(f"Model {self.model_name!r} returned an empty embedding")
        return [float(x) for x in vector]
