"""Unit tests for configuration and service-context wiring."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from snippet_search.config import Settings
from snippet_search.context import ServiceContext, build_context
from snippet_search.retrieval.memory_store import MemoryVectorStore


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("LIMIT", "MAX_RESULTS", "MCP_HTTP_PORT", "MINIMUM_DELIMITER", "MAXIMUM_DELIMITER"):
            monkeypatch.delenv(var, raising=False)
        config = Settings(_env_file=None)
        assert config.similarity_threshold == 0.6
        assert config.max_results == 2
        assert config.http_port == 9090
        assert config.minimum_delimiter == "-" * 10
        assert config.maximum_delimiter == "-" * 40
        assert config.json_store_file_path == "rag-memory-store.json"

    def test_reads_original_env_names(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LIMIT", "0.75")
        monkeypatch.setenv("MAX_RESULTS", "5")
        monkeypatch.setenv("MCP_HTTP_PORT", "8181")
        monkeypatch.setenv("EMBEDDING_MODEL", "ai/embeddinggemma")
        monkeypatch.setenv("JSON_STORE_FILE_PATH", "/data/store.json")
        config = Settings(_env_file=None)
        assert config.similarity_threshold == 0.75
        assert config.max_results == 5
        assert config.http_port == 8181
        assert config.embedding_model == "ai/embeddinggemma"
        assert config.json_store_file_path == "/data/store.json"

    def test_empty_port_falls_back_to_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCP_HTTP_PORT", "")
        assert Settings(_env_file=None).http_port == 9090

    def test_max_results_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            Settings(_env_file=None, max_results=0)


class TestServiceContext:
    def test_retriever_uses_configured_limits(self, embedder) -> None:
        config = Settings(_env_file=None, similarity_threshold=0.3, max_results=4)
        context = ServiceContext(settings=config, store=MemoryVectorStore(), embedder=embedder)
        assert context.retriever.threshold == 0.3
        assert context.retriever.top_n == 4

    def test_health_on_empty_store(self, embedder) -> None:
        context = ServiceContext(settings=Settings(_env_file=None), store=MemoryVectorStore(), embedder=embedder)
        status = context.health()
        assert status.healthy is False
        assert status.body["status"] == "unhealthy"


def test_end_to_end_cold_start_and_query(tmp_path: Path, embedder) -> None:
    """Ingest a two-chunk document, then query it through the built context."""
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "facts.md").write_text(
        "Paris is the capital of France.\n----------\nGo is a programming language.\n",
        encoding="utf-8",
    )
    config = Settings(
        _env_file=None,
        content_root=str(docs),
        json_store_file_path=str(tmp_path / "store.json"),
        similarity_threshold=0.6,
        max_results=1,
    )

    with patch("snippet_search.context.OpenAICompatibleEmbedder.from_settings", return_value=embedder):
        context = build_context(config)

    assert len(context.store) == 2
    assert context.health().body == {"status": "healthy", "records": 2, "embeddings_model": "fake-bow"}

    answer = context.retriever.search_snippet("What is the capital of France?")
    assert "Paris is the capital of France." in answer
    assert "Go is a programming language." not in answer
