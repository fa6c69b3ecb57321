"""Shared pytest configuration and fixtures."""

from __future__ import annotations

import re

import pytest

from snippet_search.ingestion.errors import EmbeddingError

VOCABULARY = ["paris", "capital", "france", "go", "programming", "language", "health", "port"]


class BagOfWordsEmbedder:
    """Deterministic embedder: one dimension per vocabulary word.

    Texts containing ``fail_on`` raise :class:`EmbeddingError`, which lets
    tests exercise the skip-and-continue path.
    """

    model_name = "fake-bow"

    def __init__(self, fail_on: str | None = None) -> None:
        self.fail_on = fail_on
        self.calls: list[str] = []

    def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        if self.fail_on is not None and self.fail_on in text:
            raise EmbeddingError(f"refusing to embed {text!r}")
        words = re.findall(r"\w+", text.lower())
        return [float(words.count(term)) for term in VOCABULARY]


class FailingEmbedder:
    model_name = "fake-down"

    def embed(self, text: str) -> list[float]:
        raise EmbeddingError("model runner unreachable")


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


SETTINGS_ENV_VARS = (
    "MODEL_RUNNER_BASE_URL",
    "EMBEDDING_MODEL",
    "OPENAI_API_KEY",
    "JSON_STORE_FILE_PATH",
    "CONTENT_ROOT",
    "CONTENT_EXTENSION",
    "MINIMUM_DELIMITER",
    "MAXIMUM_DELIMITER",
    "LIMIT",
    "MAX_RESULTS",
    "MCP_HTTP_PORT",
    "HTTP_HOST",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's exported service variables out of the tests."""
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture()
def embedder() -> BagOfWordsEmbedder:
    return BagOfWordsEmbedder()


@pytest.fixture()
def flaky_embedder() -> BagOfWordsEmbedder:
    """Embedder that fails on any chunk mentioning ``Go``."""
    return BagOfWordsEmbedder(fail_on="Go")


@pytest.fixture()
def failing_embedder() -> FailingEmbedder:
    return FailingEmbedder()
