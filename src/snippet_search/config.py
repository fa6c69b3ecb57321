"""Shared configuration loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_MINIMUM_DELIMITER = "-" * 10
DEFAULT_MAXIMUM_DELIMITER = "-" * 40


class Settings(BaseSettings):
    """Service settings, populated from env vars or .env file."""

    # Embedding provider (OpenAI-compatible endpoint)
    model_runner_base_url: str = Field(
        default="http://localhost:12434/engines/llama.cpp/v1/",
        description="Base URL of the OpenAI-compatible embeddings API.",
    )
    embedding_model: str = "ai/mxbai-embed-large:latest"
    openai_api_key: str = Field(
        default="",
        description="API key for the embeddings endpoint (local model runners accept any value).",
    )

    # Vector store
    json_store_file_path: str = "rag-memory-store.json"

    # Ingestion
    content_root: str = "."
    content_extension: str = ".md"
    minimum_delimiter: str = DEFAULT_MINIMUM_DELIMITER
    maximum_delimiter: str = DEFAULT_MAXIMUM_DELIMITER

    # Retrieval
    similarity_threshold: float = Field(default=0.6, validation_alias="LIMIT")
    max_results: int = Field(default=2, gt=0)

    # Serving
    http_host: str = "0.0.0.0"
    http_port: int = Field(default=9090, validation_alias="MCP_HTTP_PORT")
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_ignore_empty": True,
        "populate_by_name": True,
        "extra": "ignore",
    }


# Singleton — import `settings` wherever needed.
settings = Settings()
