"""Document discovery — thin wrapper around LangChain's ``DirectoryLoader``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from langchain_community.document_loaders import DirectoryLoader, TextLoader

from snippet_search.ingestion.errors import DocumentDiscoveryError

if TYPE_CHECKING:
    from langchain_core.documents import Document

logger = logging.getLogger(__name__)


def discover_documents(root: str | Path, extension: str = ".md") -> list[Document]:
    """Recursively load every file ending in *extension* under *root*.

    Hidden files and directories are skipped.  Documents are returned
    sorted by their ``source`` path so that ingestion order is stable
    across runs.

    Raises
    ------
    DocumentDiscoveryError
        When *root* is not a directory or a matching file cannot be read.
    """
    root = Path(root)
    if not root.is_dir():
        raise DocumentDiscoveryError(f"Content directory not found: {root}")

    suffix = extension if extension.startswith(".") else f".{extension}"
    loader = DirectoryLoader(
        str(root),
        glob=f"**/*{suffix}",
        loader_cls=TextLoader,  # type: ignore[arg-type]
        loader_kwargs={"encoding": "utf-8"},
        show_progress=False,
        use_multithreading=False,
    )
    try:
        documents = loader.load()
    except Exception as exc:
        raise DocumentDiscoveryError(f"Failed to load content files under {root}: {exc}") from exc

    documents.sort(key=lambda doc: str(doc.metadata.get("source", "")))
    logger.info("Found %d content files to process under %s", len(documents), root)
    return documents
