"""
Snippet search — a ``search_snippet`` tool over a locally persisted vector store.

Documents are chunked, embedded through an OpenAI-compatible endpoint and
stored in a JSON-backed in-memory vector store; queries are answered by
top-N cosine-similarity retrieval.
"""

__version__ = "0.1.0"
