"""
Ingestion — document discovery, chunking, and embedding into the vector store.

This runs once, at cold start, when no persisted store exists.
"""
