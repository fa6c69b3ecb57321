"""Exceptions raised by the ingestion layer."""


class IngestionError(Exception):
    """Base class for ingestion failures that abort startup."""


class DocumentDiscoveryError(IngestionError):
    """Source documents could not be discovered or read."""


class EmbeddingError(Exception):
    """The embedding provider failed to produce a vector for a text."""
