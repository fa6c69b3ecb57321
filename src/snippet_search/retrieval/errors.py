"""Vector-store exceptions."""


class VectorStoreError(Exception):
    """Base class for vector-store failures."""


class StoreNotFoundError(VectorStoreError):
    """No persisted store exists at the requested path."""


class StoreCorruptError(VectorStoreError):
    """A persisted store exists but cannot be read or validated."""


class StorePersistError(VectorStoreError):
    """The store could not be written to disk."""


class DuplicateRecordError(VectorStoreError):
    """A record id is already present in the store."""


class DimensionMismatchError(VectorStoreError):
    """An embedding is empty or does not match the store's dimension."""
