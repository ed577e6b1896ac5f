"""Infrastructure adapters for external services."""

from .storage_adapter import LocalDocumentStore

__all__ = [
    # Storage
    "LocalDocumentStore",
]
