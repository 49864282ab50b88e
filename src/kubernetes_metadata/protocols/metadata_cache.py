"""Metadata cache protocol.

Defines the interface for the bounded store that maps a source key (a log
file path) to its resolved metadata.
"""

from typing import Protocol, runtime_checkable

from kubernetes_metadata.entities import ResolvedMetadata


@runtime_checkable
class MetadataCache(Protocol):
    """Protocol for metadata cache backends.

    Implementations must be safe to share between threads: every ``get`` and
    ``put`` for a given key is atomic with respect to that key.
    """

    def get(self, key: str) -> ResolvedMetadata | None:
        """Look up a cached record.

        Args:
            key: The source key

        Returns:
            The cached record, or None when missing or expired
        """
        ...

    def put(self, key: str, value: ResolvedMetadata) -> None:
        """Store a record, replacing any previous one for the key.

        Args:
            key: The source key
            value: The record to cache
        """
        ...

    def delete(self, key: str) -> bool:
        """Remove a record.

        Returns:
            True if an entry was removed, False otherwise
        """
        ...

    def clear(self) -> int:
        """Remove all records.

        Returns:
            Number of entries removed
        """
        ...

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with stats (implementation-specific)
        """
        ...
