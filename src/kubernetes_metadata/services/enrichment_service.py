"""Enrichment service for core business logic.

This service orchestrates enrichment by coordinating the path parser, the
control-plane client (data access), the log format resolver and the
metadata cache.

Flow for a source key:
1. Cache hit: return the stored record
2. Miss: parse the path into a workload identity
3. Look the pod up on the API server
4. Sanitize labels/annotations and resolve log formats
5. Cache the assembled record and return it

Unrecognized paths and failed lookups are never cached, so the next event
for the same source retries. Concurrent misses on one key each perform their
own lookup; no lock is held across the remote call.
"""

import logging
import time

from kubernetes_metadata.config import settings
from kubernetes_metadata.entities import (
    EnrichmentResult,
    EnrichmentStatus,
    LogFormats,
    LookupOutcome,
    PodLookup,
    RawControlPlaneData,
    ResolvedMetadata,
    WorkloadIdentity,
)
from kubernetes_metadata.models import EnrichmentMetrics
from kubernetes_metadata.protocols import ControlPlaneClient, MetadataCache
from kubernetes_metadata.repositories import KubernetesApiClient, LRUMetadataCache
from kubernetes_metadata.utils import sanitize_keys

from .identity_parser import parse_path_identity
from .log_format import resolve_log_formats

logger = logging.getLogger(__name__)


class EnrichmentService:
    """Core enrichment orchestration service.

    This service depends on PROTOCOLS, not concrete implementations:
    - MetadataCache: in-memory LRU by default, any thread-safe store works
    - ControlPlaneClient: httpx client by default, fakes in tests

    One instance is meant to be shared by all worker threads.

    Example:
        ```python
        from kubernetes_metadata.repositories import KubernetesApiClient, LRUMetadataCache
        from kubernetes_metadata.services import EnrichmentService

        service = EnrichmentService.create(
            cache=LRUMetadataCache.create(max_size=500),
            client=KubernetesApiClient.create(api_url="http://127.0.0.1:8001"),
        )
        metadata = service.enrich("/var/log/containers/web-1a2b_prod_nginx-9f8e.log")
        ```
    """

    def __init__(
        self,
        cache: MetadataCache,
        client: ControlPlaneClient,
        default_log_format: str | None = None,
        metrics: EnrichmentMetrics | None = None,
    ) -> None:
        """Initialize the enrichment service.

        Args:
            cache: Metadata cache (required).
            client: Control-plane client (required).
            default_log_format: Format used when no annotation matches. Defaults to settings.
            metrics: Counters to update. A fresh instance is created if None.
        """
        self._cache = cache
        self._client = client
        self._default_format = (
            settings.default_log_format if default_log_format is None else default_log_format
        )
        self._metrics = EnrichmentMetrics() if metrics is None else metrics

    @classmethod
    def create(
        cls,
        cache: MetadataCache | None = None,
        client: ControlPlaneClient | None = None,
        default_log_format: str | None = None,
    ) -> "EnrichmentService":
        """Factory method to create EnrichmentService with default implementations.

        Args:
            cache: Metadata cache. If None, an LRUMetadataCache from settings.
            client: Control-plane client. If None, a KubernetesApiClient from settings.
            default_log_format: Fallback log format. If None, uses settings.

        Returns:
            Configured EnrichmentService instance
        """
        return cls(
            cache=cache if cache is not None else LRUMetadataCache.create(),
            client=client if client is not None else KubernetesApiClient.create(),
            default_log_format=default_log_format,
        )

    def enrich(self, key: str | None) -> ResolvedMetadata | None:
        """Resolve metadata for a log source.

        Args:
            key: Source key, normally the log file path

        Returns:
            ResolvedMetadata, or None if the source could not be enriched
        """
        return self.enrich_detailed(key).metadata

    def enrich_detailed(self, key: str | None) -> EnrichmentResult:
        """Resolve metadata for a log source and report how it was obtained.

        Args:
            key: Source key, normally the log file path

        Returns:
            EnrichmentResult with status, metadata and any absorbed fault
        """
        if not key or not isinstance(key, str):
            self._metrics.record_skip()
            return EnrichmentResult(status=EnrichmentStatus.NO_SOURCE)

        cached = self._cache_get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            self._metrics.record_hit()
            return EnrichmentResult(status=EnrichmentStatus.CACHE_HIT, metadata=cached)

        logger.info("Cache miss for %s", key)
        self._metrics.record_miss()

        identity = parse_path_identity(key)
        if identity is None:
            logger.debug("Path does not name a container log: %s", key)
            return EnrichmentResult(status=EnrichmentStatus.UNRECOGNIZED_PATH)

        lookup = self._lookup(identity)
        if not lookup.found or lookup.data is None:
            return EnrichmentResult(status=EnrichmentStatus.LOOKUP_FAILED, lookup=lookup)

        metadata, assembly_error = self._assemble(identity, lookup.data)

        cache_error = None
        if assembly_error is None:
            try:
                self._cache.put(key, metadata)
            except Exception as e:
                logger.warning("Unexpected error when caching metadata for %s: %s", key, e)
                self._metrics.record_cache_write_failure()
                cache_error = str(e)

        return EnrichmentResult(
            status=EnrichmentStatus.RESOLVED,
            metadata=metadata,
            lookup=lookup,
            cache_error=cache_error,
            assembly_error=assembly_error,
        )

    def _cache_get(self, key: str) -> ResolvedMetadata | None:
        try:
            return self._cache.get(key)
        except Exception as e:
            logger.warning("Cache read failed for %s, treating as miss: %s", key, e)
            return None

    def _lookup(self, identity: WorkloadIdentity) -> PodLookup:
        logger.info("Looking up pod %s/%s (container %s)", identity.namespace, identity.pod, identity.container)
        start = time.perf_counter()
        try:
            lookup = self._client.lookup(identity.namespace, identity.pod)
        except Exception as e:
            logger.warning("Control-plane client raised for %s/%s: %s", identity.namespace, identity.pod, e)
            lookup = PodLookup(outcome=LookupOutcome.TRANSPORT_ERROR, detail=str(e))
        duration_ms = (time.perf_counter() - start) * 1000

        self._metrics.record_lookup(duration_ms, succeeded=lookup.found)
        return lookup

    def _assemble(
        self,
        identity: WorkloadIdentity,
        data: RawControlPlaneData,
    ) -> tuple[ResolvedMetadata, str | None]:
        """Build the full record, degrading to identity-only metadata on failure."""
        try:
            labels = sanitize_keys(data.labels)
            annotations = sanitize_keys(data.annotations)
            formats = resolve_log_formats(annotations, identity.container, self._default_format)
            metadata = ResolvedMetadata.from_identity(identity, labels, annotations, formats)
            logger.debug("Kubernetes metadata => %s", metadata)
            return metadata, None
        except Exception as e:
            logger.warning("Could not assemble metadata for %s/%s: %s", identity.namespace, identity.pod, e)
            fallback = LogFormats(stdout=self._default_format, stderr=self._default_format)
            return ResolvedMetadata.from_identity(identity, {}, {}, fallback), str(e)

    def clear_cache(self) -> int:
        """Clear all cached records.

        Returns:
            Number of entries removed
        """
        return self._cache.clear()

    def invalidate(self, key: str) -> bool:
        """Drop the cached record for one source.

        Returns:
            True if an entry was removed, False otherwise
        """
        return self._cache.delete(key)

    def get_stats(self) -> dict:
        """Get cache and enrichment statistics.

        Returns:
            Dictionary with cache and enrichment statistics
        """
        return {
            "cache": self._cache.get_stats(),
            "enrichment": self._metrics.to_dict(),
            "default_log_format": self._default_format,
        }

    def is_healthy(self) -> bool:
        """Check if the control plane is reachable.

        Returns:
            True if the API server answers
        """
        return self._client.is_available()

    def close(self) -> None:
        """Release the control-plane client's resources, if it holds any."""
        close = getattr(self._client, "close", None)
        if callable(close):
            close()

    @property
    def default_log_format(self) -> str:
        """Get the fallback log format."""
        return self._default_format

    @property
    def cache(self) -> MetadataCache:
        """Get the underlying cache (for testing)."""
        return self._cache

    @property
    def client(self) -> ControlPlaneClient:
        """Get the underlying control-plane client (for testing)."""
        return self._client

    @property
    def metrics(self) -> EnrichmentMetrics:
        """Get the enrichment counters."""
        return self._metrics
