"""Kubernetes Metadata - enrich log events with pod metadata.

Derives a workload identity from a container log file path, looks the pod up
on the Kubernetes API server and caches the resulting labels, annotations and
log formats per source path.

Layers:
    - protocols: Interface contracts (MetadataCache, ControlPlaneClient)
    - repositories: API server client and in-memory LRU/TTL cache
    - services: Path parsing, log format resolution, enrichment orchestration
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from kubernetes_metadata.services import EnrichmentService, KubernetesMetadataFilter

    service = EnrichmentService.create()
    event_filter = KubernetesMetadataFilter(service)
    event_filter.filter({"path": "/var/log/containers/web-1a2b_prod_nginx-9f8e.log"})
    ```

For HTTP API:
    ```python
    from kubernetes_metadata.api.app import app
    ```
"""

from kubernetes_metadata.config import Settings, settings
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
from kubernetes_metadata.handlers import EnrichmentHandler
from kubernetes_metadata.models import EnrichmentMetrics
from kubernetes_metadata.protocols import ControlPlaneClient, MetadataCache
from kubernetes_metadata.repositories import KubernetesApiClient, LRUMetadataCache
from kubernetes_metadata.services import (
    EnrichmentService,
    KubernetesMetadataFilter,
    parse_path_identity,
    resolve_log_formats,
)
from kubernetes_metadata.utils import sanitize_keys

__all__ = [
    # Configuration
    "Settings",
    "settings",
    # Protocols (interfaces)
    "ControlPlaneClient",
    "MetadataCache",
    # Services (business logic)
    "EnrichmentService",
    "KubernetesMetadataFilter",
    "parse_path_identity",
    "resolve_log_formats",
    "sanitize_keys",
    # Handlers (HTTP)
    "EnrichmentHandler",
    # Repositories (data access)
    "KubernetesApiClient",
    "LRUMetadataCache",
    # Entities (domain models)
    "WorkloadIdentity",
    "RawControlPlaneData",
    "LookupOutcome",
    "PodLookup",
    "LogFormats",
    "ResolvedMetadata",
    "EnrichmentStatus",
    "EnrichmentResult",
    "EnrichmentMetrics",
]
