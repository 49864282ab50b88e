"""Service layer for business logic.

This layer contains the enrichment logic and its orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Filter -> EnrichmentService -> Repository
    (HTTP)  -> (Event) -> (Business)        -> (API server, cache)

Usage:
    ```python
    from kubernetes_metadata.services import EnrichmentService, KubernetesMetadataFilter

    service = EnrichmentService.create()
    event_filter = KubernetesMetadataFilter(service)
    ```
"""

from .enrichment_service import EnrichmentService
from .event_filter import KubernetesMetadataFilter
from .identity_parser import parse_path_identity
from .log_format import resolve_log_formats

__all__ = [
    "EnrichmentService",
    "KubernetesMetadataFilter",
    "parse_path_identity",
    "resolve_log_formats",
]
