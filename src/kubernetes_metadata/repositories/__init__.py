"""Repository layer for data access.

This layer abstracts external dependencies (the Kubernetes API server and
the metadata cache) behind protocol-based interfaces. This enables:
- Swapping implementations without touching the service
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from kubernetes_metadata.protocols import ControlPlaneClient, MetadataCache

from .kubernetes_api_client import KubernetesApiClient
from .lru_cache import LRUMetadataCache

__all__ = [
    "ControlPlaneClient",
    "MetadataCache",
    "KubernetesApiClient",
    "LRUMetadataCache",
]
