"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the cache backend or the API client without touching the service
- Unit testing with fake implementations

Usage:
    ```python
    from kubernetes_metadata.protocols import ControlPlaneClient, MetadataCache

    cache: MetadataCache = LRUMetadataCache()
    client: ControlPlaneClient = KubernetesApiClient.create()
    ```
"""

from .control_plane_client import ControlPlaneClient
from .metadata_cache import MetadataCache

__all__ = [
    "ControlPlaneClient",
    "MetadataCache",
]
