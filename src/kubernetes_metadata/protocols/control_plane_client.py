"""Control-plane client protocol.

Defines the interface for anything that can resolve a (namespace, pod) pair
into pod labels and annotations.
"""

from typing import Protocol, runtime_checkable

from kubernetes_metadata.entities import PodLookup, RawControlPlaneData


@runtime_checkable
class ControlPlaneClient(Protocol):
    """Protocol for Kubernetes API clients.

    Neither method may raise on a failed lookup; failures are reported
    through the returned value.
    """

    def lookup(self, namespace: str, pod: str) -> PodLookup:
        """Look up a pod and report how the request ended.

        Args:
            namespace: Pod namespace
            pod: Pod name

        Returns:
            PodLookup describing the outcome
        """
        ...

    def fetch(self, namespace: str, pod: str) -> RawControlPlaneData | None:
        """Fetch pod labels and annotations.

        Args:
            namespace: Pod namespace
            pod: Pod name

        Returns:
            RawControlPlaneData if found, None otherwise
        """
        ...

    def is_available(self) -> bool:
        """Check if the API server is reachable.

        Returns:
            True if reachable, False otherwise
        """
        ...
