"""Event-level application of enrichment.

Reads the log source from one event field and writes the resolved metadata
into another, leaving events it cannot enrich untouched.
"""

import logging
from collections.abc import MutableMapping
from typing import Any

from kubernetes_metadata.config import settings

from .enrichment_service import EnrichmentService

logger = logging.getLogger(__name__)


class KubernetesMetadataFilter:
    """Attach Kubernetes metadata to events.

    Example:
        ```python
        event_filter = KubernetesMetadataFilter(service)
        event = {"path": "/var/log/containers/web-1a2b_prod_nginx-9f8e.log", "message": "..."}
        if event_filter.filter(event):
            print(event["kubernetes"]["namespace"])  # prod
        ```
    """

    def __init__(
        self,
        service: EnrichmentService,
        source: str | None = None,
        target: str | None = None,
    ) -> None:
        """Initialize the filter.

        Args:
            service: Enrichment service shared by all workers (required).
            source: Event field holding the log path. Defaults to settings.
            target: Event field to write metadata into. Defaults to settings.
        """
        self._service = service
        self._source = settings.source_field if source is None else source
        self._target = settings.target_field if target is None else target

    def filter(self, event: MutableMapping[str, Any]) -> bool:
        """Enrich one event in place.

        Args:
            event: The event to enrich

        Returns:
            True if the target field was set, False if the event was left as is
        """
        path = event.get(self._source)
        if not isinstance(path, str) or not path:
            return False

        metadata = self._service.enrich(path)
        if metadata is None:
            return False

        event[self._target] = metadata.to_dict()
        return True

    @property
    def source(self) -> str:
        return self._source

    @property
    def target(self) -> str:
        return self._target
