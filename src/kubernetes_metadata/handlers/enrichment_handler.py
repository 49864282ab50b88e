"""HTTP handlers for enrichment operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error responses.

Handlers are synchronous: the API server lookup blocks, so FastAPI runs
them in its worker thread pool, all sharing one EnrichmentService.
"""

from fastapi import HTTPException, status

from kubernetes_metadata.dto import (
    CacheClearResponse,
    EnrichRequest,
    EnrichResponse,
    FilterEventRequest,
    FilterEventResponse,
    HealthCheckResponse,
    MetadataItem,
    StatsResponse,
)
from kubernetes_metadata.services import EnrichmentService, KubernetesMetadataFilter


class EnrichmentHandler:
    """HTTP handlers for enrichment operations.

    This handler delegates business logic to EnrichmentService and
    KubernetesMetadataFilter and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Setting appropriate status codes
    - Error handling and responses

    Example:
        ```python
        service = EnrichmentService.create()
        handler = EnrichmentHandler(service=service)

        @app.post("/enrich", response_model=EnrichResponse)
        def enrich(request: EnrichRequest):
            return handler.enrich(request)
        ```
    """

    def __init__(
        self,
        service: EnrichmentService,
        event_filter: KubernetesMetadataFilter | None = None,
    ) -> None:
        """Initialize the enrichment handler.

        Args:
            service: The enrichment service (required).
            event_filter: Event filter; built over the service with default fields if None.
        """
        self._service = service
        self._filter = event_filter or KubernetesMetadataFilter(service)

    def enrich(self, request: EnrichRequest) -> EnrichResponse:
        """Handle POST /enrich requests.

        Args:
            request: The enrich request DTO

        Returns:
            EnrichResponse; metadata is null when the source was not enriched

        Raises:
            HTTPException: If an unexpected error occurs
        """
        try:
            result = self._service.enrich_detailed(request.source)
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to enrich source: {e}",
            ) from e

        metadata = None
        if result.metadata is not None:
            metadata = MetadataItem(**result.metadata.to_dict())

        return EnrichResponse(
            source=request.source,
            status=result.status.value,
            metadata=metadata,
        )

    def filter_event(self, request: FilterEventRequest) -> FilterEventResponse:
        """Handle POST /filter requests.

        Args:
            request: The filter request DTO

        Returns:
            FilterEventResponse with the (possibly) enriched event

        Raises:
            HTTPException: If an unexpected error occurs
        """
        event = dict(request.event)
        try:
            enriched = self._filter.filter(event)
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to filter event: {e}",
            ) from e

        return FilterEventResponse(event=event, enriched=enriched)

    def get_stats(self) -> StatsResponse:
        """Handle GET /stats requests.

        Returns:
            StatsResponse with cache and enrichment statistics

        Raises:
            HTTPException: If an error occurs while fetching stats
        """
        try:
            stats = self._service.get_stats()

            return StatsResponse(
                cache=stats.get("cache", {}),
                enrichment=stats.get("enrichment", {}),
                default_log_format=stats.get("default_log_format", ""),
            )

        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to get stats: {e}",
            ) from e

    def clear_cache(self) -> CacheClearResponse:
        """Handle DELETE /cache requests.

        Returns:
            CacheClearResponse with the number of removed entries
        """
        try:
            count = self._service.clear_cache()

            return CacheClearResponse(
                success=True,
                deleted_count=count,
                message="Cache cleared successfully",
            )

        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to clear cache: {e}",
            ) from e

    def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Returns:
            HealthCheckResponse; the service stays usable from cache while the
            API server is unreachable, so that case reports ``degraded``
        """
        is_healthy = self._service.is_healthy()
        cache_stats = self._service.get_stats().get("cache", {})

        return HealthCheckResponse(
            status="healthy" if is_healthy else "degraded",
            control_plane_healthy=is_healthy,
            cache_entries=cache_stats.get("total_entries", 0),
        )
