"""Response DTOs for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class MetadataItem(BaseModel):
    """Resolved Kubernetes metadata for a log source."""

    replication_controller: str = Field(..., description="Pod name without its instance suffix")
    pod: str = Field(..., description="Full pod name")
    namespace: str = Field(..., description="Pod namespace")
    container: str = Field(..., description="Container name without its instance suffix")
    container_id: str = Field(..., description="Container instance token from the file name")
    labels: dict[str, Any] = Field(default_factory=dict, description="Sanitized pod labels")
    annotations: dict[str, Any] = Field(default_factory=dict, description="Sanitized pod annotations")
    log_format_stdout: str = Field(..., description="Log format for the stdout stream")
    log_format_stderr: str = Field(..., description="Log format for the stderr stream")


class EnrichResponse(BaseModel):
    """Response DTO for a single enrichment."""

    source: str = Field(..., description="The requested log source")
    status: str = Field(..., description="How the request was served, e.g. cache_hit or lookup_failed")
    metadata: MetadataItem | None = Field(None, description="Resolved metadata, null when not enriched")


class FilterEventResponse(BaseModel):
    """Response DTO for event enrichment."""

    event: dict[str, Any] = Field(..., description="The event, with the target field set when enriched")
    enriched: bool = Field(..., description="Whether metadata was attached")


class StatsResponse(BaseModel):
    """Response DTO for cache and enrichment statistics."""

    cache: dict[str, Any] = Field(..., description="Cache size, limits and eviction counters")
    enrichment: dict[str, Any] = Field(..., description="Request and lookup counters")
    default_log_format: str = Field(..., description="Fallback log format")


class CacheClearResponse(BaseModel):
    """Response DTO for cache clear operation."""

    success: bool = Field(..., description="Whether the operation succeeded")
    deleted_count: int = Field(..., description="Number of entries removed", ge=0)
    message: str = Field(..., description="Human-readable status message")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'degraded'")
    control_plane_healthy: bool = Field(..., description="Whether the API server is reachable")
    cache_entries: int = Field(..., description="Number of live cache entries", ge=0)
