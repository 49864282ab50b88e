"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import EnrichRequest, FilterEventRequest
from .responses import (
    CacheClearResponse,
    EnrichResponse,
    FilterEventResponse,
    HealthCheckResponse,
    MetadataItem,
    StatsResponse,
)

__all__ = [
    "EnrichRequest",
    "FilterEventRequest",
    "MetadataItem",
    "EnrichResponse",
    "FilterEventResponse",
    "StatsResponse",
    "CacheClearResponse",
    "HealthCheckResponse",
]
