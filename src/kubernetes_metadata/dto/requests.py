"""Request DTOs for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class EnrichRequest(BaseModel):
    """Request DTO for resolving metadata of a single log source."""

    source: str = Field(
        ...,
        description="Log source path, e.g. /var/log/containers/<pod>_<namespace>_<container>.log",
        min_length=1,
    )


class FilterEventRequest(BaseModel):
    """Request DTO for enriching a whole event."""

    event: dict[str, Any] = Field(..., description="The event; the source field is read from it")
