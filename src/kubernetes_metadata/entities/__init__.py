"""Domain entities for internal representation.

These are pure dataclasses (frozen) shared by services and repositories.
They are NOT used for API contracts - use DTOs from the dto package for that.

Entities should have:
- No JSON serialization logic beyond plain dict conversion
- No Pydantic validation
- No external dependencies
"""

from .control_plane_data import LookupOutcome, PodLookup, RawControlPlaneData
from .enrichment_result import EnrichmentResult, EnrichmentStatus
from .resolved_metadata import LogFormats, ResolvedMetadata
from .workload_identity import WorkloadIdentity

__all__ = [
    "WorkloadIdentity",
    "RawControlPlaneData",
    "LookupOutcome",
    "PodLookup",
    "LogFormats",
    "ResolvedMetadata",
    "EnrichmentStatus",
    "EnrichmentResult",
]
