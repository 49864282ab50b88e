"""Enrichment result domain entity."""

from dataclasses import dataclass
from enum import Enum

from .control_plane_data import PodLookup
from .resolved_metadata import ResolvedMetadata


class EnrichmentStatus(str, Enum):
    """Which path an enrichment request took through the engine."""

    CACHE_HIT = "cache_hit"
    RESOLVED = "resolved"
    NO_SOURCE = "no_source"
    UNRECOGNIZED_PATH = "unrecognized_path"
    LOOKUP_FAILED = "lookup_failed"


@dataclass(frozen=True)
class EnrichmentResult:
    """Outcome of one enrichment request.

    Faults the engine absorbs (a failed cache write, a failed assembly) are
    recorded here instead of being raised.

    Attributes:
        status: Path taken through the engine
        metadata: The resolved record, if any
        lookup: Control-plane lookup performed on a miss
        cache_error: Reason the cache write was skipped
        assembly_error: Reason the full record could not be assembled
    """

    status: EnrichmentStatus
    metadata: ResolvedMetadata | None = None
    lookup: PodLookup | None = None
    cache_error: str | None = None
    assembly_error: str | None = None

    @property
    def is_enriched(self) -> bool:
        return self.metadata is not None
