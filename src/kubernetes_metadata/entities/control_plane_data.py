"""Control-plane lookup entities."""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class RawControlPlaneData:
    """Pod labels and annotations exactly as the API server returned them."""

    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)


class LookupOutcome(str, Enum):
    """How a pod lookup against the API server ended."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    HTTP_ERROR = "http_error"
    TRANSPORT_ERROR = "transport_error"
    INVALID_BODY = "invalid_body"


@dataclass(frozen=True)
class PodLookup:
    """Result of a single pod lookup.

    Only ``FOUND`` carries data. Every other outcome is a transient miss the
    caller is expected to absorb.

    Attributes:
        outcome: How the lookup ended
        data: Labels and annotations, set only when found
        status_code: HTTP status code, when a response was received
        detail: Human-readable reason for a miss
    """

    outcome: LookupOutcome
    data: RawControlPlaneData | None = None
    status_code: int | None = None
    detail: str | None = None

    @property
    def found(self) -> bool:
        return self.outcome is LookupOutcome.FOUND and self.data is not None
