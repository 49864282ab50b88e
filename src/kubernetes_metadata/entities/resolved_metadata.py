"""Resolved metadata domain entity."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, NamedTuple

from .workload_identity import WorkloadIdentity


class LogFormats(NamedTuple):
    """Log format directives per output stream."""

    stdout: str
    stderr: str


@dataclass(frozen=True)
class ResolvedMetadata:
    """Enriched record attached to events and stored in the cache.

    Instances are built once on a cache miss and never mutated afterwards.
    Labels and annotations are read-only mappings, and ``to_dict`` hands out
    plain dict copies.

    Attributes:
        replication_controller: Pod name without its instance suffix
        pod: Full pod name
        namespace: Pod namespace
        container: Container name without its instance suffix
        container_id: Container instance token from the file name
        labels: Sanitized pod labels
        annotations: Sanitized pod annotations
        log_format_stdout: Format directive for the stdout stream
        log_format_stderr: Format directive for the stderr stream
    """

    replication_controller: str
    pod: str
    namespace: str
    container: str
    container_id: str
    labels: Mapping[str, Any] = field(default_factory=dict)
    annotations: Mapping[str, Any] = field(default_factory=dict)
    log_format_stdout: str = "default"
    log_format_stderr: str = "default"

    def __post_init__(self) -> None:
        # Cached records are shared between workers; expose read-only views
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))
        object.__setattr__(self, "annotations", MappingProxyType(dict(self.annotations)))

    @classmethod
    def from_identity(
        cls,
        identity: WorkloadIdentity,
        labels: Mapping[str, Any],
        annotations: Mapping[str, Any],
        formats: LogFormats,
    ) -> "ResolvedMetadata":
        """Assemble a record from a parsed identity and control-plane data."""
        return cls(
            replication_controller=identity.replication_controller,
            pod=identity.pod,
            namespace=identity.namespace,
            container=identity.container,
            container_id=identity.container_id,
            labels=labels,
            annotations=annotations,
            log_format_stdout=formats.stdout,
            log_format_stderr=formats.stderr,
        )

    @property
    def identity(self) -> WorkloadIdentity:
        return WorkloadIdentity(
            replication_controller=self.replication_controller,
            pod=self.pod,
            namespace=self.namespace,
            container=self.container,
            container_id=self.container_id,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the plain dict written into event target fields."""
        return {
            "replication_controller": self.replication_controller,
            "pod": self.pod,
            "namespace": self.namespace,
            "container": self.container,
            "container_id": self.container_id,
            "labels": dict(self.labels),
            "annotations": dict(self.annotations),
            "log_format_stderr": self.log_format_stderr,
            "log_format_stdout": self.log_format_stdout,
        }
