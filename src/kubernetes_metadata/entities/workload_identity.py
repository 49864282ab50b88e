"""Workload identity domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WorkloadIdentity:
    """Identity of a container recovered from its log file name.

    Attributes:
        replication_controller: Pod name with the instance suffix stripped
        pod: Full pod name
        namespace: Namespace the pod runs in
        container: Container name with the instance suffix stripped
        container_id: Final dash-separated token of the container segment
    """

    replication_controller: str
    pod: str
    namespace: str
    container: str
    container_id: str
