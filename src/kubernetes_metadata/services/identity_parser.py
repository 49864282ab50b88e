"""Workload identity parsing from kubelet log file names.

Container log files are named ``<pod>_<namespace>_<container>-<id>.log``.
Pod and container names may carry a trailing ``-<suffix>`` instance token
which is dropped to recover the replication controller and logical
container name.
"""

import re

from kubernetes_metadata.entities import WorkloadIdentity

INSTANCE_SUFFIX_RE = re.compile(r"-[0-9a-z]*$")

LOG_SUFFIX = ".log"
SANDBOX_PREFIX = "POD-"


def _strip_instance_suffix(name: str) -> str:
    return INSTANCE_SUFFIX_RE.sub("", name, count=1)


def _last_token(name: str) -> str:
    tokens = name.split("-")
    while tokens and not tokens[-1]:
        tokens.pop()
    return tokens[-1] if tokens else ""


def parse_path_identity(path: object) -> WorkloadIdentity | None:
    """Derive a workload identity from a log file path.

    Args:
        path: Log source path, e.g. ``/var/log/containers/web-1a2b_prod_nginx-9f8e.log``

    Returns:
        WorkloadIdentity, or None when the path does not name an application
        container log. Never raises.

    Example:
        ```python
        parse_path_identity("/var/log/containers/web-1a2b_prod_nginx-9f8e.log")
        # WorkloadIdentity(replication_controller="web", pod="web-1a2b",
        #                  namespace="prod", container="nginx", container_id="9f8e")
        ```
    """
    if not isinstance(path, str):
        return None

    filename = path.rstrip("/").rsplit("/", 1)[-1]
    if filename.endswith(LOG_SUFFIX):
        filename = filename[: -len(LOG_SUFFIX)]

    parts = filename.split("_")
    if len(parts) != 3:
        return None

    pod, namespace, container_segment = parts
    # Infrastructure sandbox containers carry no application logs
    if container_segment.startswith(SANDBOX_PREFIX):
        return None

    container = _strip_instance_suffix(container_segment)
    if not (pod and namespace and container):
        return None

    return WorkloadIdentity(
        replication_controller=_strip_instance_suffix(pod),
        pod=pod,
        namespace=namespace,
        container=container,
        container_id=_last_token(container_segment),
    )
