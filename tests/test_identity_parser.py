"""
Tests for workload identity parsing from log paths.
"""

import pytest

from kubernetes_metadata.entities import WorkloadIdentity
from kubernetes_metadata.services import parse_path_identity


def test_parses_kubelet_container_log():
    """Test a full kubelet container log path."""
    identity = parse_path_identity("/var/log/containers/web-1a2b3_prod_nginx-9f8e7d.log")

    assert identity == WorkloadIdentity(
        replication_controller="web",
        pod="web-1a2b3",
        namespace="prod",
        container="nginx",
        container_id="9f8e7d",
    )


@pytest.mark.parametrize(
    ("pod", "namespace", "container", "expected_rc", "expected_container"),
    [
        ("api-7c9d", "default", "app-0a1b", "api", "app"),
        ("worker", "batch", "runner", "worker", "runner"),
        ("db-primary-5f6g", "data", "postgres-abc123", "db-primary", "postgres"),
    ],
)
def test_strips_instance_suffixes(pod, namespace, container, expected_rc, expected_container):
    """Test pod and container suffix stripping."""
    identity = parse_path_identity(f"{pod}_{namespace}_{container}.log")

    assert identity is not None
    assert identity.namespace == namespace
    assert identity.pod == pod
    assert identity.replication_controller == expected_rc
    assert identity.container == expected_container


def test_container_id_is_last_dash_token():
    """Test container id extraction."""
    identity = parse_path_identity("web-1_prod_sidecar-proxy-deadbeef.log")

    assert identity is not None
    assert identity.container == "sidecar-proxy"
    assert identity.container_id == "deadbeef"


def test_container_without_suffix_uses_whole_segment_as_id():
    """Test a container segment with no dash."""
    identity = parse_path_identity("web_prod_nginx.log")

    assert identity is not None
    assert identity.container == "nginx"
    assert identity.container_id == "nginx"


def test_uppercase_suffix_is_not_stripped():
    """Test that only lowercase alphanumeric suffixes are instance tokens."""
    identity = parse_path_identity("web-ABC_prod_nginx.log")

    assert identity is not None
    assert identity.replication_controller == "web-ABC"


def test_works_without_log_extension():
    """Test a bare file name."""
    identity = parse_path_identity("web-1a2b3_prod_nginx-9f8e7d")

    assert identity is not None
    assert identity.container_id == "9f8e7d"


@pytest.mark.parametrize(
    "path",
    [
        "/var/log/containers/web-1a2b3_prod_POD-abc123.log",
        "/var/log/containers/web_prod.log",
        "/var/log/containers/web_prod_nginx_extra.log",
        "/var/log/syslog",
        "/var/log/containers/",
        "",
        "_prod_nginx.log",
        "web__nginx.log",
        "web_prod_-abc.log",
    ],
)
def test_unrecognized_paths_return_none(path):
    """Test paths that do not name an application container log."""
    assert parse_path_identity(path) is None


@pytest.mark.parametrize("value", [None, 42, b"web_prod_nginx.log", ["web_prod_nginx.log"]])
def test_non_string_input_returns_none(value):
    """Test that parsing is total over arbitrary input."""
    assert parse_path_identity(value) is None


def test_only_final_segment_is_considered():
    """Test that underscores in directories are ignored."""
    identity = parse_path_identity("/data/my_logs/dir_x/web-1_prod_nginx-2.log")

    assert identity is not None
    assert identity.namespace == "prod"


def test_trailing_slash_is_ignored():
    """Test that a trailing separator does not hide the file name."""
    identity = parse_path_identity("x/web-1a2b3_prod_nginx-9f8e7d.log/")

    assert identity is not None
    assert identity.pod == "web-1a2b3"
    assert identity.namespace == "prod"
    assert identity.container == "nginx"
