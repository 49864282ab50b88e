"""
Tests for the kubernetes metadata API.
"""

import pytest
from fastapi.testclient import TestClient

from kubernetes_metadata.api.app import app

from .conftest import NGINX_PATH


@pytest.fixture
def client(service):
    """Create a test client wired to the fake-backed service."""
    app.state.enrichment_service = service
    with TestClient(app) as test_client:
        yield test_client
    del app.state.enrichment_service


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Kubernetes Metadata API"


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["control_plane_healthy"] is True


def test_health_degraded(client, fake_client):
    """Test health when the control plane is down."""
    fake_client.fail = True
    data = client.get("/health").json()
    assert data["status"] == "degraded"


def test_enrich(client):
    """Test enrich endpoint."""
    response = client.post("/enrich", json={"source": NGINX_PATH})
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "resolved"
    assert data["metadata"]["container"] == "nginx"

    again = client.post("/enrich", json={"source": NGINX_PATH}).json()
    assert again["status"] == "cache_hit"
    assert again["metadata"] == data["metadata"]


def test_enrich_unrecognized(client):
    """Test enrich with a path that is not a container log."""
    data = client.post("/enrich", json={"source": "/var/log/syslog"}).json()
    assert data["status"] == "unrecognized_path"
    assert data["metadata"] is None


def test_enrich_validation(client):
    """Test request validation."""
    response = client.post("/enrich", json={"source": ""})
    assert response.status_code == 422


def test_filter(client):
    """Test filter endpoint."""
    response = client.post("/filter", json={"event": {"path": NGINX_PATH, "message": "hi"}})
    assert response.status_code == 200
    data = response.json()
    assert data["enriched"] is True
    assert data["event"]["kubernetes"]["namespace"] == "prod"
    assert data["event"]["message"] == "hi"


def test_filter_passthrough(client):
    """Test filter endpoint with an event lacking a source."""
    data = client.post("/filter", json={"event": {"message": "hi"}}).json()
    assert data == {"event": {"message": "hi"}, "enriched": False}


def test_stats_and_clear(client):
    """Test stats and cache clearing."""
    client.post("/enrich", json={"source": NGINX_PATH})

    stats = client.get("/stats").json()
    assert stats["cache"]["total_entries"] == 1
    assert stats["enrichment"]["cache_misses"] == 1

    cleared = client.delete("/cache").json()
    assert cleared["success"] is True
    assert cleared["deleted_count"] == 1
    assert client.get("/stats").json()["cache"]["total_entries"] == 0
