"""Shared fixtures for kubernetes metadata tests."""

import json
import threading

import httpx
import pytest

from kubernetes_metadata.entities import LookupOutcome, PodLookup, RawControlPlaneData
from kubernetes_metadata.repositories import KubernetesApiClient, LRUMetadataCache
from kubernetes_metadata.services import EnrichmentService

API_URL = "http://k8s.test"
NGINX_PATH = "/var/log/containers/web-1a2b3_prod_nginx-9f8e7d.log"


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeControlPlaneClient:
    """In-memory ControlPlaneClient that counts lookups."""

    def __init__(self, pods: dict[tuple[str, str], RawControlPlaneData] | None = None) -> None:
        self.pods = pods or {}
        self.calls: list[tuple[str, str]] = []
        self.fail = False
        self._lock = threading.Lock()

    def lookup(self, namespace: str, pod: str) -> PodLookup:
        with self._lock:
            self.calls.append((namespace, pod))
        if self.fail:
            return PodLookup(outcome=LookupOutcome.HTTP_ERROR, status_code=500, detail="boom")
        data = self.pods.get((namespace, pod))
        if data is None:
            return PodLookup(outcome=LookupOutcome.NOT_FOUND, status_code=404)
        return PodLookup(outcome=LookupOutcome.FOUND, data=data, status_code=200)

    def fetch(self, namespace: str, pod: str) -> RawControlPlaneData | None:
        return self.lookup(namespace, pod).data

    def is_available(self) -> bool:
        return not self.fail


def pod_body(labels: dict | None = None, annotations: dict | None = None) -> dict:
    """Minimal pod resource as returned by the API server."""
    metadata: dict = {"name": "web-1a2b3", "namespace": "prod"}
    if labels is not None:
        metadata["labels"] = labels
    if annotations is not None:
        metadata["annotations"] = annotations
    return {"kind": "Pod", "apiVersion": "v1", "metadata": metadata}


def json_transport(handler):
    """Build an httpx.MockTransport from a request -> (status, body) callable."""

    def respond(request: httpx.Request) -> httpx.Response:
        status_code, body = handler(request)
        if isinstance(body, (dict, list)):
            return httpx.Response(status_code, content=json.dumps(body).encode())
        return httpx.Response(status_code, content=body or b"")

    return httpx.MockTransport(respond)


@pytest.fixture
def clock():
    """Fake monotonic clock."""
    return FakeClock()


@pytest.fixture
def fake_client():
    """Fake control plane knowing the nginx pod."""
    return FakeControlPlaneClient(
        {
            ("prod", "web-1a2b3"): RawControlPlaneData(
                labels={"app.kubernetes.io/name": "web", "tier": "frontend"},
                annotations={"log-format-stderr-nginx": "json", "kubernetes.io/created-by": "rs"},
            )
        }
    )


@pytest.fixture
def cache(clock):
    """Small LRU cache driven by the fake clock."""
    return LRUMetadataCache(max_size=10, ttl=900, clock=clock)


@pytest.fixture
def service(cache, fake_client):
    """Enrichment service over the fake control plane."""
    return EnrichmentService(cache=cache, client=fake_client, default_log_format="default")


@pytest.fixture
def make_api_client():
    """Factory for KubernetesApiClient instances backed by a mock transport."""
    clients: list[KubernetesApiClient] = []

    def factory(handler, **kwargs) -> KubernetesApiClient:
        kwargs.setdefault("api_url", API_URL)
        client = KubernetesApiClient(transport=json_transport(handler), **kwargs)
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()
