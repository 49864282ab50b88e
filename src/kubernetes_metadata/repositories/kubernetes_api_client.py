"""Kubernetes API server client.

Resolves pods to their labels and annotations with one synchronous GET per
lookup:

    GET {api_url}/api/v1/namespaces/{namespace}/pods/{pod}

TLS verification is disabled by default. In-cluster API servers (and
``kubectl proxy`` endpoints) frequently present self-signed certificates;
operators who want verification pass ``verify=True`` or a CA bundle path,
or set ``KUBERNETES_VERIFY_TLS`` / ``KUBERNETES_CA_BUNDLE``.

There are no retries here. A failed lookup is reported once and the caller
decides what to do with it.
"""

import logging
import ssl
import threading
from pathlib import Path
from urllib.parse import quote

import httpx

from kubernetes_metadata.config import settings
from kubernetes_metadata.entities import LookupOutcome, PodLookup, RawControlPlaneData

logger = logging.getLogger(__name__)


class KubernetesApiClient:
    """httpx-based implementation of the ControlPlaneClient protocol.

    This class satisfies the ControlPlaneClient protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        with KubernetesApiClient.create(api_url="https://kubernetes.default.svc") as client:
            data = client.fetch("prod", "web-1a2b")
            if data is not None:
                print(data.labels)
        ```
    """

    def __init__(
        self,
        api_url: str | None = None,
        auth_token: str | None = None,
        auth_token_file: str | None = None,
        verify: bool | str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            api_url: API server base URL. Defaults to settings.api_url.
            auth_token: Bearer token. Defaults to settings.auth_token.
            auth_token_file: File to read the bearer token from when no token
                is given. Defaults to settings.auth_token_file.
            verify: TLS verification flag or CA bundle path.
                Defaults to settings.tls_verify (disabled).
            transport: Custom httpx transport, e.g. httpx.MockTransport in tests.
        """
        self._api_url = (api_url or settings.api_url).rstrip("/")
        self._auth_token = auth_token or settings.auth_token
        if self._auth_token is None:
            self._auth_token = self._read_token(auth_token_file or settings.auth_token_file)
        self._verify = settings.tls_verify if verify is None else verify
        self._transport = transport
        self._client: httpx.Client | None = None
        self._client_lock = threading.Lock()

    @staticmethod
    def _read_token(path: str | None) -> str | None:
        if not path:
            return None
        try:
            token = Path(path).read_text(encoding="utf-8").strip()
        except OSError as e:
            logger.warning("Could not read auth token file %s: %s", path, e)
            return None
        return token or None

    @classmethod
    def create(
        cls,
        api_url: str | None = None,
        auth_token: str | None = None,
    ) -> "KubernetesApiClient":
        """Factory method to create KubernetesApiClient with defaults.

        Args:
            api_url: API server base URL. If None, uses settings.
            auth_token: Bearer token. If None, uses settings.

        Returns:
            Configured KubernetesApiClient
        """
        return cls(api_url=api_url, auth_token=auth_token)

    @property
    def client(self) -> httpx.Client:
        """Lazy-load the HTTP client.

        Worker threads share one instance, so the first build is serialized.

        Returns:
            The httpx.Client instance
        """
        client = self._client
        if client is not None:
            return client

        with self._client_lock:
            if self._client is None:
                verify: bool | ssl.SSLContext = self._verify  # type: ignore[assignment]
                if isinstance(self._verify, str):
                    verify = ssl.create_default_context(cafile=self._verify)
                self._client = httpx.Client(
                    verify=verify,
                    headers=self._headers(),
                    transport=self._transport,
                )
            return self._client

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._auth_token:
            headers["Authorization"] = f"Bearer {self._auth_token}"
        return headers

    def pod_url(self, namespace: str, pod: str) -> str:
        """Build the pod resource URL."""
        return (
            f"{self._api_url}/api/v1/namespaces/{quote(namespace, safe='')}"
            f"/pods/{quote(pod, safe='')}"
        )

    def lookup(self, namespace: str, pod: str) -> PodLookup:
        """Look up a pod and report how the request ended.

        Args:
            namespace: Pod namespace
            pod: Pod name

        Returns:
            PodLookup; only a FOUND outcome carries data. Never raises.
        """
        url = self.pod_url(namespace, pod)

        try:
            response = self.client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.info("Kubernetes API request failed for %s/%s: %s", namespace, pod, e)
            return PodLookup(outcome=LookupOutcome.TRANSPORT_ERROR, detail=str(e))

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info("Pod %s/%s not found", namespace, pod)
            return PodLookup(
                outcome=LookupOutcome.NOT_FOUND,
                status_code=response.status_code,
                detail="pod not found",
            )

        if response.status_code != httpx.codes.OK:
            logger.info("Non 200 response code returned: %d", response.status_code)
            return PodLookup(
                outcome=LookupOutcome.HTTP_ERROR,
                status_code=response.status_code,
                detail=f"unexpected status {response.status_code}",
            )

        try:
            body = response.json()
        except ValueError as e:
            logger.info("Could not decode Kubernetes API response: %s", e)
            return self._invalid(response, f"invalid JSON: {e}")

        metadata = body.get("metadata") if isinstance(body, dict) else None
        if not isinstance(metadata, dict):
            return self._invalid(response, "response has no metadata object")

        labels = metadata.get("labels") or {}
        annotations = metadata.get("annotations") or {}
        if not isinstance(labels, dict) or not isinstance(annotations, dict):
            return self._invalid(response, "labels and annotations must be objects")

        logger.info("Successfully queried the Kubernetes API for %s/%s", namespace, pod)
        return PodLookup(
            outcome=LookupOutcome.FOUND,
            data=RawControlPlaneData(labels=dict(labels), annotations=dict(annotations)),
            status_code=response.status_code,
        )

    @staticmethod
    def _invalid(response: httpx.Response, detail: str) -> PodLookup:
        logger.info("Invalid Kubernetes API response: %s", detail)
        return PodLookup(
            outcome=LookupOutcome.INVALID_BODY,
            status_code=response.status_code,
            detail=detail,
        )

    def fetch(self, namespace: str, pod: str) -> RawControlPlaneData | None:
        """Fetch pod labels and annotations.

        Args:
            namespace: Pod namespace
            pod: Pod name

        Returns:
            RawControlPlaneData if found, None otherwise
        """
        return self.lookup(namespace, pod).data

    def is_available(self) -> bool:
        """Check if the API server answers on its discovery endpoint.

        Returns:
            True if ``GET /api`` returns 200, False otherwise
        """
        try:
            response = self.client.get(f"{self._api_url}/api")
        except (httpx.HTTPError, httpx.InvalidURL):
            return False
        return response.status_code == httpx.codes.OK

    def close(self) -> None:
        """Close the HTTP client.

        Should be called when shutting down the application.
        """
        with self._client_lock:
            if self._client is not None:
                self._client.close()
                self._client = None

    def __enter__(self) -> "KubernetesApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def api_url(self) -> str:
        """Get the API server base URL."""
        return self._api_url

    @property
    def verify(self) -> bool | str:
        """Get the TLS verification setting."""
        return self._verify
