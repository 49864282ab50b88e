"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from kubernetes_metadata.config import settings
from kubernetes_metadata.handlers import EnrichmentHandler
from kubernetes_metadata.repositories import KubernetesApiClient, LRUMetadataCache
from kubernetes_metadata.services import EnrichmentService, KubernetesMetadataFilter

logger = logging.getLogger(__name__)


def get_enrichment_service(request: Request) -> EnrichmentService:
    """Dependency injection for EnrichmentService from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The EnrichmentService instance from app.state

    Raises:
        RuntimeError: If service is not initialized
    """
    service = getattr(request.app.state, "enrichment_service", None)
    if service is None:
        raise RuntimeError("EnrichmentService not initialized. Check lifespan setup.")
    return service


def get_handler(request: Request) -> EnrichmentHandler:
    """Dependency injection for EnrichmentHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The EnrichmentHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "enrichment_handler", None)
    if handler is None:
        raise RuntimeError("EnrichmentHandler not initialized. Check lifespan setup.")
    return handler


def build_service() -> EnrichmentService:
    """Create the default service stack from settings."""
    cache = LRUMetadataCache.create(max_size=settings.cache_max_size, ttl=settings.cache_ttl)
    client = KubernetesApiClient.create(api_url=settings.api_url)
    return EnrichmentService.create(
        cache=cache,
        client=client,
        default_log_format=settings.default_log_format,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Repositories (cache, API client) - created explicitly
    2. Service (business logic) - stored in app.state.enrichment_service
    3. Handler (HTTP endpoints) - stored in app.state.enrichment_handler

    A service already placed on app.state (e.g. by tests) is reused.

    Args:
        app: The FastAPI application instance

    Yields:
        None
    """
    service = getattr(app.state, "enrichment_service", None)
    owns_service = service is None
    if owns_service:
        service = build_service()

    event_filter = KubernetesMetadataFilter(
        service,
        source=settings.source_field,
        target=settings.target_field,
    )
    app.state.enrichment_service = service
    app.state.enrichment_handler = EnrichmentHandler(service=service, event_filter=event_filter)

    logger.info("Enrichment service initialized")
    logger.info("Kubernetes API: %s", settings.api_url)
    logger.info("Cache: max_size=%d ttl=%ss", settings.cache_max_size, settings.cache_ttl)

    yield

    del app.state.enrichment_handler
    if owns_service:
        service.close()
        del app.state.enrichment_service
    logger.info("Enrichment service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[EnrichmentHandler, Depends(get_handler)]
ServiceDep = Annotated[EnrichmentService, Depends(get_enrichment_service)]
