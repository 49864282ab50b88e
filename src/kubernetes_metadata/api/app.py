import logging
from typing import Any

from fastapi import FastAPI

from kubernetes_metadata.api.dependencies import HandlerDep, lifespan
from kubernetes_metadata.config import settings
from kubernetes_metadata.dto import (
    CacheClearResponse,
    EnrichRequest,
    EnrichResponse,
    FilterEventRequest,
    FilterEventResponse,
    HealthCheckResponse,
    StatsResponse,
)

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(
    title="Kubernetes Metadata API",
    description="Enriches log events with pod metadata from the Kubernetes API",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/")
def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Kubernetes Metadata API",
        "version": "0.1.0",
        "description": "Enriches log events with pod metadata from the Kubernetes API",
        "endpoints": {
            "enrich": "/enrich",
            "filter": "/filter",
            "cache": "/cache",
            "stats": "/stats",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return handler.health_check()


@app.post("/enrich", response_model=EnrichResponse)
def enrich(request: EnrichRequest, handler: HandlerDep) -> EnrichResponse:
    """Resolve Kubernetes metadata for a log source path."""
    return handler.enrich(request)


@app.post("/filter", response_model=FilterEventResponse)
def filter_event(request: FilterEventRequest, handler: HandlerDep) -> FilterEventResponse:
    """Attach Kubernetes metadata to an event."""
    return handler.filter_event(request)


@app.get("/stats", response_model=StatsResponse)
def get_stats(handler: HandlerDep) -> StatsResponse:
    """Get cache and enrichment statistics."""
    return handler.get_stats()


@app.delete("/cache", response_model=CacheClearResponse)
def clear_cache(handler: HandlerDep) -> CacheClearResponse:
    """Clear all cached metadata."""
    return handler.clear_cache()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "kubernetes_metadata.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
