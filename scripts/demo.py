#!/usr/bin/env python3
"""
Demo script for kubernetes metadata enrichment.

Enriches container log paths against a running API server, by default the
one exposed by `kubectl proxy` on http://127.0.0.1:8001.

    kubectl proxy &
    python scripts/demo.py                       # every file in /var/log/containers
    python scripts/demo.py path/a.log path/b.log
"""

import argparse
import glob
import json
import time

from kubernetes_metadata.repositories import KubernetesApiClient, LRUMetadataCache
from kubernetes_metadata.services import EnrichmentService, KubernetesMetadataFilter


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demo_enrichment(service: EnrichmentService, paths: list[str]) -> None:
    """Enrich each path and show the outcome."""
    print_section("Enrichment")

    for path in paths:
        result = service.enrich_detailed(path)
        print(f"\n{path}")
        print(f"  status: {result.status.value}")
        if result.lookup is not None and not result.lookup.found:
            print(f"  lookup: {result.lookup.outcome.value} ({result.lookup.detail})")
        if result.metadata is not None:
            print(json.dumps(result.metadata.to_dict(), indent=2, sort_keys=True))


def demo_cache(service: EnrichmentService, paths: list[str]) -> None:
    """Show how much a warm cache saves."""
    print_section("Cache Performance")

    service.clear_cache()

    start = time.perf_counter()
    for path in paths:
        service.enrich(path)
    cold_ms = (time.perf_counter() - start) * 1000

    start = time.perf_counter()
    for path in paths:
        service.enrich(path)
    warm_ms = (time.perf_counter() - start) * 1000

    print(f"  cold pass: {cold_ms:.2f}ms")
    print(f"  warm pass: {warm_ms:.2f}ms")
    print(json.dumps(service.get_stats(), indent=2))


def demo_filter(service: EnrichmentService, paths: list[str]) -> None:
    """Apply the filter to a sample event."""
    print_section("Event Filter")

    event_filter = KubernetesMetadataFilter(service)
    event = {event_filter.source: paths[0], "message": "hello"}
    enriched = event_filter.filter(event)
    print(f"  enriched: {enriched}")
    print(json.dumps(event, indent=2, sort_keys=True))


def main() -> None:
    parser = argparse.ArgumentParser(description="Kubernetes metadata enrichment demo")
    parser.add_argument("paths", nargs="*", help="Container log paths")
    parser.add_argument("--api", default=None, help="API server URL")
    args = parser.parse_args()

    paths = args.paths or sorted(glob.glob("/var/log/containers/*.log"))
    if not paths:
        print("No log paths given and none found in /var/log/containers")
        return

    with KubernetesApiClient.create(api_url=args.api) as client:
        service = EnrichmentService.create(cache=LRUMetadataCache.create(), client=client)
        demo_enrichment(service, paths)
        demo_cache(service, paths)
        demo_filter(service, paths)


if __name__ == "__main__":
    main()
