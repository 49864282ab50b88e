"""Per-stream log format resolution from pod annotations."""

import logging
from collections.abc import Mapping
from typing import Any

from kubernetes_metadata.entities import LogFormats

logger = logging.getLogger(__name__)

STREAMS = ("stderr", "stdout")


def candidate_keys(stream: str, container: str) -> list[str]:
    """Annotation keys consulted for a stream, most specific first."""
    return [
        f"log-format-{stream}-{container}",
        f"log-format-{container}",
        f"log-format-{stream}",
        "log-format",
    ]


def resolve_log_formats(
    annotations: Mapping[str, Any] | None,
    container: str,
    default_format: str,
) -> LogFormats:
    """Resolve the stdout and stderr log formats for a container.

    Lookup order per stream is stream+container, container, stream, then the
    global ``log-format`` key. Streams without a match use the default.

    Args:
        annotations: Sanitized pod annotations, may be None
        container: Logical container name
        default_format: Fallback format

    Returns:
        LogFormats for both streams. Never raises.
    """
    annotations = annotations or {}
    resolved = {stream: default_format for stream in STREAMS}

    for stream in STREAMS:
        try:
            for key in candidate_keys(stream, container):
                value = annotations.get(key)
                if value is not None:
                    resolved[stream] = value
                    break
        except Exception as e:
            logger.warning("Error resolving %s log format for %s: %s", stream, container, e)
            resolved[stream] = default_format

    return LogFormats(stdout=resolved["stdout"], stderr=resolved["stderr"])
