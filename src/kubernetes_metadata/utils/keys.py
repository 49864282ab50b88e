"""Label and annotation key normalization."""

from collections.abc import Mapping
from typing import Any

_KEY_TRANSLATION = str.maketrans({".": "_", ",": "_", "/": "-"})


def sanitize_keys(data: Mapping[str, Any] | None) -> dict[str, Any]:
    """Normalize label or annotation keys into a field-name-safe form.

    ``.`` and ``,`` become ``_`` and ``/`` becomes ``-``. Values are left as
    they are.

    Args:
        data: Raw mapping from the API server, may be None

    Returns:
        A new dict with sanitized keys

    Example:
        ```python
        sanitize_keys({"app.kubernetes.io/name": "web"})
        # {"app_kubernetes_io-name": "web"}
        ```
    """
    if not data:
        return {}

    return {str(key).translate(_KEY_TRANSLATION): value for key, value in data.items()}
