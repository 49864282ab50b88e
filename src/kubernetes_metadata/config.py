import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Event fields
    source_field: str = os.getenv("KUBERNETES_SOURCE_FIELD", "path")
    target_field: str = os.getenv("KUBERNETES_TARGET_FIELD", "kubernetes")

    # Kubernetes API
    api_url: str = os.getenv("KUBERNETES_API_URL", "http://127.0.0.1:8001")
    auth_token: str | None = os.getenv("KUBERNETES_AUTH_TOKEN")
    # e.g. /var/run/secrets/kubernetes.io/serviceaccount/token
    auth_token_file: str | None = os.getenv("KUBERNETES_AUTH_TOKEN_FILE")
    # In-cluster API servers commonly present self-signed certificates, so
    # verification is off unless explicitly enabled or a CA bundle is given.
    verify_tls: bool = _env_flag("KUBERNETES_VERIFY_TLS", "false")
    ca_bundle: str | None = os.getenv("KUBERNETES_CA_BUNDLE")

    # Log formats
    default_log_format: str = os.getenv("DEFAULT_LOG_FORMAT", "default")

    # Cache
    cache_max_size: int = int(os.getenv("CACHE_MAX_SIZE", "1000"))
    cache_ttl: float = float(os.getenv("CACHE_TTL", "900"))  # 15 minutes

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = _env_flag("API_RELOAD", "false")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def tls_verify(self) -> bool | str:
        """Value handed to the HTTP client's ``verify`` option.

        Returns:
            The CA bundle path when configured, otherwise the verify flag
        """
        if self.ca_bundle:
            return self.ca_bundle
        return self.verify_tls

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_max_size <= 0:
            raise ValueError(f"CACHE_MAX_SIZE must be positive, got {self.cache_max_size}")

        if self.cache_ttl <= 0:
            raise ValueError(f"CACHE_TTL must be positive, got {self.cache_ttl}")

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {self.log_level!r}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
