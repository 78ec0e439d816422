import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Auth
    admin_key: str | None = os.getenv("ADMIN_KEY")

    # Key-value store binding (unset means no binding)
    products_kv_url: str | None = os.getenv("PRODUCTS_KV_URL")
    products_kv_password: str | None = os.getenv("PRODUCTS_KV_PASSWORD")
    products_key: str = os.getenv("PRODUCTS_KEY", "products")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def is_memory_store(self) -> bool:
        """Check if the store binding points at the in-process store."""
        return bool(self.products_kv_url) and self.products_kv_url.startswith("memory://")

    def require_admin_key(self) -> str:
        """Return the admin key, refusing to continue without one.

        Raises:
            ConfigurationError: If ADMIN_KEY is unset or empty
        """
        if not self.admin_key:
            raise ConfigurationError(
                "ADMIN_KEY is not set. Writes to /api/products require an explicit admin key."
            )
        return self.admin_key

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not self.products_key:
            raise ValueError("PRODUCTS_KEY must not be empty")

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"LOG_LEVEL must be a valid logging level, got {self.log_level}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client(config: Settings | None = None) -> redis.Redis:
    """Create a Redis client instance for the products store."""
    config = config or settings
    if not config.products_kv_url:
        raise ConfigurationError("PRODUCTS_KV_URL is not set")
    return redis.from_url(
        config.products_kv_url,
        password=config.products_kv_password,
        decode_responses=True,
    )


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once for the process."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
