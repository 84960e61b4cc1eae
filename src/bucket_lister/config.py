import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ALLOWED_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True, slots=True)
class AppConfig:
    """
    Observability configuration loaded from environment variables.

    None of these settings change what the handler returns; they only shape
    how it logs and emits metrics.
    """

    service_name: str
    environment: str
    log_level: str
    metrics_namespace: str

    @classmethod
    def load_from_env(cls) -> "AppConfig":
        """
        Loads configuration from environment variables, performing validation.
        Fails fast with a ConfigurationError if anything is invalid.
        """
        try:
            service_name = os.getenv("SERVICE_NAME", "bucket-lister").strip()
            if not service_name:
                raise ValueError("SERVICE_NAME must not be empty.")

            environment = os.getenv("ENVIRONMENT", "dev").strip()
            if not environment:
                raise ValueError("ENVIRONMENT must not be empty.")

            metrics_namespace = os.getenv("METRICS_NAMESPACE", "BucketLister").strip()
            if not metrics_namespace:
                raise ValueError("METRICS_NAMESPACE must not be empty.")

            log_level = os.getenv("LOG_LEVEL", "INFO").upper()
            if log_level not in ALLOWED_LOG_LEVELS:
                raise ValueError(
                    f"LOG_LEVEL must be one of {ALLOWED_LOG_LEVELS}, not '{log_level}'"
                )

        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value for an environment variable: {e}"
            ) from e

        return cls(
            service_name=service_name,
            environment=environment,
            log_level=log_level,
            metrics_namespace=metrics_namespace,
        )


# --- Singleton Factory Function (Lazy-loaded and Cached) ---
@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Loads the application configuration from environment variables.
    The result is cached using lru_cache, so the environment is only read once
    on the first call.
    """
    logger.info("Loading application configuration from environment...")
    return AppConfig.load_from_env()
