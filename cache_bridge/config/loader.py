"""
cache-bridge — Configuration Loader

Loads and validates configuration from environment variables and .env files.
Provides a singleton configuration instance for the runtime.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from ..errors import ConfigurationError
from .schemas import CacheBridgeConfig

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_config_instance: CacheBridgeConfig | None = None


def _build_config_dict() -> dict:
    return {
        "environment": os.getenv("ENVIRONMENT", "development"),
        "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
        "cache": {
            "backend": os.getenv("CACHE_BACKEND", "memory"),
            "ttl_seconds": int(os.getenv("CACHE_TTL_SECONDS", "0")),
            "namespace": os.getenv("CACHE_NAMESPACE", "cache_bridge"),
        },
    }


def load_config(
    env_file: str | None = None,
    reload: bool = False,
) -> CacheBridgeConfig:
    """
    Load configuration from environment variables and .env file.

    Args:
        env_file: Path to .env file (default: .env in the working directory)
        reload: Force reload even if config already loaded

    Returns:
        Validated CacheBridgeConfig instance

    Raises:
        ConfigurationError: If configuration is invalid
    """
    global _config_instance

    if _config_instance is not None and not reload:
        return _config_instance

    env_path = Path(env_file) if env_file else Path.cwd() / ".env"

    if env_path.exists():
        logger.info(f"Loading environment from {env_path}")
        try:
            load_dotenv(env_path, override=True)
        except OSError as e:
            logger.error(
                f"Failed to load .env file from {env_path}: {e}",
                extra={"path": str(env_path), "error": str(e)},
                exc_info=True,
            )
            raise ConfigurationError(
                f"Failed to load environment file: {e}",
                details={"path": str(env_path), "error": str(e)},
            ) from e
    else:
        logger.debug("No .env file found, using environment variables only")

    try:
        _config_instance = CacheBridgeConfig(**_build_config_dict())
        logger.info(
            f"Configuration loaded successfully (environment: {_config_instance.environment})",
            extra={"environment": _config_instance.environment, "cache_backend": str(_config_instance.cache.backend)},
        )
        return _config_instance
    except ValidationError as e:
        logger.error(
            f"Configuration validation failed: {e}",
            extra={"validation_errors": e.errors()},
            exc_info=True,
        )
        raise ConfigurationError(
            "Configuration validation failed. Check your environment variables and configuration.",
            details={"validation_errors": e.errors()},
        ) from e
    except ValueError as e:
        # Malformed numeric environment variables
        logger.error(
            f"Invalid configuration value: {e}",
            extra={"error": str(e)},
            exc_info=True,
        )
        raise ConfigurationError(
            f"Failed to load configuration: {e}",
            details={"error": str(e)},
        ) from e


def get_config() -> CacheBridgeConfig:
    """Return the loaded configuration, loading it on first use."""
    if _config_instance is None:
        return load_config()
    return _config_instance


def reload_config(env_file: str | None = None) -> CacheBridgeConfig:
    """Force a reload of configuration from the environment."""
    return load_config(env_file=env_file, reload=True)


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging for applications embedding cache-bridge.

    Args:
        level: Log level name; defaults to the configured log_level
    """
    if level is None:
        level = str(get_config().log_level)
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
