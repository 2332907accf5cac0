"""Configuration management for the riot-proxy service."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from decouple import Choices
from decouple import config

from riot_proxy.core.topology import valid_platforms, valid_regions


class Environment(Enum):
    """Supported deployment environments."""

    DEVELOPMENT = "development"
    CI = "CI"
    PRODUCTION = "production"


@dataclass
class Config:
    """Configuration for the riot-proxy service."""

    # Riot API key; an empty key is reported per request, not at startup
    riot_api_key: str = ""

    # Environment configuration
    environment: Environment = Environment.DEVELOPMENT

    # Riot API configuration
    riot_api_base_url: str = ""
    riot_api_timeout_seconds: float = 10.0

    # Lookup defaults
    default_region: str = "asia"
    default_platform: str = "kr"

    # HTTP server configuration
    http_host: str = "0.0.0.0"
    http_port: int = 8000

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(
            config("ENVIRONMENT", default="development", cast=Choices(["development", "CI", "production"]))
        )

        return cls(
            riot_api_key=config("RIOT_API_KEY", default=""),
            environment=env,
            # Riot API
            riot_api_base_url=config("RIOT_API_BASE_URL", default=""),
            riot_api_timeout_seconds=config("RIOT_API_TIMEOUT_SECONDS", default=10.0, cast=float),
            # Lookup defaults
            default_region=config("DEFAULT_REGION", default="asia", cast=Choices(valid_regions())),
            default_platform=config("DEFAULT_PLATFORM", default="kr", cast=Choices(valid_platforms())),
            # HTTP server
            http_host=config("HTTP_HOST", default="0.0.0.0"),
            http_port=config("HTTP_PORT", default=8000, cast=int),
            # Logging
            log_level=config(
                "LOG_LEVEL",
                default="INFO",
                cast=Choices(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
            ),
            log_format=config("LOG_FORMAT", default="json", cast=Choices(["json", "text"])),
        )

    def has_api_key(self) -> bool:
        """Check if a Riot API key is configured."""
        return bool(self.riot_api_key)


_config: Optional[Config] = None


def init_config() -> Config:
    """Load configuration from the environment and store it globally."""
    global _config
    _config = Config.from_env()
    return _config


def get_config() -> Config:
    """Get the global configuration.

    Raises:
        RuntimeError: If init_config() has not been called
    """
    if _config is None:
        raise RuntimeError("Configuration not initialized. Call init_config() first.")
    return _config


def reset_config() -> None:
    """Drop the global configuration."""
    global _config
    _config = None


def is_config_initialized() -> bool:
    return _config is not None
