"""Configuration loading for the Sevalla MCP server.

Usage:
    from sevalla_mcp.config import get_settings

    settings = get_settings()
    client_config = settings.client_config()
"""

from functools import lru_cache

from sevalla_mcp.config.models import ClientConfig
from sevalla_mcp.config.settings import ConfigurationError, Settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` to reload configuration.
    """
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "Settings",
    "get_settings",
    "reload_settings",
]
