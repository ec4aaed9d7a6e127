"""Configuration management for uricraft."""

from .loader import ConfigLoader, ConfigurationError, load_config
from .models import CatalogConfig, QueryConfig, UriCraftConfig

__all__ = [
    "UriCraftConfig",
    "CatalogConfig",
    "QueryConfig",
    "ConfigLoader",
    "ConfigurationError",
    "load_config",
]
