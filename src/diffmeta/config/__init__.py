"""Configuration loading, schema, and defaults."""

from diffmeta.config.loader import ConfigError, load_config
from diffmeta.config.schema import DiffMetaConfig

__all__ = [
    "ConfigError",
    "DiffMetaConfig",
    "load_config",
]
