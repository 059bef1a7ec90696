"""
Zoro Plugin - Anime source plugin for the zoro API provider

This plugin provides search with pagination, episode listing and
HLS episode server resolution with subtitle tracks.
"""

from .plugin import ZoroPlugin, plugin_metadata, default_config
from .config import ZoroConfig, get_default_config, validate_config
from .resolver import ManifestResolver
from .utils import normalize_query

__all__ = [
    "ZoroPlugin",
    "plugin_metadata",
    "default_config",
    "ZoroConfig",
    "get_default_config",
    "validate_config",
    "ManifestResolver",
    "normalize_query",
]
