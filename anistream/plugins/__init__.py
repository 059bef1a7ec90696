"""
Plugin Layer - Anime source implementations.

This module contains the plugin interface and the individual source
implementations that provide search, episode listing and stream
resolution for the host catalog.
"""

from anistream.plugins.base import BasePlugin, PluginMetadata

__all__ = [
    "BasePlugin",
    "PluginMetadata",
]
