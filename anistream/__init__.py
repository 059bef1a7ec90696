"""
AniStream - Anime source adapter for media catalog hosts.

Provides source plugins that search an upstream anime API, list episodes
and resolve HLS master playlists into per-quality playable sources with
subtitle tracks.
"""

__version__ = "0.1.0"
__author__ = "AniStream Team"

# Package metadata
__title__ = "anistream"
__description__ = "Anime source adapter resolving HLS episode streams"
__license__ = "MIT"

# Version info tuple for programmatic access
VERSION_INFO = tuple(map(int, __version__.split(".")))

# Export main components for easy importing
from anistream.core.models import (
    EpisodeDetails,
    EpisodeServer,
    ProviderSettings,
    SearchOptions,
    SearchResult,
    SubOrDub,
    VideoSource,
)
from anistream.plugins.zoro import ZoroPlugin, normalize_query

__all__ = [
    "__version__",
    "__author__",
    "EpisodeDetails",
    "EpisodeServer",
    "ProviderSettings",
    "SearchOptions",
    "SearchResult",
    "SubOrDub",
    "VideoSource",
    "ZoroPlugin",
    "normalize_query",
]
