"""
Core Layer - Data models, exceptions and shared helpers.

This module contains the data models and error types shared by every
source plugin, along with logging and URL utilities.
"""

from anistream.core.exceptions import (
    AniStreamError,
    ConfigurationError,
    NetworkError,
    PluginError,
    ResolutionError,
    SearchError,
)
from anistream.core.models import (
    EpisodeDetails,
    EpisodeServer,
    ManifestEntry,
    ProviderSettings,
    SearchOptions,
    SearchResult,
    SubOrDub,
    SubtitleTrack,
    VariantStream,
    VideoSource,
    WatchResponse,
)
from anistream.core.utils import setup_logging, url_directory

__all__ = [
    # Data Models
    "EpisodeDetails",
    "EpisodeServer",
    "ManifestEntry",
    "ProviderSettings",
    "SearchOptions",
    "SearchResult",
    "SubOrDub",
    "SubtitleTrack",
    "VariantStream",
    "VideoSource",
    "WatchResponse",
    # Utilities
    "setup_logging",
    "url_directory",
    # Exceptions
    "AniStreamError",
    "ConfigurationError",
    "NetworkError",
    "PluginError",
    "ResolutionError",
    "SearchError",
]
