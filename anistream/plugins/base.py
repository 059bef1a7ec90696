"""
Base Plugin Interface - Abstract base class for anime source plugins.

This module defines the interface that every source plugin implements,
providing a consistent API for capability declaration, search, episode
listing and episode server resolution.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Any, Union

import aiohttp
from pydantic import BaseModel, Field

from anistream.core.models import (
    EpisodeDetails,
    EpisodeServer,
    ProviderSettings,
    SearchOptions,
    SearchResult,
)


logger = logging.getLogger(__name__)


class PluginMetadata(BaseModel):
    """Metadata information for a plugin."""

    name: str = Field(..., description="Plugin display name")
    version: str = Field(default="1.0.0", description="Plugin version")
    author: str = Field(default="Unknown", description="Plugin author")
    description: str = Field(default="", description="Plugin description")
    website: Optional[str] = Field(None, description="Upstream API URL")
    requires_auth: bool = Field(default=False, description="Whether plugin requires authentication")


class BasePlugin(ABC):
    """
    Abstract base class for anime source plugins.

    Plugins own a lazily created aiohttp session. Hosts may inject their
    own session instead, which ``cleanup()`` closes as well.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize the plugin with configuration.

        Args:
            config: Plugin-specific configuration dictionary
            session: Optional pre-built HTTP session
        """
        self.config = config or {}
        self._session = session

        # Set up logging for this plugin
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self._initialize_config()

    def _initialize_config(self) -> None:
        """Initialize transport settings with defaults."""
        # None means no total timeout; callers impose their own
        self.timeout = self.config.get('timeout')
        self.user_agent = self.config.get(
            'user_agent',
            'AniStream/0.1.0 (https://github.com/anistream/anistream)'
        )

    @property
    @abstractmethod
    def metadata(self) -> PluginMetadata:
        """Get plugin metadata information."""
        pass

    @property
    @abstractmethod
    def base_url(self) -> str:
        """Get the base URL of the upstream API."""
        pass

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session with proper configuration."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout)

            headers = {
                'User-Agent': self.user_agent,
                'Accept': 'application/json, text/plain, */*',
                'Accept-Language': 'en-US,en;q=0.5',
            }

            self._session = aiohttp.ClientSession(
                timeout=timeout,
                headers=headers
            )

        return self._session

    @abstractmethod
    def get_settings(self) -> ProviderSettings:
        """
        Declare the provider's static capabilities.

        Returns:
            Available episode servers and dub support
        """
        pass

    @abstractmethod
    async def search(self, options: Union[SearchOptions, str]) -> List[SearchResult]:
        """
        Search for anime by title.

        Args:
            options: Search options or a bare query string

        Returns:
            List of anime search results

        Raises:
            SearchError: If the query is unusable
            NetworkError: If an upstream request fails
        """
        pass

    @abstractmethod
    async def find_episodes(self, anime_id: str) -> List[EpisodeDetails]:
        """
        Get episodes for a specific anime.

        Args:
            anime_id: Upstream anime identifier

        Returns:
            List of available episodes

        Raises:
            NetworkError: If the upstream request fails
        """
        pass

    @abstractmethod
    async def find_episode_server(self, episode: EpisodeDetails, server: str) -> EpisodeServer:
        """
        Resolve playable video sources for an episode.

        Args:
            episode: Episode to resolve
            server: Requested server name, or "default"

        Returns:
            Episode server descriptor

        Raises:
            NetworkError: If an upstream request fails
            ResolutionError: If no playable manifest is listed
        """
        pass

    async def cleanup(self) -> None:
        """Clean up resources used by the plugin."""
        if self._session and not self._session.closed:
            try:
                await self._session.close()
                self.logger.debug("HTTP session closed")
            except Exception as e:
                self.logger.debug(f"Error closing HTTP session: {e}")
        self._session = None

    async def __aenter__(self) -> "BasePlugin":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.cleanup()

    def __str__(self) -> str:
        return f"{self.metadata.name} v{self.metadata.version}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.metadata.name}')"


# Export base plugin class and metadata
__all__ = ["BasePlugin", "PluginMetadata"]
