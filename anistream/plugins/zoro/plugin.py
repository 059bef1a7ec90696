"""
Zoro Plugin - Main plugin implementation for the zoro API source

This module implements the plugin class the host talks to. It declares
the provider's capabilities and routes search, episode listing and
episode server resolution to the API client, parser and resolver.
"""

import logging
from typing import Dict, List, Optional, Any, Union

import aiohttp

from anistream.plugins.base import BasePlugin, PluginMetadata
from anistream.core.models import (
    EpisodeDetails,
    EpisodeServer,
    ProviderSettings,
    SearchOptions,
    SearchResult,
)
from anistream.core.exceptions import AniStreamError, PluginError, SearchError

from .api import ZoroAPI
from .config import ZoroConfig, get_default_config, merge_with_defaults, validate_config
from .parser import ZoroParser
from .resolver import ManifestResolver, DEFAULT_SERVER
from .utils import normalize_query


logger = logging.getLogger(__name__)


plugin_metadata = PluginMetadata(
    name="Zoro",
    version="1.0.0",
    author="AniStream Team",
    description="Anime source plugin for the zoro provider of a consumet-style API",
    website=get_default_config()["api_url"],
    requires_auth=False
)


class ZoroPlugin(BasePlugin):
    """
    Zoro plugin for discovering anime and resolving HLS streams.

    Every call builds its own request-scoped objects; the HTTP session is
    the only thing shared between concurrent calls.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize Zoro plugin.

        Args:
            config: Plugin configuration dictionary
            session: Optional pre-built HTTP session

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        merged_config = merge_with_defaults(config)

        self.plugin_config: ZoroConfig = validate_config(merged_config)

        super().__init__(self.plugin_config.model_dump(), session=session)

        self.parser = ZoroParser(self.plugin_config.api_url, self.plugin_config.source)

        logger.debug("Zoro plugin initialized successfully")

    @property
    def metadata(self) -> PluginMetadata:
        """Get plugin metadata."""
        return plugin_metadata

    @property
    def base_url(self) -> str:
        """Get base URL of the upstream API."""
        return self.plugin_config.api_url

    @property
    def api(self) -> ZoroAPI:
        """API client bound to the current session."""
        return ZoroAPI(self.session, self.plugin_config.api_url, self.plugin_config.source)

    @property
    def resolver(self) -> ManifestResolver:
        """Manifest resolver bound to the current session."""
        return ManifestResolver(self.api, self.parser, self.plugin_config.default_server)

    def get_settings(self) -> ProviderSettings:
        """Get the servers and dub support advertised to the host."""
        return ProviderSettings(
            episode_servers=list(self.plugin_config.episode_servers),
            supports_dub=self.plugin_config.supports_dub,
        )

    async def search(self, options: Union[SearchOptions, str]) -> List[SearchResult]:
        """
        Search for anime, following pagination until the last page.

        There is no page limit; callers needing a bound must wrap the call
        in their own timeout.

        Args:
            options: Search options or a bare query string

        Returns:
            Results of every page, in page order

        Raises:
            SearchError: If the query is empty after normalization
            NetworkError: If any page request fails
        """
        if isinstance(options, str):
            options = SearchOptions(query=options)

        keyword = normalize_query(options.query)
        if not keyword:
            raise SearchError("Search query cannot be empty", query=options.query, source=self.plugin_config.source)

        logger.debug(f"Searching {self.metadata.name} with query: '{keyword}'")

        try:
            api = self.api
            all_results: List[SearchResult] = []
            page = 1
            has_next = True

            while has_next:
                page_data = await api.search_page(keyword, page)
                has_next, page_results = self.parser.parse_search_page(page_data)

                logger.debug(f"Found {len(page_results)} results on page {page}")
                all_results.extend(page_results)
                page += 1

            logger.info(f"Found {len(all_results)} anime results for query: '{keyword}' ({page - 1} pages)")
            return all_results

        except AniStreamError:
            raise
        except Exception as e:
            raise PluginError(f"Search failed for query '{keyword}': {e}", plugin_name=self.metadata.name) from e

    async def find_episodes(self, anime_id: str) -> List[EpisodeDetails]:
        """
        Get episodes for a specific anime.

        Args:
            anime_id: Upstream anime identifier

        Returns:
            Every upstream episode, in upstream order

        Raises:
            NetworkError: If the info request fails
        """
        if not anime_id:
            raise PluginError("Anime ID cannot be empty", plugin_name=self.metadata.name)

        try:
            info_data = await self.api.get_info(anime_id)
            episodes = self.parser.parse_episodes(info_data)

            logger.info(f"Found {len(episodes)} episodes for anime: {anime_id}")
            return episodes

        except AniStreamError:
            raise
        except Exception as e:
            raise PluginError(f"Failed to get episodes for '{anime_id}': {e}", plugin_name=self.metadata.name) from e

    async def find_episode_server(self, episode: EpisodeDetails, server: str = DEFAULT_SERVER) -> EpisodeServer:
        """
        Resolve playable video sources for an episode.

        Args:
            episode: Episode to resolve
            server: Requested server, or "default"

        Returns:
            Episode server descriptor

        Raises:
            NetworkError: If the watch or playlist request fails
            ResolutionError: If no HLS master playlist is listed
        """
        try:
            return await self.resolver.resolve_server(episode, server)

        except AniStreamError:
            raise
        except Exception as e:
            raise PluginError(
                f"Failed to resolve episode server for '{episode.id}': {e}",
                plugin_name=self.metadata.name
            ) from e

    def __str__(self) -> str:
        return f"Zoro Plugin v{self.metadata.version}"

    def __repr__(self) -> str:
        return f"ZoroPlugin(base_url='{self.base_url}', source='{self.plugin_config.source}')"


# Export plugin class and metadata
default_config = get_default_config()
__all__ = ["ZoroPlugin", "plugin_metadata", "default_config"]
