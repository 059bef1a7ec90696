"""
Zoro API Client

This module handles all HTTP interactions with the consumet-style API
serving the zoro source, plus retrieval of raw HLS manifests.
Requests are issued once; retry policy belongs to the host's transport.
"""

import logging
from typing import Dict, Any

import aiohttp

from anistream.core.exceptions import NetworkError

from .utils import build_search_url, build_info_url, build_watch_url


logger = logging.getLogger(__name__)


class ZoroAPI:
    """Client for interacting with the zoro API endpoints."""

    def __init__(self, session: aiohttp.ClientSession, api_url: str, source: str = "zoro"):
        """
        Initialize Zoro API client.

        Args:
            session: aiohttp session for making requests
            api_url: Base URL of the API
            source: Provider segment in API paths
        """
        self.session = session
        self.api_url = api_url
        self.source = source

    async def _fetch(self, url: str, failure: str, as_json: bool = True) -> Any:
        """
        Issue a single GET request.

        Args:
            url: Absolute URL to request
            failure: Message prefix used when the request fails
            as_json: Decode the body as JSON instead of text

        Returns:
            Decoded JSON payload or response text

        Raises:
            NetworkError: On transport failure or non-success status
        """
        logger.debug(f"GET {url}")

        try:
            async with self.session.get(url) as response:
                if response.status >= 400:
                    error_text = await response.text()
                    raise NetworkError(
                        f"{failure}: {response.status} {response.reason or ''}".rstrip(),
                        url=url,
                        status_code=response.status,
                        details=error_text
                    )

                if as_json:
                    return await response.json(content_type=None)
                return await response.text()

        except aiohttp.ClientError as e:
            raise NetworkError(f"{failure}: {e}", url=url, details=str(e)) from e

    async def search_page(self, query: str, page: int = 1) -> Dict[str, Any]:
        """
        Fetch one page of search results.

        Args:
            query: Normalized search query
            page: 1-based page number

        Returns:
            Raw page payload with ``hasNextPage`` and ``results``

        Raises:
            NetworkError: If the page request fails
        """
        url = build_search_url(self.api_url, self.source, query, page)
        data = await self._fetch(url, f"Search failed (page {page})")
        return data or {}

    async def get_info(self, anime_id: str) -> Dict[str, Any]:
        """
        Get anime information including its episode list.

        Args:
            anime_id: Upstream anime identifier

        Returns:
            Raw info payload

        Raises:
            NetworkError: If the info request fails
        """
        url = build_info_url(self.api_url, self.source, anime_id)
        data = await self._fetch(url, f"Failed to fetch episode info for \"{anime_id}\"")
        logger.debug(f"Retrieved info for anime ID: {anime_id}")
        return data or {}

    async def get_watch(self, episode_id: str) -> Dict[str, Any]:
        """
        Get streaming sources and subtitles for an episode.

        Args:
            episode_id: Upstream episode identifier

        Returns:
            Raw watch payload

        Raises:
            NetworkError: If the watch request fails
        """
        url = build_watch_url(self.api_url, self.source, episode_id)
        data = await self._fetch(url, f"Failed to fetch watch info for \"{episode_id}\"")
        return data or {}

    async def get_playlist(self, playlist_url: str) -> str:
        """
        Fetch an HLS playlist as raw text.

        Raises:
            NetworkError: If the playlist request fails
        """
        return await self._fetch(playlist_url, "Failed to fetch master playlist", as_json=False)

    def __repr__(self) -> str:
        return f"ZoroAPI(api_url='{self.api_url}', source='{self.source}')"


__all__ = ["ZoroAPI"]
