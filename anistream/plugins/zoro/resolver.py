"""
Zoro Manifest Resolver

This module turns an episode into a playable episode server: it fetches
the watch metadata, selects the HLS master playlist, parses its variants
and attaches the episode's subtitle tracks to each of them.
"""

import logging
from typing import List

from anistream.core.models import EpisodeDetails, EpisodeServer, VideoSource
from anistream.core.utils import url_directory

from .api import ZoroAPI
from .parser import ZoroParser, parse_master_playlist


logger = logging.getLogger(__name__)


DEFAULT_SERVER = "default"


class ManifestResolver:
    """Resolves episodes to HLS video sources."""

    def __init__(self, api: ZoroAPI, parser: ZoroParser, default_server: str = "zoro"):
        """
        Initialize resolver.

        Args:
            api: API client used for watch and playlist requests
            parser: Parser for upstream payloads
            default_server: Label reported when the host asks for "default"
        """
        self.api = api
        self.parser = parser
        self.default_server = default_server

    def server_label(self, server: str) -> str:
        """Map a requested server to the label reported on the result."""
        return self.default_server if server == DEFAULT_SERVER else server

    async def resolve_server(self, episode: EpisodeDetails, server: str = DEFAULT_SERVER) -> EpisodeServer:
        """
        Resolve playable sources for an episode.

        The server argument only labels the result; the upstream exposes
        a single backend.

        Args:
            episode: Episode to resolve
            server: Requested server, or "default"

        Returns:
            Episode server, possibly without video sources when the
            playlist lists no usable variant

        Raises:
            NetworkError: If the watch or playlist request fails
            ResolutionError: If the watch response lists no HLS source
        """
        server_name = self.server_label(server)

        watch_data = await self.api.get_watch(episode.id)
        watch = self.parser.parse_watch(watch_data)

        master = self.parser.select_master_source(watch, episode.id)
        logger.debug(f"Master playlist for {episode.id}: {master.url}")

        playlist_text = await self.api.get_playlist(master.url)
        base_url = url_directory(master.url)

        variants = parse_master_playlist(playlist_text)

        video_sources: List[VideoSource] = [
            VideoSource(
                url=base_url + variant.relative_uri,
                type="m3u8",
                quality=variant.resolution_label,
                subtitles=self.parser.build_subtitles(episode.id, watch.subtitles),
            )
            for variant in variants
        ]

        if not video_sources:
            logger.warning(f"No playable variants in master playlist for episode {episode.id}")
        else:
            logger.info(
                f"Resolved {len(video_sources)} sources for episode {episode.id} "
                f"({', '.join(source.quality for source in video_sources)})"
            )

        return EpisodeServer(server=server_name, headers={}, video_sources=video_sources)


__all__ = ["ManifestResolver", "DEFAULT_SERVER"]
