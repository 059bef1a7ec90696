"""
Zoro Data Parser

This module maps zoro API payloads into AniStream models and parses
HLS master playlists into resolution-tagged variant streams.
"""

import logging
import re
from typing import Dict, List, Any, Tuple

from anistream.core.exceptions import ResolutionError
from anistream.core.models import (
    EpisodeDetails,
    ManifestEntry,
    SearchResult,
    SubOrDub,
    SubtitleTrack,
    UpstreamSubtitle,
    VariantStream,
    WatchResponse,
)

from .utils import build_info_url, build_watch_url


logger = logging.getLogger(__name__)


STREAM_INF_TAG = "#EXT-X-STREAM-INF:"
RESOLUTION_PATTERN = re.compile(r'RESOLUTION=(\d+)x(\d+)')


def parse_master_playlist(playlist_text: str) -> List[VariantStream]:
    """
    Parse an HLS master playlist into variant streams.

    Each ``#EXT-X-STREAM-INF`` line carrying a ``RESOLUTION=WxH`` attribute
    expects its URI on the very next line. Tags without a resolution, and
    tags whose next line is missing, blank or another ``#`` line, are
    skipped rather than treated as errors.

    Args:
        playlist_text: Raw master playlist

    Returns:
        Variants in playlist order
    """
    variants: List[VariantStream] = []
    pending_label = None

    for line in playlist_text.splitlines():
        if pending_label is not None:
            uri = line.strip()
            if uri and not uri.startswith("#"):
                variants.append(VariantStream(resolution_label=pending_label, relative_uri=uri))
            else:
                logger.warning(f"Skipping {pending_label} variant without a URI line")
            pending_label = None

        if line.startswith(STREAM_INF_TAG):
            match = RESOLUTION_PATTERN.search(line)
            if match:
                pending_label = f"{match.group(2)}p"
            else:
                logger.debug(f"Skipping stream without resolution: {line}")

    if pending_label is not None:
        logger.warning(f"Skipping {pending_label} variant at end of playlist")

    return variants


class ZoroParser:
    """Parser for zoro API responses."""

    def __init__(self, api_url: str, source: str = "zoro"):
        """
        Initialize parser.

        Args:
            api_url: Base URL for constructing endpoint URLs
            source: Provider segment in API paths
        """
        self.api_url = api_url
        self.source = source

    def parse_search_page(self, page_data: Dict[str, Any]) -> Tuple[bool, List[SearchResult]]:
        """
        Parse one page of search results.

        Args:
            page_data: Raw page payload

        Returns:
            Tuple of (has next page, parsed results)
        """
        has_next_page = bool(page_data.get("hasNextPage", False))

        results = []
        for item in page_data.get("results") or []:
            anime_id = str(item["id"])
            results.append(SearchResult(
                id=anime_id,
                title=item.get("title") or "",
                url=build_info_url(self.api_url, self.source, anime_id),
                sub_or_dub=SubOrDub.from_counts(
                    int(item.get("sub") or 0),
                    int(item.get("dub") or 0),
                ),
            ))

        return has_next_page, results

    def parse_episodes(self, info_data: Dict[str, Any]) -> List[EpisodeDetails]:
        """
        Parse the episode list from an info payload.

        Filler and sub/dub flags are not carried over.

        Args:
            info_data: Raw info payload

        Returns:
            Episodes in upstream order
        """
        episodes = []

        for episode in info_data.get("episodes") or []:
            episode_id = str(episode["id"])
            episodes.append(EpisodeDetails(
                id=episode_id,
                number=episode["number"],
                url=build_watch_url(self.api_url, self.source, episode_id, encode=False),
                title=episode.get("title") or "",
            ))

        logger.debug(f"Parsed {len(episodes)} episodes")
        return episodes

    def parse_watch(self, watch_data: Dict[str, Any]) -> WatchResponse:
        """
        Parse the sources and subtitles of a watch payload.

        Other fields, such as intro/outro skip markers, are not read.

        Args:
            watch_data: Raw watch payload

        Returns:
            Decoded watch response
        """
        sources = [
            ManifestEntry(
                url=source["url"],
                is_hls=bool(source.get("isM3U8", False)),
                media_type=source.get("type") or "",
            )
            for source in watch_data.get("sources") or []
        ]

        subtitles = [
            UpstreamSubtitle(url=subtitle["url"], lang=subtitle.get("lang") or "")
            for subtitle in watch_data.get("subtitles") or []
        ]

        return WatchResponse(
            sources=sources,
            subtitles=subtitles,
        )

    def select_master_source(self, watch: WatchResponse, episode_id: str) -> ManifestEntry:
        """
        Pick the HLS master playlist entry.

        Args:
            watch: Decoded watch response
            episode_id: Episode being resolved, for error context

        Returns:
            First source flagged as HLS

        Raises:
            ResolutionError: If no source is flagged as HLS
        """
        for source in watch.sources:
            if source.is_hls:
                return source

        raise ResolutionError(
            "No HLS master playlist found",
            episode_id=episode_id,
            plugin_name=self.source,
            details=[source.url for source in watch.sources]
        )

    def build_subtitles(self, episode_id: str, subtitles: List[UpstreamSubtitle]) -> List[SubtitleTrack]:
        """
        Map upstream subtitles to tracks with stable per-episode ids.

        Args:
            episode_id: Episode the tracks belong to
            subtitles: Upstream subtitle entries

        Returns:
            Subtitle tracks in upstream order
        """
        return [
            SubtitleTrack(
                id=f"{episode_id}-sub-{index}",
                url=subtitle.url,
                language=subtitle.lang,
                is_default=SubtitleTrack.is_default_language(subtitle.lang),
            )
            for index, subtitle in enumerate(subtitles)
        ]


__all__ = ["ZoroParser", "parse_master_playlist", "STREAM_INF_TAG", "RESOLUTION_PATTERN"]
