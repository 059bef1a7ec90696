"""
Zoro Utilities - Helper functions specific to the zoro API source

This module provides query normalization and endpoint URL builders
for the Zoro plugin.
"""

import re
from urllib.parse import quote


# Characters left unescaped in path segments, same set as encodeURIComponent.
_SEGMENT_SAFE = "!~*'()"

_ORDINAL_SUFFIX = re.compile(r'\b(\d+)(st|nd|rd|th)\b')
_WHITESPACE = re.compile(r'\s+')
_NUMBER_THEN_SEASON = re.compile(r'(\d+)\s*Season', re.IGNORECASE)
_SEASON_THEN_NUMBER = re.compile(r'Season\s*(\d+)', re.IGNORECASE)


def normalize_query(query: str) -> str:
    """
    Normalize a free-text search query for the zoro search endpoint.

    Ordinal suffixes are stripped ("3rd" -> "3"), whitespace runs are
    collapsed, and the word "Season" next to a number is dropped, so
    "3rd Season" and "Season 3" both become "3". Each season pattern
    is replaced at most once.

    Args:
        query: Raw query string

    Returns:
        Normalized query
    """
    if not query:
        return ""

    query = _ORDINAL_SUFFIX.sub(r'\1', query)
    query = _WHITESPACE.sub(' ', query)
    query = _NUMBER_THEN_SEASON.sub(r'\1', query, count=1)
    query = _SEASON_THEN_NUMBER.sub(r'\1', query, count=1)

    return query.strip()


def encode_segment(value: str) -> str:
    """Percent-encode a value for use as a single URL path segment."""
    return quote(value, safe=_SEGMENT_SAFE)


def build_search_url(api_url: str, source: str, query: str, page: int = 1) -> str:
    """
    Build search URL for one result page.

    Args:
        api_url: Base URL of the API
        source: Provider segment
        query: Normalized search query
        page: 1-based page number

    Returns:
        Complete search URL
    """
    return f"{api_url}/anime/{source}/{encode_segment(query)}?page={page}"


def build_info_url(api_url: str, source: str, anime_id: str) -> str:
    """Build the info endpoint URL for an anime."""
    return f"{api_url}/anime/{source}/info?id={anime_id}"


def build_watch_url(api_url: str, source: str, episode_id: str, encode: bool = True) -> str:
    """
    Build the watch endpoint URL for an episode.

    The episode URL handed to the host keeps the raw id; the URL actually
    requested encodes it.
    """
    episode_segment = encode_segment(episode_id) if encode else episode_id
    return f"{api_url}/anime/{source}/watch/{episode_segment}"


__all__ = [
    "normalize_query",
    "encode_segment",
    "build_search_url",
    "build_info_url",
    "build_watch_url",
]
