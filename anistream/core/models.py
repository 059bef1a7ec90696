"""
Core Data Models - Pydantic models for type safety and validation.

This module defines the data structures exchanged between source plugins
and the host catalog: search results, episodes, manifest entries, variant
streams, subtitle tracks and the final episode server descriptor.

Field names are snake_case; host-facing models serialize to the host's
camelCase shape with ``model_dump(by_alias=True)``.
"""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field


class SubOrDub(str, Enum):
    """Audio/caption availability of an anime."""

    SUB = "sub"
    DUB = "dub"
    BOTH = "both"

    @classmethod
    def from_counts(cls, sub: int, dub: int) -> "SubOrDub":
        """Derive availability from upstream subbed/dubbed episode counts."""
        if sub > 0 and dub > 0:
            return cls.BOTH
        elif dub > 0:
            return cls.DUB
        else:
            return cls.SUB

    def __str__(self) -> str:
        return self.value


class SearchOptions(BaseModel):
    """Search request issued by the host."""

    query: str = Field(..., description="Free-text search query")


class SearchResult(BaseModel):
    """
    Represents an anime search result from a plugin source.

    The URL points at the source's info endpoint for this anime.
    """

    id: str = Field(..., min_length=1, description="Upstream anime identifier")
    title: str = Field(..., description="Anime title")
    url: str = Field(..., description="Info endpoint URL for the anime")
    sub_or_dub: SubOrDub = Field(
        SubOrDub.SUB, serialization_alias="subOrDub", description="Sub/dub availability"
    )

    def __str__(self) -> str:
        return f"{self.title} ({self.sub_or_dub})"

    def __repr__(self) -> str:
        return f"SearchResult(id='{self.id}', title='{self.title}')"


class EpisodeDetails(BaseModel):
    """Represents an individual episode of an anime."""

    id: str = Field(..., min_length=1, description="Upstream episode identifier")
    number: int = Field(..., description="Episode number")
    url: str = Field(..., description="Watch endpoint URL for the episode")
    title: str = Field("", description="Episode title")

    def __str__(self) -> str:
        return f"Episode {self.number}: {self.title}"

    def __repr__(self) -> str:
        return f"EpisodeDetails(id='{self.id}', number={self.number})"


class ManifestEntry(BaseModel):
    """Upstream source descriptor from a watch response."""

    url: str = Field(..., description="Source URL")
    is_hls: bool = Field(False, description="Whether the source is an HLS master playlist")
    media_type: str = Field("", description="Upstream media type label")


class UpstreamSubtitle(BaseModel):
    """Subtitle entry as listed in a watch response."""

    url: str
    lang: str = ""


class WatchResponse(BaseModel):
    """Decoded watch endpoint payload."""

    sources: List[ManifestEntry] = Field(default_factory=list)
    subtitles: List[UpstreamSubtitle] = Field(default_factory=list)


class VariantStream(BaseModel):
    """One resolution rendition parsed from a master playlist."""

    resolution_label: str = Field(..., description="Quality label such as 720p")
    relative_uri: str = Field(..., description="Variant playlist URI as written in the manifest")


class SubtitleTrack(BaseModel):
    """Subtitle track attached to a video source."""

    id: str
    url: str
    language: str
    is_default: bool = Field(False, serialization_alias="isDefault")

    @classmethod
    def is_default_language(cls, language: str) -> bool:
        """English tracks are selected by default."""
        return "english" in language.lower()


class VideoSource(BaseModel):
    """A playable stream for one quality."""

    url: str = Field(..., description="Absolute variant playlist URL")
    type: str = Field("m3u8", description="Stream container type")
    quality: str = Field(..., description="Quality label such as 720p")
    subtitles: List[SubtitleTrack] = Field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.quality} ({self.type})"


class EpisodeServer(BaseModel):
    """
    Normalized playable-source descriptor for an episode.

    Returned even when no variant could be parsed from the manifest.
    """

    server: str = Field(..., description="Descriptive server label")
    headers: Dict[str, str] = Field(default_factory=dict, description="Headers required for playback")
    video_sources: List[VideoSource] = Field(
        default_factory=list, serialization_alias="videoSources"
    )

    @property
    def qualities(self) -> List[str]:
        """Quality labels in playlist order."""
        return [source.quality for source in self.video_sources]

    def __repr__(self) -> str:
        return f"EpisodeServer(server='{self.server}', sources={len(self.video_sources)})"


class ProviderSettings(BaseModel):
    """Static capabilities declared by a provider."""

    episode_servers: List[str] = Field(default_factory=list, serialization_alias="episodeServers")
    supports_dub: bool = Field(False, serialization_alias="supportsDub")


# Type aliases for better code readability
SearchResultList = List[SearchResult]
EpisodeList = List[EpisodeDetails]

# Export all models and types
__all__ = [
    "SubOrDub",
    "SearchOptions",
    "SearchResult",
    "EpisodeDetails",
    "ManifestEntry",
    "UpstreamSubtitle",
    "WatchResponse",
    "VariantStream",
    "SubtitleTrack",
    "VideoSource",
    "EpisodeServer",
    "ProviderSettings",
    "SearchResultList",
    "EpisodeList",
]
