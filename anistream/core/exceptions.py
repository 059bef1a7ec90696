"""
Core Exceptions - Custom exception classes for AniStream.

This module defines the exception hierarchy raised by source plugins.
Transport failures, structural resolution failures and unusable input
are kept distinct so the host can present them differently.
"""

from typing import Optional, Any


class AniStreamError(Exception):
    """Base exception class for all AniStream-specific errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        """
        Initialize AniStream error.

        Args:
            message: Human-readable error message
            details: Additional error details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class ConfigurationError(AniStreamError):
    """Raised when a plugin configuration is invalid."""

    def __init__(self, message: str, field_name: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(message, details)
        self.field_name = field_name


class PluginError(AniStreamError):
    """Raised when plugin-related errors occur."""

    def __init__(self, message: str, plugin_name: Optional[str] = None, details: Optional[Any] = None):
        """
        Initialize plugin error.

        Args:
            message: Error description
            plugin_name: Name of the problematic plugin
            details: Additional error context
        """
        super().__init__(message, details)
        self.plugin_name = plugin_name


class NetworkError(AniStreamError):
    """Raised when an upstream request fails or returns a non-success status."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None, details: Optional[Any] = None):
        """
        Initialize network error.

        Args:
            message: Error description
            url: URL that caused the error
            status_code: HTTP status code if applicable
            details: Additional error context
        """
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


class ResolutionError(PluginError):
    """Raised when an upstream response lacks a playable HLS manifest."""

    def __init__(self, message: str, episode_id: Optional[str] = None, plugin_name: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(message, plugin_name, details)
        self.episode_id = episode_id


class SearchError(AniStreamError):
    """Raised when a search cannot be issued."""

    def __init__(self, message: str, query: Optional[str] = None, source: Optional[str] = None, details: Optional[Any] = None):
        """
        Initialize search error.

        Args:
            message: Error description
            query: Search query that caused the error
            source: Source plugin that rejected it
            details: Additional error context
        """
        super().__init__(message, details)
        self.query = query
        self.source = source


# Export all exception classes
__all__ = [
    "AniStreamError",
    "ConfigurationError",
    "PluginError",
    "NetworkError",
    "ResolutionError",
    "SearchError",
]
