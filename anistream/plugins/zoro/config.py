"""
Zoro Plugin Configuration

This module handles configuration validation and defaults for the Zoro plugin.
"""

import logging
from typing import Dict, Any, List, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator

from anistream.core.exceptions import ConfigurationError


logger = logging.getLogger(__name__)


DEFAULT_API_URL = "https://d2dd7450351ba6fb.vercel.app"


class ZoroConfig(BaseModel):
    """Configuration model for Zoro plugin."""

    # Upstream API
    api_url: str = Field(default=DEFAULT_API_URL, description="Base URL of the consumet-style API")
    source: str = Field(default="zoro", description="Provider segment in API paths")

    # Capabilities
    default_server: str = Field(default="zoro", description="Server label used when 'default' is requested")
    episode_servers: List[str] = Field(
        default_factory=lambda: ["server1", "server2"],
        description="Episode servers advertised to the host"
    )
    supports_dub: bool = Field(default=True, description="Whether dubbed titles are offered")

    # Transport
    timeout: Optional[int] = Field(default=None, ge=1, description="Total request timeout in seconds (None disables)")
    user_agent: str = Field(
        default="AniStream/0.1.0 (https://github.com/anistream/anistream)",
        description="User agent string for requests"
    )

    @field_validator('api_url')
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        v = v.strip().rstrip('/')
        if not v.startswith(('http://', 'https://')):
            raise ValueError("API URL must start with http:// or https://")
        return v

    @field_validator('source', 'default_server')
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Value cannot be empty")
        return v.strip()

    @field_validator('episode_servers')
    @classmethod
    def validate_episode_servers(cls, v: List[str]) -> List[str]:
        servers = [server.strip() for server in v if server and server.strip()]
        if not servers:
            raise ValueError("At least one episode server is required")
        return servers


def get_default_config() -> Dict[str, Any]:
    """Get default configuration for Zoro plugin."""
    return ZoroConfig().model_dump()


def merge_with_defaults(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge provided config with defaults.

    Args:
        config: User configuration dictionary

    Returns:
        Merged configuration dictionary
    """
    merged = get_default_config()

    if config:
        merged.update(config)

    return merged


def validate_config(config: Dict[str, Any]) -> ZoroConfig:
    """
    Validate and create ZoroConfig from dictionary.

    Args:
        config: Configuration dictionary

    Returns:
        Validated ZoroConfig instance

    Raises:
        ConfigurationError: If configuration is invalid
    """
    try:
        return ZoroConfig(**config)
    except ValidationError as e:
        logger.error(f"Invalid Zoro configuration: {e}")
        field_name = None
        errors = e.errors()
        if errors and errors[0].get("loc"):
            field_name = str(errors[0]["loc"][0])
        raise ConfigurationError(
            f"Invalid Zoro configuration: {e}",
            field_name=field_name,
            details=errors
        ) from e


# Export configuration utilities
__all__ = [
    "ZoroConfig",
    "DEFAULT_API_URL",
    "get_default_config",
    "merge_with_defaults",
    "validate_config",
]
