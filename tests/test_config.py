import asyncio

import pytest

from anistream.core.exceptions import ConfigurationError
from anistream.plugins.zoro import ZoroPlugin, get_default_config, validate_config
from anistream.plugins.zoro.config import DEFAULT_API_URL, merge_with_defaults


def test_default_config() -> None:
    config = get_default_config()

    assert config["api_url"] == DEFAULT_API_URL
    assert config["source"] == "zoro"
    assert config["episode_servers"] == ["server1", "server2"]
    assert config["timeout"] is None


def test_merge_overrides_defaults_only_where_given() -> None:
    merged = merge_with_defaults({"supports_dub": False})

    assert merged["supports_dub"] is False
    assert merged["default_server"] == "zoro"


def test_api_url_trailing_slash_is_stripped() -> None:
    assert validate_config({"api_url": "https://api.test/"}).api_url == "https://api.test"


@pytest.mark.parametrize(
    "config, field_name",
    [
        ({"api_url": "ftp://nope"}, "api_url"),
        ({"episode_servers": []}, "episode_servers"),
        ({"timeout": 0}, "timeout"),
        ({"source": "  "}, "source"),
    ],
)
def test_invalid_config_raises_configuration_error(config, field_name) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        ZoroPlugin(config)

    assert exc_info.value.field_name == field_name


def test_get_settings_declares_capabilities(make_plugin) -> None:
    plugin, _ = make_plugin({})

    settings = plugin.get_settings()

    assert settings.episode_servers == ["server1", "server2"]
    assert settings.supports_dub is True
    assert settings.model_dump(by_alias=True) == {"episodeServers": ["server1", "server2"], "supportsDub": True}
    assert plugin.metadata.name == "Zoro"
    assert plugin.metadata.website == DEFAULT_API_URL


def test_cleanup_closes_session(make_plugin) -> None:
    plugin, session = make_plugin({})

    async def _use_and_close():
        async with plugin:
            pass

    asyncio.run(_use_and_close())

    assert session.closed is True

