import asyncio

import aiohttp
import pytest

from anistream.core.exceptions import NetworkError, PluginError
from conftest import API_URL, FakeResponse


INFO_URL = f"{API_URL}/anime/zoro/info?id=frieren-18542"


def test_find_episodes_maps_all_upstream_episodes(make_plugin) -> None:
    plugin, session = make_plugin({
        INFO_URL: FakeResponse(json_data={
            "id": "frieren-18542",
            "title": "Frieren: Beyond Journey's End",
            "episodes": [
                {"id": "frieren-18542$episode$107257", "number": 1, "title": "The Journey's End", "isFiller": False, "isSubbed": True, "isDubbed": True},
                {"id": "frieren-18542$episode$107258", "number": 2, "title": "It Didn't Have to Be Magic...", "isFiller": False, "isSubbed": True, "isDubbed": False},
                {"id": "frieren-18542$episode$107259", "number": 3, "title": "Killing Magic", "isFiller": True},
            ],
        }),
    })

    episodes = asyncio.run(plugin.find_episodes("frieren-18542"))

    assert session.requested == [INFO_URL]
    assert [e.number for e in episodes] == [1, 2, 3]
    assert episodes[2].title == "Killing Magic"
    assert episodes[0].url == f"{API_URL}/anime/zoro/watch/frieren-18542$episode$107257"


def test_find_episodes_failure_names_id_and_status(make_plugin) -> None:
    plugin, _ = make_plugin({INFO_URL: FakeResponse(status=500, reason="Internal Server Error")})

    with pytest.raises(NetworkError) as exc_info:
        asyncio.run(plugin.find_episodes("frieren-18542"))

    assert exc_info.value.status_code == 500
    assert "frieren-18542" in str(exc_info.value)


def test_find_episodes_without_episode_list(make_plugin) -> None:
    plugin, _ = make_plugin({INFO_URL: FakeResponse(json_data={"id": "frieren-18542"})})

    assert asyncio.run(plugin.find_episodes("frieren-18542")) == []


def test_find_episodes_wraps_malformed_payload(make_plugin) -> None:
    plugin, _ = make_plugin({INFO_URL: FakeResponse(json_data={"episodes": [{"title": "no id"}]})})

    with pytest.raises(PluginError):
        asyncio.run(plugin.find_episodes("frieren-18542"))


def test_find_episodes_connection_failure_keeps_url(make_plugin) -> None:
    plugin, _ = make_plugin({INFO_URL: aiohttp.ClientConnectionError("connection refused")})

    with pytest.raises(NetworkError) as exc_info:
        asyncio.run(plugin.find_episodes("frieren-18542"))

    assert exc_info.value.url == INFO_URL
    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)
