from __future__ import annotations

import pytest

import common_api.client as client_module
from common_api import ApiClient, ClientSettings
from common_api.api import CityApi, CurrentUserApi, DeviceInitApi, DictEntryApi, FileApi
from common_api.http import NullLoadingIndicator


def test_every_api_shares_the_transport(http) -> None:
    client = ApiClient(http)

    assert isinstance(client.city, CityApi)
    assert isinstance(client.dict_entry, DictEntryApi)
    assert isinstance(client.current_user, CurrentUserApi)
    assert isinstance(client.file, FileApi)
    assert isinstance(client.device_init, DeviceInitApi)
    assert client.city.http is http
    assert client.verify_code.http is http


@pytest.mark.asyncio
async def test_client_lists_through_the_shared_transport(http, backend) -> None:
    backend.reply(json={"total_count": 0, "content": []})
    client = ApiClient(http)

    page = await client.country.list({"page_size": 5})

    assert page.total_count == 0
    assert backend.path == "/country"
    assert backend.params == {"page_size": "5"}


@pytest.mark.asyncio
async def test_from_settings_configures_logging_on_request(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(
        client_module,
        "configure_logging",
        lambda level, json=False: calls.append((level, json)),
    )
    settings = ClientSettings(base_url="http://backend.test/api", log_level="DEBUG")
    loading = NullLoadingIndicator()

    async with ApiClient.from_settings(settings, loading=loading, setup_logging=True) as client:
        assert client.http.loading is loading
        assert str(client.http.client.base_url) == "http://backend.test/api/"

    assert calls == [("DEBUG", False)]
    assert client.http.client.is_closed


def test_from_settings_leaves_logging_alone_by_default(monkeypatch) -> None:
    monkeypatch.setattr(
        client_module,
        "configure_logging",
        lambda *args, **kwargs: pytest.fail("logging configured"),
    )

    client = ApiClient.from_settings(ClientSettings())

    assert client.http.client.base_url.host == "localhost"
