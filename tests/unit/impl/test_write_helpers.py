from __future__ import annotations

import pytest

from common_api.api import CityApi
from common_api.exceptions import ArgumentTypeError
from common_api.impl import (
    add_impl,
    batch_delete_impl,
    batch_erase_impl,
    batch_purge_impl,
    batch_restore_impl,
    delete_by_parent_and_key_impl,
    delete_impl,
    erase_all_impl,
    erase_impl,
    purge_all_impl,
    purge_impl,
    restore_all_impl,
    restore_by_key_impl,
    restore_impl,
    update_by_key_impl,
    update_by_parent_and_key_impl,
    update_impl,
    update_property_impl,
)
from common_api.schemas import City, Info, State


@pytest.fixture
def api(http) -> CityApi:
    return CityApi(http)


@pytest.mark.asyncio
async def test_add_posts_entity_without_none_fields(api, backend, loading) -> None:
    backend.reply(json={"id": 8, "name": "Ningbo", "create_time": "2024-03-01T08:00:00"})

    city = await add_impl(api, "/city", City(name="Ningbo", province=Info(id=33)), True)

    assert backend.last.method == "POST"
    assert backend.body == {"name": "Ningbo", "province": {"id": 33}}
    assert city.id == 8
    assert city.create_time.year == 2024
    assert loading.events[0] == ("show", "Adding data...")


@pytest.mark.asyncio
async def test_add_rejects_other_entity_types(api, backend) -> None:
    with pytest.raises(ArgumentTypeError, match="'entity'"):
        await add_impl(api, "/city", ["Ningbo"], True)

    assert backend.requests == []


@pytest.mark.asyncio
async def test_update_puts_to_id_url(api, backend, loading) -> None:
    backend.reply(json={"id": 8, "name": "Ningbo City"})

    city = await update_impl(api, "/city/{id}", {"id": 8, "name": "Ningbo City"}, True)

    assert backend.last.method == "PUT"
    assert backend.path == "/city/8"
    assert backend.body == {"id": 8, "name": "Ningbo City"}
    assert city.name == "Ningbo City"
    assert loading.events[0] == ("show", "Updating data...")


@pytest.mark.asyncio
async def test_update_requires_id(api, backend) -> None:
    with pytest.raises(ArgumentTypeError, match="'entity.id'"):
        await update_impl(api, "/city/{id}", City(name="Ningbo"), True)

    assert backend.requests == []


@pytest.mark.asyncio
async def test_update_by_key_requires_string_key(api) -> None:
    with pytest.raises(ArgumentTypeError, match="'entity.code'"):
        await update_by_key_impl(api, "/city/code/{code}", "code", {"name": "x"}, True)


@pytest.mark.asyncio
async def test_update_by_key_and_by_parent_and_key(api, backend) -> None:
    await update_by_key_impl(api, "/city/code/{code}", "code", {"code": "NB"}, False)
    assert backend.path == "/city/code/NB"

    await update_by_parent_and_key_impl(
        api,
        "/province/{province_id}/city/code/{code}",
        "province_id",
        33,
        "code",
        City(code="NB", name="Ningbo"),
        False,
    )
    assert backend.path == "/province/33/city/code/NB"
    assert backend.body == {"code": "NB", "name": "Ningbo"}


@pytest.mark.asyncio
async def test_update_property_sends_bare_value(api, backend) -> None:
    backend.reply(json="2024-03-02T10:00:00")

    timestamp = await update_property_impl(
        api, "/city/{id}/state", 8, "state", (State, str), State.LOCKED, True
    )

    assert backend.path == "/city/8/state"
    assert backend.body == "LOCKED"
    assert timestamp == "2024-03-02T10:00:00"


@pytest.mark.asyncio
async def test_update_property_checks_value_type(api, backend) -> None:
    with pytest.raises(ArgumentTypeError, match="'state'"):
        await update_property_impl(api, "/city/{id}/state", 8, "state", (State, str), 3, True)

    assert backend.requests == []


@pytest.mark.asyncio
async def test_delete_returns_timestamp(api, backend, loading) -> None:
    backend.reply(json="2024-03-03T00:00:00")

    timestamp = await delete_impl(api, "/city/{id}", 8, True)

    assert backend.last.method == "DELETE"
    assert timestamp == "2024-03-03T00:00:00"
    assert loading.events == [("show", "Deleting data..."), ("clear",)]


@pytest.mark.asyncio
async def test_delete_by_parent_and_key(api, backend) -> None:
    await delete_by_parent_and_key_impl(
        api, "/dict/{dict_id}/entry/code/{code}", "dict_id", 3, "code", "M", False
    )

    assert backend.path == "/dict/3/entry/code/M"


@pytest.mark.asyncio
async def test_restore_uses_patch(api, backend, loading) -> None:
    await restore_impl(api, "/city/{id}", 8, True)
    await restore_by_key_impl(api, "/city/code/{code}", "code", "NB", False)

    assert [request.method for request in backend.requests] == ["PATCH", "PATCH"]
    assert backend.path == "/city/code/NB"
    assert loading.events[0] == ("show", "Restoring data...")


@pytest.mark.asyncio
async def test_erase_and_purge_single_entities(api, backend, loading) -> None:
    await erase_impl(api, "/city/{id}/erase", 8, True)
    await purge_impl(api, "/city/{id}/purge", 9, True)

    assert [request.url.path for request in backend.requests] == [
        "/api/city/8/erase",
        "/api/city/9/purge",
    ]
    assert ("show", "Erasing data...") in loading.events
    assert ("show", "Purging data...") in loading.events


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("helper", "method", "url"),
    [
        (batch_delete_impl, "DELETE", "/city/batch"),
        (batch_restore_impl, "PATCH", "/city/batch"),
        (batch_purge_impl, "DELETE", "/city/batch/purge"),
        (batch_erase_impl, "DELETE", "/city/batch/erase"),
    ],
)
async def test_batch_operations_send_ids_and_return_count(
    api, backend, helper, method, url
) -> None:
    backend.reply(json=2)

    count = await helper(api, url, [1, "2"], True)

    assert count == 2
    assert backend.last.method == method
    assert backend.path == url
    assert backend.body == [1, "2"]


@pytest.mark.asyncio
async def test_batch_operations_check_ids(api, backend) -> None:
    with pytest.raises(ArgumentTypeError, match=r"'ids\[0\]'"):
        await batch_delete_impl(api, "/city/batch", [None], True)

    assert backend.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("helper", "method", "url"),
    [
        (purge_all_impl, "DELETE", "/city/purge"),
        (restore_all_impl, "PATCH", "/city/restore"),
        (erase_all_impl, "DELETE", "/city/erase"),
    ],
)
async def test_all_operations_return_count(api, backend, helper, method, url) -> None:
    backend.reply(json=5)

    assert await helper(api, url, False) == 5
    assert backend.last.method == method
    assert backend.last.content == b""
