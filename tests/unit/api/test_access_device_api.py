from __future__ import annotations

from datetime import datetime

import pytest

from common_api.api import (
    DeviceApi,
    DeviceInitApi,
    RoleApi,
    SocialNetworkAccountApi,
    UserRoleApi,
)
from common_api.exceptions import ArgumentTypeError, UnsupportedFieldError
from common_api.schemas import Device, SocialNetwork, SocialNetworkAccount, State


@pytest.mark.asyncio
async def test_role_list_and_state(http, backend) -> None:
    api = RoleApi(http)

    await api.list(criteria={"app_code": "crm", "guest": False})
    await api.update_state(4, State.NORMAL)

    assert dict(backend.requests[0].url.params) == {"app_code": "crm", "guest": "false"}
    assert backend.path == "/role/4/state"


@pytest.mark.asyncio
async def test_user_role_assignments(http, backend) -> None:
    api = UserRoleApi(http)
    backend.reply(json={"id": 1, "user": {"id": 2}, "role": {"id": 3}})

    assignment = await api.add({"user": {"id": 2}, "role": {"id": 3}})
    await api.erase(1)

    assert assignment.role.id == 3
    assert backend.path == "/user-role/1/erase"

    with pytest.raises(UnsupportedFieldError):
        await api.list(criteria={"deleted": True})


@pytest.mark.asyncio
async def test_social_network_account_by_open_id(http, backend) -> None:
    api = SocialNetworkAccountApi(http)
    backend.reply(json={"id": 5, "social_network": "WECHAT", "app_id": "wx", "open_id": "o/1"})

    account = await api.get_by_open_id(SocialNetwork.WECHAT, "wx", "o/1")

    assert account.social_network is SocialNetwork.WECHAT
    assert backend.last.url.raw_path == b"/api/social-network-account/open-id/WECHAT/wx/o%2F1"


@pytest.mark.asyncio
async def test_social_network_account_update_by_open_id(http, backend) -> None:
    entity = SocialNetworkAccount(
        social_network=SocialNetwork.DINGTALK, app_id="ding", open_id="o-9", nickname="Li"
    )

    await SocialNetworkAccountApi(http).update_by_open_id(entity)

    assert backend.last.method == "PUT"
    assert backend.path == "/social-network-account/open-id/DINGTALK/ding/o-9"
    assert backend.body["nickname"] == "Li"


@pytest.mark.asyncio
async def test_social_network_account_update_requires_app_id(http, backend) -> None:
    with pytest.raises(ArgumentTypeError, match="'entity.app_id'"):
        await SocialNetworkAccountApi(http).update_by_open_id(
            {"social_network": "QQ", "open_id": "o-1"}
        )

    assert backend.requests == []


@pytest.mark.asyncio
async def test_device_inventory_updates(http, backend) -> None:
    api = DeviceApi(http)

    await api.update_hardware(1, {"cpu": "x86"})
    await api.update_operating_system(1, {"name": "Linux"})
    await api.update_softwares(1, [{"name": "agent", "version": "1.2"}])
    await api.update_deploy_address(1, {"detail": "Room 101"})
    await api.update_location(1, {"latitude": 30.2, "longitude": 120.1})
    await api.update_ip_address(1, "10.0.0.8")
    await api.update_owner(1, {"id": 2})
    await api.update_last_startup_time(1, datetime(2024, 7, 1, 8, 0))
    await api.update_last_heartbeat_time(1, "2024-07-01T09:00:00")

    assert [r.url.path.rsplit("/", 1)[-1] for r in backend.requests] == [
        "hardware",
        "operating-system",
        "softwares",
        "deploy-address",
        "location",
        "ip-address",
        "owner",
        "last-startup-time",
        "last-heartbeat-time",
    ]
    assert backend.body == "2024-07-01T09:00:00"


@pytest.mark.asyncio
async def test_device_startup_time_is_serialized(http, backend) -> None:
    await DeviceApi(http).update_last_startup_time(1, datetime(2024, 7, 1, 8, 0))

    assert backend.body == "2024-07-01T08:00:00"


@pytest.mark.asyncio
async def test_device_property_types_are_checked(http, backend) -> None:
    api = DeviceApi(http)

    with pytest.raises(ArgumentTypeError, match="'softwares'"):
        await api.update_softwares(1, {"name": "agent"})
    with pytest.raises(ArgumentTypeError, match="'ip_address'"):
        await api.update_ip_address(1, 167772168)

    assert backend.requests == []


@pytest.mark.asyncio
async def test_role_export_and_import(http, backend) -> None:
    backend.reply(content=b"id,name\n1,admin\n")
    backend.reply(json=3)

    result = await RoleApi(http).export_csv({"app_code": "crm"})
    count = await UserRoleApi(http).import_json(b"[]")

    assert result.filename == "role.csv"
    assert [(r.method, r.url.path) for r in backend.requests] == [
        ("GET", "/api/role/export/csv"),
        ("POST", "/api/user-role/import/json"),
    ]
    assert dict(backend.requests[0].url.params) == {"app_code": "crm"}
    assert count == 3


@pytest.mark.asyncio
async def test_device_init_register(http, backend, loading) -> None:
    await DeviceInitApi(http).register(Device(code="D-01", name="Gate"))

    assert backend.last.method == "POST"
    assert backend.path == "/device/register"
    assert backend.body == {"code": "D-01", "name": "Gate"}
    assert loading.events == [("show", "Registering the device..."), ("clear",)]


@pytest.mark.asyncio
async def test_device_init_unregister_and_unbound_send_the_code(http, backend) -> None:
    api = DeviceInitApi(http)

    await api.unregister("D-01")
    unregister_body = backend.body
    await api.unbound("D-01", show_loading=False)

    assert [(r.method, r.url.path) for r in backend.requests] == [
        ("PUT", "/api/device/unregister"),
        ("PUT", "/api/device/unbound"),
    ]
    assert unregister_body == "D-01"
    assert backend.body == "D-01"


@pytest.mark.asyncio
async def test_device_init_checks_arguments(http, backend) -> None:
    api = DeviceInitApi(http)

    with pytest.raises(ArgumentTypeError, match="'device'"):
        await api.register("D-01")
    with pytest.raises(ArgumentTypeError, match="'code'"):
        await api.unregister(1)

    assert backend.requests == []
