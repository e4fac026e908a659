from __future__ import annotations

import pytest
import structlog

from common_api.api import (
    AppApi,
    CategoryApi,
    OperationLogApi,
    SettingApi,
    SystemApi,
    TaskApi,
)
from common_api.exceptions import ArgumentTypeError, UnsupportedFieldError
from common_api.schemas import OperationLog, Setting, State, SystemInfo, TaskStatus


@pytest.mark.asyncio
async def test_app_state_updates_by_id_and_code(http, backend) -> None:
    api = AppApi(http)

    await api.update_state(1, State.DISABLED)
    await api.update_state_by_code("crm", "NORMAL")

    assert [(r.method, r.url.path) for r in backend.requests] == [
        ("PUT", "/api/app/1/state"),
        ("PUT", "/api/app/code/crm/state"),
    ]
    assert backend.body == "NORMAL"


@pytest.mark.asyncio
async def test_category_criteria_include_entity_and_parent(http, backend) -> None:
    await CategoryApi(http).list(criteria={"entity": "Device", "parent_code": "HW"})

    assert backend.params == {"entity": "Device", "parent_code": "HW"}


@pytest.mark.asyncio
async def test_setting_get_and_update_by_name(http, backend) -> None:
    api = SettingApi(http)
    backend.reply(json={"name": "site.title", "value": "Demo", "readonly": False})
    backend.reply(json="2024-05-01T00:00:00")

    setting = await api.get("site.title")
    timestamp = await api.update("site.title", "Portal")

    assert isinstance(setting, Setting)
    assert setting.readonly is False
    assert timestamp == "2024-05-01T00:00:00"
    assert backend.last.method == "PUT"
    assert backend.path == "/setting/site.title"
    assert backend.body == "Portal"


@pytest.mark.asyncio
async def test_setting_value_must_be_string(http, backend) -> None:
    with pytest.raises(ArgumentTypeError, match="'value'"):
        await SettingApi(http).update("site.size", 10)

    assert backend.requests == []


@pytest.mark.asyncio
async def test_operation_log_list_and_get(http, backend) -> None:
    api = OperationLogApi(http)
    backend.reply(json={"total_count": 0, "content": []})
    backend.reply(json={"id": 9, "action": "LOGIN", "success": True, "latency": 12})

    await api.list(
        criteria={
            "username": "admin",
            "success": True,
            "request_time_start": "2024-01-01T00:00:00",
            "latency_end": 500,
        }
    )
    log = await api.get(9)

    assert backend.requests[0].url.path == "/api/system/operation-log"
    assert dict(backend.requests[0].url.params) == {
        "username": "admin",
        "success": "true",
        "request_time_start": "2024-01-01T00:00:00",
        "latency_end": "500",
    }
    assert isinstance(log, OperationLog)
    assert log.latency == 12


@pytest.mark.asyncio
async def test_operation_log_rejects_latency_as_string(http) -> None:
    with pytest.raises(ArgumentTypeError, match="'criteria.latency_start'"):
        await OperationLogApi(http).list(criteria={"latency_start": "10"})


@pytest.mark.asyncio
async def test_task_status(http, backend) -> None:
    backend.reply(json="RUNNING")

    status = await TaskApi(http).get_status("1234567890123")

    assert status is TaskStatus.RUNNING
    assert backend.path == "/task/1234567890123/status"


@pytest.mark.asyncio
async def test_task_criteria(http, backend) -> None:
    await TaskApi(http).list(criteria={"status": TaskStatus.FAILED, "target_entity": "User"})

    assert backend.params == {"status": "FAILED", "target_entity": "User"}

    with pytest.raises(UnsupportedFieldError):
        await TaskApi(http).list(criteria={"deleted": True})


@pytest.mark.asyncio
async def test_system_info_and_time(http, backend, loading) -> None:
    backend.reply(json={"name": "backend", "version": "2.3.0"})
    backend.reply(json="2024-05-01T12:00:00")

    with structlog.testing.capture_logs() as logs:
        api = SystemApi(http)
        info = await api.get_info()
        now = await api.get_time(show_loading=False)

    assert info == SystemInfo(name="backend", version="2.3.0")
    assert now == "2024-05-01T12:00:00"
    assert [r.url.path for r in backend.requests] == ["/api/system/info", "/api/system/time"]
    assert loading.events == [("show", "Getting data..."), ("clear",), ("clear",)]
    events = [entry["event"] for entry in logs]
    assert "system.info_got" in events
    assert "system.time_got" in events
