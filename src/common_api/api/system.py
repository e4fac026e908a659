"""APIs of the system administration entities and the system endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel

from ..impl import (
    delete_by_parent_and_key_impl,
    erase_by_parent_and_key_impl,
    exists_by_parent_and_key_impl,
    get_by_key_impl,
    get_by_parent_and_key_impl,
    get_info_by_parent_and_key_impl,
    get_property_impl,
    purge_by_parent_and_key_impl,
    restore_by_parent_and_key_impl,
    update_by_parent_and_key_impl,
    update_property_by_key_impl,
)
from ..impl.options import create_entity
from ..schemas.common import Id, Info, InfoWithEntity, State, StatefulInfo
from ..schemas.system import (
    App,
    Category,
    Dict,
    DictEntry,
    DictEntryInfo,
    OperationLog,
    OperationLogInfo,
    Setting,
    SystemInfo,
    TaskInfo,
    TaskStatus,
)
from ..utils.checks import ID_TYPES, check_argument_type, get_field
from .base import (
    AUDIT_CRITERIA,
    AddMixin,
    BaseApi,
    CodeKeyedCrudMixin,
    DeleteMixin,
    EraseMixin,
    ExistsMixin,
    ExportMixin,
    GetMixin,
    ImportMixin,
    ListMixin,
    PurgeMixin,
    RestoreMixin,
    UpdateMixin,
    UpdateStateByCodeMixin,
    UpdateStateMixin,
    define_criteria,
    info_criteria,
    time_range_criteria,
)

__all__ = [
    "AppApi",
    "CategoryApi",
    "DictApi",
    "DictEntryApi",
    "SettingApi",
    "OperationLogApi",
    "TaskApi",
    "SystemApi",
]


class AppApi(CodeKeyedCrudMixin, UpdateStateMixin, UpdateStateByCodeMixin):
    base_path = "/app"
    entity_class = App
    entity_info_class = StatefulInfo
    criteria_definitions = (
        define_criteria(name=str, state=(State, str), predefined=bool)
        + info_criteria("organization")
        + AUDIT_CRITERIA
    )


class CategoryApi(CodeKeyedCrudMixin):
    base_path = "/category"
    entity_class = Category
    entity_info_class = InfoWithEntity
    criteria_definitions = (
        define_criteria(entity=str, name=str)
        + info_criteria("parent")
        + define_criteria(predefined=bool)
        + AUDIT_CRITERIA
    )


class DictApi(CodeKeyedCrudMixin):
    base_path = "/dict"
    entity_class = Dict
    entity_info_class = Info
    criteria_definitions = (
        define_criteria(name=str, standard_doc=str, predefined=bool) + AUDIT_CRITERIA
    )


def _dict_id(entry: Any) -> Any:
    if isinstance(entry, BaseModel):
        dictionary = get_field(entry, "dictionary")
    else:
        dictionary = get_field(entry, "dict")
    if dictionary is None:
        return None
    return get_field(dictionary, "id")


class DictEntryApi(
    ListMixin,
    GetMixin,
    ExistsMixin,
    AddMixin,
    UpdateMixin,
    DeleteMixin,
    RestoreMixin,
    PurgeMixin,
    EraseMixin,
    ExportMixin,
    ImportMixin,
):
    """Entries of a dictionary.

    An entry code is unique within its dictionary only, so the code-keyed
    operations also take the dictionary. Reads address the dictionary by its
    code, writes address it by its ID.
    """

    base_path = "/dict/entry"
    entity_class = DictEntry
    entity_info_class = DictEntryInfo
    criteria_definitions = (
        define_criteria(name=str) + info_criteria("dict", "parent") + AUDIT_CRITERIA
    )

    _READ_BY_CODE = "/dict/code/{dict_code}/entry/code/{code}"
    _WRITE_BY_CODE = "/dict/{dict_id}/entry/code/{code}"

    async def get_by_code(
        self, dict_code: str, code: str, show_loading: bool = True
    ) -> Optional[DictEntry]:
        check_argument_type("dict_code", dict_code, str)
        return await get_by_parent_and_key_impl(
            self, self._READ_BY_CODE, "dict_code", dict_code, "code", code, show_loading
        )

    async def get_info_by_code(
        self, dict_code: str, code: str, show_loading: bool = True
    ) -> Optional[DictEntryInfo]:
        check_argument_type("dict_code", dict_code, str)
        return await get_info_by_parent_and_key_impl(
            self,
            self._READ_BY_CODE + "/info",
            "dict_code",
            dict_code,
            "code",
            code,
            show_loading,
        )

    async def exists_by_code(
        self, dict_code: str, code: str, show_loading: bool = True
    ) -> bool:
        check_argument_type("dict_code", dict_code, str)
        return await exists_by_parent_and_key_impl(
            self, self._READ_BY_CODE, "dict_code", dict_code, "code", code, show_loading
        )

    async def update_by_code(
        self, entity: Any, show_loading: bool = True
    ) -> Optional[DictEntry]:
        """Replace the entry addressed by ``entity.dict.id`` and ``entity.code``."""

        check_argument_type("entity", entity, (DictEntry, Mapping))
        return await update_by_parent_and_key_impl(
            self,
            self._WRITE_BY_CODE,
            "dict_id",
            _dict_id(entity),
            "code",
            entity,
            show_loading,
        )

    async def delete_by_code(
        self, dict_id: Id, code: str, show_loading: bool = True
    ) -> Any:
        return await delete_by_parent_and_key_impl(
            self, self._WRITE_BY_CODE, "dict_id", dict_id, "code", code, show_loading
        )

    async def restore_by_code(
        self, dict_id: Id, code: str, show_loading: bool = True
    ) -> None:
        await restore_by_parent_and_key_impl(
            self, self._WRITE_BY_CODE, "dict_id", dict_id, "code", code, show_loading
        )

    async def purge_by_code(
        self, dict_id: Id, code: str, show_loading: bool = True
    ) -> None:
        await purge_by_parent_and_key_impl(
            self,
            self._WRITE_BY_CODE + "/purge",
            "dict_id",
            dict_id,
            "code",
            code,
            show_loading,
        )

    async def erase_by_code(
        self, dict_id: Id, code: str, show_loading: bool = True
    ) -> None:
        await erase_by_parent_and_key_impl(
            self,
            self._WRITE_BY_CODE + "/erase",
            "dict_id",
            dict_id,
            "code",
            code,
            show_loading,
        )


class SettingApi(ListMixin, AddMixin, ExportMixin, ImportMixin):
    """System settings, addressed by their unique name."""

    base_path = "/setting"
    entity_class = Setting
    entity_info_class = Setting
    criteria_definitions = define_criteria(
        name=str, readonly=bool, nullable=bool, multiple=bool, encrypted=bool
    )

    async def get(self, name: str, show_loading: bool = True) -> Optional[Setting]:
        return await get_by_key_impl(
            self, self._url("/{name}"), "name", name, show_loading
        )

    async def update(self, name: str, value: str, show_loading: bool = True) -> Any:
        """Set the value of a setting and return the modification timestamp."""

        return await update_property_by_key_impl(
            self, self._url("/{name}"), "name", name, "value", str, value, show_loading
        )


class OperationLogApi(ListMixin, GetMixin):
    """Read-only access to the audit trail of the backend."""

    base_path = "/system/operation-log"
    entity_class = OperationLog
    entity_info_class = OperationLogInfo
    criteria_definitions = (
        define_criteria(
            action=str,
            resource=str,
            property=str,
            user_id=ID_TYPES,
            username=str,
            app_id=ID_TYPES,
            app_code=str,
            success=bool,
            error_type=str,
            error_code=str,
            client_ip=str,
            request_host=str,
            http_method=str,
            trace_id=str,
            span_id=str,
            correlation_id=str,
            request_id=str,
            api_version=str,
            endpoint=str,
            service=str,
            service_host=str,
            thread=str,
            instance=str,
        )
        + time_range_criteria("request_time", "response_time")
        + define_criteria(latency_start=int, latency_end=int)
    )


class TaskApi(ListMixin, GetMixin):
    base_path = "/task"
    entity_class = TaskInfo
    entity_info_class = TaskInfo
    criteria_definitions = (
        info_criteria("category")
        + define_criteria(
            target_entity=str,
            target_id=ID_TYPES,
            result_entity=str,
            result_id=ID_TYPES,
            status=(TaskStatus, str),
        )
        + time_range_criteria(
            "submit_time",
            "start_time",
            "cancel_time",
            "finish_time",
            "create_time",
            "modify_time",
        )
    )

    async def get_status(self, id: Id, show_loading: bool = True) -> Optional[TaskStatus]:
        return await get_property_impl(
            self, self._url("/{id}/status"), "status", TaskStatus, id, show_loading
        )


class SystemApi(BaseApi):
    """Information about the backend itself."""

    async def get_info(self, show_loading: bool = True) -> Optional[SystemInfo]:
        check_argument_type("show_loading", show_loading, bool)
        if show_loading:
            self.http.loading.show_getting()
        obj = await self.http.get("/system/info")
        info = create_entity(SystemInfo, obj)
        self.logger.info("system.info_got", info=info)
        return info

    async def get_time(self, show_loading: bool = True) -> Any:
        """Return the current time of the backend."""

        check_argument_type("show_loading", show_loading, bool)
        if show_loading:
            self.http.loading.show_getting()
        timestamp = await self.http.get("/system/time")
        self.logger.info("system.time_got", timestamp=timestamp)
        return timestamp
