"""Base class and operation mixins of the entity APIs.

An entity API declares its ``base_path``, entity classes and accepted
criteria, and picks the mixins for the operations the backend exposes on
that path. Every mixin method delegates to one shared helper with the
conventional URL below ``base_path``.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, ClassVar, Optional, Sequence, Union

import structlog

from ..exceptions import UnsupportedFieldError
from ..http.transport import HttpTransport
from ..impl import (
    add_impl,
    batch_delete_impl,
    batch_erase_impl,
    batch_purge_impl,
    batch_restore_impl,
    delete_by_key_impl,
    delete_impl,
    erase_by_key_impl,
    erase_impl,
    exists_by_key_impl,
    exists_impl,
    export_impl,
    get_by_key_impl,
    get_impl,
    get_info_by_key_impl,
    get_info_impl,
    import_impl,
    list_impl,
    list_info_impl,
    purge_all_impl,
    purge_by_key_impl,
    purge_impl,
    restore_by_key_impl,
    restore_impl,
    update_by_key_impl,
    update_impl,
    update_property_by_key_impl,
    update_property_impl,
)
from ..impl.export_impl import as_export_format
from ..impl.import_impl import ImportSource
from ..logging import get_logger
from ..schemas.common import (
    DownloadResult,
    Entity,
    ExportFormat,
    Id,
    Info,
    Page,
    State,
)
from ..utils.checks import ID_TYPES, CriterionDefinition, check_object_argument

__all__ = [
    "BaseApi",
    "EntityApi",
    "CriterionDefinition",
    "define_criteria",
    "info_criteria",
    "time_range_criteria",
    "AUDIT_CRITERIA",
    "ListMixin",
    "GetMixin",
    "GetByCodeMixin",
    "ExistsMixin",
    "ExistsByCodeMixin",
    "AddMixin",
    "UpdateMixin",
    "UpdateByCodeMixin",
    "UpdateStateMixin",
    "UpdateStateByCodeMixin",
    "DeleteMixin",
    "DeleteByCodeMixin",
    "RestoreMixin",
    "RestoreByCodeMixin",
    "PurgeMixin",
    "PurgeByCodeMixin",
    "EraseMixin",
    "EraseByCodeMixin",
    "ExportMixin",
    "ImportMixin",
    "CodeKeyedCrudMixin",
]

TIME_TYPES: tuple[type, ...] = (str, datetime, date)


def define_criteria(**types: Any) -> tuple[CriterionDefinition, ...]:
    """Declare criteria fields, e.g. ``define_criteria(name=str, level=int)``."""

    return tuple(CriterionDefinition(name, value) for name, value in types.items())


def info_criteria(*prefixes: str) -> tuple[CriterionDefinition, ...]:
    """Declare the ``<prefix>_id``, ``<prefix>_code`` and ``<prefix>_name`` criteria."""

    definitions: list[CriterionDefinition] = []
    for prefix in prefixes:
        definitions.append(CriterionDefinition(f"{prefix}_id", ID_TYPES))
        definitions.append(CriterionDefinition(f"{prefix}_code", str))
        definitions.append(CriterionDefinition(f"{prefix}_name", str))
    return tuple(definitions)


def time_range_criteria(*fields: str) -> tuple[CriterionDefinition, ...]:
    """Declare the ``<field>_start`` and ``<field>_end`` range criteria."""

    return tuple(
        CriterionDefinition(f"{field}_{bound}", TIME_TYPES)
        for field in fields
        for bound in ("start", "end")
    )


AUDIT_CRITERIA = define_criteria(deleted=bool) + time_range_criteria(
    "create_time", "modify_time", "delete_time"
)


class BaseApi:
    """An API object sending its requests through a shared transport."""

    def __init__(self, http: HttpTransport) -> None:
        self.http = http
        self.logger: structlog.stdlib.BoundLogger = get_logger(
            type(self).__module__, api=type(self).__name__
        )


class EntityApi(BaseApi):
    """Common state of an API object bound to one entity type."""

    base_path: ClassVar[str] = ""
    entity_class: ClassVar[type[Any]] = Entity
    entity_info_class: ClassVar[type[Any]] = Info
    criteria_definitions: ClassVar[Sequence[CriterionDefinition]] = ()
    option_definitions: ClassVar[Sequence[CriterionDefinition]] = ()

    def _url(self, suffix: str = "") -> str:
        return f"{self.base_path}{suffix}"

    def _options(self, options: Mapping[str, Any]) -> Optional[dict[str, Any]]:
        """Validate extra query options against ``option_definitions``."""

        if not options:
            return None
        declared = {definition.name for definition in self.option_definitions}
        for key in options:
            if key not in declared:
                raise UnsupportedFieldError(f'Unsupported field: "options.{key}"')
        check_object_argument("options", options, self.option_definitions)
        return dict(options)


class ListMixin(EntityApi):
    async def list(
        self,
        page_request: Any = None,
        criteria: Any = None,
        sort_request: Any = None,
        show_loading: bool = True,
        **options: Any,
    ) -> Page[Any]:
        return await list_impl(
            self,
            self._url(),
            page_request,
            criteria,
            sort_request,
            show_loading,
            self._options(options),
        )

    async def list_info(
        self,
        page_request: Any = None,
        criteria: Any = None,
        sort_request: Any = None,
        show_loading: bool = True,
    ) -> Page[Any]:
        return await list_info_impl(
            self, self._url("/info"), page_request, criteria, sort_request, show_loading
        )


class GetMixin(EntityApi):
    async def get(self, id: Id, show_loading: bool = True, **options: Any) -> Any:
        return await get_impl(
            self, self._url("/{id}"), id, show_loading, self._options(options)
        )

    async def get_info(self, id: Id, show_loading: bool = True) -> Any:
        return await get_info_impl(self, self._url("/{id}/info"), id, show_loading)


class GetByCodeMixin(EntityApi):
    async def get_by_code(self, code: str, show_loading: bool = True, **options: Any) -> Any:
        return await get_by_key_impl(
            self,
            self._url("/code/{code}"),
            "code",
            code,
            show_loading,
            self._options(options),
        )

    async def get_info_by_code(self, code: str, show_loading: bool = True) -> Any:
        return await get_info_by_key_impl(
            self, self._url("/code/{code}/info"), "code", code, show_loading
        )


class ExistsMixin(EntityApi):
    async def exists(self, id: Id, show_loading: bool = True) -> bool:
        return await exists_impl(self, self._url("/{id}"), id, show_loading)


class ExistsByCodeMixin(EntityApi):
    async def exists_by_code(self, code: str, show_loading: bool = True) -> bool:
        return await exists_by_key_impl(
            self, self._url("/code/{code}"), "code", code, show_loading
        )


class AddMixin(EntityApi):
    async def add(self, entity: Any, show_loading: bool = True, **options: Any) -> Any:
        return await add_impl(
            self, self._url(), entity, show_loading, self._options(options)
        )


class UpdateMixin(EntityApi):
    async def update(self, entity: Any, show_loading: bool = True, **options: Any) -> Any:
        return await update_impl(
            self, self._url("/{id}"), entity, show_loading, self._options(options)
        )


class UpdateByCodeMixin(EntityApi):
    async def update_by_code(
        self, entity: Any, show_loading: bool = True, **options: Any
    ) -> Any:
        return await update_by_key_impl(
            self,
            self._url("/code/{code}"),
            "code",
            entity,
            show_loading,
            self._options(options),
        )


class UpdateStateMixin(EntityApi):
    async def update_state(
        self,
        id: Id,
        state: Union[State, str],
        show_loading: bool = True,
        **options: Any,
    ) -> Any:
        return await update_property_impl(
            self,
            self._url("/{id}/state"),
            id,
            "state",
            (State, str),
            state,
            show_loading,
            self._options(options),
        )


class UpdateStateByCodeMixin(EntityApi):
    async def update_state_by_code(
        self,
        code: str,
        state: Union[State, str],
        show_loading: bool = True,
        **options: Any,
    ) -> Any:
        return await update_property_by_key_impl(
            self,
            self._url("/code/{code}/state"),
            "code",
            code,
            "state",
            (State, str),
            state,
            show_loading,
            self._options(options),
        )


class DeleteMixin(EntityApi):
    async def delete(self, id: Id, show_loading: bool = True, **options: Any) -> Any:
        return await delete_impl(
            self, self._url("/{id}"), id, show_loading, self._options(options)
        )

    async def batch_delete(
        self, ids: Sequence[Id], show_loading: bool = True, **options: Any
    ) -> int:
        return await batch_delete_impl(
            self, self._url("/batch"), ids, show_loading, self._options(options)
        )


class DeleteByCodeMixin(EntityApi):
    async def delete_by_code(
        self, code: str, show_loading: bool = True, **options: Any
    ) -> Any:
        return await delete_by_key_impl(
            self,
            self._url("/code/{code}"),
            "code",
            code,
            show_loading,
            self._options(options),
        )


class RestoreMixin(EntityApi):
    async def restore(self, id: Id, show_loading: bool = True, **options: Any) -> None:
        await restore_impl(
            self, self._url("/{id}"), id, show_loading, self._options(options)
        )

    async def batch_restore(
        self, ids: Sequence[Id], show_loading: bool = True, **options: Any
    ) -> int:
        return await batch_restore_impl(
            self, self._url("/batch"), ids, show_loading, self._options(options)
        )


class RestoreByCodeMixin(EntityApi):
    async def restore_by_code(
        self, code: str, show_loading: bool = True, **options: Any
    ) -> None:
        await restore_by_key_impl(
            self,
            self._url("/code/{code}"),
            "code",
            code,
            show_loading,
            self._options(options),
        )


class PurgeMixin(EntityApi):
    async def purge(self, id: Id, show_loading: bool = True, **options: Any) -> None:
        await purge_impl(
            self, self._url("/{id}/purge"), id, show_loading, self._options(options)
        )

    async def purge_all(self, show_loading: bool = True, **options: Any) -> int:
        return await purge_all_impl(
            self, self._url("/purge"), show_loading, self._options(options)
        )

    async def batch_purge(
        self, ids: Sequence[Id], show_loading: bool = True, **options: Any
    ) -> int:
        return await batch_purge_impl(
            self, self._url("/batch/purge"), ids, show_loading, self._options(options)
        )


class PurgeByCodeMixin(EntityApi):
    async def purge_by_code(
        self, code: str, show_loading: bool = True, **options: Any
    ) -> None:
        await purge_by_key_impl(
            self,
            self._url("/code/{code}/purge"),
            "code",
            code,
            show_loading,
            self._options(options),
        )


class EraseMixin(EntityApi):
    async def erase(self, id: Id, show_loading: bool = True, **options: Any) -> None:
        await erase_impl(
            self, self._url("/{id}/erase"), id, show_loading, self._options(options)
        )

    async def batch_erase(
        self, ids: Sequence[Id], show_loading: bool = True, **options: Any
    ) -> int:
        return await batch_erase_impl(
            self, self._url("/batch/erase"), ids, show_loading, self._options(options)
        )


class EraseByCodeMixin(EntityApi):
    async def erase_by_code(
        self, code: str, show_loading: bool = True, **options: Any
    ) -> None:
        await erase_by_key_impl(
            self,
            self._url("/code/{code}/erase"),
            "code",
            code,
            show_loading,
            self._options(options),
        )


class ExportMixin(EntityApi):
    async def export(
        self,
        format: Union[ExportFormat, str],
        criteria: Any = None,
        sort_request: Any = None,
        show_loading: bool = True,
    ) -> DownloadResult:
        export_format = as_export_format(format)
        return await export_impl(
            self,
            self._url(f"/export/{export_format.path}"),
            export_format,
            criteria,
            sort_request,
            show_loading,
        )

    async def export_xml(
        self, criteria: Any = None, sort_request: Any = None, show_loading: bool = True
    ) -> DownloadResult:
        return await self.export(ExportFormat.XML, criteria, sort_request, show_loading)

    async def export_json(
        self, criteria: Any = None, sort_request: Any = None, show_loading: bool = True
    ) -> DownloadResult:
        return await self.export(ExportFormat.JSON, criteria, sort_request, show_loading)

    async def export_excel(
        self, criteria: Any = None, sort_request: Any = None, show_loading: bool = True
    ) -> DownloadResult:
        return await self.export(ExportFormat.EXCEL, criteria, sort_request, show_loading)

    async def export_csv(
        self, criteria: Any = None, sort_request: Any = None, show_loading: bool = True
    ) -> DownloadResult:
        return await self.export(ExportFormat.CSV, criteria, sort_request, show_loading)


class ImportMixin(EntityApi):
    async def import_(
        self,
        format: Union[ExportFormat, str],
        file: ImportSource,
        parallel: Optional[bool] = False,
        threads: Optional[int] = None,
        show_loading: bool = True,
    ) -> int:
        export_format = as_export_format(format)
        return await import_impl(
            self,
            self._url(f"/import/{export_format.path}"),
            export_format,
            file,
            parallel,
            threads,
            show_loading,
        )

    async def import_xml(
        self,
        file: ImportSource,
        parallel: Optional[bool] = False,
        threads: Optional[int] = None,
        show_loading: bool = True,
    ) -> int:
        return await self.import_(ExportFormat.XML, file, parallel, threads, show_loading)

    async def import_json(
        self,
        file: ImportSource,
        parallel: Optional[bool] = False,
        threads: Optional[int] = None,
        show_loading: bool = True,
    ) -> int:
        return await self.import_(ExportFormat.JSON, file, parallel, threads, show_loading)

    async def import_excel(
        self,
        file: ImportSource,
        parallel: Optional[bool] = False,
        threads: Optional[int] = None,
        show_loading: bool = True,
    ) -> int:
        return await self.import_(ExportFormat.EXCEL, file, parallel, threads, show_loading)

    async def import_csv(
        self,
        file: ImportSource,
        parallel: Optional[bool] = False,
        threads: Optional[int] = None,
        show_loading: bool = True,
    ) -> int:
        return await self.import_(ExportFormat.CSV, file, parallel, threads, show_loading)


class CodeKeyedCrudMixin(
    ListMixin,
    GetMixin,
    GetByCodeMixin,
    ExistsMixin,
    ExistsByCodeMixin,
    AddMixin,
    UpdateMixin,
    UpdateByCodeMixin,
    DeleteMixin,
    DeleteByCodeMixin,
    RestoreMixin,
    RestoreByCodeMixin,
    PurgeMixin,
    PurgeByCodeMixin,
    EraseMixin,
    EraseByCodeMixin,
    ExportMixin,
    ImportMixin,
):
    """Every operation keyed by ID and by ``code``, plus export and import."""
