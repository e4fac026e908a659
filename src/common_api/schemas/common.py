"""Shared models of the REST contracts: paging, sorting, infos and errors."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "ApiModel",
    "Entity",
    "Id",
    "State",
    "SortOrder",
    "Gender",
    "ExportFormat",
    "PageRequest",
    "SortRequest",
    "Page",
    "ErrorInfo",
    "Info",
    "StatefulInfo",
    "InfoWithEntity",
    "DownloadResult",
]

Id = Union[int, str]
"""Identifier of an entity; large IDs travel as strings."""

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base model of every payload exchanged with the backend.

    Unknown fields are kept so that an entity fetched from the server can be
    sent back unchanged by ``update``.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Entity(ApiModel):
    """Fields shared by every persisted entity."""

    id: Optional[Id] = None
    create_time: Optional[datetime] = None
    modify_time: Optional[datetime] = None
    delete_time: Optional[datetime] = None


class State(str, Enum):
    """Lifecycle state of a stateful entity."""

    NORMAL = "NORMAL"
    DISABLED = "DISABLED"
    LOCKED = "LOCKED"
    FROZEN = "FROZEN"
    BLOCKED = "BLOCKED"


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class ExportFormat(str, Enum):
    """File formats supported by the export and import endpoints."""

    XML = "XML"
    JSON = "JSON"
    EXCEL = "EXCEL"
    CSV = "CSV"

    @property
    def mime_type(self) -> str:
        return _EXPORT_MIME_TYPES[self]

    @property
    def extension(self) -> str:
        return "xlsx" if self is ExportFormat.EXCEL else self.value.lower()

    @property
    def path(self) -> str:
        """URL segment of the format, e.g. ``excel``."""

        return self.value.lower()


_EXPORT_MIME_TYPES = {
    ExportFormat.XML: "application/xml",
    ExportFormat.JSON: "application/json",
    ExportFormat.EXCEL: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ExportFormat.CSV: "text/csv",
}


class PageRequest(BaseModel):
    """Paging parameters of a list query. Page indexes start at 0."""

    model_config = ConfigDict(extra="forbid")

    page_index: Optional[int] = Field(default=None, ge=0)
    page_size: Optional[int] = Field(default=None, ge=1)


class SortRequest(BaseModel):
    """Sorting parameters of a list query."""

    model_config = ConfigDict(extra="forbid")

    sort_field: Optional[str] = None
    sort_order: Optional[SortOrder] = None


class Page(BaseModel, Generic[T]):
    """One page of a list query."""

    model_config = ConfigDict(extra="ignore")

    total_count: int = Field(default=0, ge=0)
    total_pages: int = Field(default=0, ge=0)
    page_index: int = Field(default=0, ge=0)
    page_size: int = Field(default=0, ge=0)
    content: List[T] = Field(default_factory=list)


class ErrorInfo(BaseModel):
    """Error payload returned by the backend for failed requests."""

    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    code: Optional[str] = None
    message: Optional[str] = None
    params: Optional[Any] = None


class Info(ApiModel):
    """Basic information of an entity."""

    id: Optional[Id] = None
    code: Optional[str] = None
    name: Optional[str] = None
    deleted: Optional[bool] = None


class StatefulInfo(Info):
    state: Optional[State] = None


class InfoWithEntity(Info):
    """Basic information of an entity that belongs to another entity type."""

    entity: Optional[str] = None


@dataclass(slots=True)
class DownloadResult:
    """File returned by an export or download endpoint."""

    content: bytes
    filename: Optional[str] = None
    mime_type: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.content)
