"""Serialization of request payloads and mapping of response bodies."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from typing import Any, Optional, TypeVar
from urllib.parse import quote
from uuid import UUID

from pydantic import BaseModel, TypeAdapter

from ..schemas.common import Id, Page
from ..utils.checks import ID_TYPES, check_argument_type, check_id_argument_type
from ..utils.naming import lower_camel, snake_key

__all__ = [
    "to_json",
    "to_query",
    "create_entity",
    "create_page",
    "stringify_id",
    "expand_url",
    "id_url",
    "key_url",
    "parent_and_key_url",
]

T = TypeVar("T")


def to_json(value: Any) -> Any:
    """Convert ``value`` into a JSON compatible structure.

    Mapping keys are normalized to ``lower_underscore`` and ``None`` values
    are dropped at every level.
    """

    if value is None:
        return None
    if isinstance(value, BaseModel):
        return to_json(value.model_dump(mode="json", exclude_none=True, by_alias=True))
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (Decimal, UUID)):
        return str(value)
    if isinstance(value, Mapping):
        return {
            snake_key(str(key)): to_json(item)
            for key, item in value.items()
            if item is not None
        }
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_json(item) for item in value]
    return value


def to_query(*parts: Any) -> dict[str, Any]:
    """Merge paging, criteria, sorting and option objects into query parameters.

    Later parts win on key clashes. The value of ``sort_field`` names an entity
    attribute and is sent in ``lowerCamel`` form.
    """

    params: dict[str, Any] = {}
    for part in parts:
        if part is None:
            continue
        params.update(to_json(part))
    sort_field = params.get("sort_field")
    if isinstance(sort_field, str):
        params["sort_field"] = lower_camel(sort_field)
    return params


@lru_cache(maxsize=None)
def _adapter(cls: Any) -> TypeAdapter[Any]:
    return TypeAdapter(cls)


def create_entity(cls: type[T], obj: Any) -> Optional[T]:
    """Validate a decoded JSON value into ``cls``; ``None`` stays ``None``."""

    if obj is None:
        return None
    return _adapter(cls).validate_python(obj)


def create_page(cls: type[T], obj: Any) -> Page[T]:
    if obj is None:
        return Page[cls]()  # type: ignore[valid-type]
    return Page[cls].model_validate(obj)  # type: ignore[valid-type]


def stringify_id(id: Id) -> str:
    check_id_argument_type(id)
    return str(id)


def expand_url(template: str, **values: Any) -> str:
    """Substitute every ``{name}`` placeholder with its URL-quoted value."""

    url = template
    for name, value in values.items():
        url = url.replace("{" + name + "}", quote(str(value), safe=""))
    return url


def id_url(url: str, id: Any) -> str:
    return expand_url(url, id=stringify_id(id))


def key_url(url: str, key_name: str, key_value: Any) -> str:
    check_argument_type(key_name, key_value, str)
    return expand_url(url, **{key_name: key_value})


def parent_and_key_url(
    url: str,
    parent_key_name: str,
    parent_key_value: Any,
    key_name: str,
    key_value: Any,
) -> str:
    check_argument_type(parent_key_name, parent_key_value, ID_TYPES)
    check_argument_type("key_name", key_name, str)
    check_argument_type(key_name, key_value, str)
    return expand_url(url, **{parent_key_name: parent_key_value, key_name: key_value})
