"""Argument checks run by every API method before any request is sent.

All checks raise :class:`~common_api.exceptions.ArgumentTypeError`, which is
also a :class:`TypeError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union

from pydantic import BaseModel

from ..exceptions import ArgumentTypeError, UnsupportedFieldError
from ..schemas.common import PageRequest, SortOrder, SortRequest
from .naming import snake_key

__all__ = [
    "CriterionDefinition",
    "ID_TYPES",
    "check_argument_type",
    "check_id_argument_type",
    "check_id_array_argument_type",
    "check_object_argument",
    "check_page_request_argument",
    "check_sort_request_argument",
    "check_criteria_argument",
    "get_field",
]

TypeSpec = Union[type, tuple[type, ...]]

ID_TYPES: tuple[type, ...] = (str, int)


@dataclass(frozen=True, slots=True)
class CriterionDefinition:
    """Declares one field accepted in the criteria of a list query."""

    name: str
    types: TypeSpec


def _as_tuple(types: TypeSpec) -> tuple[type, ...]:
    return types if isinstance(types, tuple) else (types,)


def _type_names(types: tuple[type, ...]) -> str:
    return "|".join(t.__name__ for t in types)


def check_argument_type(
    name: str, value: Any, types: TypeSpec, nullable: bool = False
) -> None:
    """Check that ``value`` is an instance of one of ``types``.

    ``bool`` values are only accepted when ``bool`` itself is listed, so
    ``True`` never passes as an ``int`` ID.
    """

    expected = _as_tuple(types)
    if value is None:
        if nullable:
            return
        raise ArgumentTypeError(f"The value of the argument '{name}' cannot be None.")
    if isinstance(value, bool) and bool not in expected:
        matched = False
    else:
        matched = isinstance(value, expected)
    if not matched:
        raise ArgumentTypeError(
            f"The value of the argument '{name}' must be of type "
            f"{_type_names(expected)}, but it is {type(value).__name__}."
        )


def check_id_argument_type(value: Any, name: str = "id") -> None:
    if not isinstance(name, str):
        raise TypeError("The name must be a string.")
    check_argument_type(name, value, ID_TYPES)


def check_id_array_argument_type(value: Any, name: str = "ids") -> None:
    if not isinstance(name, str):
        raise TypeError("The name must be a string.")
    check_argument_type(name, value, (list, tuple))
    for index, item in enumerate(value):
        check_id_argument_type(item, f"{name}[{index}]")


def get_field(obj: Union[Mapping[str, Any], BaseModel], key: str) -> Any:
    if isinstance(obj, BaseModel):
        return getattr(obj, key, None)
    return obj.get(key)


def check_object_argument(
    name: str,
    obj: Any,
    definitions: Iterable[CriterionDefinition] = (),
    nullable: bool = False,
) -> None:
    """Check a mapping against the declared field definitions.

    Keys holding ``None`` are skipped. A key without a definition raises
    :class:`UnsupportedFieldError`.
    """

    if obj is None:
        if nullable:
            return
        raise ArgumentTypeError(f"The value of the argument '{name}' cannot be None.")
    check_argument_type(name, obj, (Mapping, BaseModel))
    fields = dict(obj)
    if not fields:
        return
    declared = {definition.name: definition.types for definition in definitions}
    if not declared:
        return
    for key, value in fields.items():
        if value is None:
            continue
        types = declared.get(snake_key(str(key)))
        if types is None:
            raise UnsupportedFieldError(f'Unsupported field: "{name}.{key}"')
        check_argument_type(f"{name}.{key}", value, types)


def check_page_request_argument(page_request: Any) -> None:
    check_argument_type("page_request", page_request, (PageRequest, Mapping))
    check_argument_type(
        "page_request.page_index", get_field(page_request, "page_index"), int, nullable=True
    )
    check_argument_type(
        "page_request.page_size", get_field(page_request, "page_size"), int, nullable=True
    )


def check_sort_request_argument(
    sort_request: Any, entity_class: Optional[type[BaseModel]] = None
) -> None:
    check_argument_type("sort_request", sort_request, (SortRequest, Mapping))
    sort_field = get_field(sort_request, "sort_field")
    check_argument_type("sort_request.sort_field", sort_field, str, nullable=True)
    check_argument_type(
        "sort_request.sort_order",
        get_field(sort_request, "sort_order"),
        (SortOrder, str),
        nullable=True,
    )
    if entity_class is not None and sort_field:
        fields = set(entity_class.model_fields)
        fields.update(
            field.alias for field in entity_class.model_fields.values() if field.alias
        )
        if sort_field not in fields and snake_key(sort_field) not in fields:
            raise ArgumentTypeError(
                f"The sort field '{sort_field}' is not a field of the class "
                f"{entity_class.__name__}."
            )


def check_criteria_argument(criteria: Any) -> None:
    check_argument_type("criteria", criteria, (Mapping, BaseModel))
