"""Updates of whole entities and of single properties."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from ..utils.checks import (
    ID_TYPES,
    TypeSpec,
    check_argument_type,
    check_id_argument_type,
    get_field,
)
from .context import EntityApiLike, check_common_arguments, entity_name
from .options import (
    create_entity,
    expand_url,
    id_url,
    key_url,
    stringify_id,
    to_json,
)


async def _put_entity(
    api: EntityApiLike,
    url: str,
    entity: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]],
) -> Any:
    data = to_json(entity)
    params = to_json(options)
    if show_loading:
        api.http.loading.show_updating()
    obj = await api.http.put(url, json=data, params=params)
    return create_entity(api.entity_class, obj)


async def _put_property(
    api: EntityApiLike,
    url: str,
    property_name: str,
    property_types: TypeSpec,
    property_value: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]],
) -> Any:
    check_argument_type(property_name, property_value, property_types)
    check_common_arguments(show_loading, options)
    data = to_json(property_value)
    params = to_json(options)
    if show_loading:
        api.http.loading.show_updating()
    return await api.http.put(url, json=data, params=params)


async def update_impl(
    api: EntityApiLike,
    url: str,
    entity: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    """Replace the entity identified by ``entity.id`` and return the stored copy."""

    check_argument_type("entity", entity, (api.entity_class, Mapping))
    id = get_field(entity, "id")
    check_id_argument_type(id, "entity.id")
    check_common_arguments(show_loading, options)
    result = await _put_entity(
        api, expand_url(url, id=stringify_id(id)), entity, show_loading, options
    )
    api.logger.info(
        "entity.updated",
        entity=entity_name(api),
        id=id,
        modify_time=getattr(result, "modify_time", None),
    )
    api.logger.debug("entity.updated_value", entity=entity_name(api), value=result)
    return result


async def update_by_key_impl(
    api: EntityApiLike,
    url: str,
    key_name: str,
    entity: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    check_argument_type("entity", entity, (api.entity_class, Mapping))
    key_value = get_field(entity, key_name)
    check_argument_type(f"entity.{key_name}", key_value, str)
    check_common_arguments(show_loading, options)
    result = await _put_entity(
        api, expand_url(url, **{key_name: key_value}), entity, show_loading, options
    )
    api.logger.info("entity.updated", entity=entity_name(api), **{key_name: key_value})
    api.logger.debug("entity.updated_value", entity=entity_name(api), value=result)
    return result


async def update_property_impl(
    api: EntityApiLike,
    url: str,
    id: Any,
    property_name: str,
    property_types: TypeSpec,
    property_value: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    """Update one property and return the modification timestamp sent back."""

    target = id_url(url, id)
    timestamp = await _put_property(
        api, target, property_name, property_types, property_value, show_loading, options
    )
    api.logger.info(
        "entity.property_updated",
        entity=entity_name(api),
        property=property_name,
        id=id,
        timestamp=timestamp,
    )
    return timestamp


async def update_property_by_key_impl(
    api: EntityApiLike,
    url: str,
    key_name: str,
    key_value: Any,
    property_name: str,
    property_types: TypeSpec,
    property_value: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    target = key_url(url, key_name, key_value)
    timestamp = await _put_property(
        api, target, property_name, property_types, property_value, show_loading, options
    )
    api.logger.info(
        "entity.property_updated",
        entity=entity_name(api),
        property=property_name,
        timestamp=timestamp,
        **{key_name: key_value},
    )
    return timestamp


async def update_by_parent_and_key_impl(
    api: EntityApiLike,
    url: str,
    parent_key_name: str,
    parent_key_value: Any,
    key_name: str,
    entity: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    check_argument_type("entity", entity, (api.entity_class, Mapping))
    check_argument_type(f"entity.{parent_key_name}", parent_key_value, ID_TYPES)
    key_value = get_field(entity, key_name)
    check_argument_type(f"entity.{key_name}", key_value, str)
    check_common_arguments(show_loading, options)
    target = expand_url(url, **{parent_key_name: parent_key_value, key_name: key_value})
    result = await _put_entity(api, target, entity, show_loading, options)
    api.logger.info(
        "entity.updated",
        entity=entity_name(api),
        **{parent_key_name: parent_key_value, key_name: key_value},
    )
    api.logger.debug("entity.updated_value", entity=entity_name(api), value=result)
    return result
