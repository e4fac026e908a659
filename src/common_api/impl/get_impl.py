"""Retrieval of entities, their infos and single properties."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from .context import EntityApiLike, check_common_arguments, entity_name
from .options import create_entity, id_url, key_url, parent_and_key_url, to_json


async def _get(
    api: EntityApiLike,
    url: str,
    show_loading: bool,
    options: Optional[Mapping[str, Any]],
) -> Any:
    check_common_arguments(show_loading, options)
    if show_loading:
        api.http.loading.show_getting()
    return await api.http.get(url, params=to_json(options))


async def get_impl(
    api: EntityApiLike,
    url: str,
    id: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    obj = await _get(api, id_url(url, id), show_loading, options)
    result = create_entity(api.entity_class, obj)
    api.logger.info("entity.got", entity=entity_name(api), id=id)
    api.logger.debug("entity.value", entity=entity_name(api), value=result)
    return result


async def get_by_key_impl(
    api: EntityApiLike,
    url: str,
    key_name: str,
    key_value: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    obj = await _get(api, key_url(url, key_name, key_value), show_loading, options)
    result = create_entity(api.entity_class, obj)
    api.logger.info("entity.got", entity=entity_name(api), **{key_name: key_value})
    api.logger.debug("entity.value", entity=entity_name(api), value=result)
    return result


async def get_info_impl(
    api: EntityApiLike,
    url: str,
    id: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    obj = await _get(api, id_url(url, id), show_loading, options)
    result = create_entity(api.entity_info_class, obj)
    api.logger.info("entity.info_got", entity=entity_name(api), id=id)
    api.logger.debug("entity.info_value", entity=entity_name(api), value=result)
    return result


async def get_info_by_key_impl(
    api: EntityApiLike,
    url: str,
    key_name: str,
    key_value: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    obj = await _get(api, key_url(url, key_name, key_value), show_loading, options)
    result = create_entity(api.entity_info_class, obj)
    api.logger.info(
        "entity.info_got", entity=entity_name(api), **{key_name: key_value}
    )
    api.logger.debug("entity.info_value", entity=entity_name(api), value=result)
    return result


async def get_property_impl(
    api: EntityApiLike,
    url: str,
    property_name: str,
    property_class: Any,
    id: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    obj = await _get(api, id_url(url, id), show_loading, options)
    result = create_entity(property_class, obj)
    api.logger.info(
        "entity.property_got", entity=entity_name(api), property=property_name, id=id
    )
    api.logger.debug(
        "entity.property_value", entity=entity_name(api), property=property_name, value=result
    )
    return result


async def get_property_by_key_impl(
    api: EntityApiLike,
    url: str,
    property_name: str,
    property_class: Any,
    key_name: str,
    key_value: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    obj = await _get(api, key_url(url, key_name, key_value), show_loading, options)
    result = create_entity(property_class, obj)
    api.logger.info(
        "entity.property_got",
        entity=entity_name(api),
        property=property_name,
        **{key_name: key_value},
    )
    api.logger.debug(
        "entity.property_value", entity=entity_name(api), property=property_name, value=result
    )
    return result


async def get_by_parent_and_key_impl(
    api: EntityApiLike,
    url: str,
    parent_key_name: str,
    parent_key_value: Any,
    key_name: str,
    key_value: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    target = parent_and_key_url(
        url, parent_key_name, parent_key_value, key_name, key_value
    )
    obj = await _get(api, target, show_loading, options)
    result = create_entity(api.entity_class, obj)
    api.logger.info(
        "entity.got",
        entity=entity_name(api),
        **{parent_key_name: parent_key_value, key_name: key_value},
    )
    api.logger.debug("entity.value", entity=entity_name(api), value=result)
    return result


async def get_info_by_parent_and_key_impl(
    api: EntityApiLike,
    url: str,
    parent_key_name: str,
    parent_key_value: Any,
    key_name: str,
    key_value: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    target = parent_and_key_url(
        url, parent_key_name, parent_key_value, key_name, key_value
    )
    obj = await _get(api, target, show_loading, options)
    result = create_entity(api.entity_info_class, obj)
    api.logger.info(
        "entity.info_got",
        entity=entity_name(api),
        **{parent_key_name: parent_key_value, key_name: key_value},
    )
    api.logger.debug("entity.info_value", entity=entity_name(api), value=result)
    return result


async def get_property_by_parent_and_key_impl(
    api: EntityApiLike,
    url: str,
    property_name: str,
    property_class: Any,
    parent_key_name: str,
    parent_key_value: Any,
    key_name: str,
    key_value: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    target = parent_and_key_url(
        url, parent_key_name, parent_key_value, key_name, key_value
    )
    obj = await _get(api, target, show_loading, options)
    result = create_entity(property_class, obj)
    api.logger.info(
        "entity.property_got",
        entity=entity_name(api),
        property=property_name,
        **{parent_key_name: parent_key_value, key_name: key_value},
    )
    api.logger.debug(
        "entity.property_value", entity=entity_name(api), property=property_name, value=result
    )
    return result
