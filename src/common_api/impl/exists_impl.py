"""Existence checks issued as ``HEAD`` requests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from .context import EntityApiLike, check_common_arguments, entity_name
from .options import id_url, key_url, parent_and_key_url, to_json


async def _head(
    api: EntityApiLike,
    url: str,
    show_loading: bool,
    options: Optional[Mapping[str, Any]],
) -> bool:
    check_common_arguments(show_loading, options)
    if show_loading:
        api.http.loading.show_getting()
    return await api.http.head(url, params=to_json(options))


async def exists_impl(
    api: EntityApiLike,
    url: str,
    id: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> bool:
    found = await _head(api, id_url(url, id), show_loading, options)
    api.logger.info("entity.existence_checked", entity=entity_name(api), id=id, exists=found)
    return found


async def exists_by_key_impl(
    api: EntityApiLike,
    url: str,
    key_name: str,
    key_value: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> bool:
    found = await _head(api, key_url(url, key_name, key_value), show_loading, options)
    api.logger.info(
        "entity.existence_checked",
        entity=entity_name(api),
        exists=found,
        **{key_name: key_value},
    )
    return found


async def exists_by_parent_and_key_impl(
    api: EntityApiLike,
    url: str,
    parent_key_name: str,
    parent_key_value: Any,
    key_name: str,
    key_value: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> bool:
    target = parent_and_key_url(
        url, parent_key_name, parent_key_value, key_name, key_value
    )
    found = await _head(api, target, show_loading, options)
    api.logger.info(
        "entity.existence_checked",
        entity=entity_name(api),
        exists=found,
        **{parent_key_name: parent_key_value, key_name: key_value},
    )
    return found
