"""Permanent removal of entities, whether or not they were soft deleted."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from ..utils.checks import check_id_array_argument_type
from .context import EntityApiLike, check_common_arguments, entity_name
from .options import id_url, key_url, parent_and_key_url, to_json


async def _delete(
    api: EntityApiLike,
    url: str,
    show_loading: bool,
    options: Optional[Mapping[str, Any]],
    json: Any = None,
) -> Any:
    check_common_arguments(show_loading, options)
    if show_loading:
        api.http.loading.show_erasing()
    return await api.http.delete(url, json=json, params=to_json(options))


async def erase_impl(
    api: EntityApiLike,
    url: str,
    id: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> None:
    await _delete(api, id_url(url, id), show_loading, options)
    api.logger.info("entity.erased", entity=entity_name(api), id=id)


async def erase_by_key_impl(
    api: EntityApiLike,
    url: str,
    key_name: str,
    key_value: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> None:
    await _delete(api, key_url(url, key_name, key_value), show_loading, options)
    api.logger.info("entity.erased", entity=entity_name(api), **{key_name: key_value})


async def erase_all_impl(
    api: EntityApiLike,
    url: str,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> int:
    count = await _delete(api, url, show_loading, options)
    api.logger.info("entity.all_erased", entity=entity_name(api), count=count)
    return count


async def batch_erase_impl(
    api: EntityApiLike,
    url: str,
    ids: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> int:
    check_id_array_argument_type(ids)
    count = await _delete(api, url, show_loading, options, json=to_json(ids))
    api.logger.info("entity.batch_erased", entity=entity_name(api), count=count)
    return count


async def erase_by_parent_and_key_impl(
    api: EntityApiLike,
    url: str,
    parent_key_name: str,
    parent_key_value: Any,
    key_name: str,
    key_value: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> None:
    target = parent_and_key_url(
        url, parent_key_name, parent_key_value, key_name, key_value
    )
    await _delete(api, target, show_loading, options)
    api.logger.info(
        "entity.erased",
        entity=entity_name(api),
        **{parent_key_name: parent_key_value, key_name: key_value},
    )
