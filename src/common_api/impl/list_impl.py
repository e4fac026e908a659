"""Paged list queries."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from ..schemas.common import Page
from ..utils.checks import (
    check_object_argument,
    check_page_request_argument,
    check_sort_request_argument,
)
from .context import EntityApiLike, check_common_arguments, entity_name
from .options import create_page, to_query


async def _fetch_page(
    api: EntityApiLike,
    url: str,
    page_request: Any,
    criteria: Any,
    sort_request: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]],
) -> Any:
    page_request = {} if page_request is None else page_request
    criteria = {} if criteria is None else criteria
    sort_request = {} if sort_request is None else sort_request
    check_page_request_argument(page_request)
    check_object_argument("criteria", criteria, api.criteria_definitions)
    check_sort_request_argument(sort_request, api.entity_class)
    check_common_arguments(show_loading, options)
    params = to_query(page_request, criteria, sort_request, options)
    if show_loading:
        api.http.loading.show_getting()
    return await api.http.get(url, params=params)


async def list_impl(
    api: EntityApiLike,
    url: str,
    page_request: Any,
    criteria: Any,
    sort_request: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> Page[Any]:
    obj = await _fetch_page(
        api, url, page_request, criteria, sort_request, show_loading, options
    )
    page = create_page(api.entity_class, obj)
    api.logger.info(
        "entity.listed", entity=entity_name(api), total_count=page.total_count
    )
    api.logger.debug("entity.page", entity=entity_name(api), page=page)
    return page


async def list_info_impl(
    api: EntityApiLike,
    url: str,
    page_request: Any,
    criteria: Any,
    sort_request: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> Page[Any]:
    obj = await _fetch_page(
        api, url, page_request, criteria, sort_request, show_loading, options
    )
    page = create_page(api.entity_info_class, obj)
    api.logger.info(
        "entity.info_listed", entity=entity_name(api), total_count=page.total_count
    )
    api.logger.debug("entity.info_page", entity=entity_name(api), page=page)
    return page
