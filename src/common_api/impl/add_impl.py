"""Creation of new entities."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from ..utils.checks import check_argument_type
from .context import EntityApiLike, check_common_arguments, entity_name
from .options import create_entity, to_json


async def add_impl(
    api: EntityApiLike,
    url: str,
    entity: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    check_argument_type("entity", entity, (api.entity_class, Mapping))
    check_common_arguments(show_loading, options)
    data = to_json(entity)
    params = to_json(options)
    if show_loading:
        api.http.loading.show_adding()
    obj = await api.http.post(url, json=data, params=params)
    result = create_entity(api.entity_class, obj)
    api.logger.info(
        "entity.added", entity=entity_name(api), id=getattr(result, "id", None)
    )
    api.logger.debug("entity.added_value", entity=entity_name(api), value=result)
    return result
