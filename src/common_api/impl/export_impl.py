"""Export of entity lists as downloadable files."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

from ..exceptions import ArgumentTypeError
from ..schemas.common import DownloadResult, ExportFormat
from ..utils.checks import (
    check_argument_type,
    check_object_argument,
    check_sort_request_argument,
)
from .context import EntityApiLike, check_common_arguments, entity_name
from .options import to_query


def as_export_format(format: Union[ExportFormat, str]) -> ExportFormat:
    """Accept an :class:`ExportFormat` or its name in any letter case."""

    check_argument_type("format", format, (ExportFormat, str))
    if isinstance(format, ExportFormat):
        return format
    try:
        return ExportFormat(format.upper())
    except ValueError:
        raise ArgumentTypeError(f"Unsupported file format: '{format}'.") from None


async def export_impl(
    api: EntityApiLike,
    url: str,
    format: Union[ExportFormat, str],
    criteria: Any,
    sort_request: Any,
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> DownloadResult:
    export_format = as_export_format(format)
    criteria = {} if criteria is None else criteria
    sort_request = {} if sort_request is None else sort_request
    check_object_argument("criteria", criteria, api.criteria_definitions)
    check_sort_request_argument(sort_request, api.entity_class)
    check_common_arguments(show_loading, options)
    params = to_query(criteria, sort_request, options)
    if show_loading:
        api.http.loading.show_exporting()
    result = await api.http.download(
        url,
        params=params,
        mime_type=export_format.mime_type,
        filename=f"{entity_name(api).lower()}.{export_format.extension}",
    )
    api.logger.info(
        "entity.exported",
        entity=entity_name(api),
        format=export_format.value,
        filename=result.filename,
        size=result.size,
    )
    return result
