"""Bulk import of entities from an uploaded file."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, BinaryIO, Optional, Union

from ..exceptions import ArgumentTypeError
from ..schemas.common import ExportFormat
from ..utils.checks import check_argument_type
from .context import EntityApiLike, check_common_arguments, entity_name
from .export_impl import as_export_format
from .options import to_json

ImportSource = Union[str, os.PathLike, bytes, BinaryIO]


def check_source_argument(name: str, source: Any) -> None:
    if not isinstance(source, (str, os.PathLike, bytes, bytearray)) and not callable(
        getattr(source, "read", None)
    ):
        raise ArgumentTypeError(
            f"The value of the argument '{name}' must be a path, bytes or a binary "
            f"file, but it is {type(source).__name__}."
        )


def read_source(source: Any, default_filename: str) -> tuple[str, bytes]:
    """Return the upload filename and content of ``source``."""

    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        return path.name, path.read_bytes()
    if isinstance(source, (bytes, bytearray)):
        return default_filename, bytes(source)
    content = source.read()
    name = getattr(source, "name", None)
    filename = os.path.basename(name) if isinstance(name, str) else None
    return filename or default_filename, content


async def import_impl(
    api: EntityApiLike,
    url: str,
    format: Union[ExportFormat, str],
    file: ImportSource,
    parallel: Optional[bool],
    threads: Optional[int],
    show_loading: bool,
    options: Optional[Mapping[str, Any]] = None,
) -> int:
    """Upload ``file`` as multipart field ``file`` and return the imported count."""

    export_format = as_export_format(format)
    check_source_argument("file", file)
    check_argument_type("parallel", parallel, bool, nullable=True)
    check_argument_type("threads", threads, int, nullable=True)
    check_common_arguments(show_loading, options)
    filename, content = read_source(file, f"import.{export_format.extension}")
    params = to_json({"parallel": parallel, "threads": threads, **(options or {})})
    if show_loading:
        api.http.loading.show_importing()
    count = await api.http.post(
        url,
        files={"file": (filename, content, export_format.mime_type)},
        params=params,
    )
    api.logger.info(
        "entity.imported",
        entity=entity_name(api),
        format=export_format.value,
        filename=filename,
        count=count,
    )
    return count
