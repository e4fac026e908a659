"""What the shared helpers need from the API object calling them."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Protocol, Sequence

import structlog

from ..http.transport import HttpTransport
from ..utils.checks import CriterionDefinition, check_argument_type


class EntityApiLike(Protocol):
    http: HttpTransport
    logger: structlog.stdlib.BoundLogger
    entity_class: type[Any]
    entity_info_class: type[Any]
    criteria_definitions: Sequence[CriterionDefinition]


def entity_name(api: EntityApiLike) -> str:
    return api.entity_class.__name__


def check_common_arguments(
    show_loading: Any, options: Optional[Mapping[str, Any]]
) -> None:
    check_argument_type("show_loading", show_loading, bool)
    check_argument_type("options", options, Mapping, nullable=True)
