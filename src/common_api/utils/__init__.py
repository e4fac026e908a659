"""Argument checking and naming helpers."""

from .checks import (
    ID_TYPES,
    CriterionDefinition,
    check_argument_type,
    check_criteria_argument,
    check_id_argument_type,
    check_id_array_argument_type,
    check_object_argument,
    check_page_request_argument,
    check_sort_request_argument,
    get_field,
)
from .naming import lower_camel, snake_key

__all__ = [
    "ID_TYPES",
    "CriterionDefinition",
    "check_argument_type",
    "check_criteria_argument",
    "check_id_argument_type",
    "check_id_array_argument_type",
    "check_object_argument",
    "check_page_request_argument",
    "check_sort_request_argument",
    "get_field",
    "lower_camel",
    "snake_key",
]
