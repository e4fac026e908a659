from __future__ import annotations

import pytest

from common_api.exceptions import ArgumentTypeError, UnsupportedFieldError
from common_api.schemas import City, DictEntry, PageRequest, SortOrder, SortRequest
from common_api.utils import (
    ID_TYPES,
    CriterionDefinition,
    check_argument_type,
    check_criteria_argument,
    check_id_argument_type,
    check_id_array_argument_type,
    check_object_argument,
    check_page_request_argument,
    check_sort_request_argument,
)

CITY_CRITERIA = (
    CriterionDefinition("name", str),
    CriterionDefinition("province_id", ID_TYPES),
    CriterionDefinition("level", int),
    CriterionDefinition("predefined", bool),
)


def test_argument_of_listed_type_passes() -> None:
    check_argument_type("name", "Beijing", str)
    check_argument_type("id", 42, (str, int))


def test_argument_type_error_names_expected_and_actual_types() -> None:
    with pytest.raises(ArgumentTypeError) as exc_info:
        check_argument_type("level", "high", (int, float))

    assert str(exc_info.value) == (
        "The value of the argument 'level' must be of type int|float, but it is str."
    )


def test_argument_type_error_is_also_a_type_error() -> None:
    with pytest.raises(TypeError):
        check_argument_type("level", "high", int)


def test_none_is_rejected_unless_nullable() -> None:
    check_argument_type("comment", None, str, nullable=True)

    with pytest.raises(ArgumentTypeError, match="cannot be None"):
        check_argument_type("comment", None, str)


def test_bool_never_passes_as_int() -> None:
    with pytest.raises(ArgumentTypeError, match="but it is bool"):
        check_argument_type("level", True, int)

    check_argument_type("visible", True, bool)


@pytest.mark.parametrize("value", [1, "1", "12345678901234567890"])
def test_id_accepts_int_and_str(value) -> None:
    check_id_argument_type(value)


@pytest.mark.parametrize("value", [None, 1.5, True, [1]])
def test_id_rejects_other_values(value) -> None:
    with pytest.raises(ArgumentTypeError):
        check_id_argument_type(value)


def test_id_check_uses_given_argument_name() -> None:
    with pytest.raises(ArgumentTypeError, match="'user_id'"):
        check_id_argument_type(None, "user_id")


def test_id_check_rejects_non_string_name() -> None:
    with pytest.raises(TypeError, match="The name must be a string."):
        check_id_argument_type(1, 3)  # type: ignore[arg-type]


def test_id_array_reports_offending_index() -> None:
    check_id_array_argument_type([1, "2", 3])

    with pytest.raises(ArgumentTypeError, match=r"'ids\[1\]'"):
        check_id_array_argument_type([1, 2.5])


def test_id_array_must_be_a_sequence() -> None:
    with pytest.raises(ArgumentTypeError, match="'ids'"):
        check_id_array_argument_type("1,2")


def test_object_argument_accepts_declared_fields() -> None:
    check_object_argument(
        "criteria", {"name": "Hang", "province_id": "33", "level": 2}, CITY_CRITERIA
    )


def test_object_argument_accepts_camel_case_keys() -> None:
    check_object_argument("criteria", {"provinceId": 33}, CITY_CRITERIA)


def test_object_argument_rejects_undeclared_field() -> None:
    with pytest.raises(UnsupportedFieldError) as exc_info:
        check_object_argument("criteria", {"population": 10}, CITY_CRITERIA)

    assert str(exc_info.value) == 'Unsupported field: "criteria.population"'


def test_object_argument_checks_field_types() -> None:
    with pytest.raises(ArgumentTypeError, match="'criteria.level'"):
        check_object_argument("criteria", {"level": "2"}, CITY_CRITERIA)


def test_object_argument_skips_none_values() -> None:
    check_object_argument("criteria", {"population": None}, CITY_CRITERIA)


def test_object_argument_without_definitions_accepts_anything() -> None:
    check_object_argument("criteria", {"anything": object()})


def test_object_argument_must_be_mapping_or_model() -> None:
    with pytest.raises(ArgumentTypeError):
        check_object_argument("criteria", ["name"], CITY_CRITERIA)


def test_page_request_accepts_model_and_mapping() -> None:
    check_page_request_argument(PageRequest(page_index=2, page_size=10))
    check_page_request_argument({"page_size": 5})


def test_page_request_rejects_non_int_fields() -> None:
    with pytest.raises(ArgumentTypeError, match="page_request.page_size"):
        check_page_request_argument({"page_size": "10"})


def test_sort_request_accepts_fields_of_entity() -> None:
    check_sort_request_argument(
        SortRequest(sort_field="create_time", sort_order=SortOrder.DESC), City
    )
    check_sort_request_argument({"sort_field": "phoneArea", "sort_order": "ASC"}, City)


def test_sort_request_accepts_aliased_field_by_wire_name() -> None:
    check_sort_request_argument({"sort_field": "dict"}, DictEntry)
    check_sort_request_argument({"sort_field": "dictionary"}, DictEntry)


def test_sort_request_rejects_unknown_field() -> None:
    with pytest.raises(ArgumentTypeError) as exc_info:
        check_sort_request_argument({"sort_field": "population"}, City)

    assert str(exc_info.value) == (
        "The sort field 'population' is not a field of the class City."
    )


def test_sort_request_rejects_invalid_order_type() -> None:
    with pytest.raises(ArgumentTypeError, match="sort_request.sort_order"):
        check_sort_request_argument({"sort_order": 1})


def test_criteria_argument_must_be_mapping_or_model() -> None:
    check_criteria_argument({"name": "x"})

    with pytest.raises(ArgumentTypeError):
        check_criteria_argument("name=x")
