from __future__ import annotations

import pytest

from common_api.utils import lower_camel, snake_key


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("createTime", "create_time"),
        ("create_time", "create_time"),
        ("md5", "md5"),
        ("provinceId", "province_id"),
    ],
)
def test_snake_key(key: str, expected: str) -> None:
    assert snake_key(key) == expected


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("create_time", "createTime"),
        ("createTime", "createTime"),
        ("name", "name"),
    ],
)
def test_lower_camel(key: str, expected: str) -> None:
    assert lower_camel(key) == expected
