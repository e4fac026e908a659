"""Conversion between the caller's and the wire's field naming."""

from __future__ import annotations

from pydantic.alias_generators import to_camel, to_snake


def snake_key(key: str) -> str:
    """Return ``key`` in ``lower_underscore`` form.

    Keys without upper case letters are already in wire form and are kept
    as is, so ``md5`` does not become ``md_5``.
    """

    if not any(char.isupper() for char in key):
        return key
    return to_snake(key)


def lower_camel(key: str) -> str:
    """Return ``key`` in ``lowerCamel`` form, e.g. ``create_time`` -> ``createTime``."""

    camel = to_camel(snake_key(key))
    return camel[:1].lower() + camel[1:]
