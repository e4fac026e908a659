"""Administrative region entities: country, province, city, district, street."""

from __future__ import annotations

from typing import Optional

from .common import Entity, Info

__all__ = ["Country", "Province", "City", "District", "Street"]


class _Region(Entity):
    code: Optional[str] = None
    name: Optional[str] = None
    phone_area: Optional[str] = None
    postalcode: Optional[str] = None
    icon: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    predefined: Optional[bool] = None


class Country(_Region):
    short_name: Optional[str] = None


class Province(_Region):
    country: Optional[Info] = None


class City(_Region):
    province: Optional[Info] = None
    level: Optional[int] = None


class District(_Region):
    city: Optional[Info] = None
    level: Optional[int] = None


class Street(_Region):
    district: Optional[Info] = None
    level: Optional[int] = None
