"""APIs of the administrative region hierarchy."""

from __future__ import annotations

from ..schemas.common import Info
from ..schemas.region import City, Country, District, Province, Street
from .base import (
    AUDIT_CRITERIA,
    CodeKeyedCrudMixin,
    define_criteria,
    info_criteria,
)

__all__ = ["CountryApi", "ProvinceApi", "CityApi", "DistrictApi", "StreetApi"]

_REGION_CRITERIA = (
    define_criteria(
        name=str, phone_area=str, postalcode=str, level=int, predefined=bool
    )
    + AUDIT_CRITERIA
)


class CountryApi(CodeKeyedCrudMixin):
    base_path = "/country"
    entity_class = Country
    entity_info_class = Info
    criteria_definitions = (
        define_criteria(
            name=str, short_name=str, phone_area=str, postalcode=str, predefined=bool
        )
        + AUDIT_CRITERIA
    )


class ProvinceApi(CodeKeyedCrudMixin):
    base_path = "/province"
    entity_class = Province
    entity_info_class = Info
    criteria_definitions = info_criteria("country") + _REGION_CRITERIA


class CityApi(CodeKeyedCrudMixin):
    base_path = "/city"
    entity_class = City
    entity_info_class = Info
    criteria_definitions = info_criteria("province") + _REGION_CRITERIA


class DistrictApi(CodeKeyedCrudMixin):
    base_path = "/district"
    entity_class = District
    entity_info_class = Info
    criteria_definitions = info_criteria("city") + _REGION_CRITERIA


class StreetApi(CodeKeyedCrudMixin):
    base_path = "/street"
    entity_class = Street
    entity_info_class = Info
    criteria_definitions = info_criteria("district") + _REGION_CRITERIA
