"""APIs of organizations, their departments and employees."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from ..impl import get_property_by_key_impl, get_property_impl, update_property_impl
from ..schemas.common import Gender, Id, InfoWithEntity, State, StatefulInfo
from ..schemas.organization import Department, Employee, EmployeeInfo, Organization
from ..schemas.person import Attachment
from ..utils.checks import ID_TYPES
from .base import (
    AUDIT_CRITERIA,
    CodeKeyedCrudMixin,
    UpdateStateByCodeMixin,
    UpdateStateMixin,
    define_criteria,
    info_criteria,
)

__all__ = ["OrganizationApi", "DepartmentApi", "EmployeeApi"]


class OrganizationApi(CodeKeyedCrudMixin, UpdateStateMixin, UpdateStateByCodeMixin):
    base_path = "/organization"
    entity_class = Organization
    entity_info_class = StatefulInfo
    criteria_definitions = (
        define_criteria(name=str)
        + info_criteria(
            "category", "parent", "country", "province", "city", "district", "street"
        )
        + define_criteria(
            postalcode=str,
            phone=str,
            mobile=str,
            email=str,
            state=(State, str),
            test=bool,
            predefined=bool,
        )
        + AUDIT_CRITERIA
    )


class DepartmentApi(CodeKeyedCrudMixin, UpdateStateMixin, UpdateStateByCodeMixin):
    base_path = "/department"
    entity_class = Department
    entity_info_class = StatefulInfo
    criteria_definitions = (
        define_criteria(name=str)
        + info_criteria("organization", "parent", "category")
        + define_criteria(phone=str, mobile=str, email=str, state=(State, str))
        + AUDIT_CRITERIA
    )


class EmployeeApi(CodeKeyedCrudMixin, UpdateStateMixin, UpdateStateByCodeMixin):
    """Employees of the organizations.

    Reads accept the ``with_user`` option to embed the user account and the
    ``transform_urls`` option to turn stored paths into download URLs.
    """

    base_path = "/employee"
    entity_class = Employee
    entity_info_class = EmployeeInfo
    criteria_definitions = (
        define_criteria(
            username=str,
            person_id=ID_TYPES,
            internal_code=str,
            name=str,
            gender=(Gender, str),
            credential_type=str,
            credential_number=str,
        )
        + info_criteria("category", "organization", "department")
        + define_criteria(
            phone=str,
            mobile=str,
            email=str,
            job_title=str,
            state=(State, str),
            test=bool,
        )
        + AUDIT_CRITERIA
    )
    option_definitions = define_criteria(with_user=bool, transform_urls=bool)

    async def get_category(
        self, id: Id, show_loading: bool = True
    ) -> Optional[InfoWithEntity]:
        return await get_property_impl(
            self, self._url("/{id}/category"), "category", InfoWithEntity, id, show_loading
        )

    async def get_category_by_code(
        self, code: str, show_loading: bool = True
    ) -> Optional[InfoWithEntity]:
        return await get_property_by_key_impl(
            self,
            self._url("/code/{code}/category"),
            "category",
            InfoWithEntity,
            "code",
            code,
            show_loading,
        )

    async def get_photo(
        self, id: Id, show_loading: bool = True, **options: Any
    ) -> Optional[Attachment]:
        return await get_property_impl(
            self,
            self._url("/{id}/photo"),
            "photo",
            Attachment,
            id,
            show_loading,
            self._options(options),
        )

    async def update_photo(
        self, id: Id, photo: Any, show_loading: bool = True
    ) -> Any:
        return await update_property_impl(
            self,
            self._url("/{id}/photo"),
            id,
            "photo",
            (Attachment, Mapping),
            photo,
            show_loading,
        )
