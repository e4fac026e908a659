"""API of the logged-in user, and of the person and employee bound to it."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

from ..impl.options import create_entity, to_json
from ..schemas.common import Info
from ..schemas.organization import Employee, EmployeeInfo
from ..schemas.person import Credential, Person, PersonInfo
from ..schemas.system import User, UserInfo
from ..utils.checks import check_argument_type
from .base import BaseApi

__all__ = ["CurrentUserApi"]


class CurrentUserApi(BaseApi):
    """Operations on the records of whoever is logged in.

    The backend resolves the user from the access token, so no method takes
    an ID.
    """

    base_path = "/me"

    async def _get(self, suffix: str, cls: type, show_loading: bool) -> Any:
        check_argument_type("show_loading", show_loading, bool)
        if show_loading:
            self.http.loading.show_getting()
        obj = await self.http.get(self.base_path + suffix)
        result = create_entity(cls, obj)
        self.logger.info("me.got", resource=suffix.lstrip("/"))
        self.logger.debug("me.value", resource=suffix.lstrip("/"), value=result)
        return result

    async def _exists(self, suffix: str, show_loading: bool) -> bool:
        check_argument_type("show_loading", show_loading, bool)
        if show_loading:
            self.http.loading.show_getting()
        found = await self.http.head(self.base_path + suffix)
        self.logger.info("me.existence_checked", resource=suffix.lstrip("/"), exists=found)
        return found

    async def _send(
        self,
        method: str,
        suffix: str,
        name: str,
        value: Any,
        types: Any,
        cls: type,
        show_loading: bool,
    ) -> Any:
        check_argument_type(name, value, types)
        check_argument_type("show_loading", show_loading, bool)
        loading = self.http.loading
        if show_loading:
            if method == "POST":
                loading.show_adding()
            else:
                loading.show_updating()
        send = self.http.post if method == "POST" else self.http.put
        obj = await send(self.base_path + suffix, json=to_json(value))
        result = create_entity(cls, obj)
        self.logger.info("me.saved", resource=suffix.lstrip("/"), method=method)
        self.logger.debug("me.value", resource=suffix.lstrip("/"), value=result)
        return result

    async def get_user(self, show_loading: bool = True) -> Optional[User]:
        return await self._get("/user", User, show_loading)

    async def get_user_info(self, show_loading: bool = True) -> Optional[UserInfo]:
        return await self._get("/user/info", UserInfo, show_loading)

    async def update_user(
        self, user: Union[User, Mapping[str, Any]], show_loading: bool = True
    ) -> Optional[User]:
        return await self._send(
            "PUT", "/user", "user", user, (User, Mapping), User, show_loading
        )

    async def exists_person(self, show_loading: bool = True) -> bool:
        return await self._exists("/person", show_loading)

    async def get_person(self, show_loading: bool = True) -> Optional[Person]:
        return await self._get("/person", Person, show_loading)

    async def get_person_info(self, show_loading: bool = True) -> Optional[PersonInfo]:
        return await self._get("/person/info", PersonInfo, show_loading)

    async def add_person(
        self, person: Union[Person, Mapping[str, Any]], show_loading: bool = True
    ) -> Optional[Person]:
        return await self._send(
            "POST", "/person", "person", person, (Person, Mapping), Person, show_loading
        )

    async def update_person(
        self, person: Union[Person, Mapping[str, Any]], show_loading: bool = True
    ) -> Optional[Person]:
        return await self._send(
            "PUT", "/person", "person", person, (Person, Mapping), Person, show_loading
        )

    async def bind_person(
        self,
        name: str,
        mobile: str,
        credential: Union[Credential, Mapping[str, Any]],
        verify_code: str,
        show_loading: bool = True,
    ) -> Optional[PersonInfo]:
        """Bind an existing person record to the user, proven by a verification code."""

        check_argument_type("name", name, str)
        check_argument_type("mobile", mobile, str)
        check_argument_type("credential", credential, (Credential, Mapping))
        check_argument_type("verify_code", verify_code, str)
        data = {
            "name": name,
            "mobile": mobile,
            "credential": credential,
            "verify_code": verify_code,
        }
        return await self._send(
            "POST", "/person/bind", "data", data, Mapping, PersonInfo, show_loading
        )

    async def exists_employee(self, show_loading: bool = True) -> bool:
        return await self._exists("/employee", show_loading)

    async def get_employee(self, show_loading: bool = True) -> Optional[Employee]:
        return await self._get("/employee", Employee, show_loading)

    async def get_employee_info(self, show_loading: bool = True) -> Optional[EmployeeInfo]:
        return await self._get("/employee/info", EmployeeInfo, show_loading)

    async def add_employee(
        self, employee: Union[Employee, Mapping[str, Any]], show_loading: bool = True
    ) -> Optional[Employee]:
        return await self._send(
            "POST",
            "/employee",
            "employee",
            employee,
            (Employee, Mapping),
            Employee,
            show_loading,
        )

    async def update_employee(
        self, employee: Union[Employee, Mapping[str, Any]], show_loading: bool = True
    ) -> Optional[Employee]:
        return await self._send(
            "PUT",
            "/employee",
            "employee",
            employee,
            (Employee, Mapping),
            Employee,
            show_loading,
        )

    async def bind_employee(
        self,
        name: str,
        mobile: str,
        organization: Union[Info, Mapping[str, Any]],
        verify_code: str,
        show_loading: bool = True,
    ) -> Optional[EmployeeInfo]:
        check_argument_type("name", name, str)
        check_argument_type("mobile", mobile, str)
        check_argument_type("organization", organization, (Info, Mapping))
        check_argument_type("verify_code", verify_code, str)
        data = {
            "name": name,
            "mobile": mobile,
            "organization": organization,
            "verify_code": verify_code,
        }
        return await self._send(
            "POST", "/employee/bind", "data", data, Mapping, EmployeeInfo, show_loading
        )
