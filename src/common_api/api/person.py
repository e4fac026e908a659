"""APIs of natural persons and of the user accounts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

from ..impl import (
    delete_impl,
    erase_by_key_impl,
    get_by_key_impl,
    get_info_by_key_impl,
    get_property_impl,
    purge_all_impl,
    purge_impl,
    restore_impl,
    update_property_impl,
)
from ..schemas.common import Gender, Id, InfoWithEntity, State, StatefulInfo
from ..schemas.person import Attachment, Contact, Person, PersonInfo
from ..schemas.system import User, UserInfo
from ..utils.checks import ID_TYPES
from .base import (
    AUDIT_CRITERIA,
    AddMixin,
    DeleteMixin,
    EraseMixin,
    ExistsMixin,
    ExportMixin,
    GetMixin,
    ImportMixin,
    ListMixin,
    PurgeMixin,
    RestoreMixin,
    UpdateMixin,
    define_criteria,
    info_criteria,
    time_range_criteria,
)

__all__ = ["PersonApi", "UserApi"]


class _UsernameKeyedMixin(GetMixin):
    async def get_by_username(
        self, username: str, show_loading: bool = True, **options: Any
    ) -> Any:
        return await get_by_key_impl(
            self,
            self._url("/username/{username}"),
            "username",
            username,
            show_loading,
            self._options(options),
        )

    async def get_info_by_username(self, username: str, show_loading: bool = True) -> Any:
        return await get_info_by_key_impl(
            self,
            self._url("/username/{username}/info"),
            "username",
            username,
            show_loading,
        )


class PersonApi(
    ListMixin,
    _UsernameKeyedMixin,
    ExistsMixin,
    AddMixin,
    UpdateMixin,
    DeleteMixin,
    RestoreMixin,
    PurgeMixin,
    EraseMixin,
    ExportMixin,
    ImportMixin,
):
    """Natural persons.

    Reads accept the ``with_user`` and ``transform_urls`` options.
    """

    base_path = "/person"
    entity_class = Person
    entity_info_class = PersonInfo
    criteria_definitions = (
        define_criteria(name=str, username=str, gender=(Gender, str))
        + time_range_criteria("birthday")
        + define_criteria(
            credential_type=str,
            credential_number=str,
            has_medicare=bool,
            medicare_type=str,
        )
        + info_criteria("medicare_city")
        + define_criteria(has_social_security=bool)
        + info_criteria("social_security_city", "source", "category", "organization")
        + define_criteria(
            phone=str, mobile=str, email=str, guardian_id=ID_TYPES, test=bool
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

    async def update_contact(
        self,
        id: Id,
        contact: Union[Contact, Mapping[str, Any]],
        show_loading: bool = True,
        **options: Any,
    ) -> Any:
        return await update_property_impl(
            self,
            self._url("/{id}/contact"),
            id,
            "contact",
            (Contact, Mapping),
            contact,
            show_loading,
            self._options(options),
        )

    async def update_comment(
        self, id: Id, comment: str, show_loading: bool = True, **options: Any
    ) -> Any:
        return await update_property_impl(
            self,
            self._url("/{id}/comment"),
            id,
            "comment",
            str,
            comment,
            show_loading,
            self._options(options),
        )

    async def update_photo(
        self,
        id: Id,
        photo: Union[Attachment, Mapping[str, Any]],
        show_loading: bool = True,
        **options: Any,
    ) -> Any:
        return await update_property_impl(
            self,
            self._url("/{id}/photo"),
            id,
            "photo",
            (Attachment, Mapping),
            photo,
            show_loading,
            self._options(options),
        )

    async def erase_by_username(self, username: str, show_loading: bool = True) -> None:
        await erase_by_key_impl(
            self,
            self._url("/username/{username}/erase"),
            "username",
            username,
            show_loading,
        )


class UserApi(
    ListMixin,
    _UsernameKeyedMixin,
    AddMixin,
    UpdateMixin,
    ExportMixin,
):
    """User accounts of the system.

    Each account property is updated through its own endpoint, and the new
    modification timestamp is returned. Accounts are deleted, restored and purged one at a time.
    """

    base_path = "/user"
    entity_class = User
    entity_info_class = UserInfo
    criteria_definitions = (
        define_criteria(name=str, nickname=str)
        + info_criteria("organization")
        + define_criteria(state=(State, str))
        + time_range_criteria("last_login_time", "valid_time", "expired_time")
        + define_criteria(predefined=bool, test=bool)
        + AUDIT_CRITERIA
    )
    option_definitions = define_criteria(transform_urls=bool)

    async def get_organization(
        self, id: Id, show_loading: bool = True
    ) -> Optional[StatefulInfo]:
        return await get_property_impl(
            self,
            self._url("/{id}/organization"),
            "organization",
            StatefulInfo,
            id,
            show_loading,
        )

    async def delete(self, id: Id, show_loading: bool = True) -> Any:
        return await delete_impl(self, self._url("/{id}"), id, show_loading)

    async def restore(self, id: Id, show_loading: bool = True) -> None:
        await restore_impl(self, self._url("/{id}"), id, show_loading)

    async def purge(self, id: Id, show_loading: bool = True) -> None:
        await purge_impl(self, self._url("/{id}/purge"), id, show_loading)

    async def purge_all(self, show_loading: bool = True) -> int:
        return await purge_all_impl(self, self._url("/purge"), show_loading)

    async def _update_property(
        self, id: Id, name: str, types: Any, value: Any, show_loading: bool
    ) -> Any:
        return await update_property_impl(
            self, self._url(f"/{{id}}/{name}"), id, name, types, value, show_loading
        )

    async def update_username(self, id: Id, username: str, show_loading: bool = True) -> Any:
        return await self._update_property(id, "username", str, username, show_loading)

    async def update_password(self, id: Id, password: str, show_loading: bool = True) -> Any:
        return await self._update_property(id, "password", str, password, show_loading)

    async def update_email(self, id: Id, email: str, show_loading: bool = True) -> Any:
        return await self._update_property(id, "email", str, email, show_loading)

    async def update_mobile(self, id: Id, mobile: str, show_loading: bool = True) -> Any:
        return await self._update_property(id, "mobile", str, mobile, show_loading)

    async def update_comment(self, id: Id, comment: str, show_loading: bool = True) -> Any:
        return await self._update_property(id, "comment", str, comment, show_loading)

    async def update_state(
        self, id: Id, state: Union[State, str], show_loading: bool = True
    ) -> Any:
        return await self._update_property(id, "state", (State, str), state, show_loading)
