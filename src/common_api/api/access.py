"""APIs of roles, role assignments and linked social network accounts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

from ..impl import get_by_key_impl, update_by_key_impl
from ..impl.options import expand_url
from ..schemas.common import State, StatefulInfo
from ..schemas.system import Role, SocialNetwork, SocialNetworkAccount, UserRole
from ..utils.checks import ID_TYPES, check_argument_type, get_field
from .base import (
    AUDIT_CRITERIA,
    AddMixin,
    DeleteMixin,
    EraseMixin,
    ExportMixin,
    GetMixin,
    ImportMixin,
    ListMixin,
    PurgeMixin,
    RestoreMixin,
    UpdateMixin,
    UpdateStateMixin,
    define_criteria,
    info_criteria,
    time_range_criteria,
)

__all__ = ["RoleApi", "UserRoleApi", "SocialNetworkAccountApi"]


class RoleApi(
    ListMixin,
    GetMixin,
    AddMixin,
    UpdateMixin,
    UpdateStateMixin,
    DeleteMixin,
    RestoreMixin,
    PurgeMixin,
    EraseMixin,
    ExportMixin,
    ImportMixin,
):
    base_path = "/role"
    entity_class = Role
    entity_info_class = StatefulInfo
    criteria_definitions = (
        info_criteria("app")
        + define_criteria(name=str, guest=bool, basic=bool, state=(State, str))
        + AUDIT_CRITERIA
    )


class UserRoleApi(
    ListMixin, GetMixin, AddMixin, EraseMixin, ExportMixin, ImportMixin
):
    """Assignments of roles to users. Assignments are never soft-deleted."""

    base_path = "/user-role"
    entity_class = UserRole
    criteria_definitions = (
        define_criteria(user_id=ID_TYPES, username=str)
        + info_criteria("app", "role")
        + time_range_criteria("create_time")
    )


class SocialNetworkAccountApi(
    ListMixin,
    GetMixin,
    AddMixin,
    UpdateMixin,
    DeleteMixin,
    RestoreMixin,
    PurgeMixin,
    EraseMixin,
):
    """Accounts of third-party social networks bound to local users.

    An account is also addressed by its open ID, which is unique within one
    app of one social network.
    """

    base_path = "/social-network-account"
    entity_class = SocialNetworkAccount
    criteria_definitions = (
        define_criteria(
            username=str, social_network=(SocialNetwork, str), app_id=str
        )
        + AUDIT_CRITERIA
    )

    _BY_OPEN_ID = "/social-network-account/open-id/{social_network}/{app_id}/{open_id}"

    def _open_id_url(self, social_network: Any, app_id: Any, name: str) -> str:
        check_argument_type(f"{name}social_network", social_network, (SocialNetwork, str))
        check_argument_type(f"{name}app_id", app_id, str)
        if isinstance(social_network, SocialNetwork):
            social_network = social_network.value
        return expand_url(
            self._BY_OPEN_ID, social_network=social_network, app_id=app_id
        )

    async def get_by_open_id(
        self,
        social_network: Union[SocialNetwork, str],
        app_id: str,
        open_id: str,
        show_loading: bool = True,
    ) -> Optional[SocialNetworkAccount]:
        url = self._open_id_url(social_network, app_id, "")
        return await get_by_key_impl(self, url, "open_id", open_id, show_loading)

    async def update_by_open_id(
        self,
        entity: Union[SocialNetworkAccount, Mapping[str, Any]],
        show_loading: bool = True,
    ) -> Optional[SocialNetworkAccount]:
        """Replace the account addressed by the network, app and open ID it carries."""

        check_argument_type("entity", entity, (SocialNetworkAccount, Mapping))
        url = self._open_id_url(
            get_field(entity, "social_network"), get_field(entity, "app_id"), "entity."
        )
        return await update_by_key_impl(self, url, "open_id", entity, show_loading)
