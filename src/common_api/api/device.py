"""API of the devices registered to the system."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Sequence, Union

from ..impl import update_property_impl
from ..impl.options import to_json
from ..schemas.common import Id, State, StatefulInfo
from ..schemas.system import Device
from ..utils.checks import check_argument_type, get_field
from .base import (
    AUDIT_CRITERIA,
    BaseApi,
    CodeKeyedCrudMixin,
    UpdateStateByCodeMixin,
    UpdateStateMixin,
    define_criteria,
    info_criteria,
    time_range_criteria,
)

__all__ = ["DeviceApi", "DeviceInitApi"]


class DeviceApi(CodeKeyedCrudMixin, UpdateStateMixin, UpdateStateByCodeMixin):
    """Devices with their hardware and software inventory.

    Each inventory property is reported through its own endpoint and the
    update returns the new modification timestamp.
    """

    base_path = "/device"
    entity_class = Device
    entity_info_class = StatefulInfo
    criteria_definitions = (
        define_criteria(name=str)
        + info_criteria("category", "organization")
        + define_criteria(ip_address=str, state=(State, str))
        + time_range_criteria("last_startup_time", "last_heartbeat_time")
        + AUDIT_CRITERIA
    )

    async def _update(
        self, id: Id, path: str, name: str, types: Any, value: Any, show_loading: bool
    ) -> Any:
        return await update_property_impl(
            self, self._url(f"/{{id}}/{path}"), id, name, types, value, show_loading
        )

    async def update_hardware(
        self, id: Id, hardware: Mapping[str, Any], show_loading: bool = True
    ) -> Any:
        return await self._update(id, "hardware", "hardware", Mapping, hardware, show_loading)

    async def update_operating_system(
        self, id: Id, operating_system: Mapping[str, Any], show_loading: bool = True
    ) -> Any:
        return await self._update(
            id, "operating-system", "operating_system", Mapping, operating_system, show_loading
        )

    async def update_softwares(
        self, id: Id, softwares: Sequence[Mapping[str, Any]], show_loading: bool = True
    ) -> Any:
        return await self._update(
            id, "softwares", "softwares", (list, tuple), softwares, show_loading
        )

    async def update_deploy_address(
        self, id: Id, deploy_address: Mapping[str, Any], show_loading: bool = True
    ) -> Any:
        return await self._update(
            id, "deploy-address", "deploy_address", Mapping, deploy_address, show_loading
        )

    async def update_location(
        self, id: Id, location: Mapping[str, Any], show_loading: bool = True
    ) -> Any:
        return await self._update(id, "location", "location", Mapping, location, show_loading)

    async def update_ip_address(
        self, id: Id, ip_address: str, show_loading: bool = True
    ) -> Any:
        return await self._update(id, "ip-address", "ip_address", str, ip_address, show_loading)

    async def update_owner(
        self, id: Id, owner: Mapping[str, Any], show_loading: bool = True
    ) -> Any:
        return await self._update(id, "owner", "owner", Mapping, owner, show_loading)

    async def update_last_startup_time(
        self, id: Id, last_startup_time: Any, show_loading: bool = True
    ) -> Any:
        return await self._update(
            id,
            "last-startup-time",
            "last_startup_time",
            (str, datetime),
            last_startup_time,
            show_loading,
        )

    async def update_last_heartbeat_time(
        self, id: Id, last_heartbeat_time: Any, show_loading: bool = True
    ) -> Any:
        return await self._update(
            id,
            "last-heartbeat-time",
            "last_heartbeat_time",
            (str, datetime),
            last_heartbeat_time,
            show_loading,
        )


class DeviceInitApi(BaseApi):
    """Registration of a device by the device itself.

    A device is addressed by its code here, since it does not know the ID the
    backend assigned to it.
    """

    def _show(self, message: str, show_loading: bool) -> None:
        check_argument_type("show_loading", show_loading, bool)
        if show_loading:
            self.http.loading.show(message)

    async def register(
        self, device: Union[Device, Mapping[str, Any]], show_loading: bool = True
    ) -> None:
        check_argument_type("device", device, (Device, Mapping))
        self._show("Registering the device...", show_loading)
        await self.http.post("/device/register", json=to_json(device))
        self.logger.info("device.registered", code=get_field(device, "code"))

    async def unregister(self, code: str, show_loading: bool = True) -> None:
        check_argument_type("code", code, str)
        self._show("Unregistering the device...", show_loading)
        await self.http.put("/device/unregister", json=to_json(code))
        self.logger.info("device.unregistered", code=code)

    async def unbound(self, code: str, show_loading: bool = True) -> None:
        """Release the device from the organization and owner it is bound to."""

        check_argument_type("code", code, str)
        self._show("Unbinding the device...", show_loading)
        await self.http.put("/device/unbound", json=to_json(code))
        self.logger.info("device.unbound", code=code)
