"""Facade bundling one API object per backend resource on a shared transport."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .api import (
    AppApi,
    AppAuthenticateApi,
    AttachmentApi,
    CategoryApi,
    CityApi,
    CountryApi,
    CurrentUserApi,
    DepartmentApi,
    DeviceApi,
    DeviceInitApi,
    DictApi,
    DictEntryApi,
    DistrictApi,
    EmployeeApi,
    FaqApi,
    FeedbackApi,
    FileApi,
    OperationLogApi,
    OrganizationApi,
    PersonApi,
    ProvinceApi,
    RoleApi,
    SettingApi,
    SocialNetworkAccountApi,
    StreetApi,
    SystemApi,
    TaskApi,
    UploadApi,
    UserApi,
    UserAuthenticateApi,
    UserRoleApi,
    VerifyCodeApi,
)
from .config import ClientSettings, load_settings
from .http import HttpTransport, LoadingIndicator
from .logging import configure_logging


@dataclass(slots=True)
class ApiClient:
    """Every API of the backend, sharing one :class:`HttpTransport`.

    Use it as an async context manager to close the underlying HTTP client::

        async with ApiClient.from_settings() as client:
            page = await client.city.list({"page_size": 20})
    """

    http: HttpTransport

    app: AppApi = field(init=False)
    app_authenticate: AppAuthenticateApi = field(init=False)
    attachment: AttachmentApi = field(init=False)
    category: CategoryApi = field(init=False)
    city: CityApi = field(init=False)
    country: CountryApi = field(init=False)
    current_user: CurrentUserApi = field(init=False)
    department: DepartmentApi = field(init=False)
    device: DeviceApi = field(init=False)
    device_init: DeviceInitApi = field(init=False)
    dict: DictApi = field(init=False)
    dict_entry: DictEntryApi = field(init=False)
    district: DistrictApi = field(init=False)
    employee: EmployeeApi = field(init=False)
    faq: FaqApi = field(init=False)
    feedback: FeedbackApi = field(init=False)
    file: FileApi = field(init=False)
    operation_log: OperationLogApi = field(init=False)
    organization: OrganizationApi = field(init=False)
    person: PersonApi = field(init=False)
    province: ProvinceApi = field(init=False)
    role: RoleApi = field(init=False)
    setting: SettingApi = field(init=False)
    social_network_account: SocialNetworkAccountApi = field(init=False)
    street: StreetApi = field(init=False)
    system: SystemApi = field(init=False)
    task: TaskApi = field(init=False)
    upload: UploadApi = field(init=False)
    user: UserApi = field(init=False)
    user_authenticate: UserAuthenticateApi = field(init=False)
    user_role: UserRoleApi = field(init=False)
    verify_code: VerifyCodeApi = field(init=False)

    def __post_init__(self) -> None:
        http = self.http
        self.app = AppApi(http)
        self.app_authenticate = AppAuthenticateApi(http)
        self.attachment = AttachmentApi(http)
        self.category = CategoryApi(http)
        self.city = CityApi(http)
        self.country = CountryApi(http)
        self.current_user = CurrentUserApi(http)
        self.department = DepartmentApi(http)
        self.device = DeviceApi(http)
        self.device_init = DeviceInitApi(http)
        self.dict = DictApi(http)
        self.dict_entry = DictEntryApi(http)
        self.district = DistrictApi(http)
        self.employee = EmployeeApi(http)
        self.faq = FaqApi(http)
        self.feedback = FeedbackApi(http)
        self.file = FileApi(http)
        self.operation_log = OperationLogApi(http)
        self.organization = OrganizationApi(http)
        self.person = PersonApi(http)
        self.province = ProvinceApi(http)
        self.role = RoleApi(http)
        self.setting = SettingApi(http)
        self.social_network_account = SocialNetworkAccountApi(http)
        self.street = StreetApi(http)
        self.system = SystemApi(http)
        self.task = TaskApi(http)
        self.upload = UploadApi(http)
        self.user = UserApi(http)
        self.user_authenticate = UserAuthenticateApi(http)
        self.user_role = UserRoleApi(http)
        self.verify_code = VerifyCodeApi(http)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ClientSettings] = None,
        loading: Optional[LoadingIndicator] = None,
        setup_logging: bool = False,
    ) -> "ApiClient":
        """Build a client from ``settings``, read from the environment when omitted.

        With ``setup_logging`` the process-wide logging is also configured
        from ``log_level`` and ``log_json``.
        """

        settings = settings or load_settings()
        if setup_logging:
            configure_logging(settings.log_level, json=settings.log_json)
        return cls(HttpTransport.from_settings(settings, loading=loading))

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.aclose()
