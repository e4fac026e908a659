"""Entity APIs and the non-CRUD APIs of the backend."""

from .access import RoleApi, SocialNetworkAccountApi, UserRoleApi
from .auth import AppAuthenticateApi, UserAuthenticateApi, VerifyCodeApi
from .base import BaseApi, EntityApi
from .current_user import CurrentUserApi
from .device import DeviceApi, DeviceInitApi
from .file import AttachmentApi, FileApi, UploadApi
from .organization import DepartmentApi, EmployeeApi, OrganizationApi
from .person import PersonApi, UserApi
from .region import CityApi, CountryApi, DistrictApi, ProvinceApi, StreetApi
from .support import FaqApi, FeedbackApi
from .system import (
    AppApi,
    CategoryApi,
    DictApi,
    DictEntryApi,
    OperationLogApi,
    SettingApi,
    SystemApi,
    TaskApi,
)

__all__ = [
    "AppApi",
    "AppAuthenticateApi",
    "AttachmentApi",
    "BaseApi",
    "CategoryApi",
    "CityApi",
    "CountryApi",
    "CurrentUserApi",
    "DepartmentApi",
    "DeviceApi",
    "DeviceInitApi",
    "DictApi",
    "DictEntryApi",
    "DistrictApi",
    "EmployeeApi",
    "EntityApi",
    "FaqApi",
    "FeedbackApi",
    "FileApi",
    "OperationLogApi",
    "OrganizationApi",
    "PersonApi",
    "ProvinceApi",
    "RoleApi",
    "SettingApi",
    "SocialNetworkAccountApi",
    "StreetApi",
    "SystemApi",
    "TaskApi",
    "UploadApi",
    "UserApi",
    "UserAuthenticateApi",
    "UserRoleApi",
    "VerifyCodeApi",
]
