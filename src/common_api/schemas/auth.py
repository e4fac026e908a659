"""Payloads of the authentication and verification endpoints."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from .common import ApiModel, StatefulInfo
from .organization import EmployeeInfo
from .person import PersonInfo
from .system import UserInfo

__all__ = ["Token", "LoginResponse", "RegisterUserParams", "VerifyScene"]


class Token(ApiModel):
    """Access token issued to a user or an app."""

    value: Optional[str] = None
    create_time: Optional[datetime] = None
    max_age: Optional[int] = None


class LoginResponse(ApiModel):
    app: Optional[StatefulInfo] = None
    user: Optional[UserInfo] = None
    token: Optional[Token] = None
    person: Optional[PersonInfo] = None
    employee: Optional[EmployeeInfo] = None
    privileges: Optional[List[str]] = None
    roles: Optional[List[str]] = None


class RegisterUserParams(ApiModel):
    username: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    nickname: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    verify_code: Optional[str] = None


class VerifyScene(str, Enum):
    """Business scene a verification code is sent for."""

    REGISTER = "REGISTER"
    LOGIN = "LOGIN"
    RESET_PASSWORD = "RESET_PASSWORD"
    CHANGE_MOBILE = "CHANGE_MOBILE"
    CHANGE_EMAIL = "CHANGE_EMAIL"
    BIND_PERSON = "BIND_PERSON"
    BIND_EMPLOYEE = "BIND_EMPLOYEE"
