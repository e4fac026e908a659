"""Organizations, departments and their employees."""

from __future__ import annotations

from typing import Optional

from .common import Entity, Gender, Id, Info, InfoWithEntity, State, StatefulInfo
from .person import Attachment, Contact

__all__ = ["Organization", "Department", "Employee", "EmployeeInfo"]


class Organization(Entity):
    code: Optional[str] = None
    name: Optional[str] = None
    parent: Optional[StatefulInfo] = None
    category: Optional[InfoWithEntity] = None
    contact: Optional[Contact] = None
    principal: Optional[Info] = None
    state: Optional[State] = None
    description: Optional[str] = None
    predefined: Optional[bool] = None


class Department(Entity):
    code: Optional[str] = None
    name: Optional[str] = None
    organization: Optional[StatefulInfo] = None
    parent: Optional[StatefulInfo] = None
    category: Optional[InfoWithEntity] = None
    contact: Optional[Contact] = None
    principal: Optional[Info] = None
    state: Optional[State] = None
    description: Optional[str] = None


class Employee(Entity):
    code: Optional[str] = None
    name: Optional[str] = None
    username: Optional[str] = None
    gender: Optional[Gender] = None
    person: Optional[Info] = None
    organization: Optional[StatefulInfo] = None
    department: Optional[StatefulInfo] = None
    category: Optional[InfoWithEntity] = None
    photo: Optional[Attachment] = None
    contact: Optional[Contact] = None
    state: Optional[State] = None
    comment: Optional[str] = None
    test: Optional[bool] = None


class EmployeeInfo(StatefulInfo):
    username: Optional[str] = None
    organization_id: Optional[Id] = None
    department_id: Optional[Id] = None
