"""Entities of the system administration domain."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from .common import ApiModel, Entity, Id, Info, InfoWithEntity, State, StatefulInfo
from .person import Contact

__all__ = [
    "App",
    "Category",
    "Dict",
    "DictEntry",
    "DictEntryInfo",
    "Device",
    "Faq",
    "Feedback",
    "FeedbackAction",
    "FeedbackTrack",
    "OperationLog",
    "OperationLogInfo",
    "Role",
    "Setting",
    "SocialNetwork",
    "SocialNetworkAccount",
    "SystemInfo",
    "TaskInfo",
    "TaskStatus",
    "User",
    "UserInfo",
    "UserRole",
]


class App(Entity):
    code: Optional[str] = None
    name: Optional[str] = None
    organization: Optional[StatefulInfo] = None
    security_key: Optional[str] = None
    state: Optional[State] = None
    icon: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    predefined: Optional[bool] = None


class Category(Entity):
    entity: Optional[str] = None
    code: Optional[str] = None
    name: Optional[str] = None
    parent: Optional[InfoWithEntity] = None
    icon: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    predefined: Optional[bool] = None


class Dict(Entity):
    code: Optional[str] = None
    name: Optional[str] = None
    standard_doc: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    predefined: Optional[bool] = None


class DictEntry(Entity):
    dictionary: Optional[Info] = Field(default=None, alias="dict")
    code: Optional[str] = None
    name: Optional[str] = None
    parent: Optional[Info] = None
    description: Optional[str] = None


class DictEntryInfo(Info):
    dict_id: Optional[Id] = None


class Device(Entity):
    code: Optional[str] = None
    name: Optional[str] = None
    category: Optional[InfoWithEntity] = None
    organization: Optional[StatefulInfo] = None
    hardware: Optional[dict[str, Any]] = None
    operating_system: Optional[dict[str, Any]] = None
    softwares: Optional[List[dict[str, Any]]] = None
    deploy_address: Optional[dict[str, Any]] = None
    location: Optional[dict[str, Any]] = None
    ip_address: Optional[str] = None
    owner: Optional[dict[str, Any]] = None
    last_startup_time: Optional[datetime] = None
    last_heartbeat_time: Optional[datetime] = None
    state: Optional[State] = None
    description: Optional[str] = None


class Faq(Entity):
    app: Optional[StatefulInfo] = None
    category: Optional[InfoWithEntity] = None
    product: Optional[Info] = None
    question: Optional[str] = None
    answer: Optional[str] = None
    state: Optional[State] = None


class UserInfo(Info):
    username: Optional[str] = None
    nickname: Optional[str] = None
    avatar: Optional[str] = None


class Feedback(Entity):
    app: Optional[StatefulInfo] = None
    type: Optional[str] = None
    category: Optional[str] = None
    submitter: Optional[UserInfo] = None
    title: Optional[str] = None
    content: Optional[str] = None
    contact: Optional[Contact] = None
    reply: Optional[str] = None
    reply_time: Optional[datetime] = None
    status: Optional[str] = None


class OperationLog(Entity):
    action: Optional[str] = None
    resource: Optional[str] = None
    property: Optional[str] = None
    user: Optional[UserInfo] = None
    app: Optional[StatefulInfo] = None
    success: Optional[bool] = None
    error_type: Optional[str] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    request_time: Optional[datetime] = None
    response_time: Optional[datetime] = None
    latency: Optional[int] = None
    client_ip: Optional[str] = None
    request_host: Optional[str] = None
    http_method: Optional[str] = None
    trace_id: Optional[str] = None
    span_id: Optional[str] = None
    correlation_id: Optional[str] = None
    request_id: Optional[str] = None
    api_version: Optional[str] = None
    endpoint: Optional[str] = None
    service: Optional[str] = None
    service_host: Optional[str] = None
    thread: Optional[str] = None
    instance: Optional[str] = None


class OperationLogInfo(ApiModel):
    id: Optional[Id] = None
    action: Optional[str] = None
    resource: Optional[str] = None
    username: Optional[str] = None
    success: Optional[bool] = None
    request_time: Optional[datetime] = None


class Role(Entity):
    app: Optional[StatefulInfo] = None
    code: Optional[str] = None
    name: Optional[str] = None
    privileges: Optional[List[str]] = None
    state: Optional[State] = None
    description: Optional[str] = None
    predefined: Optional[bool] = None


class Setting(ApiModel):
    """A named system setting. Settings are keyed by name, not by ID."""

    name: Optional[str] = None
    type: Optional[str] = None
    readonly: Optional[bool] = None
    nullable: Optional[bool] = None
    multiple: Optional[bool] = None
    encrypted: Optional[bool] = None
    value: Optional[str] = None
    description: Optional[str] = None
    create_time: Optional[datetime] = None
    modify_time: Optional[datetime] = None


class SocialNetwork(str, Enum):
    WECHAT = "WECHAT"
    QQ = "QQ"
    WEIBO = "WEIBO"
    ALIPAY = "ALIPAY"
    DINGTALK = "DINGTALK"


class SocialNetworkAccount(Entity):
    user: Optional[UserInfo] = None
    social_network: Optional[SocialNetwork] = None
    app_id: Optional[str] = None
    open_id: Optional[str] = None
    union_id: Optional[str] = None
    nickname: Optional[str] = None
    avatar: Optional[str] = None


class SystemInfo(ApiModel):
    """Name and version of the backend software."""

    name: Optional[str] = None
    version: Optional[str] = None
    vendor: Optional[str] = None
    homepage: Optional[str] = None
    description: Optional[str] = None


class TaskStatus(str, Enum):
    PENDING = "PENDING"
    RUNNING = "RUNNING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"


class TaskInfo(Entity):
    type: Optional[str] = None
    name: Optional[str] = None
    category: Optional[InfoWithEntity] = None
    target_entity: Optional[str] = None
    target_id: Optional[Id] = None
    result_entity: Optional[str] = None
    result_id: Optional[Id] = None
    status: Optional[TaskStatus] = None
    progress: Optional[int] = None
    submit_time: Optional[datetime] = None
    start_time: Optional[datetime] = None
    cancel_time: Optional[datetime] = None
    finish_time: Optional[datetime] = None
    result: Optional[Any] = None
    error: Optional[str] = None


class User(Entity):
    username: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    nickname: Optional[str] = None
    avatar: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    organization: Optional[StatefulInfo] = None
    roles: Optional[List[str]] = None
    state: Optional[State] = None
    comment: Optional[str] = None
    last_login_time: Optional[datetime] = None
    valid_time: Optional[datetime] = None
    expired_time: Optional[datetime] = None
    predefined: Optional[bool] = None
    test: Optional[bool] = None


class UserRole(Entity):
    user: Optional[UserInfo] = None
    role: Optional[StatefulInfo] = None


class FeedbackAction(str, Enum):
    REPLY = "REPLY"
    ACCEPT = "ACCEPT"
    REJECT = "REJECT"
    CLOSE = "CLOSE"
    REOPEN = "REOPEN"


class FeedbackTrack(Entity):
    """One step in the handling history of a feedback."""

    feedback_id: Optional[Id] = None
    action: Optional[FeedbackAction] = None
    operator: Optional[UserInfo] = None
    content: Optional[str] = None
    attachments: Optional[List[dict[str, Any]]] = None
