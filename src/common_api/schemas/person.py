"""People, contacts and the files attached to them."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional

from .common import ApiModel, Entity, Gender, Id, Info, InfoWithEntity, State, StatefulInfo

__all__ = [
    "Address",
    "Contact",
    "Credential",
    "Upload",
    "Attachment",
    "Person",
    "PersonInfo",
]


class Address(ApiModel):
    country: Optional[Info] = None
    province: Optional[Info] = None
    city: Optional[Info] = None
    district: Optional[Info] = None
    street: Optional[Info] = None
    detail: Optional[str] = None
    postalcode: Optional[str] = None


class Contact(ApiModel):
    phone: Optional[str] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    url: Optional[str] = None
    address: Optional[Address] = None
    phone_verified: Optional[bool] = None
    mobile_verified: Optional[bool] = None
    email_verified: Optional[bool] = None


class Credential(ApiModel):
    type: Optional[str] = None
    number: Optional[str] = None


class Upload(Entity):
    """A file stored by the upload service."""

    filename: Optional[str] = None
    content_type: Optional[str] = None
    size: Optional[int] = None
    url: Optional[str] = None
    path: Optional[str] = None
    md5: Optional[str] = None


class Attachment(Entity):
    """A file attached to an owner entity."""

    type: Optional[str] = None
    classification: Optional[str] = None
    index: Optional[int] = None
    owner_type: Optional[str] = None
    owner_id: Optional[Id] = None
    upload: Optional[Upload] = None
    visible: Optional[bool] = None
    state: Optional[State] = None
    description: Optional[str] = None


class Person(Entity):
    name: Optional[str] = None
    username: Optional[str] = None
    gender: Optional[Gender] = None
    birthday: Optional[date] = None
    credential: Optional[Credential] = None
    has_medicare: Optional[bool] = None
    medicare_type: Optional[str] = None
    medicare_city: Optional[Info] = None
    has_social_security: Optional[bool] = None
    social_security_city: Optional[Info] = None
    source: Optional[Info] = None
    category: Optional[InfoWithEntity] = None
    photo: Optional[Attachment] = None
    contact: Optional[Contact] = None
    guardian: Optional[Info] = None
    organization: Optional[StatefulInfo] = None
    comment: Optional[str] = None
    test: Optional[bool] = None
    extra: Optional[Dict[str, Any]] = None


class PersonInfo(Info):
    username: Optional[str] = None
    gender: Optional[Gender] = None
    mobile: Optional[str] = None
