"""Shared Direct Link enums and small reference/identity models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from direct_link_sdk.schemas.base import BaseSchema, ResourceSchema


class RouteFilterAction(str, Enum):
    """Whether a matching prefix is advertised (``permit``) or dropped (``deny``)."""
    PERMIT = "permit"
    DENY = "deny"


class ConnectionMode(str, Enum):
    DIRECT = "direct"
    TRANSIT = "transit"


class OfferingType(str, Enum):
    CONNECT = "connect"
    DEDICATED = "dedicated"


class ResourceGroupIdentity(BaseSchema):
    id: str = Field(..., description="Resource group identifier.", examples=["56969d6043e9465c883cb9f7363e78e8"])


class ResourceGroupReference(ResourceSchema):
    id: str


class GatewayPortIdentity(BaseSchema):
    """Port to attach a ``connect`` gateway to."""
    id: str = Field(..., description="Port identifier.", examples=["fffdcb1a-fee4-41c7-9e11-9cd99e65c777"])


class GatewayPortReference(ResourceSchema):
    id: str


class AuthenticationKeyIdentity(BaseSchema):
    """Key Protect key used for BGP MD5 authentication."""
    crn: str = Field(
        ...,
        description="CRN of the key.",
        examples=["crn:v1:bluemix:public:kms:us-south:a/766d8d374a484f029d0fca5a40a52a1c:5d343839-07d3-4213-a950-0f71ed45423f:key:7fc1a0ba-4633-48cb-997b-5749787c952c"],
    )


class AuthenticationKeyReference(ResourceSchema):
    crn: str


class GatewayBfdConfigTemplate(BaseSchema):
    interval: int = Field(..., ge=300, le=255000, description="Minimum interval in milliseconds between BFD control packets.")
    multiplier: Optional[int] = Field(default=None, ge=1, le=255, description="Consecutive missed packets before the session is down.")


class GatewayBfdPatchTemplate(BaseSchema):
    interval: Optional[int] = Field(default=None, ge=300, le=255000)
    multiplier: Optional[int] = Field(default=None, ge=1, le=255)


class GatewayBfdConfig(ResourceSchema):
    bfd_status: Optional[str] = None
    bfd_status_updated_at: Optional[datetime] = None
    interval: int
    multiplier: Optional[int] = None


class AsPrependTemplate(BaseSchema):
    """AS path prepend applied to routes matching ``prefix`` / ``specific_prefixes``."""
    length: int = Field(..., ge=3, le=10, description="Number of times the ASN is prepended.")
    policy: str = Field(..., description="'import' or 'export'.", examples=["import"])
    prefix: Optional[str] = Field(default=None, description="Deprecated: use specific_prefixes.")
    specific_prefixes: Optional[List[str]] = Field(default=None, examples=[["192.168.3.0/24"]])


class AsPrepend(ResourceSchema):
    id: str
    length: int
    policy: str
    prefix: Optional[str] = None
    specific_prefixes: Optional[List[str]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PaginationFirst(ResourceSchema):
    href: str


class PaginationNext(ResourceSchema):
    href: Optional[str] = None
    start: Optional[str] = None
