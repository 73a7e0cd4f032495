"""Virtual connection models.

A virtual connection binds a gateway to a network in the customer's account:
a classic infrastructure account, a VPC, a transit gateway or a Power Virtual
Server workspace.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from direct_link_sdk.schemas.base import BaseSchema, PatchSchema, ResourceSchema


class VirtualConnectionType(str, Enum):
    CLASSIC = "classic"
    VPC = "vpc"
    TRANSIT = "transit"
    POWER_VIRTUAL_SERVER = "power_virtual_server"


class VirtualConnectionStatus(str, Enum):
    PENDING = "pending"
    ATTACHED = "attached"
    APPROVAL_PENDING = "approval_pending"
    REJECTED = "rejected"
    EXPIRED = "expired"
    DELETING = "deleting"
    DETACHED_BY_NETWORK_PENDING = "detached_by_network_pending"
    DETACHED_BY_NETWORK = "detached_by_network"


class GatewayVirtualConnectionTemplate(BaseSchema):
    name: str = Field(
        ...,
        min_length=1,
        max_length=63,
        description="Unique name within the gateway.",
        examples=["newVC"],
    )
    type: VirtualConnectionType = Field(..., description="Kind of network to connect.")
    network_id: Optional[str] = Field(
        default=None,
        description="CRN of the target network; omitted for classic connections.",
        examples=["crn:v1:bluemix:public:is:us-east:a/28e4d90ac7504be69447111122223333::vpc:aaa81ac8-5e96-42a0-a4b7-6c2e2d1bbbbb"],
    )


class GatewayVirtualConnectionPatchTemplate(PatchSchema):
    """Sparse update for a virtual connection.

    ``status`` is only writable by the network owner, to approve
    (``attached``) or reject a cross-account request.
    """

    name: Optional[str] = Field(default=None, min_length=1, max_length=63)
    status: Optional[VirtualConnectionStatus] = None


class GatewayVirtualConnection(ResourceSchema):
    id: str
    name: str
    type: str
    status: str
    created_at: Optional[datetime] = None
    network_account: Optional[str] = None
    network_id: Optional[str] = None


class GatewayVirtualConnectionCollection(ResourceSchema):
    virtual_connections: List[GatewayVirtualConnection] = Field(default_factory=list)
