"""Gateway models

Overview
--------
Pydantic models for Direct Link gateways, aligned with the Direct Link v1
API. Two areas are polymorphic and resolved by the ``type`` discriminator:

- ``GatewayTemplate``: ``dedicated`` (customer cross-connect at an IBM
  location) vs ``connect`` (provisioned on a provider port).
- ``Gateway.change_request``: pending ``create_gateway``, ``delete_gateway``
  or ``update_attributes`` requests on provider-managed gateways.

Endpoint mapping
----------------
- ``GET /gateways`` → ``GatewayCollection``
- ``POST /gateways`` ← ``GatewayTemplate`` → ``Gateway``
- ``GET /gateways/{id}`` → ``Gateway``
- ``PATCH /gateways/{id}`` ← ``GatewayPatchTemplate.as_patch()`` → ``Gateway``
- ``POST /gateways/{id}/actions`` ← ``GatewayActionTemplate`` → ``Gateway``
- ``GET /gateways/{id}/statistics`` → ``GatewayStatisticCollection``
- ``GET /gateways/{id}/status`` → ``GatewayStatusCollection``
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import Discriminator, Field, Tag, TypeAdapter

from direct_link_sdk.schemas.base import BaseSchema, PatchSchema, ResourceSchema

from .common import (
    AsPrepend,
    AsPrependTemplate,
    AuthenticationKeyIdentity,
    AuthenticationKeyReference,
    ConnectionMode,
    GatewayBfdConfig,
    GatewayBfdConfigTemplate,
    GatewayBfdPatchTemplate,
    GatewayPortIdentity,
    GatewayPortReference,
    ResourceGroupIdentity,
    ResourceGroupReference,
    RouteFilterAction,
)
from .route_filter import GatewayTemplateRouteFilter


class GatewayType(str, Enum):
    CONNECT = "connect"
    DEDICATED = "dedicated"


class GatewayAction(str, Enum):
    """Actions a customer can take on a provider-initiated change request."""
    CREATE_GATEWAY_APPROVE = "create_gateway_approve"
    CREATE_GATEWAY_REJECT = "create_gateway_reject"
    DELETE_GATEWAY_APPROVE = "delete_gateway_approve"
    DELETE_GATEWAY_REJECT = "delete_gateway_reject"
    UPDATE_ATTRIBUTES_APPROVE = "update_attributes_approve"
    UPDATE_ATTRIBUTES_REJECT = "update_attributes_reject"


class GatewayStatisticType(str, Enum):
    MACSEC_MKA = "macsec_mka"
    MACSEC_SECURITY = "macsec_security"


class GatewayStatusType(str, Enum):
    BGP = "bgp"
    LINK = "link"
    MACSEC = "macsec"


# -----------------------------
# Create templates
# -----------------------------


class _GatewayTemplateBase(BaseSchema):
    bgp_asn: int = Field(..., ge=1, le=4294967295, description="Customer BGP ASN.", examples=[64999])
    global_: bool = Field(
        ...,
        alias="global",
        description="True for global routing, false for local routing only.",
    )
    metered: bool = Field(..., description="Metered billing when true, unlimited when false.")
    name: str = Field(..., min_length=1, max_length=63, description="Unique gateway name.", examples=["myGateway"])
    speed_mbps: int = Field(..., description="Gateway speed in megabits per second.", examples=[1000])
    as_prepends: Optional[List[AsPrependTemplate]] = None
    authentication_key: Optional[AuthenticationKeyIdentity] = None
    bfd_config: Optional[GatewayBfdConfigTemplate] = None
    bgp_base_cidr: Optional[str] = Field(default=None, description="Deprecated in favour of bgp_cer_cidr/bgp_ibm_cidr.")
    bgp_cer_cidr: Optional[str] = Field(default=None, examples=["169.254.0.10/30"])
    bgp_ibm_cidr: Optional[str] = Field(default=None, examples=["169.254.0.9/30"])
    connection_mode: Optional[ConnectionMode] = None
    default_export_route_filter: Optional[RouteFilterAction] = None
    default_import_route_filter: Optional[RouteFilterAction] = None
    export_route_filters: Optional[List[GatewayTemplateRouteFilter]] = None
    import_route_filters: Optional[List[GatewayTemplateRouteFilter]] = None
    patch_panel_completion_notice: Optional[str] = None
    resource_group: Optional[ResourceGroupIdentity] = None


class GatewayTemplateDedicated(_GatewayTemplateBase):
    """Template for a ``dedicated`` gateway at an IBM location."""

    type: Literal["dedicated"] = "dedicated"
    carrier_name: str = Field(..., min_length=1, max_length=128, examples=["myCarrierName"])
    cross_connect_router: str = Field(..., examples=["xcr01.dal03"])
    customer_name: str = Field(..., min_length=1, max_length=128, examples=["newCustomerName"])
    location_name: str = Field(..., examples=["dal03"])
    vlan: Optional[int] = Field(default=None, ge=2, le=3967)


class GatewayTemplateConnect(_GatewayTemplateBase):
    """Template for a ``connect`` gateway on a provider port."""

    type: Literal["connect"] = "connect"
    port: GatewayPortIdentity


GatewayTemplate = Annotated[
    Union[GatewayTemplateDedicated, GatewayTemplateConnect],
    Field(discriminator="type"),
]

GATEWAY_TEMPLATE_ADAPTER: TypeAdapter = TypeAdapter(GatewayTemplate)


# -----------------------------
# Update / action templates
# -----------------------------


class GatewayPatchTemplate(PatchSchema):
    """Sparse gateway update sent as a JSON Merge-Patch.

    Examples:
        >>> GatewayPatchTemplate(name="renamed", global_=False).as_patch()
        {'global': False, 'name': 'renamed'}
    """

    authentication_key: Optional[AuthenticationKeyIdentity] = None
    bfd_config: Optional[GatewayBfdPatchTemplate] = None
    connection_mode: Optional[ConnectionMode] = None
    default_export_route_filter: Optional[RouteFilterAction] = None
    default_import_route_filter: Optional[RouteFilterAction] = None
    global_: Optional[bool] = Field(default=None, alias="global")
    loa_reject_reason: Optional[str] = None
    metered: Optional[bool] = None
    name: Optional[str] = Field(default=None, min_length=1, max_length=63)
    operational_status: Optional[str] = None
    patch_panel_completion_notice: Optional[str] = None
    speed_mbps: Optional[int] = None


class GatewayActionUpdate(BaseSchema):
    """One attribute change being approved by ``update_attributes_approve``."""

    speed_mbps: Optional[int] = None


class GatewayActionTemplate(BaseSchema):
    action: GatewayAction
    authentication_key: Optional[AuthenticationKeyIdentity] = None
    bfd_config: Optional[GatewayBfdConfigTemplate] = None
    connection_mode: Optional[ConnectionMode] = None
    default_export_route_filter: Optional[RouteFilterAction] = None
    default_import_route_filter: Optional[RouteFilterAction] = None
    export_route_filters: Optional[List[GatewayTemplateRouteFilter]] = None
    global_: Optional[bool] = Field(default=None, alias="global")
    import_route_filters: Optional[List[GatewayTemplateRouteFilter]] = None
    metered: Optional[bool] = None
    resource_group: Optional[ResourceGroupIdentity] = None
    updates: Optional[List[GatewayActionUpdate]] = None


# -----------------------------
# Resources
# -----------------------------


class GatewayChangeRequestCreate(ResourceSchema):
    type: Literal["create_gateway"]


class GatewayChangeRequestDelete(ResourceSchema):
    type: Literal["delete_gateway"]


class GatewayChangeRequestUpdateAttributes(ResourceSchema):
    type: Literal["update_attributes"]
    updates: List[Dict[str, Any]] = Field(default_factory=list)


class GatewayChangeRequestGeneric(ResourceSchema):
    """Change request of a type this client does not model yet."""

    type: str


_CHANGE_REQUEST_TYPES = ("create_gateway", "delete_gateway", "update_attributes")


def _change_request_tag(value: Any) -> str:
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return kind if kind in _CHANGE_REQUEST_TYPES else "generic"


GatewayChangeRequest = Annotated[
    Union[
        Annotated[GatewayChangeRequestCreate, Tag("create_gateway")],
        Annotated[GatewayChangeRequestDelete, Tag("delete_gateway")],
        Annotated[GatewayChangeRequestUpdateAttributes, Tag("update_attributes")],
        Annotated[GatewayChangeRequestGeneric, Tag("generic")],
    ],
    Discriminator(_change_request_tag),
]


class Gateway(ResourceSchema):
    """Direct Link gateway as returned by the API."""

    id: str
    name: str
    type: str
    speed_mbps: int
    bgp_asn: int
    global_: bool = Field(..., alias="global")
    metered: bool
    created_at: datetime
    crn: str
    location_name: str
    location_display_name: str
    operational_status: str
    as_prepends: Optional[List[AsPrepend]] = None
    authentication_key: Optional[AuthenticationKeyReference] = None
    bfd_config: Optional[GatewayBfdConfig] = None
    bgp_base_cidr: Optional[str] = None
    bgp_cer_cidr: Optional[str] = None
    bgp_ibm_asn: Optional[int] = None
    bgp_ibm_cidr: Optional[str] = None
    bgp_status: Optional[str] = None
    bgp_status_updated_at: Optional[datetime] = None
    carrier_name: Optional[str] = None
    change_request: Optional[GatewayChangeRequest] = None
    completion_notice_reject_reason: Optional[str] = None
    connection_mode: Optional[str] = None
    cross_connect_router: Optional[str] = None
    customer_name: Optional[str] = None
    default_export_route_filter: Optional[str] = None
    default_import_route_filter: Optional[str] = None
    link_status: Optional[str] = None
    link_status_updated_at: Optional[datetime] = None
    patch_panel_completion_notice: Optional[str] = None
    port: Optional[GatewayPortReference] = None
    provider_api_managed: Optional[bool] = None
    resource_group: Optional[ResourceGroupReference] = None
    vlan: Optional[int] = None


class GatewayCollection(ResourceSchema):
    gateways: List[Gateway] = Field(default_factory=list)


class GatewayStatistic(ResourceSchema):
    type: str
    data: str
    created_at: Optional[datetime] = None


class GatewayStatisticCollection(ResourceSchema):
    statistics: List[GatewayStatistic] = Field(default_factory=list)


class GatewayStatus(ResourceSchema):
    type: str
    value: str
    updated_at: Optional[datetime] = None


class GatewayStatusCollection(ResourceSchema):
    status: List[GatewayStatus] = Field(default_factory=list)
