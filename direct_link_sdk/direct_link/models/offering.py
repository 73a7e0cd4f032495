"""Offering information: locations, cross-connect routers and link speeds."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from direct_link_sdk.schemas.base import ResourceSchema


class LocationOutput(ResourceSchema):
    """Location where a Direct Link gateway can be provisioned."""

    name: str
    display_name: str
    location_type: str
    market: str
    offering_type: str
    provision_enabled: bool
    billing_location: Optional[str] = None
    building_colocation_owner: Optional[str] = None
    macsec_enabled: Optional[bool] = None
    market_geography: Optional[str] = None
    mzr: Optional[str] = None
    vpc_region: Optional[str] = None


class LocationCollection(ResourceSchema):
    locations: List[LocationOutput] = Field(default_factory=list)


class LocationCrossConnectRouter(ResourceSchema):
    router_name: str
    total_connections: Optional[int] = None
    capabilities: List[str] = Field(default_factory=list)


class LocationCrossConnectRouterCollection(ResourceSchema):
    cross_connect_routers: List[LocationCrossConnectRouter] = Field(default_factory=list)


class OfferingSpeed(ResourceSchema):
    link_speed: int = Field(..., description="Link speed in megabits per second.")
    capabilities: List[str] = Field(default_factory=list)
    macsec_enabled: Optional[bool] = None


class OfferingSpeedCollection(ResourceSchema):
    speeds: List[OfferingSpeed] = Field(default_factory=list)
