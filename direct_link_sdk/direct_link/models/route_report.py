"""Route report models.

A route report is a point-in-time snapshot of the routes a gateway learns and
advertises, generated asynchronously (``status`` moves from ``pending`` to
``complete``).
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from direct_link_sdk.schemas.base import ResourceSchema


class RouteReportStatus(str, Enum):
    COMPLETE = "complete"
    PENDING = "pending"


class RouteReportRoute(ResourceSchema):
    prefix: str


class RouteReportAdvertisedRoute(ResourceSchema):
    as_path: Optional[str] = None
    prefix: str


class RouteReportOnPremRoute(ResourceSchema):
    as_path: Optional[str] = None
    next_hop: Optional[str] = None
    prefix: str


class RouteReportOverlappingRoute(ResourceSchema):
    prefix: str
    type: Optional[str] = None
    virtual_connection_id: Optional[str] = None


class RouteReportOverlappingRouteGroup(ResourceSchema):
    routes: List[RouteReportOverlappingRoute] = Field(default_factory=list)


class RouteReportVirtualConnectionRoute(ResourceSchema):
    active: Optional[bool] = None
    local_preference: Optional[str] = None
    prefix: str


class RouteReportConnection(ResourceSchema):
    routes: List[RouteReportVirtualConnectionRoute] = Field(default_factory=list)
    virtual_connection_id: Optional[str] = None
    virtual_connection_name: Optional[str] = None
    virtual_connection_type: Optional[str] = None


class RouteReport(ResourceSchema):
    id: str
    status: RouteReportStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    advertised_routes: List[RouteReportAdvertisedRoute] = Field(default_factory=list)
    gateway_routes: List[RouteReportRoute] = Field(default_factory=list)
    on_prem_routes: List[RouteReportOnPremRoute] = Field(default_factory=list)
    overlapping_routes: List[RouteReportOverlappingRouteGroup] = Field(default_factory=list)
    virtual_connection_routes: List[RouteReportConnection] = Field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return self.status == RouteReportStatus.COMPLETE


class RouteReportCollection(ResourceSchema):
    route_reports: List[RouteReport] = Field(default_factory=list)
