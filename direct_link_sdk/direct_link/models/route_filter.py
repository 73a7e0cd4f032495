"""Route filter models

Route filters are ordered permit/deny rules on CIDR prefixes, applied to BGP
routes exported to or imported from the customer edge. The same shapes serve
both directions; only the collection key differs.

Endpoint mapping
----------------
- ``GET /gateways/{id}/export_route_filters`` → ``ExportRouteFilterCollection``
- ``GET /gateways/{id}/import_route_filters`` → ``ImportRouteFilterCollection``
- ``POST``/``GET``/``PATCH`` on a single filter → ``RouteFilter``
- ``PUT`` on the collection takes ``List[GatewayTemplateRouteFilter]`` plus ``If-Match``
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from direct_link_sdk.schemas.base import BaseSchema, PatchSchema, ResourceSchema

from .common import RouteFilterAction


class GatewayTemplateRouteFilter(BaseSchema):
    """Route filter entry used when creating a gateway or replacing a whole list.

    Order in the list is evaluation order, so no ``before`` is accepted here.
    """

    action: RouteFilterAction = Field(..., description="Action applied to matching routes.")
    prefix: str = Field(..., description="IPv4 CIDR prefix to match.", examples=["192.168.100.0/24"])
    ge: Optional[int] = Field(default=None, ge=0, le=32, description="Match prefixes at least this long.")
    le: Optional[int] = Field(default=None, ge=0, le=32, description="Match prefixes at most this long.")


class RouteFilterTemplate(GatewayTemplateRouteFilter):
    """Body of a single route filter create request."""

    before: Optional[str] = Field(
        default=None,
        description="Identifier of the filter this one is inserted before; appended when omitted.",
        examples=["1a15dcab-7e40-45e1-b7c5-bc690eaa9782"],
    )


class RouteFilterPatch(PatchSchema):
    """Sparse update for a single route filter.

    Examples:
        >>> RouteFilterPatch(action="deny").as_patch()
        {'action': 'deny'}
    """

    action: Optional[RouteFilterAction] = None
    before: Optional[str] = None
    ge: Optional[int] = Field(default=None, ge=0, le=32)
    le: Optional[int] = Field(default=None, ge=0, le=32)
    prefix: Optional[str] = None


class RouteFilter(ResourceSchema):
    id: str
    action: RouteFilterAction
    prefix: str
    before: Optional[str] = None
    ge: Optional[int] = None
    le: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ExportRouteFilterCollection(ResourceSchema):
    export_route_filters: List[RouteFilter] = Field(default_factory=list)

    @property
    def items(self) -> List[RouteFilter]:
        return self.export_route_filters


class ImportRouteFilterCollection(ResourceSchema):
    import_route_filters: List[RouteFilter] = Field(default_factory=list)

    @property
    def items(self) -> List[RouteFilter]:
        return self.import_route_filters
