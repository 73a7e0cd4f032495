"""Direct Link API models.

Re-exports request templates (e.g. ``GatewayTemplateDedicated``,
``RouteFilterTemplate``), merge-patch templates (``GatewayPatchTemplate``,
``RouteFilterPatch``, ``GatewayVirtualConnectionPatchTemplate``) and response
resources (``Gateway``, ``RouteFilter``, ``PortCollection``...) consumed by
``DirectLinkV1``.
"""

from direct_link_sdk.direct_link.models.common import (
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
    OfferingType,
    PaginationFirst,
    PaginationNext,
    ResourceGroupIdentity,
    ResourceGroupReference,
    RouteFilterAction,
)
from direct_link_sdk.direct_link.models.gateway import (
    GATEWAY_TEMPLATE_ADAPTER,
    Gateway,
    GatewayAction,
    GatewayActionTemplate,
    GatewayActionUpdate,
    GatewayChangeRequest,
    GatewayChangeRequestCreate,
    GatewayChangeRequestDelete,
    GatewayChangeRequestGeneric,
    GatewayChangeRequestUpdateAttributes,
    GatewayCollection,
    GatewayPatchTemplate,
    GatewayStatistic,
    GatewayStatisticCollection,
    GatewayStatisticType,
    GatewayStatus,
    GatewayStatusCollection,
    GatewayStatusType,
    GatewayTemplate,
    GatewayTemplateConnect,
    GatewayTemplateDedicated,
    GatewayType,
)
from direct_link_sdk.direct_link.models.offering import (
    LocationCollection,
    LocationCrossConnectRouter,
    LocationCrossConnectRouterCollection,
    LocationOutput,
    OfferingSpeed,
    OfferingSpeedCollection,
)
from direct_link_sdk.direct_link.models.port import Port, PortCollection
from direct_link_sdk.direct_link.models.route_filter import (
    ExportRouteFilterCollection,
    GatewayTemplateRouteFilter,
    ImportRouteFilterCollection,
    RouteFilter,
    RouteFilterPatch,
    RouteFilterTemplate,
)
from direct_link_sdk.direct_link.models.route_report import (
    RouteReport,
    RouteReportAdvertisedRoute,
    RouteReportCollection,
    RouteReportConnection,
    RouteReportOnPremRoute,
    RouteReportOverlappingRoute,
    RouteReportOverlappingRouteGroup,
    RouteReportRoute,
    RouteReportStatus,
    RouteReportVirtualConnectionRoute,
)
from direct_link_sdk.direct_link.models.virtual_connection import (
    GatewayVirtualConnection,
    GatewayVirtualConnectionCollection,
    GatewayVirtualConnectionPatchTemplate,
    GatewayVirtualConnectionTemplate,
    VirtualConnectionStatus,
    VirtualConnectionType,
)

__all__ = [
    # Shared
    "AsPrepend",
    "AsPrependTemplate",
    "AuthenticationKeyIdentity",
    "AuthenticationKeyReference",
    "ConnectionMode",
    "GatewayBfdConfig",
    "GatewayBfdConfigTemplate",
    "GatewayBfdPatchTemplate",
    "GatewayPortIdentity",
    "GatewayPortReference",
    "OfferingType",
    "PaginationFirst",
    "PaginationNext",
    "ResourceGroupIdentity",
    "ResourceGroupReference",
    "RouteFilterAction",
    # Gateways
    "GATEWAY_TEMPLATE_ADAPTER",
    "Gateway",
    "GatewayAction",
    "GatewayActionTemplate",
    "GatewayActionUpdate",
    "GatewayChangeRequest",
    "GatewayChangeRequestCreate",
    "GatewayChangeRequestDelete",
    "GatewayChangeRequestGeneric",
    "GatewayChangeRequestUpdateAttributes",
    "GatewayCollection",
    "GatewayPatchTemplate",
    "GatewayStatistic",
    "GatewayStatisticCollection",
    "GatewayStatisticType",
    "GatewayStatus",
    "GatewayStatusCollection",
    "GatewayStatusType",
    "GatewayTemplate",
    "GatewayTemplateConnect",
    "GatewayTemplateDedicated",
    "GatewayType",
    # Offering info
    "LocationCollection",
    "LocationCrossConnectRouter",
    "LocationCrossConnectRouterCollection",
    "LocationOutput",
    "OfferingSpeed",
    "OfferingSpeedCollection",
    # Ports
    "Port",
    "PortCollection",
    # Route filters
    "ExportRouteFilterCollection",
    "GatewayTemplateRouteFilter",
    "ImportRouteFilterCollection",
    "RouteFilter",
    "RouteFilterPatch",
    "RouteFilterTemplate",
    # Route reports
    "RouteReport",
    "RouteReportAdvertisedRoute",
    "RouteReportCollection",
    "RouteReportConnection",
    "RouteReportOnPremRoute",
    "RouteReportOverlappingRoute",
    "RouteReportOverlappingRouteGroup",
    "RouteReportRoute",
    "RouteReportStatus",
    "RouteReportVirtualConnectionRoute",
    # Virtual connections
    "GatewayVirtualConnection",
    "GatewayVirtualConnectionCollection",
    "GatewayVirtualConnectionPatchTemplate",
    "GatewayVirtualConnectionTemplate",
    "VirtualConnectionStatus",
    "VirtualConnectionType",
]
