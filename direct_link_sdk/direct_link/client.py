"""Direct Link v1 API client

Overview
--------
Thin, typed HTTP client for the IBM Cloud Direct Link API. Every operation
validates its required arguments, builds a request with the ``version``
query parameter, sends it through the shared ``BaseService`` core and parses
the body into a Pydantic model.

Key features
------------
- Namespaced surface mirroring the REST resource tree:
  - ``gateways``: gateways, actions, completion notice, LOA, statistics, status
    - ``gateways.export_route_filters`` / ``gateways.import_route_filters``
    - ``gateways.route_reports``
    - ``gateways.virtual_connections``
  - ``offering_types``: locations, cross-connect routers, speeds
  - ``ports``: provider ports, plus a cursor-driven ``pager()``
- PATCH operations send RFC 7396 merge-patch bodies built by ``as_patch()``.
- Per-call ``headers`` are merged over the SDK defaults.

Errors
------
Missing required arguments raise ``ValueError`` before any network call. HTTP
failures surface as ``DirectLinkApiError`` / ``DirectLinkConnectionError``.

Usage
-----
>>> client = DirectLinkV1(version="2024-11-19", auth_token="Bearer <iam-token>")
>>> gateways = client.gateways.list().result.gateways
>>> etag = client.gateways.export_route_filters.list(gateway_id).etag
"""

from __future__ import annotations

from typing import IO, Any, Dict, List, Mapping, Optional, Type, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from direct_link_sdk.core.config import DEFAULT_SERVICE_URL, DirectLinkSettings, get_settings
from direct_link_sdk.core.response import DetailedResponse
from direct_link_sdk.core.service import BaseService
from direct_link_sdk.core.utils import get_sdk_headers
from direct_link_sdk.schemas.base import BaseSchema, PatchSchema

from .models import (
    GATEWAY_TEMPLATE_ADAPTER,
    AuthenticationKeyIdentity,
    ConnectionMode,
    ExportRouteFilterCollection,
    Gateway,
    GatewayAction,
    GatewayActionTemplate,
    GatewayActionUpdate,
    GatewayBfdConfigTemplate,
    GatewayCollection,
    GatewayPatchTemplate,
    GatewayStatisticCollection,
    GatewayStatisticType,
    GatewayStatusCollection,
    GatewayStatusType,
    GatewayTemplateConnect,
    GatewayTemplateDedicated,
    GatewayTemplateRouteFilter,
    GatewayVirtualConnection,
    GatewayVirtualConnectionCollection,
    GatewayVirtualConnectionPatchTemplate,
    GatewayVirtualConnectionTemplate,
    ImportRouteFilterCollection,
    LocationCollection,
    LocationCrossConnectRouterCollection,
    OfferingSpeedCollection,
    Port,
    PortCollection,
    ResourceGroupIdentity,
    RouteFilter,
    RouteFilterAction,
    RouteFilterPatch,
    RouteFilterTemplate,
    RouteReport,
    RouteReportCollection,
    VirtualConnectionType,
)
from .pager import PortsPager

Headers = Optional[Mapping[str, str]]
GatewayTemplateInput = Union[GatewayTemplateDedicated, GatewayTemplateConnect, Dict[str, Any]]

MERGE_PATCH_CONTENT_TYPE = "application/merge-patch+json"


def _require(**kwargs: Any) -> None:
    """Raise ``ValueError`` for the first argument that is ``None`` or empty."""
    for name, value in kwargs.items():
        if value is None or (isinstance(value, (str, bytes)) and not value):
            raise ValueError(f"{name} must be provided")


def _seg(value: Any) -> str:
    """URL-encode a path segment."""
    if isinstance(value, BaseModel):
        raise TypeError("path parameters must be scalar values")
    return quote(str(getattr(value, "value", value)), safe="")


def _body(payload: Union[BaseModel, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(payload, PatchSchema):
        return payload.as_patch()
    if isinstance(payload, BaseSchema):
        return payload.to_body()
    if isinstance(payload, dict):
        return payload
    raise TypeError(f"Unsupported request body type: {type(payload).__name__}")


class DirectLinkV1(BaseService):
    """Client for the Direct Link v1 API.

    Design
    ------
    - Keeps a small, explicit surface that mirrors the REST resource tree.
    - Groups endpoints into namespaces (``gateways``, ``offering_types``, ``ports``).
    - Returns ``DetailedResponse`` with a typed ``result`` for all operations.
    """

    DEFAULT_SERVICE_URL = DEFAULT_SERVICE_URL
    SERVICE_NAME = "direct_link"
    SERVICE_VERSION = "V1"

    def __init__(
        self,
        version: str,
        *,
        service_url: str = DEFAULT_SERVICE_URL,
        auth_token: Optional[str] = None,
        token_provider: Optional[Any] = None,
        timeout: float = 60.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """Create a Direct Link client.

        Args:
            version: API version date (``YYYY-MM-DD``) sent on every request.
            service_url: Base URL including ``/v1``.
            auth_token: Authorization header value, e.g. ``"Bearer <iam-token>"``.
            token_provider: Callable returning the Authorization value before each request.
            timeout: Default HTTP timeout in seconds.
            client: Optional preconfigured ``httpx.Client``.

        Raises:
            ValueError: If ``version`` or ``service_url`` is empty.
        """
        _require(version=version)
        super().__init__(
            service_url=service_url,
            auth_token=auth_token,
            token_provider=token_provider,
            timeout=timeout,
            client=client,
        )
        self.version = version
        self._gateways = _GatewaysNamespace(self)
        self._offering_types = _OfferingTypesNamespace(self)
        self._ports = _PortsNamespace(self)

    @classmethod
    def new_instance(
        cls,
        version: Optional[str] = None,
        *,
        settings: Optional[DirectLinkSettings] = None,
        client: Optional[httpx.Client] = None,
    ) -> "DirectLinkV1":
        """Build a client from ``DIRECT_LINK_*`` settings (environment or ``.env``).

        An explicit ``version`` overrides ``DIRECT_LINK_VERSION``. Retries are
        enabled when ``DIRECT_LINK_MAX_RETRIES`` is positive.
        """
        cfg = settings or get_settings()
        service = cls(
            version or cfg.version,
            service_url=cfg.url,
            auth_token=cfg.auth_token,
            timeout=cfg.timeout,
            client=client,
        )
        if cfg.max_retries > 0:
            service.enable_retries(cfg.max_retries, cfg.retry_interval)
        return service

    @property
    def gateways(self) -> "_GatewaysNamespace":
        return self._gateways

    @property
    def offering_types(self) -> "_OfferingTypesNamespace":
        return self._offering_types

    @property
    def ports(self) -> "_PortsNamespace":
        return self._ports

    def _call(
        self,
        operation_id: str,
        method: str,
        path: str,
        *,
        headers: Headers = None,
        params: Optional[Mapping[str, Any]] = None,
        json: Optional[Any] = None,
        files: Optional[Mapping[str, Any]] = None,
        accept: Optional[str] = "application/json",
        content_type: Optional[str] = None,
        model: Optional[Type[BaseModel]] = None,
    ) -> DetailedResponse[Any]:
        """Build, send and parse a single operation."""
        request_headers = httpx.Headers(get_sdk_headers(self.SERVICE_NAME, self.SERVICE_VERSION, operation_id))
        if accept:
            request_headers["Accept"] = accept
        if content_type:
            request_headers["Content-Type"] = content_type
        if headers:
            request_headers.update(headers)
        query: Dict[str, Any] = {"version": self.version}
        for k, v in (params or {}).items():
            query[k] = getattr(v, "value", v)
        request = self.prepare_request(method, path, headers=request_headers, params=query, json=json, files=files)
        self._logger.debug("DirectLinkV1.%s: %s %s", operation_id, method, request.url)
        response = self.send(request)
        if model is not None and response.result is not None:
            response.result = model.model_validate(response.result)
        return response


# ----------------------
# Gateways
# ----------------------


class _GatewaysNamespace:
    def __init__(self, client: DirectLinkV1) -> None:
        self._client = client
        self._export_route_filters = _RouteFiltersNamespace(client, "export", ExportRouteFilterCollection)
        self._import_route_filters = _RouteFiltersNamespace(client, "import", ImportRouteFilterCollection)
        self._route_reports = _RouteReportsNamespace(client)
        self._virtual_connections = _VirtualConnectionsNamespace(client)

    @property
    def export_route_filters(self) -> "_RouteFiltersNamespace":
        return self._export_route_filters

    @property
    def import_route_filters(self) -> "_RouteFiltersNamespace":
        return self._import_route_filters

    @property
    def route_reports(self) -> "_RouteReportsNamespace":
        return self._route_reports

    @property
    def virtual_connections(self) -> "_VirtualConnectionsNamespace":
        return self._virtual_connections

    def list(self, *, headers: Headers = None) -> DetailedResponse[GatewayCollection]:
        """List all Direct Link gateways in the account.

        API
        ---
        - Method/Path: ``GET /gateways``

        Returns:
            ``GatewayCollection``
        """
        return self._client._call("list_gateways", "GET", "/gateways", headers=headers, model=GatewayCollection)

    def create(self, gateway_template: GatewayTemplateInput, *, headers: Headers = None) -> DetailedResponse[Gateway]:
        """Create a ``dedicated`` or ``connect`` gateway.

        API
        ---
        - Method/Path: ``POST /gateways``
        - Body: ``GatewayTemplateDedicated`` or ``GatewayTemplateConnect``. A
          plain dict is validated against the ``type`` discriminator first.

        Returns:
            ``Gateway`` (HTTP 201)
        """
        _require(gateway_template=gateway_template)
        if isinstance(gateway_template, dict):
            gateway_template = GATEWAY_TEMPLATE_ADAPTER.validate_python(gateway_template)
        return self._client._call(
            "create_gateway",
            "POST",
            "/gateways",
            headers=headers,
            json=_body(gateway_template),
            content_type="application/json",
            model=Gateway,
        )

    def get(self, gateway_id: str, *, headers: Headers = None) -> DetailedResponse[Gateway]:
        """Get a gateway. ``GET /gateways/{id}``."""
        _require(gateway_id=gateway_id)
        return self._client._call(
            "get_gateway", "GET", f"/gateways/{_seg(gateway_id)}", headers=headers, model=Gateway
        )

    def update(
        self,
        gateway_id: str,
        gateway_patch: Union[GatewayPatchTemplate, Dict[str, Any]],
        *,
        headers: Headers = None,
    ) -> DetailedResponse[Gateway]:
        """Update a gateway with a JSON Merge-Patch.

        API
        ---
        - Method/Path: ``PATCH /gateways/{id}``
        - Content-Type: ``application/merge-patch+json``
        - Body: ``GatewayPatchTemplate.as_patch()`` (only the fields that were set),
          or a dict sent unchanged.
        """
        _require(gateway_id=gateway_id, gateway_patch=gateway_patch)
        return self._client._call(
            "update_gateway",
            "PATCH",
            f"/gateways/{_seg(gateway_id)}",
            headers=headers,
            json=_body(gateway_patch),
            content_type=MERGE_PATCH_CONTENT_TYPE,
            model=Gateway,
        )

    def delete(self, gateway_id: str, *, headers: Headers = None) -> DetailedResponse[None]:
        """Delete a gateway. ``DELETE /gateways/{id}`` (HTTP 204)."""
        _require(gateway_id=gateway_id)
        return self._client._call("delete_gateway", "DELETE", f"/gateways/{_seg(gateway_id)}", headers=headers, accept=None)

    def create_action(
        self,
        gateway_id: str,
        action: Union[GatewayAction, str],
        *,
        authentication_key: Optional[AuthenticationKeyIdentity] = None,
        bfd_config: Optional[GatewayBfdConfigTemplate] = None,
        connection_mode: Optional[ConnectionMode] = None,
        default_export_route_filter: Optional[RouteFilterAction] = None,
        default_import_route_filter: Optional[RouteFilterAction] = None,
        export_route_filters: Optional[List[GatewayTemplateRouteFilter]] = None,
        global_: Optional[bool] = None,
        import_route_filters: Optional[List[GatewayTemplateRouteFilter]] = None,
        metered: Optional[bool] = None,
        resource_group: Optional[ResourceGroupIdentity] = None,
        updates: Optional[List[GatewayActionUpdate]] = None,
        headers: Headers = None,
    ) -> DetailedResponse[Gateway]:
        """Approve or reject a provider-initiated change request on a ``connect`` gateway.

        API
        ---
        - Method/Path: ``POST /gateways/{id}/actions``
        - Body: ``GatewayActionTemplate``. ``create_gateway_approve`` requires
          ``global_`` and ``metered``; ``update_attributes_*`` echoes the
          pending ``updates``.
        """
        _require(gateway_id=gateway_id, action=action)
        template = GatewayActionTemplate(
            action=action,
            authentication_key=authentication_key,
            bfd_config=bfd_config,
            connection_mode=connection_mode,
            default_export_route_filter=default_export_route_filter,
            default_import_route_filter=default_import_route_filter,
            export_route_filters=export_route_filters,
            global_=global_,
            import_route_filters=import_route_filters,
            metered=metered,
            resource_group=resource_group,
            updates=updates,
        )
        return self._client._call(
            "create_gateway_action",
            "POST",
            f"/gateways/{_seg(gateway_id)}/actions",
            headers=headers,
            json=template.to_body(),
            content_type="application/json",
            model=Gateway,
        )

    def get_completion_notice(self, gateway_id: str, *, headers: Headers = None) -> DetailedResponse[bytes]:
        """Download the completion notice PDF. ``GET /gateways/{id}/completion_notice``."""
        _require(gateway_id=gateway_id)
        return self._client._call(
            "list_gateway_completion_notice",
            "GET",
            f"/gateways/{_seg(gateway_id)}/completion_notice",
            headers=headers,
            accept="application/pdf",
        )

    def create_completion_notice(
        self,
        gateway_id: str,
        upload: Union[bytes, IO[bytes]],
        *,
        upload_content_type: Optional[str] = None,
        filename: str = "completion_notice.pdf",
        headers: Headers = None,
    ) -> DetailedResponse[None]:
        """Upload a signed completion notice for a ``dedicated`` gateway.

        API
        ---
        - Method/Path: ``PUT /gateways/{id}/completion_notice``
        - Body: ``multipart/form-data`` with the PDF in the ``upload`` part (HTTP 204).
          ``upload_content_type`` defaults to ``application/pdf``.
        """
        _require(gateway_id=gateway_id, upload=upload)
        return self._client._call(
            "create_gateway_completion_notice",
            "PUT",
            f"/gateways/{_seg(gateway_id)}/completion_notice",
            headers=headers,
            files={"upload": (filename, upload, upload_content_type or "application/pdf")},
            accept=None,
        )

    def get_letter_of_authorization(self, gateway_id: str, *, headers: Headers = None) -> DetailedResponse[bytes]:
        """Download the LOA PDF. ``GET /gateways/{id}/letter_of_authorization``."""
        _require(gateway_id=gateway_id)
        return self._client._call(
            "list_gateway_letter_of_authorization",
            "GET",
            f"/gateways/{_seg(gateway_id)}/letter_of_authorization",
            headers=headers,
            accept="application/pdf",
        )

    def get_statistics(
        self,
        gateway_id: str,
        type: Union[GatewayStatisticType, str],
        *,
        headers: Headers = None,
    ) -> DetailedResponse[GatewayStatisticCollection]:
        """Get gateway statistics. ``GET /gateways/{id}/statistics?type=``."""
        _require(gateway_id=gateway_id, type=type)
        return self._client._call(
            "get_gateway_statistics",
            "GET",
            f"/gateways/{_seg(gateway_id)}/statistics",
            headers=headers,
            params={"type": type},
            model=GatewayStatisticCollection,
        )

    def get_status(
        self,
        gateway_id: str,
        type: Optional[Union[GatewayStatusType, str]] = None,
        *,
        headers: Headers = None,
    ) -> DetailedResponse[GatewayStatusCollection]:
        """Get BGP/link/MACsec status. ``GET /gateways/{id}/status[?type=]``."""
        _require(gateway_id=gateway_id)
        return self._client._call(
            "get_gateway_status",
            "GET",
            f"/gateways/{_seg(gateway_id)}/status",
            headers=headers,
            params={"type": type},
            model=GatewayStatusCollection,
        )


class _RouteFiltersNamespace:
    """Export or import route filters of a gateway; both share one surface."""

    def __init__(
        self,
        client: DirectLinkV1,
        direction: str,
        collection_model: Union[Type[ExportRouteFilterCollection], Type[ImportRouteFilterCollection]],
    ) -> None:
        self._client = client
        self._direction = direction
        self._collection_model = collection_model
        self._resource = f"{direction}_route_filters"

    def _path(self, gateway_id: str, filter_id: Optional[str] = None) -> str:
        path = f"/gateways/{_seg(gateway_id)}/{self._resource}"
        if filter_id is not None:
            path += f"/{_seg(filter_id)}"
        return path

    def list(self, gateway_id: str, *, headers: Headers = None) -> DetailedResponse[Any]:
        """List route filters in evaluation order.

        The ``ETag`` response header (``DetailedResponse.etag``) is the
        ``if_match`` value for ``replace``.
        """
        _require(gateway_id=gateway_id)
        return self._client._call(
            f"list_gateway_{self._resource}",
            "GET",
            self._path(gateway_id),
            headers=headers,
            model=self._collection_model,
        )

    def create(
        self,
        gateway_id: str,
        action: Union[RouteFilterAction, str],
        prefix: str,
        *,
        before: Optional[str] = None,
        ge: Optional[int] = None,
        le: Optional[int] = None,
        headers: Headers = None,
    ) -> DetailedResponse[RouteFilter]:
        """Create one route filter, appended or inserted ``before`` another."""
        _require(gateway_id=gateway_id, action=action, prefix=prefix)
        template = RouteFilterTemplate(action=action, prefix=prefix, before=before, ge=ge, le=le)
        return self._client._call(
            f"create_gateway_{self._direction}_route_filter",
            "POST",
            self._path(gateway_id),
            headers=headers,
            json=template.to_body(),
            content_type="application/json",
            model=RouteFilter,
        )

    def replace(
        self,
        gateway_id: str,
        if_match: str,
        route_filters: Optional[List[Union[GatewayTemplateRouteFilter, Dict[str, Any]]]] = None,
        *,
        headers: Headers = None,
    ) -> DetailedResponse[Any]:
        """Replace the whole route filter list.

        API
        ---
        - Method/Path: ``PUT /gateways/{id}/{export|import}_route_filters``
        - Headers: ``If-Match`` with the ETag from ``list`` (HTTP 412 when stale).
        - Body: ``{"<direction>_route_filters": [...]}``. Omitting
          ``route_filters`` clears the list.
        """
        _require(gateway_id=gateway_id, if_match=if_match)
        items = [_body(GatewayTemplateRouteFilter.model_validate(f) if isinstance(f, dict) else f) for f in route_filters or []]
        request_headers = httpx.Headers({"If-Match": if_match})
        if headers:
            request_headers.update(headers)
        return self._client._call(
            f"replace_gateway_{self._resource}",
            "PUT",
            self._path(gateway_id),
            headers=request_headers,
            json={self._resource: items},
            content_type="application/json",
            model=self._collection_model,
        )

    def get(self, gateway_id: str, id: str, *, headers: Headers = None) -> DetailedResponse[RouteFilter]:
        _require(gateway_id=gateway_id, id=id)
        return self._client._call(
            f"get_gateway_{self._direction}_route_filter",
            "GET",
            self._path(gateway_id, id),
            headers=headers,
            model=RouteFilter,
        )

    def update(
        self,
        gateway_id: str,
        id: str,
        route_filter_patch: Union[RouteFilterPatch, Dict[str, Any]],
        *,
        headers: Headers = None,
    ) -> DetailedResponse[RouteFilter]:
        """Update one route filter with a JSON Merge-Patch."""
        _require(gateway_id=gateway_id, id=id, route_filter_patch=route_filter_patch)
        return self._client._call(
            f"update_gateway_{self._direction}_route_filter",
            "PATCH",
            self._path(gateway_id, id),
            headers=headers,
            json=_body(route_filter_patch),
            content_type=MERGE_PATCH_CONTENT_TYPE,
            model=RouteFilter,
        )

    def delete(self, gateway_id: str, id: str, *, headers: Headers = None) -> DetailedResponse[None]:
        _require(gateway_id=gateway_id, id=id)
        return self._client._call(
            f"delete_gateway_{self._direction}_route_filter",
            "DELETE",
            self._path(gateway_id, id),
            headers=headers,
            accept=None,
        )


class _RouteReportsNamespace:
    def __init__(self, client: DirectLinkV1) -> None:
        self._client = client

    @staticmethod
    def _path(gateway_id: str, report_id: Optional[str] = None) -> str:
        path = f"/gateways/{_seg(gateway_id)}/route_reports"
        if report_id is not None:
            path += f"/{_seg(report_id)}"
        return path

    def list(self, gateway_id: str, *, headers: Headers = None) -> DetailedResponse[RouteReportCollection]:
        _require(gateway_id=gateway_id)
        return self._client._call(
            "list_gateway_route_reports", "GET", self._path(gateway_id), headers=headers, model=RouteReportCollection
        )

    def create(self, gateway_id: str, *, headers: Headers = None) -> DetailedResponse[RouteReport]:
        """Request a new route report (HTTP 202, ``status == "pending"``)."""
        _require(gateway_id=gateway_id)
        return self._client._call(
            "create_gateway_route_report", "POST", self._path(gateway_id), headers=headers, model=RouteReport
        )

    def get(self, gateway_id: str, id: str, *, headers: Headers = None) -> DetailedResponse[RouteReport]:
        _require(gateway_id=gateway_id, id=id)
        return self._client._call(
            "get_gateway_route_report", "GET", self._path(gateway_id, id), headers=headers, model=RouteReport
        )

    def delete(self, gateway_id: str, id: str, *, headers: Headers = None) -> DetailedResponse[None]:
        _require(gateway_id=gateway_id, id=id)
        return self._client._call(
            "delete_gateway_route_report", "DELETE", self._path(gateway_id, id), headers=headers, accept=None
        )


class _VirtualConnectionsNamespace:
    def __init__(self, client: DirectLinkV1) -> None:
        self._client = client

    @staticmethod
    def _path(gateway_id: str, connection_id: Optional[str] = None) -> str:
        path = f"/gateways/{_seg(gateway_id)}/virtual_connections"
        if connection_id is not None:
            path += f"/{_seg(connection_id)}"
        return path

    def list(self, gateway_id: str, *, headers: Headers = None) -> DetailedResponse[GatewayVirtualConnectionCollection]:
        _require(gateway_id=gateway_id)
        return self._client._call(
            "list_gateway_virtual_connections",
            "GET",
            self._path(gateway_id),
            headers=headers,
            model=GatewayVirtualConnectionCollection,
        )

    def create(
        self,
        gateway_id: str,
        name: str,
        type: Union[VirtualConnectionType, str],
        *,
        network_id: Optional[str] = None,
        headers: Headers = None,
    ) -> DetailedResponse[GatewayVirtualConnection]:
        """Connect the gateway to a network. ``network_id`` is required for non-classic types."""
        _require(gateway_id=gateway_id, name=name, type=type)
        template = GatewayVirtualConnectionTemplate(name=name, type=type, network_id=network_id)
        return self._client._call(
            "create_gateway_virtual_connection",
            "POST",
            self._path(gateway_id),
            headers=headers,
            json=template.to_body(),
            content_type="application/json",
            model=GatewayVirtualConnection,
        )

    def get(self, gateway_id: str, id: str, *, headers: Headers = None) -> DetailedResponse[GatewayVirtualConnection]:
        _require(gateway_id=gateway_id, id=id)
        return self._client._call(
            "get_gateway_virtual_connection",
            "GET",
            self._path(gateway_id, id),
            headers=headers,
            model=GatewayVirtualConnection,
        )

    def update(
        self,
        gateway_id: str,
        id: str,
        virtual_connection_patch: Union[GatewayVirtualConnectionPatchTemplate, Dict[str, Any]],
        *,
        headers: Headers = None,
    ) -> DetailedResponse[GatewayVirtualConnection]:
        """Rename, approve or reject a virtual connection with a JSON Merge-Patch."""
        _require(gateway_id=gateway_id, id=id, virtual_connection_patch=virtual_connection_patch)
        return self._client._call(
            "update_gateway_virtual_connection",
            "PATCH",
            self._path(gateway_id, id),
            headers=headers,
            json=_body(virtual_connection_patch),
            content_type=MERGE_PATCH_CONTENT_TYPE,
            model=GatewayVirtualConnection,
        )

    def delete(self, gateway_id: str, id: str, *, headers: Headers = None) -> DetailedResponse[None]:
        _require(gateway_id=gateway_id, id=id)
        return self._client._call(
            "delete_gateway_virtual_connection", "DELETE", self._path(gateway_id, id), headers=headers, accept=None
        )


# ----------------------
# Offering information
# ----------------------


class _OfferingTypesNamespace:
    def __init__(self, client: DirectLinkV1) -> None:
        self._client = client

    def list_locations(self, offering_type: str, *, headers: Headers = None) -> DetailedResponse[LocationCollection]:
        """List locations for ``dedicated`` or ``connect``. ``GET /offering_types/{type}/locations``."""
        _require(offering_type=offering_type)
        return self._client._call(
            "list_offering_type_locations",
            "GET",
            f"/offering_types/{_seg(offering_type)}/locations",
            headers=headers,
            model=LocationCollection,
        )

    def list_cross_connect_routers(
        self, offering_type: str, location_name: str, *, headers: Headers = None
    ) -> DetailedResponse[LocationCrossConnectRouterCollection]:
        """List routers at a location.

        API
        ---
        - Method/Path: ``GET /offering_types/{type}/locations/{location_name}/cross_connect_routers``
        - Only meaningful for ``dedicated``.
        """
        _require(offering_type=offering_type, location_name=location_name)
        return self._client._call(
            "list_offering_type_location_cross_connect_routers",
            "GET",
            f"/offering_types/{_seg(offering_type)}/locations/{_seg(location_name)}/cross_connect_routers",
            headers=headers,
            model=LocationCrossConnectRouterCollection,
        )

    def list_speeds(self, offering_type: str, *, headers: Headers = None) -> DetailedResponse[OfferingSpeedCollection]:
        _require(offering_type=offering_type)
        return self._client._call(
            "list_offering_type_speeds",
            "GET",
            f"/offering_types/{_seg(offering_type)}/speeds",
            headers=headers,
            model=OfferingSpeedCollection,
        )


# ----------------------
# Ports
# ----------------------


class _PortsNamespace:
    def __init__(self, client: DirectLinkV1) -> None:
        self._client = client

    def list(
        self,
        *,
        start: Optional[str] = None,
        limit: Optional[int] = None,
        location_name: Optional[str] = None,
        headers: Headers = None,
    ) -> DetailedResponse[PortCollection]:
        """List provider ports (one page).

        API
        ---
        - Method/Path: ``GET /ports``
        - Query:
          - ``start`` (str): cursor from the previous page's ``next``.
          - ``limit`` (int): page size, 1..100.
          - ``location_name`` (str): filter by location.
        """
        if limit is not None and not 1 <= limit <= 100:
            raise ValueError("limit must be between 1 and 100")
        return self._client._call(
            "list_ports",
            "GET",
            "/ports",
            headers=headers,
            params={"start": start, "limit": limit, "location_name": location_name},
            model=PortCollection,
        )

    def get(self, id: str, *, headers: Headers = None) -> DetailedResponse[Port]:
        _require(id=id)
        return self._client._call("get_port", "GET", f"/ports/{_seg(id)}", headers=headers, model=Port)

    def pager(self, *, limit: Optional[int] = None, location_name: Optional[str] = None) -> PortsPager:
        """Iterate every page of ``GET /ports`` following the ``start`` cursor."""
        return PortsPager(self._client, limit=limit, location_name=location_name)
