from __future__ import annotations

import json
import re
import uuid
from typing import Any, Dict, Iterator, List, Optional

import httpx
import pytest

from direct_link_sdk.direct_link.client import DirectLinkV1

SERVICE_URL = "https://directlink.test/v1"


class FakeDirectLinkApi:
    """Stateful in-memory stand-in for the Direct Link REST API.

    Covers gateways, export/import route filters (with ETag concurrency),
    virtual connections, route reports and paginated ports.
    """

    def __init__(self, ports: Optional[List[Dict[str, Any]]] = None) -> None:
        self.gateways: Dict[str, Dict[str, Any]] = {}
        self.route_filters: Dict[str, Dict[str, List[Dict[str, Any]]]] = {}
        self.filter_revisions: Dict[str, Dict[str, int]] = {}
        self.virtual_connections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.route_reports: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.ports: List[Dict[str, Any]] = ports or []
        self.requests: List[httpx.Request] = []

    # ----------------------
    # Helpers
    # ----------------------

    @staticmethod
    def _error(status: int, code: str, message: str) -> httpx.Response:
        return httpx.Response(status, json={"errors": [{"code": code, "message": message}], "trace": uuid.uuid4().hex})

    def _etag(self, gw_id: str, direction: str) -> str:
        return f'W/"{direction}-{self.filter_revisions[gw_id][direction]}"'

    def _filters_response(self, status: int, gw_id: str, direction: str) -> httpx.Response:
        key = f"{direction}_route_filters"
        return httpx.Response(
            status,
            json={key: self.route_filters[gw_id][direction]},
            headers={"ETag": self._etag(gw_id, direction)},
        )

    def _bump(self, gw_id: str, direction: str) -> None:
        self.filter_revisions[gw_id][direction] += 1

    # ----------------------
    # Dispatch
    # ----------------------

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.params.get("version") is None:
            return self._error(400, "missing_version", "version query parameter is required")
        path = request.url.path.removeprefix("/v1")
        method = request.method

        if path == "/gateways":
            if method == "GET":
                return httpx.Response(200, json={"gateways": list(self.gateways.values())})
            return self._create_gateway(json.loads(request.content))

        if path == "/ports":
            return self._list_ports(request)

        m = re.fullmatch(r"/gateways/([^/]+)(?:/(\w+))?(?:/([^/]+))?", path)
        if not m:
            return self._error(404, "not_found", "unknown path")
        gw_id, sub, item_id = m.groups()
        if gw_id not in self.gateways:
            return self._error(404, "not_found", f"Gateway {gw_id} not found")

        if sub is None:
            return self._gateway(method, gw_id, request)
        if sub in ("export_route_filters", "import_route_filters"):
            return self._route_filters(method, gw_id, sub.split("_", 1)[0], item_id, request)
        if sub == "virtual_connections":
            return self._virtual_connections(method, gw_id, item_id, request)
        if sub == "route_reports":
            return self._route_reports(method, gw_id, item_id)
        return self._error(404, "not_found", "unknown path")

    def _create_gateway(self, body: Dict[str, Any]) -> httpx.Response:
        if any(g["name"] == body["name"] for g in self.gateways.values()):
            return self._error(409, "conflict", "A gateway with the same name already exists")
        gw_id = str(uuid.uuid4())
        gateway = {
            "id": gw_id,
            "name": body["name"],
            "type": body["type"],
            "speed_mbps": body["speed_mbps"],
            "bgp_asn": body["bgp_asn"],
            "global": body["global"],
            "metered": body["metered"],
            "created_at": "2024-03-01T12:00:00Z",
            "crn": f"crn:v1:bluemix:public:directlink:dal03:a/acct::{body['type']}:{gw_id}",
            "location_name": body.get("location_name", "dal03"),
            "location_display_name": "Dallas 3",
            "operational_status": "awaiting_loa" if body["type"] == "dedicated" else "create_pending",
            "default_export_route_filter": body.get("default_export_route_filter", "permit"),
            "default_import_route_filter": body.get("default_import_route_filter", "permit"),
        }
        self.gateways[gw_id] = gateway
        self.route_filters[gw_id] = {"export": [], "import": []}
        self.filter_revisions[gw_id] = {"export": 1, "import": 1}
        self.virtual_connections[gw_id] = {}
        self.route_reports[gw_id] = {}
        for direction in ("export", "import"):
            for tpl in body.get(f"{direction}_route_filters", []):
                self.route_filters[gw_id][direction].append({"id": str(uuid.uuid4()), **tpl})
        return httpx.Response(201, json=gateway)

    def _gateway(self, method: str, gw_id: str, request: httpx.Request) -> httpx.Response:
        if method == "GET":
            return httpx.Response(200, json=self.gateways[gw_id])
        if method == "PATCH":
            if request.headers.get("Content-Type") != "application/merge-patch+json":
                return self._error(415, "unsupported_media_type", "merge-patch required")
            for key, value in json.loads(request.content).items():
                if value is None:
                    self.gateways[gw_id].pop(key, None)
                else:
                    self.gateways[gw_id][key] = value
            return httpx.Response(200, json=self.gateways[gw_id])
        if method == "DELETE":
            del self.gateways[gw_id]
            return httpx.Response(204)
        return self._error(405, "method_not_allowed", method)

    def _route_filters(
        self, method: str, gw_id: str, direction: str, filter_id: Optional[str], request: httpx.Request
    ) -> httpx.Response:
        filters = self.route_filters[gw_id][direction]
        if filter_id is None:
            if method == "GET":
                return self._filters_response(200, gw_id, direction)
            if method == "PUT":
                if request.headers.get("If-Match") != self._etag(gw_id, direction):
                    return self._error(412, "precondition_failed", "ETag does not match")
                body = json.loads(request.content)[f"{direction}_route_filters"]
                self.route_filters[gw_id][direction] = [{"id": str(uuid.uuid4()), **tpl} for tpl in body]
                self._bump(gw_id, direction)
                return self._filters_response(201, gw_id, direction)
            # POST
            tpl = json.loads(request.content)
            before = tpl.pop("before", None)
            new = {"id": str(uuid.uuid4()), **tpl}
            index = next((i for i, f in enumerate(filters) if f["id"] == before), len(filters))
            filters.insert(index, new)
            self._bump(gw_id, direction)
            return httpx.Response(201, json=new)

        current = next((f for f in filters if f["id"] == filter_id), None)
        if current is None:
            return self._error(404, "not_found", f"Route filter {filter_id} not found")
        if method == "GET":
            return httpx.Response(200, json=current)
        if method == "PATCH":
            current.update({k: v for k, v in json.loads(request.content).items() if k != "before"})
            self._bump(gw_id, direction)
            return httpx.Response(200, json=current)
        filters.remove(current)
        self._bump(gw_id, direction)
        return httpx.Response(204)

    def _virtual_connections(
        self, method: str, gw_id: str, vc_id: Optional[str], request: httpx.Request
    ) -> httpx.Response:
        vcs = self.virtual_connections[gw_id]
        if vc_id is None:
            if method == "GET":
                return httpx.Response(200, json={"virtual_connections": list(vcs.values())})
            body = json.loads(request.content)
            new = {"id": str(uuid.uuid4()), "status": "pending", "created_at": "2024-03-01T12:00:00Z", **body}
            vcs[new["id"]] = new
            return httpx.Response(201, json=new)
        if vc_id not in vcs:
            return self._error(404, "not_found", f"Virtual connection {vc_id} not found")
        if method == "GET":
            return httpx.Response(200, json=vcs[vc_id])
        if method == "PATCH":
            vcs[vc_id].update(json.loads(request.content))
            return httpx.Response(200, json=vcs[vc_id])
        del vcs[vc_id]
        return httpx.Response(204)

    def _route_reports(self, method: str, gw_id: str, report_id: Optional[str]) -> httpx.Response:
        reports = self.route_reports[gw_id]
        if report_id is None:
            if method == "GET":
                return httpx.Response(200, json={"route_reports": list(reports.values())})
            report = {"id": str(uuid.uuid4()), "status": "pending", "created_at": "2024-03-01T12:00:00Z"}
            reports[report["id"]] = report
            return httpx.Response(202, json=report)
        if report_id not in reports:
            return self._error(404, "not_found", f"Route report {report_id} not found")
        if method == "GET":
            # Reports complete on first read after creation.
            reports[report_id].update(
                {"status": "complete", "gateway_routes": [{"prefix": f["prefix"]} for f in self.route_filters[gw_id]["export"]]}
            )
            return httpx.Response(200, json=reports[report_id])
        del reports[report_id]
        return httpx.Response(204)

    def _list_ports(self, request: httpx.Request) -> httpx.Response:
        limit = int(request.url.params.get("limit", "50"))
        location = request.url.params.get("location_name")
        ports = [p for p in self.ports if location is None or p["location_name"] == location]
        start = request.url.params.get("start")
        offset = int(start) if start else 0
        page = ports[offset : offset + limit]
        body: Dict[str, Any] = {
            "first": {"href": f"{SERVICE_URL}/ports?limit={limit}"},
            "limit": limit,
            "total_count": len(ports),
            "ports": page,
        }
        if offset + limit < len(ports):
            # Only href carries the cursor, like some service responses.
            body["next"] = {"href": f"{SERVICE_URL}/ports?start={offset + limit}&limit={limit}"}
        return httpx.Response(200, json=body)


def _port(index: int, location: str) -> Dict[str, Any]:
    return {
        "id": f"port-{index:02d}",
        "label": f"XCR-{index:02d}",
        "location_name": location,
        "location_display_name": location.upper(),
        "provider_name": "provider_1",
        "direct_link_count": index % 3,
        "supported_link_speeds": [1000, 2000],
    }


@pytest.fixture()
def fake_api() -> FakeDirectLinkApi:
    ports = [_port(i, "dal03" if i % 2 == 0 else "wdc04") for i in range(11)]
    return FakeDirectLinkApi(ports=ports)


@pytest.fixture()
def direct_link(fake_api: FakeDirectLinkApi) -> Iterator[DirectLinkV1]:
    http = httpx.Client(transport=httpx.MockTransport(fake_api))
    with DirectLinkV1("2024-11-19", service_url=SERVICE_URL, auth_token="Bearer it-token", client=http) as service:
        yield service
    http.close()
