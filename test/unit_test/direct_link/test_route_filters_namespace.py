from __future__ import annotations

import json
from typing import Any, Dict

import httpx
import pytest

from direct_link_sdk.direct_link.models import (
    ExportRouteFilterCollection,
    GatewayTemplateRouteFilter,
    ImportRouteFilterCollection,
    RouteFilter,
    RouteFilterAction,
    RouteFilterPatch,
)


@pytest.mark.parametrize(
    "direction,collection_model",
    [("export", ExportRouteFilterCollection), ("import", ImportRouteFilterCollection)],
)
def test_list_route_filters_exposes_etag(make_service, route_filter_payload, direction, collection_model) -> None:
    key = f"{direction}_route_filters"

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET" and request.url.path == f"/v1/gateways/gw-1/{key}"
        assert request.headers["X-IBMCloud-SDK-Analytics"].endswith(f"operation_id=list_gateway_{key}")
        return httpx.Response(200, json={key: [route_filter_payload()]}, headers={"ETag": 'W/"rf-etag-1"'})

    service = make_service(handler)
    resp = getattr(service.gateways, key).list("gw-1")

    assert isinstance(resp.result, collection_model)
    assert resp.result.items[0].prefix == "192.168.100.0/24"
    assert resp.etag == 'W/"rf-etag-1"'


def test_create_route_filter_with_before(make_service, route_filter_payload) -> None:
    captured: Dict[str, Any] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST" and request.url.path == "/v1/gateways/gw-1/export_route_filters"
        captured["body"] = json.loads(request.content)
        return httpx.Response(201, json=route_filter_payload(id="rf-new", before="rf-2"))

    resp = make_service(handler).gateways.export_route_filters.create(
        "gw-1", RouteFilterAction.PERMIT, "192.168.100.0/24", before="rf-2", ge=25, le=30
    )

    assert captured["body"] == {
        "action": "permit",
        "prefix": "192.168.100.0/24",
        "before": "rf-2",
        "ge": 25,
        "le": 30,
    }
    assert isinstance(resp.result, RouteFilter)
    assert resp.result.before == "rf-2"


def test_replace_route_filters_sends_if_match_and_wrapped_list(make_service, route_filter_payload) -> None:
    captured: Dict[str, Any] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "PUT" and request.url.path == "/v1/gateways/gw-1/import_route_filters"
        captured["if_match"] = request.headers["If-Match"]
        captured["body"] = json.loads(request.content)
        return httpx.Response(
            201,
            json={"import_route_filters": [route_filter_payload(action="deny", prefix="10.0.0.0/8")]},
            headers={"ETag": 'W/"rf-etag-2"'},
        )

    resp = make_service(handler).gateways.import_route_filters.replace(
        "gw-1",
        'W/"rf-etag-1"',
        [
            GatewayTemplateRouteFilter(action="deny", prefix="10.0.0.0/8", le=16),
            {"action": "permit", "prefix": "192.168.0.0/16"},
        ],
    )

    assert captured["if_match"] == 'W/"rf-etag-1"'
    assert captured["body"] == {
        "import_route_filters": [
            {"action": "deny", "prefix": "10.0.0.0/8", "le": 16},
            {"action": "permit", "prefix": "192.168.0.0/16"},
        ]
    }
    assert isinstance(resp.result, ImportRouteFilterCollection)
    assert resp.etag == 'W/"rf-etag-2"'


def test_replace_lowercase_if_match_header_is_sent_once(make_service) -> None:
    captured: Dict[str, Any] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["if_match"] = request.headers.get_list("If-Match")
        return httpx.Response(201, json={"export_route_filters": []})

    make_service(handler).gateways.export_route_filters.replace("gw-1", 'W/"old"', headers={"if-match": 'W/"new"'})
    assert captured["if_match"] == ['W/"new"']


def test_replace_without_filters_clears_list(make_service) -> None:
    captured: Dict[str, Any] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["body"] = json.loads(request.content)
        return httpx.Response(201, json={"export_route_filters": []})

    resp = make_service(handler).gateways.export_route_filters.replace("gw-1", 'W/"e"')
    assert captured["body"] == {"export_route_filters": []}
    assert resp.result.items == []


def test_get_update_delete_route_filter(make_service, route_filter_payload) -> None:
    captured: Dict[str, Any] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v1/gateways/gw-1/export_route_filters/rf-1"
        if request.method == "GET":
            return httpx.Response(200, json=route_filter_payload(id="rf-1"))
        if request.method == "PATCH":
            captured["content_type"] = request.headers["Content-Type"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json=route_filter_payload(id="rf-1", action="deny"))
        if request.method == "DELETE":
            return httpx.Response(204)
        return httpx.Response(405)

    ns = make_service(handler).gateways.export_route_filters

    assert ns.get("gw-1", "rf-1").result.id == "rf-1"

    updated = ns.update("gw-1", "rf-1", RouteFilterPatch(action="deny"))
    assert captured["content_type"] == "application/merge-patch+json"
    assert captured["body"] == {"action": "deny"}
    assert updated.result.action is RouteFilterAction.DENY

    deleted = ns.delete("gw-1", "rf-1")
    assert deleted.status_code == 204 and deleted.result is None


def test_route_filter_operation_ids_follow_direction(make_service, route_filter_payload) -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers["X-IBMCloud-SDK-Analytics"].rsplit("=", 1)[-1])
        return httpx.Response(200, json=route_filter_payload())

    service = make_service(handler)
    service.gateways.import_route_filters.get("gw-1", "rf-1")
    service.gateways.export_route_filters.update("gw-1", "rf-1", {"le": 28})
    assert seen == ["get_gateway_import_route_filter", "update_gateway_export_route_filter"]
