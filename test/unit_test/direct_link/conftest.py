from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List

import httpx
import pytest

from direct_link_sdk.direct_link.client import DirectLinkV1

SERVICE_URL = "https://directlink.test/v1"
API_VERSION = "2024-11-19"


@pytest.fixture()
def make_service() -> Iterator[Callable[..., DirectLinkV1]]:
    """Build a ``DirectLinkV1`` whose HTTP client routes to a MockTransport handler."""
    clients: List[httpx.Client] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any) -> DirectLinkV1:
        http = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(http)
        kwargs.setdefault("auth_token", "Bearer test-token")
        return DirectLinkV1(API_VERSION, service_url=SERVICE_URL, client=http, **kwargs)

    yield _make
    for c in clients:
        c.close()


@pytest.fixture()
def gateway_payload() -> Callable[..., Dict[str, Any]]:
    def _payload(**overrides: Any) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": "ef4dcb1a-fee4-41c7-9e11-9cd99e65c1f4",
            "name": "myGateway",
            "type": "dedicated",
            "speed_mbps": 1000,
            "bgp_asn": 64999,
            "global": True,
            "metered": False,
            "created_at": "2024-03-01T12:00:00Z",
            "crn": "crn:v1:bluemix:public:directlink:dal03:a/57a7d05f36894e3cb9b46a43556d903e::dedicated:ef4dcb1a-fee4-41c7-9e11-9cd99e65c1f4",
            "location_name": "dal03",
            "location_display_name": "Dallas 3",
            "operational_status": "awaiting_loa",
            "bgp_status": "idle",
            "cross_connect_router": "xcr01.dal03",
        }
        data.update(overrides)
        return data

    return _payload


@pytest.fixture()
def route_filter_payload() -> Callable[..., Dict[str, Any]]:
    def _payload(**overrides: Any) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": "1a15dcab-7e26-45e1-b7c5-bc690eaa9724",
            "action": "permit",
            "prefix": "192.168.100.0/24",
            "ge": 25,
            "le": 30,
            "created_at": "2024-03-01T12:00:00Z",
            "updated_at": "2024-03-01T12:00:00Z",
        }
        data.update(overrides)
        return data

    return _payload
