"""Small helpers shared by the HTTP core and generated service code."""

from __future__ import annotations

import platform
from typing import Dict, Optional

import httpx

from direct_link_sdk.version import __version__

SDK_NAME = "direct-link-python-sdk"


def get_query_param(url: Optional[str], param: str) -> Optional[str]:
    """Return the value of a query parameter from a (possibly relative) URL.

    Used to extract pagination cursors from ``next.href`` links.

    Examples:
        >>> get_query_param("https://example.com/v1/ports?start=abc&limit=10", "start")
        'abc'
        >>> get_query_param("/v1/ports?limit=10", "start") is None
        True
    """
    if not url:
        return None
    try:
        return httpx.URL(url).params.get(param)
    except httpx.InvalidURL as e:
        raise ValueError(f"Unable to parse URL {url!r}: {e}") from e


def get_sdk_headers(service_name: str, service_version: str, operation_id: str) -> Dict[str, str]:
    """Build the analytics headers attached to every operation."""
    user_agent = "{0}/{1} (lang=python; os.name={2}; python.version={3})".format(
        SDK_NAME, __version__, platform.system(), platform.python_version()
    )
    return {
        "User-Agent": user_agent,
        "X-IBMCloud-SDK-Analytics": f"service_name={service_name};service_version={service_version};operation_id={operation_id}",
    }
