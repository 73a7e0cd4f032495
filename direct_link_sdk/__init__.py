"""Direct Link SDK.

Typed Python client for the IBM Cloud Direct Link API (``/v1``).

Package layout
--------------

- ``direct_link_sdk.core``: HTTP core (``BaseService``), ``DetailedResponse``,
  error types, settings (``DirectLinkSettings``) and opt-in logging setup.
- ``direct_link_sdk.schemas``: Pydantic bases for request templates,
  resources and merge-patch documents.
- ``direct_link_sdk.direct_link``: the ``DirectLinkV1`` client, its models
  and the ``PortsPager``.

Quick start
-----------

.. code-block:: python

    from direct_link_sdk import DirectLinkV1

    with DirectLinkV1(version="2024-11-19", auth_token="Bearer <iam-token>") as dl:
        for gw in dl.gateways.list().result.gateways:
            print(gw.name, gw.operational_status)
"""

from direct_link_sdk.core import (
    DetailedResponse,
    DirectLinkApiError,
    DirectLinkConnectionError,
    DirectLinkError,
    DirectLinkSettings,
    setup_logging,
)
from direct_link_sdk.direct_link import DirectLinkV1, PortsPager
from direct_link_sdk.version import __version__

__all__ = [
    "DetailedResponse",
    "DirectLinkApiError",
    "DirectLinkConnectionError",
    "DirectLinkError",
    "DirectLinkSettings",
    "DirectLinkV1",
    "PortsPager",
    "__version__",
    "setup_logging",
]
