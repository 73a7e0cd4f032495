"""Pydantic base schema utilities for Direct Link models.

Provides the shared bases used by every model under
``direct_link_sdk.direct_link.models``:

- :class:`BaseSchema` for request templates (strict, unknown fields rejected)
- :class:`ResourceSchema` for server resources (unknown fields kept)
- :class:`PatchSchema` for JSON Merge-Patch bodies (``as_patch()``)

The Direct Link wire format is snake_case, so no alias generator is used.
Fields that clash with Python keywords declare an explicit alias (``global_``
is sent as ``global``).
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Shared base for request templates.

    - Sets strict handling for extra fields
    - Enables ``populate_by_name`` so aliased fields accept the Python name
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
    )

    def to_body(self) -> Dict[str, Any]:
        """Serialize into a JSON-ready request body keyed by wire names."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ResourceSchema(BaseSchema):
    """Base for resources returned by the API.

    Unknown fields are accepted and preserved in ``model_extra`` so newer
    server payloads still parse.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
    )


class PatchSchema(BaseSchema):
    """Base for sparse update templates sent as ``application/merge-patch+json``."""

    def as_patch(self) -> Dict[str, Any]:
        """Build an RFC 7396 merge-patch document.

        Only fields explicitly set by the caller are kept (recursively), and
        ``None`` values are dropped.
        """
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True, mode="json")
