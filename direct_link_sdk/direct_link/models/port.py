"""Provider port models.

``GET /ports`` is the only paginated Direct Link endpoint. Each page carries
``first`` and, while more results exist, ``next`` links. The cursor for the
following page is ``next.start`` (also present as the ``start`` query
parameter of ``next.href``).
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from direct_link_sdk.core.utils import get_query_param
from direct_link_sdk.schemas.base import ResourceSchema

from .common import PaginationFirst, PaginationNext


class Port(ResourceSchema):
    id: str
    label: str
    location_name: str
    location_display_name: Optional[str] = None
    provider_name: str
    direct_link_count: int = 0
    supported_link_speeds: List[int] = Field(default_factory=list)


class PortCollection(ResourceSchema):
    first: PaginationFirst
    limit: int
    next: Optional[PaginationNext] = None
    total_count: Optional[int] = None
    ports: List[Port] = Field(default_factory=list)

    def get_next_start(self) -> Optional[str]:
        """Return the cursor for the following page, or ``None`` on the last page."""
        if self.next is None:
            return None
        if self.next.start:
            return self.next.start
        return get_query_param(self.next.href, "start")
