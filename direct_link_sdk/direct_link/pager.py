"""Cursor pager for ``GET /ports``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, List, Optional

from .models import Port

if TYPE_CHECKING:
    from .client import DirectLinkV1

logger = logging.getLogger(__name__)


class PortsPager:
    """Walk every page of provider ports.

    The pager is single-use: once the last page was fetched ``has_next()``
    returns ``False`` and ``get_next()`` raises ``StopIteration``.

    Examples:
        >>> pager = client.ports.pager(limit=50, location_name="dal03")
        >>> while pager.has_next():
        ...     page = pager.get_next()
        >>> all_ports = client.ports.pager().get_all()
    """

    def __init__(
        self,
        client: "DirectLinkV1",
        *,
        limit: Optional[int] = None,
        location_name: Optional[str] = None,
    ) -> None:
        if limit is not None and not 1 <= limit <= 100:
            raise ValueError("limit must be between 1 and 100")
        self._client = client
        self._limit = limit
        self._location_name = location_name
        self._has_next = True
        self._next_start: Optional[str] = None
        self._pages_fetched = 0

    def has_next(self) -> bool:
        return self._has_next

    def get_next(self) -> List[Port]:
        """Fetch the following page of ports.

        Raises:
            StopIteration: When every page was already returned.
        """
        if not self._has_next:
            raise StopIteration("No more results available")
        response = self._client.ports.list(
            start=self._next_start,
            limit=self._limit,
            location_name=self._location_name,
        )
        collection = response.result
        self._pages_fetched += 1
        self._next_start = collection.get_next_start() if collection is not None else None
        self._has_next = self._next_start is not None
        logger.debug("PortsPager: page %d fetched, has_next=%s", self._pages_fetched, self._has_next)
        return list(collection.ports) if collection is not None else []

    def get_all(self) -> List[Port]:
        """Fetch every remaining page and return the concatenated ports."""
        results: List[Port] = []
        while self._has_next:
            results.extend(self.get_next())
        return results

    def __iter__(self) -> Iterator[Port]:
        while self._has_next:
            yield from self.get_next()
