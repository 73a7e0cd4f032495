from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Mapping, Optional, TypeVar

import httpx

T = TypeVar("T")


@dataclass
class DetailedResponse(Generic[T]):
    """Outcome of a successful operation.

    ``result`` holds the parsed model (or raw ``bytes`` for binary downloads,
    ``None`` for empty bodies). ``headers`` keeps the response headers as a
    case-insensitive ``httpx.Headers``, so ``headers["ETag"]`` and
    ``headers["etag"]`` read the same value.
    """

    result: Optional[T]
    headers: Mapping[str, str] = field(default_factory=httpx.Headers)
    status_code: int = 200

    def __post_init__(self) -> None:
        if not isinstance(self.headers, httpx.Headers):
            self.headers = httpx.Headers(self.headers)

    @property
    def etag(self) -> Optional[str]:
        return self.headers.get("ETag")
