"""HTTP core shared by Direct Link service clients

Overview
--------
``BaseService`` is the small collaborator every generated service builds on.
It owns an ``httpx.Client`` and provides:

- ``set_service_url``: base URL validation and normalization
- ``prepare_request``: absolute URL, default + per-call headers, auth header
- ``send``: one HTTP exchange mapped to ``DetailedResponse`` or a typed error
- ``enable_retries`` / ``disable_retries``: a ``tenacity`` policy around ``send``

Authentication
--------------
Provide ``auth_token`` directly (e.g. ``"Bearer <iam-token>"``) or a
``token_provider`` callable invoked before each request. How the token is
obtained is up to the caller.

Errors
------
Non-2xx responses raise ``DirectLinkApiError``; transport failures and
timeouts raise ``DirectLinkConnectionError``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional

import httpx
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from .errors import DirectLinkApiError, DirectLinkConnectionError, DirectLinkError
from .response import DetailedResponse

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPES = ("application/json", "application/problem+json")


def _is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, DirectLinkError) and exc.is_retryable


class BaseService:
    """Common HTTP functionality for Direct Link services.

    Design
    ------
    - Holds only immutable-per-call configuration (URL, auth, default headers).
    - Leaves body encoding and response typing to the service layer.
    - Retries are off by default and bounded when enabled.
    """

    def __init__(
        self,
        *,
        service_url: str,
        auth_token: Optional[str] = None,
        token_provider: Optional[Callable[[], str]] = None,
        timeout: float = 60.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """Create the HTTP core.

        Args:
            service_url: Base URL of the service (e.g. ``https://directlink.cloud.ibm.com/v1``).
            auth_token: Authorization header value. Ignored when ``token_provider`` is set.
            token_provider: Callable invoked before each request to fetch the header value.
            timeout: Default HTTP timeout for the internal client.
            client: Optional preconfigured ``httpx.Client`` to use. An injected
                client is not closed by ``close()``.
        """
        self.service_url = ""
        self.set_service_url(service_url)
        self.auth_token = auth_token
        self._token_provider = token_provider
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._default_headers: Dict[str, str] = {}
        self._retrying: Optional[Retrying] = None
        self._logger = logging.getLogger(type(self).__module__)

    # ----------------------
    # Configuration
    # ----------------------

    def set_service_url(self, service_url: str) -> None:
        """Set the base URL used for every request.

        Raises:
            ValueError: If the URL is empty or wrapped in braces/quotes.
        """
        if not service_url:
            raise ValueError("The service URL is required")
        if service_url[0] in "{\"" or service_url[-1] in "}\"":
            raise ValueError(
                "The service URL shouldn't start or end with curly brackets or quotes. "
                "Be sure to remove any {} and \" characters surrounding your service URL"
            )
        self.service_url = service_url.rstrip("/")

    def set_default_headers(self, headers: Mapping[str, str]) -> None:
        """Headers sent with every request; per-call headers take precedence."""
        self._default_headers = dict(headers)

    def set_timeout(self, timeout: float) -> None:
        self._client.timeout = httpx.Timeout(timeout)

    def enable_retries(self, max_retries: int = 4, retry_interval: float = 30.0) -> None:
        """Retry retryable failures (429, 5xx, transport errors).

        Args:
            max_retries: Number of additional attempts after the first one.
            retry_interval: Cap in seconds for the exponential wait between attempts.
        """
        if max_retries < 0:
            raise ValueError("max_retries must be a non-negative integer")
        if retry_interval < 0:
            raise ValueError("retry_interval must be non-negative")
        self._retrying = Retrying(
            stop=stop_after_attempt(max_retries + 1),
            wait=wait_exponential(multiplier=1, max=retry_interval),
            retry=retry_if_exception(_is_retryable),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        self._logger.debug("Retries enabled: max_retries=%d retry_interval=%.1fs", max_retries, retry_interval)

    def disable_retries(self) -> None:
        self._retrying = None

    @property
    def retries_enabled(self) -> bool:
        return self._retrying is not None

    @property
    def http_client(self) -> httpx.Client:
        return self._client

    # ----------------------
    # Request lifecycle
    # ----------------------

    def _ensure_token(self) -> None:
        """Refresh ``auth_token`` from the provider, if one was supplied.

        Provider failures are raised to the caller; sending an unauthenticated
        request would only fail later with a less useful 401.
        """
        if self._token_provider is not None:
            self.auth_token = self._token_provider()

    def prepare_request(
        self,
        method: str,
        path: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, Any]] = None,
        json: Optional[Any] = None,
        content: Optional[bytes] = None,
        files: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Request:
        """Build an ``httpx.Request`` against ``service_url``.

        ``None`` query values are dropped. The body is read eagerly so the same
        request can be re-sent by the retry policy.
        """
        self._ensure_token()
        merged = httpx.Headers(self._default_headers)
        if self.auth_token:
            merged["Authorization"] = self.auth_token
        if headers:
            merged.update({k: v for k, v in headers.items() if v is not None})
        query = {k: v for k, v in (params or {}).items() if v is not None}
        request = self._client.build_request(
            method,
            f"{self.service_url}{path}",
            headers=merged,
            params=query or None,
            json=json,
            content=content,
            files=files,
        )
        request.read()
        return request

    def send(self, request: httpx.Request) -> DetailedResponse[Any]:
        """Send a prepared request, applying the retry policy when enabled.

        Returns:
            ``DetailedResponse`` whose ``result`` is parsed JSON, raw bytes for
            other content types, or ``None`` for an empty body.

        Raises:
            DirectLinkApiError: When the response status is >= 400.
            DirectLinkConnectionError: When the request could not complete.
        """
        if self._retrying is None:
            return self._send_once(request)
        for attempt in self._retrying.copy():
            with attempt:
                return self._send_once(request)
        raise DirectLinkError("Retry policy finished without an outcome")  # pragma: no cover

    def _send_once(self, request: httpx.Request) -> DetailedResponse[Any]:
        self._logger.debug("%s %s", request.method, request.url)
        try:
            r = self._client.send(request)
        except httpx.TimeoutException as e:
            raise DirectLinkConnectionError(f"Request timed out: {request.method} {request.url}") from e
        except httpx.TransportError as e:
            raise DirectLinkConnectionError(f"Request failed: {request.method} {request.url}: {e}") from e
        try:
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            err = DirectLinkApiError.from_response(e.response)
            self._logger.debug("%s %s failed: %s", request.method, request.url, err)
            raise err from e
        return DetailedResponse(result=self._parse_body(r), headers=r.headers, status_code=r.status_code)

    @staticmethod
    def _parse_body(r: httpx.Response) -> Any:
        if r.status_code == 204 or not r.content:
            return None
        content_type = r.headers.get("content-type", "")
        if content_type.startswith(JSON_CONTENT_TYPES):
            return r.json()
        return r.content

    # ----------------------
    # Resource management
    # ----------------------

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
