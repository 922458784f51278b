"""
Backend Service HTTP Client
Client for relaying requests to the agenda backend service

Connection pooling follows the usual httpx pattern:
- Single shared AsyncClient initialized at app startup
- Closed on app shutdown
- Per-request client when used before startup
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Union

import httpx

from booking_gateway.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class BackendResponse:
    """Raw backend answer: nothing here is interpreted"""
    status_code: int
    body: bytes
    content_type: Optional[str]

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def build_target_url(base_url: str, path: str, query: Optional[str] = None) -> str:
    """Concatenate base + path + optional ?query, without normalising either side"""
    url = f"{base_url}{path}"
    if query:
        url = f"{url}?{query}"
    return url


class BackendClient:
    """
    HTTP client for the backend service.

    Lifecycle:
        - Call start() during app startup (FastAPI lifespan)
        - Call stop() during app shutdown
        - If not started, falls back to a per-request client
    """

    # Connection pool settings
    MAX_CONNECTIONS = 100
    MAX_KEEPALIVE = 20
    KEEPALIVE_EXPIRY = 5.0

    def __init__(self, base_url: str, timeout: float = 30.0):
        self.base_url = base_url
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def started(self) -> bool:
        return self._client is not None

    async def start(self):
        """
        Initialize the shared HTTP client.
        Call this during FastAPI app startup via lifespan.
        """
        if self._client is not None:
            logger.warning("BackendClient already started")
            return

        limits = httpx.Limits(
            max_connections=self.MAX_CONNECTIONS,
            max_keepalive_connections=self.MAX_KEEPALIVE,
            keepalive_expiry=self.KEEPALIVE_EXPIRY
        )
        self._client = httpx.AsyncClient(limits=limits, timeout=httpx.Timeout(self.timeout))

        logger.info("BackendClient started", base_url=self.base_url, timeout=self.timeout)

    async def stop(self):
        """
        Close the HTTP client and release resources.
        Call this during FastAPI app shutdown via lifespan.
        """
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("BackendClient stopped")

    async def request(
        self,
        path: str,
        method: str = "GET",
        query: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[Union[bytes, str]] = None,
    ) -> BackendResponse:
        """
        Issue one request to the backend.

        Args:
            path: Backend path, e.g. "/clientes/7"
            method: HTTP method
            query: Raw query string without the leading "?"
            headers: Headers to send as-is
            body: Raw request body

        Returns:
            BackendResponse with status, raw body bytes and content type

        Raises:
            httpx.HTTPError: when the backend cannot be reached
        """
        url = build_target_url(self.base_url, path, query)
        kwargs = {"headers": dict(headers or {})}
        if body is not None:
            kwargs["content"] = body

        if self._client:
            response = await self._client.request(method, url, **kwargs)
        else:
            logger.warning("BackendClient not started, using per-request client")
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
                response = await client.request(method, url, **kwargs)

        logger.debug("Backend call completed", method=method, url=url, status_code=response.status_code)

        return BackendResponse(
            status_code=response.status_code,
            body=response.content,
            content_type=response.headers.get("content-type"),
        )

    async def health_check(self) -> str:
        """Check if the backend answers at all"""
        try:
            result = await self.request("/clientes", query="limit=1")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Backend health check failed", error=str(e))
            return "unreachable"
        return "healthy" if result.status_code < 500 else "unhealthy"
