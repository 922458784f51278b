"""
Page Loader
Fetches every resource a page needs concurrently and degrades each one to
an empty default instead of failing the page.
"""

import asyncio
import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Protocol, Sequence

import httpx

from booking_gateway.utils.backend_client import BackendResponse
from booking_gateway.utils.logger import get_logger

logger = get_logger(__name__)


class Fetcher(Protocol):
    async def request(self, path: str, method: str = "GET", **kwargs) -> BackendResponse: ...


@dataclass(frozen=True)
class ResourceFetch:
    """One logical resource a page depends on"""
    name: str
    path: str
    default_factory: Callable[[], Any] = list


@dataclass
class ResourceResult:
    name: str
    data: Any
    error: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.error is not None


@dataclass
class PageData:
    data: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Page payload: one key per resource plus the errors map"""
        return {**self.data, "errors": dict(self.errors)}


async def load_resource(backend: Fetcher, fetch: ResourceFetch) -> ResourceResult:
    """
    Fetch and parse one resource.

    Never raises for backend trouble: transport failures, non-2xx statuses and
    malformed JSON all yield the resource's default plus a diagnostic.
    """
    try:
        response = await backend.request(fetch.path)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning("Backend unreachable", resource=fetch.name, path=fetch.path, error=repr(e))
        return ResourceResult(fetch.name, fetch.default_factory(), f"backend unreachable: {type(e).__name__}")

    if not response.ok:
        logger.info("Backend returned error status", resource=fetch.name, status_code=response.status_code)
        return ResourceResult(
            fetch.name, fetch.default_factory(), f"backend returned status {response.status_code}"
        )

    try:
        payload = json.loads(response.body)
    except ValueError as e:
        logger.warning("Malformed JSON payload", resource=fetch.name, path=fetch.path, error=str(e))
        return ResourceResult(fetch.name, fetch.default_factory(), "malformed JSON payload")

    return ResourceResult(fetch.name, payload)


async def load_page(backend: Fetcher, fetches: Sequence[ResourceFetch]) -> PageData:
    """Fire all fetches at once and aggregate once every one has resolved"""
    results = await asyncio.gather(*(load_resource(backend, fetch) for fetch in fetches))

    page = PageData()
    for fetch, result in zip(fetches, results):
        page.data[fetch.name] = result.data
        if result.degraded:
            page.errors[fetch.name] = result.error

    if page.errors:
        logger.info("Page loaded with degraded resources", degraded=sorted(page.errors))
    return page


# Resources each page renders, in payload order
PAGES: Dict[str, Sequence[ResourceFetch]] = {
    "agendamentos": (
        ResourceFetch("agendamentos", "/agendamentos"),
        ResourceFetch("clientes", "/clientes"),
        ResourceFetch("servicos", "/servicos"),
    ),
    "clientes": (ResourceFetch("clientes", "/clientes"),),
    "servicos": (ResourceFetch("servicos", "/servicos"),),
}
