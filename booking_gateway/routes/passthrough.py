"""
Passthrough Routes
Relay /api requests to the backend and hand its answer back untouched
"""

import re
from dataclasses import dataclass
from typing import Any, Mapping, Sequence
from urllib.parse import quote

from fastapi import APIRouter, Depends, Request, Response

from booking_gateway.utils.backend_client import BackendClient
from booking_gateway.utils.dependencies import get_backend_client

FALLBACK_CONTENT_TYPE = "application/json"

# Methods whose body is forwarded, always as JSON
BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


@dataclass(frozen=True)
class PassthroughRoute:
    """A UI path relayed to the same path on the backend, minus the /api prefix"""
    path: str
    methods: Sequence[str]
    forward_query: bool = False


ROUTES: Sequence[PassthroughRoute] = (
    PassthroughRoute("/clientes", ("GET", "POST"), forward_query=True),
    PassthroughRoute("/clientes/{id}", ("GET", "PUT", "DELETE")),
    PassthroughRoute("/agendamentos", ("GET", "POST")),
    PassthroughRoute("/agendamentos/{id}", ("GET", "PUT", "DELETE")),
    PassthroughRoute("/availability", ("GET",), forward_query=True),
    PassthroughRoute("/servicos", ("GET", "POST"), forward_query=True),
    PassthroughRoute("/servicos/{id}", ("GET", "PUT", "DELETE")),
    PassthroughRoute("/work_windows", ("GET", "POST")),
)


async def forward(
    request: Request,
    backend: BackendClient,
    backend_path: str,
    forward_query: bool,
) -> Response:
    """
    Make exactly one backend call for the inbound request.

    Transport errors are left to the application's generic error handler.
    """
    method = request.method
    query = request.url.query if forward_query else None
    headers = {}
    body = None
    if method in BODY_METHODS:
        body = await request.body()
        headers["Content-Type"] = "application/json"

    result = await backend.request(backend_path, method=method, query=query or None, headers=headers, body=body)

    return Response(
        content=result.body,
        status_code=result.status_code,
        headers={"content-type": result.content_type or FALLBACK_CONTENT_TYPE},
    )


def build_backend_path(template: str, path_params: Mapping[str, Any]) -> str:
    """Substitute decoded path parameters, re-encoded so they stay one path segment"""
    return template.format(**{k: quote(str(v), safe="") for k, v in path_params.items()})


def path_slug(path: str) -> str:
    """Operation-id suffix for a path template, e.g. _clientes_id"""
    return re.sub(r"\W+", "_", path).rstrip("_")


def add_passthrough_route(router: APIRouter, route: PassthroughRoute) -> None:
    """Register one table entry on the router"""

    async def relay(request: Request, backend: BackendClient = Depends(get_backend_client)) -> Response:
        backend_path = build_backend_path(route.path, request.path_params)
        return await forward(request, backend, backend_path, route.forward_query)

    # One registration per method keeps OpenAPI operation ids unique
    for method in route.methods:
        router.add_api_route(
            route.path,
            relay,
            methods=[method],
            name=f"relay {method} {route.path}",
            operation_id=f"relay_{method.lower()}{path_slug(route.path)}",
            response_class=Response,
        )


def build_router(routes: Sequence[PassthroughRoute] = ROUTES) -> APIRouter:
    router = APIRouter()
    for route in routes:
        add_passthrough_route(router, route)
    return router


router = build_router()
