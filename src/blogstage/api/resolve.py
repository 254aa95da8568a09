"""Resolve API endpoint.

Tells what a request URI designates, for the layer that renders it.
"""

import sys

from aiohttp import web

from blogstage.app_keys import resolver_key, verbose_key
from blogstage.core.errors import PathTraversalError, TagOrderError


def create_resolve_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/resolve", resolve_uri),
        web.get("/api/resolve/{path:.*}", resolve_uri),
    ]


async def resolve_uri(request: web.Request) -> web.Response:
    path = request.match_info.get("path", "")
    resolver = request.app[resolver_key]

    try:
        info = resolver.resolve(path)
    except PathTraversalError:
        # Same answer as a missing page, the reason is not disclosed
        info = None
    except TagOrderError as e:
        return web.json_response(
            {"error": str(e), "path": path, "canonical": e.canonical_uri},
            status=400,
        )

    if info is None:
        return web.json_response(
            {"error": "Page not found", "path": path},
            status=404,
        )

    if request.app[verbose_key]:
        print(
            f"[RESOLVE] {path or '/'} -> {info.kind.value}: {info.path}",
            file=sys.stderr,
        )

    return web.json_response(info.to_dict())
