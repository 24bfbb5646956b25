"""
Builds a RequestContext from an inbound Starlette request.
"""

from typing import Optional
from urllib.parse import quote

from fastapi import Request

from primecache.domain.value_objects.prime_request import RequestContext

# RFC 3986 pchar plus "/" - everything a path may carry unescaped.
_PATH_SAFE = "/:@!$&'()*+,;=-._~"


def _strip_prefix(path: str, prefix: str) -> str:
    if prefix and path.startswith(prefix):
        return path[len(prefix):]
    return path


def _encoded_path(scope: dict, path_base: str) -> str:
    """
    The request path as the client sent it, without the path base.

    ``raw_path`` keeps escapes such as ``%2F`` that ``path`` has already
    decoded. Servers that do not provide it get the re-quoted ``path``.
    """
    raw_path: Optional[bytes] = scope.get("raw_path")
    if raw_path:
        encoded_base = quote(path_base, safe=_PATH_SAFE)
        return _strip_prefix(_strip_prefix(raw_path.decode("latin-1"), path_base), encoded_base)

    path = scope.get("path", "") or ""
    return quote(_strip_prefix(path, path_base), safe=_PATH_SAFE)


def request_context_from(request: Request) -> RequestContext:
    """
    Split ``request`` into scheme, host, path base, path and query string.

    ``root_path`` (the mount prefix) is the path base. Depending on the
    server, the path may or may not already include it.
    """
    scope = request.scope
    path_base = scope.get("root_path", "") or ""

    query = request.url.query
    return RequestContext(
        scheme=request.url.scheme,
        host=request.url.netloc,
        path_base=quote(path_base, safe=_PATH_SAFE),
        path=_encoded_path(scope, path_base),
        query_string=f"?{query}" if query else "",
    )
