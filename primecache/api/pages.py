"""
Server-rendered pages.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from jinja2 import Environment

from primecache.api.request_context import request_context_from
from primecache.application.use_cases.prime_cache import PrimeCacheUseCase
from primecache.infra.config.dependencies import (
    get_prime_cache_use_case,
    get_template_environment,
)
from primecache.infra.templating.environment import prime_cache_helper

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    use_case: Annotated[PrimeCacheUseCase, Depends(get_prime_cache_use_case)],
    env: Annotated[Environment, Depends(get_template_environment)],
) -> HTMLResponse:
    """Render the landing page with its greeting primed into the client cache."""
    tmpl = env.get_template("index.html")
    html = await tmpl.render_async(
        prime_cache=prime_cache_helper(use_case, request_context_from(request)),
        greeting_url="/api/greeting",
    )
    return HTMLResponse(content=html)


@router.get("/api/greeting")
async def greeting():
    return {"message": "Hello from the server"}
