"""
Jinja2 environment for server-rendered pages.

Templates are rendered asynchronously so helpers that return awaitables,
such as ``prime_cache``, are awaited in place::

    {{ prime_cache("/api/greeting") }}
"""

from pathlib import Path
from typing import Awaitable, Callable, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from primecache.application.use_cases.prime_cache import PrimeCacheUseCase
from primecache.domain.value_objects.prime_request import RequestContext

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "web" / "templates"


def build_environment(template_directory: Optional[Union[str, Path]] = None) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(template_directory or TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        enable_async=True,
    )


def prime_cache_helper(
    use_case: PrimeCacheUseCase, context: RequestContext
) -> Callable[[str], Awaitable[Markup]]:
    """Bind the use case to the request being rendered, for use as a template global."""

    def prime_cache(url: str) -> Awaitable[Markup]:
        return use_case.execute(context, url)

    return prime_cache
