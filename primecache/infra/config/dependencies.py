"""
FastAPI dependency injection configuration.
"""

from typing import Annotated

from fastapi import Depends
from jinja2 import Environment

from primecache.application.ports import HttpTransportPort
from primecache.application.use_cases.prime_cache import PrimeCacheUseCase
from primecache.infra.config.logging_config import get_logger
from primecache.infra.config.settings import get_settings
from primecache.infra.http.httpx_transport import HttpxTransport
from primecache.infra.templating.environment import build_environment

_environment = None


def get_template_environment() -> Environment:
    global _environment
    if _environment is None:
        _environment = build_environment(get_settings().templates_path)
    return _environment


def get_http_transport() -> HttpTransportPort:
    return HttpxTransport(settings=get_settings())


def get_prime_cache_use_case(
    transport: Annotated[HttpTransportPort, Depends(get_http_transport)],
) -> PrimeCacheUseCase:
    return PrimeCacheUseCase(transport=transport, logger=get_logger("prime_cache"))
