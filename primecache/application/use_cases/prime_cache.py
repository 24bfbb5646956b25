"""
Use Case: Prime the client-side response cache

This use case handles:
1. Validating the URL to prime
2. Resolving it against the URL of the page being rendered
3. Fetching it through the injected transport
4. Rendering a script fragment that seeds ``window.__preCachedResponses``

Fetch failures never propagate: they are logged as a warning and render
as an empty fragment.
"""

from typing import Awaitable, Optional

from markupsafe import Markup

from primecache.application.ports import HttpTransportPort, LoggerPort
from primecache.domain.exceptions import InvalidArgumentError
from primecache.domain.value_objects.prime_request import PrimeRequest, RequestContext
from primecache.domain.value_objects.prime_result import (
    PrimeFailure,
    PrimeResult,
    PrimeSuccess,
)
from primecache.presentation.prime_script import render_prime_script


class PrimeCacheUseCase:
    def __init__(self, transport: HttpTransportPort, logger: Optional[LoggerPort] = None):
        self.transport = transport
        self.logger = logger

    def execute(self, context: RequestContext, url: Optional[str]) -> Awaitable[Markup]:
        """
        Prime the client cache for ``url``.

        The URL is validated before anything is awaited, so an empty URL
        raises at call time rather than when the result is awaited.

        Args:
            context: The request currently being rendered
            url: URL to fetch, absolute or relative to the current request

        Returns:
            Awaitable resolving to the script fragment, or empty markup on failure

        Raises:
            InvalidArgumentError: If ``url`` is None or empty
        """
        self._validate_url(url)
        return self._render(context, url)

    def fetch(self, context: RequestContext, url: Optional[str]) -> Awaitable[PrimeResult]:
        """Like :meth:`execute` but return the result instead of markup."""
        self._validate_url(url)
        return self._fetch(PrimeRequest.for_context(context, url))

    async def _render(self, context: RequestContext, url: str) -> Markup:
        result = await self._fetch(PrimeRequest.for_context(context, url))
        return render_prime_script(result)

    async def _fetch(self, request: PrimeRequest) -> PrimeResult:
        resolved_url = None
        try:
            resolved_url = request.resolve()
            response = await self.transport.get(resolved_url)
            body = response.text()
        except Exception as e:
            self._log_failure(request.relative_url, resolved_url, e)
            return PrimeFailure(url=request.relative_url, error=str(e) or type(e).__name__)

        return PrimeSuccess(
            url=request.relative_url,
            status_code=int(response.status_code),
            body=body,
        )

    def _log_failure(self, url: str, resolved_url: Optional[str], error: Exception) -> None:
        if self.logger is None:
            return
        self.logger.warning(
            "prime_cache.failed",
            url=url,
            resolved_url=resolved_url,
            error=str(error),
            error_type=type(error).__name__,
        )

    @staticmethod
    def _validate_url(url: Optional[str]) -> None:
        if not url:
            raise InvalidArgumentError("Value cannot be null or empty", argument="url")
