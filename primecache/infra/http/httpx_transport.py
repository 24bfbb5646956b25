"""
httpx implementation of the outbound HTTP transport.
"""

from typing import Any, Dict, Optional

import httpx

from primecache.application.ports import HttpTransportPort, TransportResponse
from primecache.infra.config.logging_config import get_logger
from primecache.infra.config.settings import Settings, get_settings


class HttpxTransport(HttpTransportPort):
    """
    Issues GET requests with ``httpx.AsyncClient``.

    When constructed with a client, that client is borrowed and never closed
    here. Otherwise every request opens and closes its own client.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        settings: Optional[Settings] = None,
    ):
        self._client = client
        self._settings = settings or get_settings()
        self._log = get_logger("infra.http")

    def client_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {
            "follow_redirects": self._settings.http_follow_redirects,
        }
        if self._settings.http_timeout_seconds is not None:
            options["timeout"] = httpx.Timeout(self._settings.http_timeout_seconds)
        return options

    async def get(self, url: str) -> TransportResponse:
        if self._client is not None:
            return await self._get(self._client, url)

        async with httpx.AsyncClient(**self.client_options()) as client:
            return await self._get(client, url)

    async def _get(self, client: httpx.AsyncClient, url: str) -> TransportResponse:
        response = await client.get(url)
        content = await response.aread()
        self._log.debug(
            "http.get", url=url, status_code=response.status_code, bytes=len(content)
        )
        return TransportResponse(
            status_code=response.status_code,
            content=content,
            encoding=response.charset_encoding,
        )
