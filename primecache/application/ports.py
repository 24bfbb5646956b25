"""
Application ports - abstract interfaces for external dependencies.

These interfaces define the contracts that the application layer needs
from external systems, following the Dependency Inversion Principle.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Protocol


@dataclass(frozen=True)
class TransportResponse:
    """Raw response as read off the wire."""

    status_code: int
    content: bytes
    encoding: Optional[str] = None

    def text(self) -> str:
        """Decode the body strictly using the declared charset, else UTF-8."""
        return self.content.decode(self.encoding or "utf-8")


class HttpTransportPort(ABC):
    """Abstract interface for issuing outbound HTTP requests."""

    @abstractmethod
    async def get(self, url: str) -> TransportResponse:
        """Issue a GET request and read the whole response body."""
        pass


class LoggerPort(Protocol):
    """The logging calls the application layer relies on (structlog-compatible)."""

    def warning(self, event: str, **kwargs: Any) -> Any: ...

