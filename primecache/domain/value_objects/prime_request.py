"""
Request value objects - the inbound request and one priming call.
"""

from dataclasses import dataclass

import httpx


@dataclass(frozen=True)
class RequestContext:
    """
    The parts of the inbound request needed to rebuild its absolute URL.

    Every component is expected to be URI-encoded already. ``query_string``
    includes its leading ``?`` or is empty.
    """

    scheme: str
    host: str
    path_base: str = ""
    path: str = ""
    query_string: str = ""

    @property
    def base_url(self) -> str:
        return "".join(
            (
                self.scheme,
                "://",
                self.host,
                self.path_base,
                self.path,
                self.query_string,
            )
        )


@dataclass(frozen=True)
class PrimeRequest:
    """A single priming call: the URL as written plus the page it was written on."""

    relative_url: str
    base_url: str

    @classmethod
    def for_context(cls, context: RequestContext, relative_url: str) -> "PrimeRequest":
        return cls(relative_url=relative_url, base_url=context.base_url)

    def resolve(self) -> str:
        """
        Resolve ``relative_url`` against ``base_url`` (RFC 3986).

        Raises:
            httpx.InvalidURL: If either URL cannot be parsed
        """
        return str(httpx.URL(self.base_url).join(self.relative_url))
