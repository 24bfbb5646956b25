"""
Outcome of a priming call.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class PrimeSuccess:
    """Response captured for ``url`` (the URL as the caller wrote it)."""

    url: str
    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class PrimeFailure:
    """Nothing to render for ``url``; ``error`` describes why."""

    url: str
    error: str

    @property
    def ok(self) -> bool:
        return False


PrimeResult = Union[PrimeSuccess, PrimeFailure]
