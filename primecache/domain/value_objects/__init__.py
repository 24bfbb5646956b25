from primecache.domain.value_objects.prime_request import PrimeRequest, RequestContext
from primecache.domain.value_objects.prime_result import (
    PrimeFailure,
    PrimeResult,
    PrimeSuccess,
)

__all__ = [
    "PrimeFailure",
    "PrimeRequest",
    "PrimeResult",
    "PrimeSuccess",
    "RequestContext",
]
