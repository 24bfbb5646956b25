from primecache.application.use_cases.prime_cache import PrimeCacheUseCase

__all__ = ["PrimeCacheUseCase"]
