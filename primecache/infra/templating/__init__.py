from primecache.infra.templating.environment import (
    TEMPLATES_DIR,
    build_environment,
    prime_cache_helper,
)

__all__ = ["TEMPLATES_DIR", "build_environment", "prime_cache_helper"]
