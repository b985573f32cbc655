"""Cache adapters.

Usage:
    from postboard.infrastructure.cache import RedisAdapter, RedisAccessTokenCache
"""

from postboard.infrastructure.cache.access_token_cache import (
    ACCESS_TOKEN_KEY,
    RedisAccessTokenCache,
)
from postboard.infrastructure.cache.redis_adapter import RedisAdapter

__all__ = ["ACCESS_TOKEN_KEY", "RedisAccessTokenCache", "RedisAdapter"]
