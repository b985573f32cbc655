"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Cache (Redis) and the single-slot access token cache
- Database (PostgreSQL)
- Password hashing (bcrypt)
- Token codec (JWT)
- Logging (structlog console)
- Identity verifier shared by REST and RPC call sites
"""

from datetime import timedelta
from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from postboard.core.config import get_settings
from postboard.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from postboard.application.services import IdentityVerifier
    from postboard.presentation.rpc.client import PostRpcClient
    from postboard.domain.protocols import (
        AccessTokenCacheProtocol,
        CacheProtocol,
        LoggerProtocol,
        PasswordHashingProtocol,
        TokenCodecProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from postboard.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_cache() -> "CacheProtocol":
    """Get cache client singleton (app-scoped).

    Returns RedisAdapter over a bounded connection pool shared by the whole
    process.

    Usage:
        cache: CacheProtocol = Depends(get_cache)
    """
    from redis.asyncio import ConnectionPool, Redis

    from postboard.infrastructure.cache import RedisAdapter

    settings = get_settings()
    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=settings.redis_max_connections,
        decode_responses=False,
        socket_connect_timeout=5,
        socket_timeout=5,
    )
    return RedisAdapter(redis_client=Redis(connection_pool=pool))


@lru_cache()
def get_access_token_cache() -> "AccessTokenCacheProtocol":
    """Get the single-slot access token cache (app-scoped)."""
    from postboard.infrastructure.cache import RedisAccessTokenCache

    return RedisAccessTokenCache(
        cache=get_cache(),
        logger=get_logger(),
        ttl_seconds=get_settings().access_token_cache_ttl_seconds,
    )


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception, always closes.
    """
    async with get_database().get_session() as session:
        yield session


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get bcrypt password service singleton (app-scoped)."""
    from postboard.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_token_codec() -> "TokenCodecProtocol":
    """Get JWT token codec singleton (app-scoped).

    The shared secret is passed in explicitly here and nowhere else. Raises
    ValueError for a short secret, which aborts startup when called from a
    lifespan hook.
    """
    from postboard.infrastructure.security import JWTTokenCodec

    settings = get_settings()
    return JWTTokenCodec(
        secret_key=settings.secret_key,
        access_token_ttl=timedelta(minutes=settings.access_token_expire_minutes),
        refresh_token_ttl=timedelta(days=settings.refresh_token_expire_days),
    )


@lru_cache()
def get_identity_verifier() -> "IdentityVerifier":
    """Get identity verifier singleton (app-scoped)."""
    from postboard.application.services import IdentityVerifier

    return IdentityVerifier(
        access_token_cache=get_access_token_cache(),
        token_codec=get_token_codec(),
        logger=get_logger(),
    )


# ============================================================================
# Gateway (Application-Scoped)
# ============================================================================


@lru_cache()
def get_post_rpc_client() -> "PostRpcClient":
    """Get the gateway's post RPC client singleton (app-scoped)."""
    from postboard.presentation.rpc.client import PostRpcClient

    settings = get_settings()
    return PostRpcClient(
        target=settings.rpc_target,
        timeout=settings.rpc_timeout_seconds,
    )
