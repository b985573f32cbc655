"""Unit tests for RefreshAccessTokenHandler.

Tests cover:
- Successful refresh (new access token cached, refresh token not rotated)
- Token verification failures (signature, expiry, malformed)
- Unknown token and missing owner
- Rejections never touch the cache
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from freezegun import freeze_time

from postboard.application.commands.auth_commands import RefreshAccessToken
from postboard.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from postboard.core.enums import ErrorCode
from postboard.core.errors import NotFoundError
from postboard.core.result import Failure, Success
from postboard.domain.errors import AuthFailure
from postboard.infrastructure.errors import CacheError, DatabaseError
from postboard.infrastructure.security import JWTTokenCodec
from tests.factories import make_user_record


@pytest.fixture
def user():
    return make_user_record()


@pytest.fixture
def user_repo(user):
    repo = AsyncMock()
    repo.find_by_id.return_value = Success(value=user)
    return repo


@pytest.fixture
def refresh_token_repo(user):
    repo = AsyncMock()
    repo.find.return_value = Success(value=user.id)
    return repo


@pytest.fixture
def access_cache():
    cache = AsyncMock()
    cache.replace.return_value = Success(value=None)
    return cache


@pytest.fixture
def handler(user_repo, refresh_token_repo, access_cache, token_codec, mock_logger):
    return RefreshAccessTokenHandler(
        user_repo=user_repo,
        refresh_token_repo=refresh_token_repo,
        access_token_cache=access_cache,
        token_codec=token_codec,
        logger=mock_logger,
    )


@pytest.mark.unit
class TestRefreshAccessTokenHandlerSuccess:
    async def test_returns_new_access_token_for_current_identity(
        self, handler, token_codec, user, access_cache
    ):
        # Arrange
        refresh_token = token_codec.issue_refresh_token(user.id)

        # Act
        result = await handler.handle(RefreshAccessToken(refresh_token=refresh_token))

        # Assert
        assert isinstance(result, Success)
        payload = token_codec.verify_access_token(result.value)
        assert payload.value.identity == user.identity
        access_cache.replace.assert_awaited_once_with(result.value)

    async def test_matches_store_on_token_and_owner(
        self, handler, token_codec, user, refresh_token_repo
    ):
        refresh_token = token_codec.issue_refresh_token(user.id)

        await handler.handle(RefreshAccessToken(refresh_token=refresh_token))

        refresh_token_repo.find.assert_awaited_once_with(refresh_token, user.id)

    async def test_refresh_token_reusable(self, handler, token_codec, user):
        refresh_token = token_codec.issue_refresh_token(user.id)

        first = await handler.handle(RefreshAccessToken(refresh_token=refresh_token))
        second = await handler.handle(RefreshAccessToken(refresh_token=refresh_token))

        assert isinstance(first, Success)
        assert isinstance(second, Success)


@pytest.mark.unit
class TestRefreshAccessTokenHandlerRejections:
    async def test_foreign_signature(self, handler, user, access_cache):
        foreign = JWTTokenCodec(secret_key="someone-elses-secret-key-32-bytes-long")
        token = foreign.issue_refresh_token(user.id)

        result = await handler.handle(RefreshAccessToken(refresh_token=token))

        assert result == Failure(error=AuthFailure.INVALID_SIGNATURE)
        access_cache.replace.assert_not_awaited()

    async def test_expired(self, handler, token_codec, user, access_cache):
        with freeze_time("2024-01-01"):
            token = token_codec.issue_refresh_token(user.id)

        result = await handler.handle(RefreshAccessToken(refresh_token=token))

        assert result == Failure(error=AuthFailure.TOKEN_EXPIRED)
        access_cache.replace.assert_not_awaited()

    async def test_access_token_presented_as_refresh(
        self, handler, token_codec, user, refresh_token_repo
    ):
        token = token_codec.issue_access_token(user.identity)

        result = await handler.handle(RefreshAccessToken(refresh_token=token))

        assert result == Failure(error=AuthFailure.INVALID_TOKEN)
        refresh_token_repo.find.assert_not_awaited()

    async def test_token_not_in_store(
        self, handler, token_codec, refresh_token_repo, access_cache
    ):
        owner_id = uuid4()
        refresh_token_repo.find.return_value = Failure(
            error=NotFoundError(
                code=ErrorCode.REFRESH_TOKEN_NOT_FOUND,
                message="Refresh token not on file",
                resource_type="RefreshToken",
                resource_id=str(owner_id),
            )
        )
        token = token_codec.issue_refresh_token(owner_id)

        result = await handler.handle(RefreshAccessToken(refresh_token=token))

        assert result == Failure(error=AuthFailure.UNKNOWN_TOKEN)
        access_cache.replace.assert_not_awaited()

    async def test_owner_deleted(self, handler, token_codec, user, user_repo):
        user_repo.find_by_id.return_value = Success(value=None)
        token = token_codec.issue_refresh_token(user.id)

        result = await handler.handle(RefreshAccessToken(refresh_token=token))

        assert result == Failure(error=AuthFailure.UNKNOWN_TOKEN)


@pytest.mark.unit
class TestRefreshAccessTokenHandlerBackendFailures:
    async def test_store_lookup_failure(
        self, handler, token_codec, user, refresh_token_repo
    ):
        refresh_token_repo.find.return_value = Failure(
            error=DatabaseError(code=ErrorCode.DATABASE_UNAVAILABLE, message="down")
        )
        token = token_codec.issue_refresh_token(user.id)

        result = await handler.handle(RefreshAccessToken(refresh_token=token))

        assert result == Failure(error=AuthFailure.BACKEND_UNAVAILABLE)

    async def test_cache_write_failure(self, handler, token_codec, user, access_cache):
        access_cache.replace.return_value = Failure(
            error=CacheError(code=ErrorCode.CACHE_UNAVAILABLE, message="down")
        )
        token = token_codec.issue_refresh_token(user.id)

        result = await handler.handle(RefreshAccessToken(refresh_token=token))

        assert result == Failure(error=AuthFailure.BACKEND_UNAVAILABLE)
