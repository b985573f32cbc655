"""Unit tests for IdentityVerifier.

The verifier reads the single cached access token and decodes it. Every
failure collapses to ``AuthFailure.UNAUTHORIZED``.
"""

from unittest.mock import AsyncMock

import pytest
from freezegun import freeze_time

from postboard.application.services import IdentityVerifier
from postboard.core.enums import ErrorCode
from postboard.core.result import Failure, Success
from postboard.domain.errors import AuthFailure
from postboard.infrastructure.enums import InfrastructureErrorCode
from postboard.infrastructure.errors import CacheError
from postboard.infrastructure.security import JWTTokenCodec
from tests.factories import make_identity

UNAUTHORIZED = Failure(error=AuthFailure.UNAUTHORIZED)


@pytest.fixture
def access_cache():
    return AsyncMock()


@pytest.fixture
def verifier(access_cache, token_codec, mock_logger):
    return IdentityVerifier(
        access_token_cache=access_cache, token_codec=token_codec, logger=mock_logger
    )


@pytest.mark.unit
class TestIdentityVerifier:
    async def test_cached_token_yields_identity(
        self, verifier, access_cache, token_codec
    ):
        identity = make_identity()
        access_cache.get.return_value = Success(
            value=token_codec.issue_access_token(identity)
        )

        assert await verifier.verify() == Success(value=identity)

    async def test_empty_slot(self, verifier, access_cache):
        access_cache.get.return_value = Failure(
            error=CacheError(
                code=ErrorCode.TOKEN_INVALID,
                infrastructure_code=InfrastructureErrorCode.CACHE_MISS,
                message="No access token cached",
            )
        )

        assert await verifier.verify() == UNAUTHORIZED

    async def test_cache_backend_down(self, verifier, access_cache):
        access_cache.get.return_value = Failure(
            error=CacheError(code=ErrorCode.CACHE_UNAVAILABLE, message="down")
        )

        assert await verifier.verify() == UNAUTHORIZED

    async def test_expired_cached_token(self, verifier, access_cache, token_codec):
        with freeze_time("2024-01-01"):
            token = token_codec.issue_access_token(make_identity())
        access_cache.get.return_value = Success(value=token)

        assert await verifier.verify() == UNAUTHORIZED

    async def test_foreign_cached_token(self, verifier, access_cache):
        foreign = JWTTokenCodec(secret_key="someone-elses-secret-key-32-bytes-long")
        access_cache.get.return_value = Success(
            value=foreign.issue_access_token(make_identity())
        )

        assert await verifier.verify() == UNAUTHORIZED

    async def test_refresh_token_in_slot(self, verifier, access_cache, token_codec):
        access_cache.get.return_value = Success(
            value=token_codec.issue_refresh_token(make_identity().id)
        )

        assert await verifier.verify() == UNAUTHORIZED

    async def test_latest_writer_wins(self, verifier, access_cache, token_codec):
        """Whoever logged in last is the identity every caller gets."""
        alice = make_identity()
        bob = make_identity(username="bobby01", email="bob@example.com")
        access_cache.get.side_effect = [
            Success(value=token_codec.issue_access_token(alice)),
            Success(value=token_codec.issue_access_token(bob)),
        ]

        assert await verifier.verify() == Success(value=alice)
        assert await verifier.verify() == Success(value=bob)
