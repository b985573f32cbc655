"""API tests for the auth/user service.

Runs the real app and real handlers; only the backing stores are swapped:
- Database: SQLite file (tables created with a sync engine up front)
- Cache: fakeredis, shared with a sync client for assertions

Covers register, login, refresh and profile, including the single cached
access token slot shared by every user.
"""

from datetime import timedelta
from unittest.mock import AsyncMock, Mock
from uuid import UUID, uuid4

import fakeredis
import fakeredis.aioredis
import pytest
from fastapi import Depends
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.application.commands.handlers.login_user_handler import (
    LoginUserHandler,
)
from postboard.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from postboard.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from postboard.application.commands.handlers.verify_access_handler import (
    VerifyAccessHandler,
)
from postboard.application.services import IdentityVerifier
from postboard.core.container import (
    get_db_session,
    get_identity_verifier,
    get_login_user_handler,
    get_refresh_access_token_handler,
    get_register_user_handler,
    get_verify_access_handler,
)
from postboard.core.result import Success
from postboard.domain.entities import Identity
from postboard.infrastructure.cache import (
    ACCESS_TOKEN_KEY,
    RedisAccessTokenCache,
    RedisAdapter,
)
from postboard.infrastructure.persistence.database import Database
from postboard.infrastructure.persistence.models import BaseModel
from postboard.infrastructure.persistence.repositories import (
    RefreshTokenRepository,
    UserRepository,
)
from postboard.infrastructure.security import BcryptPasswordService, JWTTokenCodec
from postboard.main import app
from tests.factories import TEST_SECRET_KEY

UNAUTHORIZED_BODY = {"status": "failed", "message": "Unauthorized"}


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def stores(tmp_path):
    """Backing stores plus the shared collaborators built on them."""
    db_path = tmp_path / "api.db"
    engine = create_engine(f"sqlite:///{db_path}")
    BaseModel.metadata.create_all(engine)
    engine.dispose()

    server = fakeredis.FakeServer()
    logger = Mock()
    codec = JWTTokenCodec(secret_key=TEST_SECRET_KEY)
    cache = RedisAccessTokenCache(
        cache=RedisAdapter(redis_client=fakeredis.aioredis.FakeRedis(server=server)),
        logger=logger,
    )
    return {
        "database": Database(database_url=f"sqlite+aiosqlite:///{db_path}"),
        "redis": fakeredis.FakeRedis(server=server),
        "logger": logger,
        "codec": codec,
        "cache": cache,
        "passwords": BcryptPasswordService(cost_factor=4),
    }


@pytest.fixture
def client(stores):
    """TestClient over the real app with handlers bound to the test stores."""
    database = stores["database"]
    cache = stores["cache"]
    codec = stores["codec"]
    logger = stores["logger"]

    async def db_session():
        async with database.get_session() as session:
            yield session

    async def login_handler(session: AsyncSession = Depends(get_db_session)):
        return LoginUserHandler(
            user_repo=UserRepository(session),
            refresh_token_repo=RefreshTokenRepository(session),
            access_token_cache=cache,
            token_codec=codec,
            password_service=stores["passwords"],
            logger=logger,
        )

    async def refresh_handler(session: AsyncSession = Depends(get_db_session)):
        return RefreshAccessTokenHandler(
            user_repo=UserRepository(session),
            refresh_token_repo=RefreshTokenRepository(session),
            access_token_cache=cache,
            token_codec=codec,
            logger=logger,
        )

    async def verify_handler(session: AsyncSession = Depends(get_db_session)):
        return VerifyAccessHandler(
            user_repo=UserRepository(session),
            access_token_cache=cache,
            token_codec=codec,
            logger=logger,
        )

    async def register_handler(session: AsyncSession = Depends(get_db_session)):
        return RegisterUserHandler(
            user_repo=UserRepository(session),
            password_service=stores["passwords"],
            logger=logger,
        )

    app.dependency_overrides.update(
        {
            get_db_session: db_session,
            get_login_user_handler: login_handler,
            get_refresh_access_token_handler: refresh_handler,
            get_verify_access_handler: verify_handler,
            get_register_user_handler: register_handler,
            get_identity_verifier: lambda: IdentityVerifier(
                access_token_cache=cache, token_codec=codec, logger=logger
            ),
        }
    )
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
        test_client.portal.call(database.close)
    app.dependency_overrides.clear()


def register(client, username="alice01", email="alice@example.com", password="pw123"):
    response = client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password},
    )
    assert response.status_code == 201
    return response.json()["identity"]


def login(client, **credentials):
    return client.post("/api/auth/login", json=credentials)


def cached_token(stores) -> str | None:
    value = stores["redis"].get(ACCESS_TOKEN_KEY)
    return value.decode() if value is not None else None


def as_identity(body: dict) -> Identity:
    return Identity(id=UUID(body["id"]), username=body["username"], email=body["email"])


# =============================================================================
# Tests: POST /api/auth/register
# =============================================================================


@pytest.mark.api
class TestRegister:
    def test_register_returns_identity(self, client):
        response = client.post(
            "/api/auth/register",
            json={"username": "alice01", "email": "alice@example.com", "password": "pw123"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "success"
        assert body["identity"]["username"] == "alice01"
        assert body["identity"]["email"] == "alice@example.com"
        assert "password" not in body["identity"]

    def test_duplicate_username_is_conflict(self, client):
        register(client)

        response = client.post(
            "/api/auth/register",
            json={"username": "alice01", "email": "other@example.com", "password": "pw123"},
        )

        assert response.status_code == 409
        assert response.json()["error"] == "user_exists"

    def test_short_username(self, client):
        response = client.post(
            "/api/auth/register",
            json={"username": "al", "email": "al@example.com", "password": "pw123"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "username_too_short"

    def test_password_over_72_utf8_bytes_is_rejected(self, client):
        response = client.post(
            "/api/auth/register",
            json={
                "username": "alice01",
                "email": "alice@example.com",
                "password": "\u00e9" * 72,
            },
        )

        assert response.status_code == 400
        assert response.json()["error"] == "password_too_long"


# =============================================================================
# Tests: POST /api/auth/login
# =============================================================================


@pytest.mark.api
class TestLogin:
    def test_login_by_username(self, client, stores):
        identity = register(client)

        response = login(client, username="alice01", password="pw123")

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "success"
        assert body["identity"] == identity
        assert body["access_token"] and body["refresh_token"]
        assert cached_token(stores) == body["access_token"]

    def test_login_by_email(self, client):
        register(client)

        response = login(client, email="alice@example.com", password="pw123")

        assert response.status_code == 201

    def test_both_login_keys_rejected(self, client):
        register(client)

        response = login(
            client, email="alice@example.com", username="alice01", password="pw123"
        )

        assert response.status_code == 400
        assert response.json()["error"] == "input_error"

    def test_wrong_password(self, client, stores):
        register(client)

        response = login(client, username="alice01", password="wrong-password")

        assert response.status_code == 401
        assert response.json() == {
            "status": "failed",
            "error": "invalid_credentials",
            "message": "Invalid login credentials.",
        }
        assert cached_token(stores) is None

    def test_unknown_user(self, client):
        response = login(client, username="ghost", password="pw123")

        assert response.status_code == 401
        assert response.json()["error"] == "invalid_credentials"

    def test_missing_password_is_validation_error(self, client):
        response = login(client, username="alice01")

        assert response.status_code == 422


# =============================================================================
# Tests: GET /api/token/refresh_token
# =============================================================================


@pytest.mark.api
class TestRefreshToken:
    def test_refresh_overwrites_cached_token(self, client, stores):
        register(client)
        tokens = login(client, username="alice01", password="pw123").json()

        response = client.get(
            "/api/token/refresh_token",
            headers={"refresh-token": tokens["refresh_token"]},
        )

        assert response.status_code == 200
        new_token = response.json()["access_token"]
        assert cached_token(stores) == new_token
        payload = stores["codec"].verify_access_token(new_token)
        assert payload.value.identity.username == "alice01"

    def test_refresh_token_is_reusable(self, client):
        register(client)
        refresh_token = login(client, username="alice01", password="pw123").json()[
            "refresh_token"
        ]
        headers = {"refresh-token": refresh_token}

        first = client.get("/api/token/refresh_token", headers=headers)
        second = client.get("/api/token/refresh_token", headers=headers)

        assert first.status_code == second.status_code == 200

    def test_unknown_refresh_token_leaves_cache_untouched(self, client, stores):
        identity = register(client)
        login(client, username="alice01", password="pw123")
        before = cached_token(stores)
        never_stored = stores["codec"].issue_refresh_token(UUID(identity["id"]))

        response = client.get(
            "/api/token/refresh_token", headers={"refresh-token": never_stored}
        )

        assert response.status_code == 401
        assert response.json()["error"] == "unknown_token"
        assert cached_token(stores) == before

    def test_foreign_signature_is_bad_request(self, client):
        register(client)
        foreign = JWTTokenCodec(secret_key="someone-elses-secret-key-32-bytes-long")
        token = foreign.issue_refresh_token(uuid4())

        response = client.get(
            "/api/token/refresh_token", headers={"refresh-token": token}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_signature"

    def test_missing_header_is_unauthorized(self, client):
        response = client.get("/api/token/refresh_token")

        assert response.status_code == 401
        assert response.json() == UNAUTHORIZED_BODY


# =============================================================================
# Tests: GET /api/user/user_profile
# =============================================================================


@pytest.mark.api
class TestUserProfile:
    def test_profile_after_login(self, client):
        identity = register(client)
        login(client, username="alice01", password="pw123")

        response = client.get("/api/user/user_profile")

        assert response.status_code == 200
        assert response.json() == {"status": "success", "identity": identity}

    def test_profile_without_login_is_uniform_401(self, client):
        response = client.get("/api/user/user_profile")

        assert response.status_code == 401
        assert response.json() == UNAUTHORIZED_BODY

    def test_profile_with_empty_slot_is_uniform_401(self, client, stores):
        register(client)
        login(client, username="alice01", password="pw123")
        stores["redis"].delete(ACCESS_TOKEN_KEY)

        response = client.get("/api/user/user_profile")

        assert response.status_code == 401
        assert response.json() == UNAUTHORIZED_BODY

    def test_profile_with_expired_token_in_slot_is_uniform_401(self, client, stores):
        identity = register(client)
        stale = JWTTokenCodec(
            secret_key=TEST_SECRET_KEY, access_token_ttl=timedelta(seconds=-60)
        )
        stores["redis"].set(
            ACCESS_TOKEN_KEY, stale.issue_access_token(as_identity(identity))
        )

        response = client.get("/api/user/user_profile")

        assert response.status_code == 401
        assert response.json() == UNAUTHORIZED_BODY

    def test_profile_with_foreign_signed_token_in_slot_is_uniform_401(
        self, client, stores
    ):
        identity = register(client)
        foreign = JWTTokenCodec(secret_key="someone-elses-secret-key-32-bytes-long")
        stores["redis"].set(
            ACCESS_TOKEN_KEY, foreign.issue_access_token(as_identity(identity))
        )

        response = client.get("/api/user/user_profile")

        assert response.status_code == 401
        assert response.json() == UNAUTHORIZED_BODY

    def test_profile_reports_identity_attached_by_verifier(self, client, stores):
        alice = register(client)
        register(client, username="bobby01", email="bob@example.com")
        login(client, username="bobby01", password="pw123")
        verifier = AsyncMock()
        verifier.verify.return_value = Success(value=as_identity(alice))
        app.dependency_overrides[get_identity_verifier] = lambda: verifier

        response = client.get("/api/user/user_profile")

        assert response.status_code == 200
        assert response.json()["identity"] == alice
        slot = stores["codec"].verify_access_token(cached_token(stores)).value
        assert slot.identity.username == "bobby01"

    def test_profile_rejects_attached_identity_that_drifted(self, client):
        alice = register(client)
        drifted = Identity(
            id=UUID(alice["id"]), username="alice01", email="old@example.com"
        )
        verifier = AsyncMock()
        verifier.verify.return_value = Success(value=drifted)
        app.dependency_overrides[get_identity_verifier] = lambda: verifier

        response = client.get("/api/user/user_profile")

        assert response.status_code == 401
        assert response.json()["error"] == "invalid_token"

    def test_last_login_wins_for_every_caller(self, client):
        register(client)
        bob = register(client, username="bobby01", email="bob@example.com")
        login(client, username="alice01", password="pw123")
        login(client, username="bobby01", password="pw123")

        response = client.get("/api/user/user_profile")

        assert response.json()["identity"] == bob


@pytest.mark.api
def test_healthcheck(client):
    response = client.get("/api/healthcheck")

    assert response.status_code == 200
    assert response.json()["status"] == "success"
