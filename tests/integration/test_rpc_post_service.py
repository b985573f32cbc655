"""Integration tests for the post RPC service.

Two layers:
- PostServicer methods called directly against SQLite, with a mock context
- A real grpc.aio server (interceptor + generic handlers) driven by
  PostRpcClient over a loopback port
"""

from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import grpc
import pytest
import pytest_asyncio

from postboard.core.result import Failure, Success
from postboard.domain.entities import Identity
from postboard.domain.errors import AuthFailure
from postboard.infrastructure.persistence.repositories import UserRepository
from postboard.presentation.rpc.client import PostRpcClient, PostServiceError
from postboard.presentation.rpc.interceptor import (
    IdentityInterceptor,
    current_identity,
)
from postboard.presentation.rpc.post_service import (
    PostServicer,
    build_generic_handlers,
)
from postboard.presentation.rpc.server import create_server


class Aborted(Exception):
    def __init__(self, code, message):
        super().__init__(message)
        self.code = code


def make_context() -> Mock:
    context = Mock()

    async def abort(code, message):
        raise Aborted(code, message)

    context.abort = AsyncMock(side_effect=abort)
    return context


@pytest_asyncio.fixture
async def author(database):
    async with database.get_session() as session:
        result = await UserRepository(session).create(
            "alice01", "alice@example.com", "hashed"
        )
    return result.value.identity


@pytest.fixture
def servicer(database):
    return PostServicer(database.get_session)


def as_user(identity):
    """Act as if the interceptor had verified ``identity`` for this task."""
    current_identity.set(identity)


@pytest.mark.integration
class TestPostServicer:
    async def test_create_then_get(self, servicer, author):
        as_user(author)

        created = await servicer.create_post(
            {"title": "Hello", "content": "World"}, make_context()
        )
        fetched = await servicer.get_post_by_id(
            {"post_id": created["post"]["id"]}, make_context()
        )

        assert created["post"]["user_id"] == str(author.id)
        assert created["post"]["username"] == "alice01"
        assert fetched == created

    async def test_list_pages(self, servicer, author):
        as_user(author)
        for i in range(3):
            await servicer.create_post(
                {"title": f"Post {i}", "content": "body"}, make_context()
            )

        reply = await servicer.get_all_post({"page": 2, "limits": 2}, make_context())

        assert reply["page"] == 2
        assert reply["limits"] == 2
        assert len(reply["posts"]) == 1

    async def test_create_without_identity_is_unauthenticated(self, servicer):
        as_user(None)

        with pytest.raises(Aborted) as exc_info:
            await servicer.create_post({"title": "t", "content": "c"}, make_context())

        assert exc_info.value.code == grpc.StatusCode.UNAUTHENTICATED

    async def test_update_by_other_user_is_permission_denied(
        self, servicer, author
    ):
        as_user(author)
        created = await servicer.create_post(
            {"title": "Mine", "content": "body"}, make_context()
        )
        as_user(Identity(id=uuid4(), username="mallory", email="m@x.io"))

        with pytest.raises(Aborted) as exc_info:
            await servicer.update_post(
                {"post_id": created["post"]["id"], "title": "Theirs"}, make_context()
            )

        assert exc_info.value.code == grpc.StatusCode.PERMISSION_DENIED

    async def test_owner_updates_and_deletes(self, servicer, author):
        as_user(author)
        created = await servicer.create_post(
            {"title": "Draft", "content": "body"}, make_context()
        )
        post_id = created["post"]["id"]

        updated = await servicer.update_post(
            {"post_id": post_id, "title": "Final"}, make_context()
        )
        deleted = await servicer.delete_post({"post_id": post_id}, make_context())

        assert updated["post"]["title"] == "Final"
        assert updated["post"]["content"] == "body"
        assert deleted == {"message": "Post deleted"}

    async def test_missing_post_is_not_found(self, servicer):
        with pytest.raises(Aborted) as exc_info:
            await servicer.get_post_by_id({"post_id": str(uuid4())}, make_context())

        assert exc_info.value.code == grpc.StatusCode.NOT_FOUND

    @pytest.mark.parametrize(
        "request_message",
        [{}, {"post_id": "not-a-uuid"}],
    )
    async def test_bad_post_id_is_invalid_argument(self, servicer, request_message):
        with pytest.raises(Aborted) as exc_info:
            await servicer.get_post_by_id(request_message, make_context())

        assert exc_info.value.code == grpc.StatusCode.INVALID_ARGUMENT

    async def test_bad_paging_is_invalid_argument(self, servicer):
        with pytest.raises(Aborted) as exc_info:
            await servicer.get_all_post({"page": 0}, make_context())

        assert exc_info.value.code == grpc.StatusCode.INVALID_ARGUMENT


@pytest_asyncio.fixture
async def rpc_server(database, mock_logger):
    """Real server on a loopback port; yields (client, verifier)."""
    verifier = AsyncMock()
    server = grpc.aio.server(interceptors=[IdentityInterceptor(verifier, mock_logger)])
    server.add_generic_rpc_handlers(
        build_generic_handlers(PostServicer(database.get_session))
    )
    port = server.add_insecure_port("127.0.0.1:0")
    await server.start()
    client = PostRpcClient(target=f"127.0.0.1:{port}", timeout=5.0)
    yield client, verifier
    await client.close()
    await server.stop(grace=None)


@pytest.mark.integration
class TestPostRpcEndToEnd:
    async def test_public_listing_needs_no_identity(self, rpc_server):
        client, verifier = rpc_server

        reply = await client.list_posts(1, 10)

        assert reply == {"page": 1, "limits": 10, "posts": []}
        verifier.verify.assert_not_awaited()

    async def test_protected_call_rejected_when_unverified(self, rpc_server):
        client, verifier = rpc_server
        verifier.verify.return_value = Failure(error=AuthFailure.UNAUTHORIZED)

        with pytest.raises(PostServiceError) as exc_info:
            await client.create_post("Hello", "World")

        assert exc_info.value.code == grpc.StatusCode.UNAUTHENTICATED
        assert exc_info.value.detail == "Unauthorized"

    async def test_protected_call_uses_verified_identity(self, rpc_server, author):
        client, verifier = rpc_server
        verifier.verify.return_value = Success(value=author)

        created = await client.create_post("Hello", "World")
        fetched = await client.get_post(created["post"]["id"])

        assert created["post"]["username"] == "alice01"
        assert fetched["post"]["id"] == created["post"]["id"]

    async def test_not_found_maps_to_status(self, rpc_server):
        client, _ = rpc_server

        with pytest.raises(PostServiceError) as exc_info:
            await client.get_post(uuid4())

        assert exc_info.value.code == grpc.StatusCode.NOT_FOUND


@pytest.mark.integration
async def test_create_server_from_settings():
    server = create_server()
    try:
        assert isinstance(server, grpc.aio.Server)
    finally:
        await server.stop(grace=None)
