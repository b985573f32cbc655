"""JSON message (de)serialization and service/method names."""

import json
from typing import Any

from postboard.domain.entities import Post

POST_SERVICE = "post.Post"
PROTECTED_POST_SERVICE = "post.ProtectedPost"

GET_ALL_POST = "GetAllPost"
GET_POST_BY_ID = "GetPostById"
CREATE_POST = "CreatePost"
UPDATE_POST = "UpdatePost"
DELETE_POST = "DeletePost"


def method_path(service: str, method: str) -> str:
    """Fully qualified gRPC method path, e.g. ``/post.Post/GetAllPost``."""
    return f"/{service}/{method}"


def serialize(message: dict[str, Any]) -> bytes:
    return json.dumps(message, default=str).encode("utf-8")


def deserialize(data: bytes) -> dict[str, Any]:
    """Decode a request or response body. An empty body is an empty message."""
    if not data:
        return {}
    decoded = json.loads(data.decode("utf-8"))
    if not isinstance(decoded, dict):
        raise ValueError("RPC message must be a JSON object")
    return decoded


def post_to_message(post: Post) -> dict[str, Any]:
    return {
        "id": str(post.id),
        "user_id": str(post.user_id),
        "username": post.username,
        "title": post.title,
        "content": post.content,
        "created_at": post.created_at.isoformat(),
    }
