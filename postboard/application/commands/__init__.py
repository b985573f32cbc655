"""Commands (CQRS write operations)."""

from postboard.application.commands.auth_commands import (
    LoginUser,
    RefreshAccessToken,
    RegisterUser,
    VerifyAccess,
)
from postboard.application.commands.post_commands import (
    CreatePost,
    DeletePost,
    UpdatePost,
)

__all__ = [
    "LoginUser",
    "RefreshAccessToken",
    "RegisterUser",
    "VerifyAccess",
    "CreatePost",
    "DeletePost",
    "UpdatePost",
]
