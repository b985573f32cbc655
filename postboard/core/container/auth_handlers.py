"""Authentication handler dependency factories.

Request-scoped handler instances: repositories are bound to the request's
database session, everything else is an application-scoped singleton.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.core.container.infrastructure import (
    get_access_token_cache,
    get_db_session,
    get_logger,
    get_password_service,
    get_token_codec,
)

if TYPE_CHECKING:
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


async def get_login_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "LoginUserHandler":
    """Get LoginUser command handler (request-scoped).

    Usage:
        @router.post("/login")
        async def login(handler: LoginUserHandler = Depends(get_login_user_handler)):
            result = await handler.handle(command)
    """
    from postboard.application.commands.handlers.login_user_handler import (
        LoginUserHandler,
    )
    from postboard.infrastructure.persistence.repositories import (
        RefreshTokenRepository,
        UserRepository,
    )

    return LoginUserHandler(
        user_repo=UserRepository(session=session),
        refresh_token_repo=RefreshTokenRepository(session=session),
        access_token_cache=get_access_token_cache(),
        token_codec=get_token_codec(),
        password_service=get_password_service(),
        logger=get_logger(),
    )


async def get_refresh_access_token_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RefreshAccessTokenHandler":
    """Get RefreshAccessToken command handler (request-scoped)."""
    from postboard.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )
    from postboard.infrastructure.persistence.repositories import (
        RefreshTokenRepository,
        UserRepository,
    )

    return RefreshAccessTokenHandler(
        user_repo=UserRepository(session=session),
        refresh_token_repo=RefreshTokenRepository(session=session),
        access_token_cache=get_access_token_cache(),
        token_codec=get_token_codec(),
        logger=get_logger(),
    )


async def get_verify_access_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "VerifyAccessHandler":
    """Get VerifyAccess command handler (request-scoped)."""
    from postboard.application.commands.handlers.verify_access_handler import (
        VerifyAccessHandler,
    )
    from postboard.infrastructure.persistence.repositories import UserRepository

    return VerifyAccessHandler(
        user_repo=UserRepository(session=session),
        access_token_cache=get_access_token_cache(),
        token_codec=get_token_codec(),
        logger=get_logger(),
    )


async def get_register_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RegisterUserHandler":
    """Get RegisterUser command handler (request-scoped)."""
    from postboard.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from postboard.infrastructure.persistence.repositories import UserRepository

    return RegisterUserHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        logger=get_logger(),
    )
