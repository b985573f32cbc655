"""Container module - Centralized dependency injection.

Re-exports every factory so callers can write:

    from postboard.core.container import get_cache, get_token_codec, ...

Organized into modules:
- infrastructure: Core services (cache, db, logging, security, verifier)
- auth_handlers: Authentication handler factories (FastAPI Depends)
- post_handlers: Post handler factories (RPC service)
"""

# Infrastructure services
from postboard.core.container.infrastructure import (
    get_access_token_cache,
    get_cache,
    get_database,
    get_db_session,
    get_identity_verifier,
    get_logger,
    get_password_service,
    get_post_rpc_client,
    get_token_codec,
)

# Auth handlers
from postboard.core.container.auth_handlers import (
    get_login_user_handler,
    get_refresh_access_token_handler,
    get_register_user_handler,
    get_verify_access_handler,
)

# Post handlers
from postboard.core.container.post_handlers import (
    get_create_post_handler,
    get_delete_post_handler,
    get_get_post_handler,
    get_list_posts_handler,
    get_update_post_handler,
)

__all__ = [
    # Infrastructure
    "get_access_token_cache",
    "get_cache",
    "get_database",
    "get_db_session",
    "get_identity_verifier",
    "get_logger",
    "get_password_service",
    "get_post_rpc_client",
    "get_token_codec",
    # Auth handlers
    "get_login_user_handler",
    "get_refresh_access_token_handler",
    "get_register_user_handler",
    "get_verify_access_handler",
    # Post handlers
    "get_create_post_handler",
    "get_delete_post_handler",
    "get_get_post_handler",
    "get_list_posts_handler",
    "get_update_post_handler",
]
