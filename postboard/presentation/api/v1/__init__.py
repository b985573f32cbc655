"""REST routers.

``auth_router`` aggregates the auth/user service routes; ``gateway_router``
aggregates the gateway's post routes. Both are mounted under ``/api``.
"""

from fastapi import APIRouter

from postboard.presentation.api.v1.auth import router as auth_routes
from postboard.presentation.api.v1.health import router as health_routes
from postboard.presentation.api.v1.posts import router as post_routes
from postboard.presentation.api.v1.tokens import router as token_routes
from postboard.presentation.api.v1.users import router as user_routes

auth_router = APIRouter(prefix="/api")
auth_router.include_router(auth_routes)
auth_router.include_router(token_routes)
auth_router.include_router(user_routes)
auth_router.include_router(health_routes)

gateway_router = APIRouter(prefix="/api")
gateway_router.include_router(post_routes)
gateway_router.include_router(health_routes)

__all__ = ["auth_router", "gateway_router"]
