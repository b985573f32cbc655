"""Identity dependencies for protected REST routes.

``require_identity`` is the REST call site of IdentityVerifier. Attach it at
router level so no protected handler runs before it:

    router = APIRouter(prefix="/user", dependencies=[Depends(require_identity)])

On success the identity is stored on ``request.state.identity`` and can be
read by handlers via ``get_current_identity``. Every rejection raises
``UnauthorizedError``, rendered as the same 401 body whatever the cause.
"""

from typing import Annotated

from fastapi import Depends, Header, Request

from postboard.application.services import IdentityVerifier
from postboard.core.container import get_identity_verifier
from postboard.core.result import Success
from postboard.domain.entities import Identity
from postboard.presentation.api.errors import UnauthorizedError


async def require_identity(
    request: Request,
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> Identity:
    """Verify the current session and attach the identity to the request."""
    result = await verifier.verify()
    if not isinstance(result, Success):
        raise UnauthorizedError()
    request.state.identity = result.value
    return result.value


def get_current_identity(request: Request) -> Identity:
    """Read the identity attached by ``require_identity``."""
    identity = getattr(request.state, "identity", None)
    if identity is None:
        raise UnauthorizedError()
    return identity


async def get_refresh_token_header(
    refresh_token: Annotated[str | None, Header(alias="refresh-token")] = None,
) -> str:
    """Extract the ``refresh-token`` header, rejecting requests without one.

    The value is passed through unchanged to the refresh handler.
    """
    if not refresh_token:
        raise UnauthorizedError()
    return refresh_token


CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
RefreshTokenHeader = Annotated[str, Depends(get_refresh_token_header)]
