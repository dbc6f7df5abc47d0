"""FastAPI dependencies enforcing the caller's role on a router.

The AccessGateMiddleware stores the principal it resolved in the request
state; these dependencies read it back once routing has happened.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from shared_kernel.auth.principal import Principal, Role
from shared_kernel.middleware.asgi import PRINCIPAL_STATE_KEY


def get_principal(request: Request) -> Principal | None:
    """Return the principal the middleware resolved, if any."""
    return getattr(request.state, PRINCIPAL_STATE_KEY, None)


def require_role(role: Role) -> Callable[..., Principal]:
    """Build a dependency admitting only principals holding ``role``.

    Example:
        router = APIRouter(dependencies=[Depends(require_role(Role.USER))])
    """

    def check_role(
        principal: Annotated[Principal | None, Depends(get_principal)],
    ) -> Principal:
        if principal is None or principal.is_anonymous or principal.role is not role:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"{role.value.capitalize()} access required",
            )
        return principal

    return check_role
