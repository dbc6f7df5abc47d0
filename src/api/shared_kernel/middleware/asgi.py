"""ASGI middleware running the AccessGate around every HTTP request.

Implemented as a pure ASGI middleware rather than ``BaseHTTPMiddleware`` so
the downstream application executes in the same task that set the tenant
context; the binding is therefore visible to every dependency and handler
and is released in the same task once the response has been sent.

Usage:
    app.add_middleware(
        AccessGateMiddleware,
        resolver=BasicAuthPrincipalResolver(get_sessionmaker),
        www_authenticate="Basic",
    )
"""

from __future__ import annotations

from starlette.datastructures import Headers
from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from shared_kernel.auth.protocols import PrincipalResolver
from shared_kernel.middleware.access_gate import ERROR_PATH, AccessGate

PRINCIPAL_STATE_KEY = "principal"


class AccessGateMiddleware:
    """Authorizes each HTTP request and scopes it to the caller's tenant."""

    def __init__(
        self,
        app: ASGIApp,
        resolver: PrincipalResolver,
        gate: AccessGate | None = None,
        www_authenticate: str | None = None,
    ) -> None:
        """Initialize the middleware.

        Args:
            app: Downstream ASGI application
            resolver: Resolves the principal from request headers
            gate: AccessGate instance (a default gate is created when omitted)
            www_authenticate: Challenge sent with 401 answers, if any
        """
        self.app = app
        self._resolver = resolver
        self._gate = gate or AccessGate()
        self._www_authenticate = www_authenticate

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        path: str = scope["path"]
        principal = None
        if path != ERROR_PATH:
            principal = await self._resolver.resolve(Headers(scope=scope))

        with self._gate.guard(path, principal) as decision:
            if not decision.allowed:
                headers = None
                if decision.status_code == 401 and self._www_authenticate:
                    headers = {"WWW-Authenticate": self._www_authenticate}
                response = PlainTextResponse(
                    decision.message,
                    status_code=decision.status_code or 403,
                    headers=headers,
                )
                await response(scope, receive, send)
                return

            scope.setdefault("state", {})[PRINCIPAL_STATE_KEY] = principal
            await self.app(scope, receive, send)
