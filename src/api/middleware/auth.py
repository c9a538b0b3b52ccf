"""
Global API key middleware.

Checks every request before routing. Rejected requests are answered with a
plain-text 401 and never reach the route handlers.
"""

from collections.abc import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from src.api.auth.gate import MIDDLEWARE_MESSAGES, RequestGate
from src.api.auth.key_validator import APIKeyValidator, AuthOutcome


class _MiddlewareGate(RequestGate):
    name = "middleware"


class ApiKeyAuthMiddleware(BaseHTTPMiddleware):
    """
    Middleware that validates the API key on every request.

    Paths listed in ``exempt_paths`` (and anything below them) skip the check.
    By default nothing is exempt.
    """

    def __init__(
        self,
        app,
        validator: APIKeyValidator,
        exempt_paths: Iterable[str] = (),
    ) -> None:
        """
        Initialize auth middleware.

        Args:
            app: The ASGI application.
            validator: Validator bound to the configured API key.
            exempt_paths: Paths served without authentication.
        """
        super().__init__(app)
        self.gate = _MiddlewareGate(validator, MIDDLEWARE_MESSAGES)
        self.exempt_paths = frozenset(exempt_paths)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process request and validate API key."""
        if self._is_exempt(request.url.path):
            return await call_next(request)

        outcome = self.gate.evaluate(request)
        if outcome is not AuthOutcome.ACCEPTED:
            return PlainTextResponse(
                self.gate.rejection_message(outcome), status_code=401
            )

        return await call_next(request)

    def _is_exempt(self, path: str) -> bool:
        """Check if the path is exempt from authentication."""
        if path in self.exempt_paths:
            return True

        # Sub-paths, e.g. /docs/oauth2-redirect
        return any(
            path.startswith(exempt.rstrip("/") + "/")
            for exempt in self.exempt_paths
            if exempt.rstrip("/")
        )
