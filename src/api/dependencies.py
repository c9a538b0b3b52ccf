"""
FastAPI dependencies for dependency injection.

Provides the per-route API key filter. Routes opt into authentication with
``dependencies=[ApiKeyGuard]``; routes without it stay reachable.
"""

from typing import Annotated

from fastapi import Depends, Request
from starlette.requests import HTTPConnection

from src.api.auth.gate import FILTER_MESSAGES, ApiKeyRejectedError, RequestGate
from src.api.auth.key_validator import APIKeyValidator, AuthOutcome


class ApiKeyAuthFilter(RequestGate):
    """
    Per-route API key check.

    Raises ``ApiKeyRejectedError`` so the route handler never runs; the
    registered exception handler turns it into a plain-text 401.
    """

    name = "filter"

    def __init__(self, validator: APIKeyValidator) -> None:
        super().__init__(validator, FILTER_MESSAGES)

    def check(self, request: HTTPConnection) -> None:
        outcome = self.evaluate(request)
        if outcome is not AuthOutcome.ACCEPTED:
            raise ApiKeyRejectedError(outcome, self.rejection_message(outcome))


def get_auth_filter(request: Request) -> ApiKeyAuthFilter:
    """Get the per-route API key filter."""
    return request.app.state.auth_filter


# Type aliases for dependency injection
AuthFilterDep = Annotated[ApiKeyAuthFilter, Depends(get_auth_filter)]


def require_api_key(request: Request, auth_filter: AuthFilterDep) -> None:
    """Reject the request unless it carries the configured API key."""
    auth_filter.check(request)


ApiKeyGuard = Depends(require_api_key)
