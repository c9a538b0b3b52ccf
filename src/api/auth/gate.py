"""
Request gate shared by the API key middleware and the per-route filter.

Both adapters delegate the decision to the same ``APIKeyValidator`` and only
differ in how they stop a rejected request and in the texts they reply with.
"""

from dataclasses import dataclass

import structlog
from starlette.requests import HTTPConnection

from src.api.auth.constants import (
    FILTER_INVALID_MESSAGE,
    FILTER_MISSING_MESSAGE,
    MIDDLEWARE_INVALID_MESSAGE,
    MIDDLEWARE_MISSING_MESSAGE,
)
from src.api.auth.key_validator import APIKeyValidator, AuthOutcome

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RejectionMessages:
    """Response texts for the two rejection outcomes."""

    missing: str
    invalid: str


MIDDLEWARE_MESSAGES = RejectionMessages(
    missing=MIDDLEWARE_MISSING_MESSAGE,
    invalid=MIDDLEWARE_INVALID_MESSAGE,
)
FILTER_MESSAGES = RejectionMessages(
    missing=FILTER_MISSING_MESSAGE,
    invalid=FILTER_INVALID_MESSAGE,
)


class ApiKeyRejectedError(Exception):
    """Raised by the per-route filter when a request fails authentication."""

    def __init__(self, outcome: AuthOutcome, message: str) -> None:
        super().__init__(message)
        self.outcome = outcome
        self.message = message


class RequestGate:
    """
    Base for components that admit or reject requests by API key.

    Subclasses decide how a rejection is delivered to the client.
    """

    name = "gate"

    def __init__(self, validator: APIKeyValidator, messages: RejectionMessages) -> None:
        self.validator = validator
        self.messages = messages

    def evaluate(self, request: HTTPConnection) -> AuthOutcome:
        """Authenticate the request and log rejections."""
        outcome = self.validator.authenticate(request)
        if not outcome.is_accepted:
            logger.warning(
                "API key rejected",
                gate=self.name,
                outcome=outcome.value,
                path=request.url.path,
                method=request.scope.get("method"),
            )
        return outcome

    def rejection_message(self, outcome: AuthOutcome) -> str:
        """Response text for a rejection outcome."""
        if outcome is AuthOutcome.REJECTED_MISSING:
            return self.messages.missing
        if outcome is AuthOutcome.REJECTED_INVALID:
            return self.messages.invalid
        raise ValueError(f"No rejection message for outcome {outcome.value!r}")
