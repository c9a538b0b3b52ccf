"""
API key validation.

The decision itself lives in ``validate_api_key``, a pure function of the
field name, the request's header or query values and the configured secret.
``APIKeyValidator`` binds the secret and the credential sources once at
startup and extracts the credential from a request.
"""

import hmac
from collections.abc import Iterable, Mapping
from enum import Enum

import structlog
from starlette.requests import HTTPConnection

from src.api.auth.constants import API_KEY_HEADER_NAME

logger = structlog.get_logger(__name__)


class AuthOutcome(str, Enum):
    """Result of checking one request's credential."""

    ACCEPTED = "accepted"
    REJECTED_MISSING = "rejected_missing"
    REJECTED_INVALID = "rejected_invalid"

    @property
    def is_accepted(self) -> bool:
        return self is AuthOutcome.ACCEPTED


def validate_api_key(
    field_name: str,
    values: Mapping[str, str],
    configured_secret: str | None,
) -> AuthOutcome:
    """
    Decide whether a request's credential matches the configured secret.

    Args:
        field_name: Header or query parameter name holding the credential.
        values: The request's header or query collection.
        configured_secret: The expected key. ``None`` or empty rejects everything.

    Returns:
        The authentication outcome.
    """
    credential = values.get(field_name)
    if credential is None:
        return AuthOutcome.REJECTED_MISSING

    # Fail closed: an unset secret must never match, not even an empty credential
    if not configured_secret:
        return AuthOutcome.REJECTED_INVALID

    if not hmac.compare_digest(credential.encode(), configured_secret.encode()):
        return AuthOutcome.REJECTED_INVALID

    return AuthOutcome.ACCEPTED


class APIKeyValidator:
    """
    Validates request credentials against a single configured API key.

    The credential is read from the API key header. When the header is
    absent and query parameters are enabled, each of them is tried in order.
    """

    def __init__(
        self,
        api_key: str | None,
        header_name: str = API_KEY_HEADER_NAME,
        query_params: Iterable[str] = (),
    ) -> None:
        """
        Initialize the API key validator.

        Args:
            api_key: The expected key, loaded once from configuration.
            header_name: Header carrying the key.
            query_params: Query parameter names accepted as a fallback.
        """
        self._api_key = api_key
        self.header_name = header_name
        self.query_params = tuple(query_params)

        if self.key_configured:
            logger.info(
                "APIKeyValidator initialized",
                header_name=self.header_name,
                query_params=list(self.query_params),
            )
        else:
            logger.warning(
                "No API key configured, all requests will be rejected",
                header_name=self.header_name,
            )

    @property
    def key_configured(self) -> bool:
        """Whether a non-empty key is configured."""
        return bool(self._api_key)

    def authenticate(self, request: HTTPConnection) -> AuthOutcome:
        """
        Extract the credential from a request and decide the outcome.

        Header or query values repeated on the request are joined with ``,``
        first, so a duplicated credential never matches the key.
        """
        header_values = request.headers.getlist(self.header_name)
        if header_values:
            return validate_api_key(
                self.header_name,
                {self.header_name: ",".join(header_values)},
                self._api_key,
            )

        for param in self.query_params:
            query_values = request.query_params.getlist(param)
            if query_values:
                return validate_api_key(
                    param, {param: ",".join(query_values)}, self._api_key
                )

        return AuthOutcome.REJECTED_MISSING
