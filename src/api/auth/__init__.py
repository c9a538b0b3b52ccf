# API Authentication
"""
API key authentication shared by the global middleware and the per-route filter.
"""

from src.api.auth.constants import API_KEY_HEADER_NAME, API_KEY_SECTION_NAME
from src.api.auth.gate import (
    FILTER_MESSAGES,
    MIDDLEWARE_MESSAGES,
    ApiKeyRejectedError,
    RejectionMessages,
    RequestGate,
)
from src.api.auth.key_validator import APIKeyValidator, AuthOutcome, validate_api_key

__all__ = [
    "API_KEY_HEADER_NAME",
    "API_KEY_SECTION_NAME",
    "APIKeyValidator",
    "ApiKeyRejectedError",
    "AuthOutcome",
    "FILTER_MESSAGES",
    "MIDDLEWARE_MESSAGES",
    "RejectionMessages",
    "RequestGate",
    "validate_api_key",
]
