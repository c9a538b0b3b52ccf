# API Middleware
"""
Middleware components: global API key check and request logging.
"""

from src.api.middleware.auth import ApiKeyAuthMiddleware
from src.api.middleware.request_logging import REQUEST_ID_HEADER, RequestLoggingMiddleware

__all__ = [
    "ApiKeyAuthMiddleware",
    "REQUEST_ID_HEADER",
    "RequestLoggingMiddleware",
]
