"""
FastAPI application entry point.

Two authentication modes are available, chosen by ``AUTHENTICATION__MODE``:

- ``middleware``: every request passes through ``ApiKeyAuthMiddleware``.
- ``filter``: only routes declared with ``ApiKeyGuard`` check the key.
"""

import structlog
from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from src.api.auth.key_validator import APIKeyValidator
from src.api.config import AUTH_MODE_MIDDLEWARE, ConfigurationError, Settings, load_settings
from src.api.dependencies import ApiKeyAuthFilter
from src.api.exception_handlers import register_exception_handlers
from src.api.logging_config import configure_logging
from src.api.middleware.auth import ApiKeyAuthMiddleware
from src.api.middleware.request_logging import RequestLoggingMiddleware
from src.api.routes import health, weather

logger = structlog.get_logger(__name__)

API_VERSION = "1.0.0"

API_KEY_SECURITY_SCHEME = "ApiKeyAuth"


def custom_openapi(app: FastAPI, header_name: str) -> dict:
    """
    Generate the OpenAPI schema with the API key security scheme.
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    openapi_schema["components"] = openapi_schema.get("components", {})
    openapi_schema["components"]["securitySchemes"] = {
        API_KEY_SECURITY_SCHEME: {
            "type": "apiKey",
            "in": "header",
            "name": header_name,
            "description": "The API key must be passed in the header.",
        }
    }
    openapi_schema["security"] = [{API_KEY_SECURITY_SCHEME: []}]

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Explicit settings. Loaded from the environment when omitted.

    Raises:
        ConfigurationError: If ``require_key`` is set and no API key is configured.
    """
    if settings is None:
        settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)

    if settings.require_key and not settings.key_configured:
        raise ConfigurationError("AUTHENTICATION__APIKEY must be set")

    app = FastAPI(
        title="API Key Authentication",
        description="""
Static API key authentication, either for every request or per route.

Pass the key in the `x-api-key` header:

```
x-api-key: your-api-key-here
```

Missing or wrong keys are answered with `401 Unauthorized`.
""",
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    validator = APIKeyValidator(
        settings.api_key,
        header_name=settings.header_name,
        query_params=settings.query_params,
    )
    app.state.validator = validator
    app.state.auth_filter = ApiKeyAuthFilter(validator)

    app.openapi = lambda: custom_openapi(app, settings.header_name)

    _configure_middleware(app, settings, validator)

    register_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(weather.router, tags=["weather"])

    logger.info(
        "Application created",
        auth_mode=settings.auth_mode,
        key_configured=settings.key_configured,
    )
    return app


def _configure_middleware(
    app: FastAPI, settings: Settings, validator: APIKeyValidator
) -> None:
    """
    Configure middleware for the application.

    Execution order (outermost first):
    1. RequestLoggingMiddleware - request ID and access log
    2. ApiKeyAuthMiddleware - only in ``middleware`` mode

    First added = last to execute.
    """
    if settings.auth_mode == AUTH_MODE_MIDDLEWARE:
        app.add_middleware(
            ApiKeyAuthMiddleware,
            validator=validator,
            exempt_paths=settings.exempt_paths,
        )

    app.add_middleware(RequestLoggingMiddleware)


# Create the application instance
app = create_app()
