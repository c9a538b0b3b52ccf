"""
Application settings loaded from environment variables.

The ``Authentication:ApiKey`` setting maps to ``AUTHENTICATION__APIKEY``.
Settings are read once at startup and passed explicitly to the app factory.
"""

import os
from dataclasses import dataclass, field

from src.api.auth.constants import API_KEY_HEADER_NAME, API_KEY_QUERY_PARAMS

AUTH_MODE_MIDDLEWARE = "middleware"
AUTH_MODE_FILTER = "filter"
AUTH_MODES = (AUTH_MODE_MIDDLEWARE, AUTH_MODE_FILTER)

LOG_FORMATS = ("json", "console")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class ConfigurationError(Exception):
    """Raised when the environment holds an unusable configuration."""


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    api_key: str | None = None
    header_name: str = API_KEY_HEADER_NAME
    query_params: tuple[str, ...] = ()
    auth_mode: str = AUTH_MODE_MIDDLEWARE
    exempt_paths: frozenset[str] = field(default_factory=frozenset)
    require_key: bool = False
    log_level: str = "INFO"
    log_format: str = "json"

    def __post_init__(self) -> None:
        if self.auth_mode not in AUTH_MODES:
            raise ConfigurationError(
                f"Unknown authentication mode {self.auth_mode!r}, expected one of {AUTH_MODES}"
            )
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}, expected one of {LOG_FORMATS}"
            )
        if not self.header_name.strip():
            raise ConfigurationError("API key header name must not be empty")
        unknown = [name for name in self.query_params if name not in API_KEY_QUERY_PARAMS]
        if unknown:
            raise ConfigurationError(
                f"Unsupported API key query parameters {unknown}, expected any of {API_KEY_QUERY_PARAMS}"
            )
        # Header values arrive latin-1 decoded, so only ASCII keys can match
        if self.api_key is not None and not self.api_key.isascii():
            raise ConfigurationError("API key must contain ASCII characters only")

    @property
    def key_configured(self) -> bool:
        return bool(self.api_key)


def _split_list(value: str | None) -> list[str]:
    """Split a comma-separated environment value, dropping blanks."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_bool(name: str, value: str | None) -> bool:
    if value is None:
        return False
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {value!r}")


def load_settings() -> Settings:
    """
    Build settings from the process environment.

    Raises:
        ConfigurationError: If a value cannot be interpreted.
    """
    return Settings(
        api_key=os.getenv("AUTHENTICATION__APIKEY"),
        header_name=os.getenv("AUTHENTICATION__HEADERNAME", API_KEY_HEADER_NAME).strip(),
        query_params=tuple(_split_list(os.getenv("AUTHENTICATION__QUERYPARAMS"))),
        auth_mode=os.getenv("AUTHENTICATION__MODE", AUTH_MODE_MIDDLEWARE).strip().lower(),
        exempt_paths=frozenset(_split_list(os.getenv("AUTHENTICATION__EXEMPTPATHS"))),
        require_key=_parse_bool(
            "AUTHENTICATION__REQUIREKEY", os.getenv("AUTHENTICATION__REQUIREKEY")
        ),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        log_format=os.getenv("LOG_FORMAT", "json").strip().lower(),
    )


def is_production_mode() -> bool:
    """Check if running in production mode."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    return env in ("production", "prod")
