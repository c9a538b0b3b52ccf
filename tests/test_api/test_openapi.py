"""
Tests for OpenAPI documentation configuration.
"""

import pytest

from src.api.config import Settings
from src.api.main import API_KEY_SECURITY_SCHEME, API_VERSION, create_app


class TestSecurityDefinitions:
    @pytest.mark.asyncio
    async def test_api_key_scheme_defined(self, filter_client):
        """
        Given: API running in filter mode
        When: GET /openapi.json
        Then: Spec includes the header API key security scheme
        """
        response = await filter_client.get("/openapi.json")

        assert response.status_code == 200
        spec = response.json()
        scheme = spec["components"]["securitySchemes"][API_KEY_SECURITY_SCHEME]
        assert scheme["type"] == "apiKey"
        assert scheme["in"] == "header"
        assert scheme["name"] == "x-api-key"
        assert spec["security"] == [{API_KEY_SECURITY_SCHEME: []}]

    @pytest.mark.asyncio
    async def test_version_and_paths(self, filter_client):
        spec = (await filter_client.get("/openapi.json")).json()
        assert spec["info"]["version"] == API_VERSION
        assert "/weatherforecast" in spec["paths"]
        assert "/weatherforecast/public" in spec["paths"]

    def test_custom_header_name_documented(self):
        app = create_app(Settings(api_key="abc123", header_name="x-service-token"))
        scheme = app.openapi()["components"]["securitySchemes"][API_KEY_SECURITY_SCHEME]
        assert scheme["name"] == "x-service-token"

    def test_schema_cached(self, filter_app):
        assert filter_app.openapi() is filter_app.openapi()
