"""
Tests for the health and weather forecast endpoints.
"""

import datetime

import pytest

from src.api.routes.weather import SUMMARIES, WeatherForecast, generate_forecasts


class TestHealthEndpoint:
    @pytest.mark.asyncio
    async def test_health_ok(self, filter_client):
        response = await filter_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestWeatherForecast:
    @pytest.mark.asyncio
    async def test_forecast_payload(self, filter_client):
        """
        Given: Public forecast endpoint
        When: GET /weatherforecast/public
        Then: Five consecutive days starting tomorrow
        """
        response = await filter_client.get("/weatherforecast/public")
        assert response.status_code == 200

        data = response.json()
        tomorrow = datetime.date.today() + datetime.timedelta(days=1)
        assert [item["date"] for item in data] == [
            (tomorrow + datetime.timedelta(days=offset)).isoformat() for offset in range(5)
        ]
        for item in data:
            assert -20 <= item["temperature_c"] <= 54
            assert item["summary"] in SUMMARIES
            assert item["temperature_f"] == 32 + int(item["temperature_c"] / 0.5556)

    def test_fahrenheit_conversion(self):
        forecast = WeatherForecast(date=datetime.date(2024, 1, 1), temperature_c=100)
        assert forecast.temperature_f == 211
        assert WeatherForecast(date=datetime.date(2024, 1, 1), temperature_c=0).temperature_f == 32

    def test_generate_forecast_count(self):
        assert len(generate_forecasts(3)) == 3
