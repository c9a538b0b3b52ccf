"""
Weather forecast demo endpoints.

``/weatherforecast`` opts into the per-route API key filter;
``/weatherforecast/public`` never does. Under the global middleware both
are protected.
"""

import datetime
import random

from fastapi import APIRouter
from pydantic import BaseModel, Field, computed_field

from src.api.dependencies import ApiKeyGuard

router = APIRouter()

SUMMARIES = [
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
]

FORECAST_DAYS = 5


class WeatherForecast(BaseModel):
    """One day of forecast."""

    date: datetime.date
    temperature_c: int = Field(..., description="Temperature in Celsius")
    summary: str | None = None

    @computed_field
    @property
    def temperature_f(self) -> int:
        return 32 + int(self.temperature_c / 0.5556)


def generate_forecasts(days: int = FORECAST_DAYS) -> list[WeatherForecast]:
    """Random forecasts for the days following today."""
    today = datetime.date.today()
    return [
        WeatherForecast(
            date=today + datetime.timedelta(days=offset),
            temperature_c=random.randint(-20, 54),
            summary=random.choice(SUMMARIES),
        )
        for offset in range(1, days + 1)
    ]


@router.get(
    "/weatherforecast",
    response_model=list[WeatherForecast],
    dependencies=[ApiKeyGuard],
)
async def get_weather_forecast() -> list[WeatherForecast]:
    """Forecast for the next five days. Requires the API key."""
    return generate_forecasts()


@router.get("/weatherforecast/public", response_model=list[WeatherForecast])
async def get_public_weather_forecast() -> list[WeatherForecast]:
    """Forecast for the next five days without the per-route API key check."""
    return generate_forecasts()
