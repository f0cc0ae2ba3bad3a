from __future__ import annotations

import logging

import httpx
from pydantic import BaseModel

from tomorrow_agents.config.settings import Settings

logger = logging.getLogger(__name__)


class LocationNotFoundError(LookupError):
    def __init__(self, location: str) -> None:
        super().__init__(f"Location '{location}' not found")
        self.location = location


class WeatherReport(BaseModel):
    location: str
    temperature: float
    feels_like: float
    humidity: float
    wind_speed: float
    wind_gust: float
    conditions: str


# WMO weather interpretation codes.
WEATHER_CONDITIONS: dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snow fall",
    73: "Moderate snow fall",
    75: "Heavy snow fall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}

CURRENT_FIELDS = (
    "temperature_2m,apparent_temperature,relative_humidity_2m,"
    "wind_speed_10m,wind_gusts_10m,weather_code"
)


class OpenMeteoClient:
    """Geocode a place name and read its current weather from Open-Meteo."""

    def __init__(self, settings: Settings, client: httpx.Client | None = None) -> None:
        self._geocoding_url = settings.geocoding_api_url
        self._weather_url = settings.weather_api_url
        self._client = client or httpx.Client(timeout=settings.default_api_timeout_seconds)

    def current_weather(self, location: str) -> WeatherReport:
        geo = self._client.get(self._geocoding_url, params={"name": location, "count": 1})
        geo.raise_for_status()
        results = geo.json().get("results") or []
        if not results:
            raise LocationNotFoundError(location)
        place = results[0]

        forecast = self._client.get(
            self._weather_url,
            params={
                "latitude": place["latitude"],
                "longitude": place["longitude"],
                "current": CURRENT_FIELDS,
            },
        )
        forecast.raise_for_status()
        current = forecast.json()["current"]
        logger.debug("Weather for %s: %s", place["name"], current)

        return WeatherReport(
            location=place["name"],
            temperature=current["temperature_2m"],
            feels_like=current["apparent_temperature"],
            humidity=current["relative_humidity_2m"],
            wind_speed=current["wind_speed_10m"],
            wind_gust=current["wind_gusts_10m"],
            conditions=WEATHER_CONDITIONS.get(current["weather_code"], "Unknown"),
        )
