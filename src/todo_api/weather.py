"""OpenWeatherMap adapter with a static fallback reading."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import httpx

from .models import WeatherQuery, WeatherSnapshot, utc_now

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_CITY = "Kaduna"


@dataclass(frozen=True)
class LiveReading:
    """Weather returned by the provider."""

    weather: WeatherSnapshot


@dataclass(frozen=True)
class FallbackReading:
    """Mock weather used when the provider is unavailable; reason says why."""

    weather: WeatherSnapshot
    reason: str


WeatherReading = Union[LiveReading, FallbackReading]


def mock_weather(city: str) -> WeatherSnapshot:
    return {
        "location": city,
        "country": "NG",
        "temperature": 27,
        "feels_like": 29,
        "humidity": 65,
        "description": "clear sky",
        "icon": "01d",
        "wind_speed": 3.5,
        "timestamp": utc_now(),
    }


def _map_response(data: Dict[str, Any]) -> WeatherSnapshot:
    conditions = data.get("weather") or [{}]
    return {
        "location": data["name"],
        "country": data["sys"]["country"],
        "temperature": int(round(data["main"]["temp"])),
        "feels_like": int(round(data["main"]["feels_like"])),
        "humidity": int(data["main"]["humidity"]),
        "description": conditions[0].get("description") or "Unknown",
        "icon": conditions[0].get("icon") or "01d",
        "wind_speed": float(data["wind"]["speed"]),
        "timestamp": utc_now(),
    }


# PUBLIC_INTERFACE
class OpenWeatherMapService:
    """
    Fetch current weather from OpenWeatherMap.

    Any failure (no API key, HTTP error status, network error, malformed
    payload) is logged and answered with a FallbackReading holding mock data,
    so callers never see provider errors. The request uses httpx's default
    timeout.

    Args:
        api_key: OpenWeatherMap app id. Empty disables live lookups.
        base_url: Provider base URL, without the trailing /weather.
        default_city: City used when the query names neither a city nor coordinates.
        transport: Optional httpx transport, used by tests to stub the provider.
    """

    def __init__(
        self,
        api_key: str = "",
        base_url: str = DEFAULT_BASE_URL,
        default_city: str = DEFAULT_CITY,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._url = f"{base_url.rstrip('/')}/weather"
        self._default_city = default_city
        self._transport = transport

    def _params(self, query: WeatherQuery, city: str) -> Dict[str, Any]:
        params: Dict[str, Any] = {"appid": self._api_key, "units": "metric"}
        if not query.city and query.lat is not None and query.lon is not None:
            params["lat"] = query.lat
            params["lon"] = query.lon
        else:
            params["q"] = city
        return params

    async def fetch(self, query: Optional[WeatherQuery] = None) -> WeatherReading:
        """Return a LiveReading from the provider, or a FallbackReading on any failure."""
        query = query or WeatherQuery()
        city = query.city or self._default_city

        if not self._api_key:
            return FallbackReading(weather=mock_weather(city), reason="missing API key")

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(self._url, params=self._params(query, city))
                response.raise_for_status()
                data = response.json()
            return LiveReading(weather=_map_response(data))
        except (httpx.HTTPError, ValueError, KeyError, TypeError, IndexError, AttributeError) as exc:
            logger.warning("Failed to fetch weather from API, using mock data: %s", exc)
            return FallbackReading(weather=mock_weather(city), reason=str(exc) or type(exc).__name__)

    # PUBLIC_INTERFACE
    async def get_current_weather(self, query: Optional[WeatherQuery] = None) -> WeatherSnapshot:
        """Return the weather snapshot for query, live or mock."""
        reading = await self.fetch(query)
        return reading.weather
