from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..dependencies import get_get_weather, get_get_weather_for_cities
from ..models import WeatherQuery
from ..schemas import ErrorResponse, WeatherListResponse, WeatherOut, WeatherResponse
from ..use_cases import GetWeatherForCitiesUseCase, GetWeatherUseCase
from ..utils import collection_envelope

router = APIRouter(
    prefix="/api/weather",
    tags=["weather"],
)

SOUTH_AFRICAN_CITIES = [
    "Cape Town,ZA",
    "Johannesburg,ZA",
    "Durban,ZA",
    "Pretoria,ZA",
    "Port Elizabeth,ZA",
    "Bloemfontein,ZA",
    "East London,ZA",
    "Polokwane,ZA",
    "Nelspruit,ZA",
    "Kimberley,ZA",
]


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=WeatherResponse,
    summary="Current Weather",
    description=(
        "Current weather for a city, or for coordinates when only lat/lon are given. "
        "Falls back to mock data when the provider is unavailable."
    ),
    responses={500: {"model": ErrorResponse, "description": "Weather lookup failed"}},
)
async def get_weather(
    city: Optional[str] = Query(None, description="City name; defaults to the configured city"),
    lat: Optional[float] = Query(None, description="Latitude, used when no city is given"),
    lon: Optional[float] = Query(None, description="Longitude, used when no city is given"),
    use_case: GetWeatherUseCase = Depends(get_get_weather),
) -> WeatherResponse:
    """
    Current weather for one location.
    """
    query = WeatherQuery(city=city.strip() if city and city.strip() else None, lat=lat, lon=lon)
    weather = await use_case.execute(query)
    return WeatherResponse(data=WeatherOut(**weather))


# PUBLIC_INTERFACE
@router.get(
    "/south-africa",
    response_model=WeatherListResponse,
    summary="South African Cities Weather",
    description="Current weather for ten major South African cities.",
    responses={500: {"model": ErrorResponse, "description": "Weather lookup failed"}},
)
async def get_south_africa_weather(
    use_case: GetWeatherForCitiesUseCase = Depends(get_get_weather_for_cities),
) -> WeatherListResponse:
    """
    Weather for the fixed list of South African cities.
    """
    readings = await use_case.execute(SOUTH_AFRICAN_CITIES)
    return WeatherListResponse(**collection_envelope([WeatherOut(**w) for w in readings]))


# PUBLIC_INTERFACE
@router.get(
    "/multi",
    response_model=WeatherListResponse,
    summary="Multiple Cities Weather",
    description="Current weather for a comma-separated list of cities.",
    responses={
        400: {"model": ErrorResponse, "description": "cities parameter missing"},
        500: {"model": ErrorResponse, "description": "Weather lookup failed"},
    },
)
async def get_multi_weather(
    cities: Optional[str] = Query(None, description="Comma-separated list of city names"),
    use_case: GetWeatherForCitiesUseCase = Depends(get_get_weather_for_cities),
) -> WeatherListResponse:
    """
    Weather for each requested city, in request order.
    """
    city_list = [c.strip() for c in (cities or "").split(",") if c.strip()]
    if not city_list:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cities parameter is required (comma-separated list)",
        )
    readings = await use_case.execute(city_list)
    return WeatherListResponse(**collection_envelope([WeatherOut(**w) for w in readings]))
