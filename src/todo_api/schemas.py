from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item.

    ``text`` is optional here so that a missing or blank value is reported by
    the use-case as a 400 with a readable message.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"text": "Buy groceries"}})

    text: Optional[str] = Field(default=None, description="Todo content; trimmed, must not be blank")


# PUBLIC_INTERFACE
class TodoUpdate(BaseModel):
    """
    Schema for updating an existing Todo item.
    All fields are optional; only fields present in the request body are updated.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"text": "Buy groceries and supplies", "completed": True}}
    )

    text: Optional[str] = Field(default=None, description="New content; must not be blank when present")
    completed: Optional[bool] = Field(default=None, description="Completion status flag")


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        # Entities use snake_case; the JSON wire format uses camelCase.
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "5f0c7c1e-8a8e-4d43-9a55-0c1f1f3f9a10",
                "text": "Buy groceries",
                "completed": False,
                "createdAt": "2025-01-25T10:15:30.123456+00:00",
                "updatedAt": "2025-01-26T09:00:00.000001+00:00",
            }
        },
    )

    id: str = Field(..., description="Unique identifier of the todo item")
    text: str = Field(..., description="Todo content")
    completed: bool = Field(..., description="Completion status flag")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")


# PUBLIC_INTERFACE
class WeatherOut(BaseModel):
    """
    Schema returned by the API for a weather snapshot.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "location": "Kaduna",
                "country": "NG",
                "temperature": 27,
                "feelsLike": 29,
                "humidity": 65,
                "description": "clear sky",
                "icon": "01d",
                "windSpeed": 3.5,
                "timestamp": "2025-01-25T10:15:30.123456+00:00",
            }
        },
    )

    location: str
    country: str
    temperature: int = Field(..., description="Temperature in degrees Celsius")
    feels_like: int = Field(..., description="Perceived temperature in degrees Celsius")
    humidity: int = Field(..., description="Relative humidity in percent")
    description: str
    icon: str = Field(..., description="OpenWeatherMap icon code")
    wind_speed: float = Field(..., description="Wind speed in m/s")
    timestamp: datetime


class TodoListResponse(BaseModel):
    success: bool = True
    data: List[TodoOut]
    count: int


class TodoResponse(BaseModel):
    success: bool = True
    data: TodoOut


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class WeatherResponse(BaseModel):
    success: bool = True
    data: WeatherOut


class WeatherListResponse(BaseModel):
    success: bool = True
    data: List[WeatherOut]
    count: int


class ErrorResponse(BaseModel):
    """
    Envelope for every failed request.
    """

    success: bool = False
    error: str = Field(..., description="Human readable error message")
