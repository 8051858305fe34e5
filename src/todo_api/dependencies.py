"""Dependency providers for the FastAPI app.

The repository and weather service are built once by
``create_app`` and kept on ``app.state``; these providers hand them to routes.
"""

from __future__ import annotations

from fastapi import Depends, Request

from .repositories import TodoRepository
from .use_cases import (
    CreateTodoUseCase,
    DeleteTodoUseCase,
    GetTodosUseCase,
    GetWeatherForCitiesUseCase,
    GetWeatherUseCase,
    UpdateTodoUseCase,
)
from .weather import OpenWeatherMapService


def get_todo_repository(request: Request) -> TodoRepository:
    """Provide the process-wide todo repository."""
    return request.app.state.repository


def get_weather_service(request: Request) -> OpenWeatherMapService:
    """Provide the weather service."""
    return request.app.state.weather_service


def get_get_todos(repository: TodoRepository = Depends(get_todo_repository)) -> GetTodosUseCase:
    return GetTodosUseCase(repository)


def get_create_todo(repository: TodoRepository = Depends(get_todo_repository)) -> CreateTodoUseCase:
    return CreateTodoUseCase(repository)


def get_update_todo(repository: TodoRepository = Depends(get_todo_repository)) -> UpdateTodoUseCase:
    return UpdateTodoUseCase(repository)


def get_delete_todo(repository: TodoRepository = Depends(get_todo_repository)) -> DeleteTodoUseCase:
    return DeleteTodoUseCase(repository)


def get_get_weather(
    service: OpenWeatherMapService = Depends(get_weather_service),
) -> GetWeatherUseCase:
    return GetWeatherUseCase(service)


def get_get_weather_for_cities(
    service: OpenWeatherMapService = Depends(get_weather_service),
) -> GetWeatherForCitiesUseCase:
    return GetWeatherForCitiesUseCase(service)
