"""
Application services. Each use-case validates its input, delegates to the
repository (or weather service) and returns the result unchanged.

Validation failures raise TodoValidationError. A missing todo is not an
error: UpdateTodoUseCase returns None and DeleteTodoUseCase returns False.
"""

from __future__ import annotations

import asyncio
from typing import Any, Iterable, List, Mapping, Optional

from .models import TodoChanges, TodoEntity, WeatherQuery, WeatherSnapshot
from .repositories import TodoRepository
from .weather import OpenWeatherMapService


class TodoValidationError(ValueError):
    """Input rejected before reaching the repository."""


def _clean_text(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip()


# PUBLIC_INTERFACE
class GetTodosUseCase:
    """Return every stored todo."""

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self) -> List[TodoEntity]:
        return self._repository.find_all()


# PUBLIC_INTERFACE
class CreateTodoUseCase:
    """Create a todo from trimmed, non-empty text."""

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, draft: Mapping[str, Any]) -> TodoEntity:
        text = _clean_text(draft.get("text"))
        if not text:
            raise TodoValidationError("Todo text is required")
        return self._repository.create({"text": text})


# PUBLIC_INTERFACE
class UpdateTodoUseCase:
    """
    Apply a sparse update to an existing todo.

    Only keys present in ``changes`` are forwarded. A present but blank
    ``text`` is rejected; an absent ``text`` leaves the stored text alone.
    Returns None when no todo has the given id.
    """

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, todo_id: str, changes: Mapping[str, Any]) -> Optional[TodoEntity]:
        if not todo_id:
            raise TodoValidationError("Todo ID is required")

        if self._repository.find_by_id(todo_id) is None:
            return None

        updates: TodoChanges = {}
        if "text" in changes:
            text = _clean_text(changes["text"])
            if not text:
                raise TodoValidationError("Todo text cannot be empty")
            updates["text"] = text
        if "completed" in changes:
            completed = changes["completed"]
            if not isinstance(completed, bool):
                raise TodoValidationError("Todo completed must be a boolean")
            updates["completed"] = completed

        return self._repository.update(todo_id, updates)


# PUBLIC_INTERFACE
class DeleteTodoUseCase:
    """Delete a todo; returns whether one was removed."""

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, todo_id: str) -> bool:
        if not todo_id:
            raise TodoValidationError("Todo ID is required")
        return self._repository.delete(todo_id)


# PUBLIC_INTERFACE
class GetWeatherUseCase:
    """Current weather for one location."""

    def __init__(self, weather_service: OpenWeatherMapService) -> None:
        self._weather_service = weather_service

    async def execute(self, query: Optional[WeatherQuery] = None) -> WeatherSnapshot:
        return await self._weather_service.get_current_weather(query or WeatherQuery())


# PUBLIC_INTERFACE
class GetWeatherForCitiesUseCase:
    """Current weather for several cities, fetched concurrently, in input order."""

    def __init__(self, weather_service: OpenWeatherMapService) -> None:
        self._weather_service = weather_service

    async def execute(self, cities: Iterable[str]) -> List[WeatherSnapshot]:
        lookups = [
            self._weather_service.get_current_weather(WeatherQuery(city=city))
            for city in cities
        ]
        return list(await asyncio.gather(*lookups))
