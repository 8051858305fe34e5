from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A lightweight domain model representing a Todo item as held by the stores.

    Fields:
    - id: Opaque unique string identifier (uuid4), immutable
    - text: Trimmed, non-empty content (validated by the use-cases)
    - completed: Boolean completion flag
    - created_at: Creation timestamp (UTC), never modified
    - updated_at: Last update timestamp (UTC), refreshed on every mutation
    """

    id: str
    text: str
    completed: bool
    created_at: datetime
    updated_at: datetime


class TodoDraft(TypedDict):
    """Input for creating a Todo."""

    text: str


class TodoChanges(TypedDict, total=False):
    """
    Sparse partial update. A key that is present means "update this field";
    a missing key leaves the stored value untouched.
    """

    text: str
    completed: bool


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# PUBLIC_INTERFACE
def create_todo(draft: TodoDraft) -> TodoEntity:
    """Build a new TodoEntity with a fresh id, completed=False and equal timestamps."""
    now = utc_now()
    return {
        "id": str(uuid.uuid4()),
        "text": draft["text"],
        "completed": False,
        "created_at": now,
        "updated_at": now,
    }


# PUBLIC_INTERFACE
class WeatherSnapshot(TypedDict):
    """Current weather conditions for one location."""

    location: str
    country: str
    temperature: int
    feels_like: int
    humidity: int
    description: str
    icon: str
    wind_speed: float
    timestamp: datetime


@dataclass(frozen=True)
class WeatherQuery:
    """Weather lookup by city name or by coordinates."""

    city: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
