import os

import pytest
from fastapi.testclient import TestClient

# Ensure we default to memory backend for tests to avoid filesystem dependencies
os.environ.setdefault("PERSISTENCE_BACKEND", "memory")
os.environ["OPENWEATHERMAP_API_KEY"] = ""

from todo_api.main import create_app  # noqa: E402
from todo_api.settings import Settings  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    return Settings(app_env="test", persistence_backend="memory", weather_api_key="")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
