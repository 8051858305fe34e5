import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .logging_config import configure_logging
from .repositories import build_repository
from .routers import todos as todos_router
from .routers import weather as weather_router
from .settings import Settings, get_settings
from .use_cases import TodoValidationError
from .utils import error_envelope
from .weather import OpenWeatherMapService

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "todos", "description": "Create, list, update and delete Todo items."},
    {"name": "weather", "description": "Current weather, live from OpenWeatherMap or mocked."},
]


def jsonable_errors(exc: RequestValidationError) -> list:
    """Validation error details with only JSON-safe values."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


def _register_exception_handlers(app: FastAPI) -> None:
    """Render every failure as {"success": false, "error": ...}."""

    @app.exception_handler(TodoValidationError)
    async def todo_validation_handler(request: Request, exc: TodoValidationError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_envelope(str(exc)))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """
        Return a consistent JSON structure for request validation errors.

        Response format:
            {
                "success": false,
                "error": "Request validation failed",
                "detail": [... pydantic/fastapi error details ...]
            }
        """
        content = error_envelope("Request validation failed")
        content["detail"] = jsonable_errors(exc)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = "Route not found" if exc.status_code == 404 and exc.detail == "Not Found" else str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(message),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope("Internal server error"),
        )


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The settings value, the todo repository and the weather service are created
    here once and kept on ``app.state`` for the dependency providers.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Todo Backend",
        description="Personal to-do list API with a decorative weather endpoint.",
        version="1.0.0",
        openapi_tags=openapi_tags,
        docs_url="/api/docs",
        openapi_url="/api/docs.json",
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.repository = build_repository(settings)
    app.state.weather_service = OpenWeatherMapService(
        api_key=settings.weather_api_key,
        base_url=settings.weather_base_url,
        default_city=settings.weather_default_city,
    )
    if not settings.weather_api_key:
        logger.warning("OPENWEATHERMAP_API_KEY is not set; weather endpoints return mock data")

    # Configure CORS based on settings (.env -> CORS_ALLOW_ORIGINS)
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.debug("%s %s query=%s", request.method, request.url.path, dict(request.query_params))
        return await call_next(request)

    _register_exception_handlers(app)

    # PUBLIC_INTERFACE
    @app.get("/api/health", summary="Health Check", tags=["health"])
    def health_check():
        """
        Health check endpoint.

        Returns:
            A JSON object with status "OK" and the current UTC timestamp.
        """
        return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}

    # Include routers
    app.include_router(todos_router.router)
    app.include_router(weather_router.router)
    return app
