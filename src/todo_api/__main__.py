"""Run the API with uvicorn: ``python -m todo_api``."""

import uvicorn

from .settings import get_settings


def main() -> None:
    settings = get_settings()
    # The app (and its data file) is only built inside the server process
    uvicorn.run(
        "todo_api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
