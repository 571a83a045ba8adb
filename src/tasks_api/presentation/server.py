import uvicorn

from src.setup.api_config import get_api_settings

APP_PATH = "src.tasks_api.presentation.main:app"


def run() -> None:
    """Serve the API with uvicorn using HOST/PORT from the environment."""
    settings = get_api_settings()
    uvicorn.run(
        APP_PATH,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
