from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class ApiSettings(BaseSettings):
    APP_NAME: str = "tasks-graphql"
    APP_VERSION: str = "0.1.0"
    GRAPHQL_PATH: str = "/api/graphql"
    # Serves the in-browser GraphiQL explorer on GRAPHQL_PATH.
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CREATE_SCHEMA_ON_STARTUP: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    model_config = ConfigDict(env_file=".env", extra="ignore")


def get_api_settings() -> ApiSettings:
    return ApiSettings()
