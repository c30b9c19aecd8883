import os
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "boundary")
    SERVICE_VERSION: str = "1.0.0"

    # Boundary validation, the pipeline itself does not re-check length
    MIN_PROBLEM_TEXT_LENGTH: int = 10
    # Upper bound keeps pattern matching cost per request bounded
    MAX_PROBLEM_TEXT_LENGTH: int = 2000

    HTTP_HOST: str = os.getenv("HTTP_HOST", "0.0.0.0")
    HTTP_PORT: int = 8000

    LOG_LEVEL: str = "INFO"


settings = Settings()
