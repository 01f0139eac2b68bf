"""Library configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings

from common_validation.core.severity import CascadeMode


class Settings(BaseSettings):
    """Validation settings loaded from environment variables."""

    # Evaluation defaults
    DEFAULT_CASCADE_MODE: CascadeMode = CascadeMode.CONTINUE

    # Rule-set documents
    DEFINITION_PATHS: list[str] = []
    DEFINITION_FILE_PATTERN: str = "*.validation.json"

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    model_config = {
        "env_prefix": "COMMON_VALIDATION_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
