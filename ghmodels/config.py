from pydantic_settings import BaseSettings
from pydantic import field_validator
from functools import lru_cache
import logging


DEFAULT_INFERENCE_URL = "https://models.github.ai/inference/chat/completions"


class Settings(BaseSettings):
    # Endpoint
    inference_url: str = DEFAULT_INFERENCE_URL
    request_timeout: float = 60.0

    # Auth
    token_host: str = "github.com"

    # Chat defaults
    default_model: str = "openai/gpt-4.1"
    system_prompt: str = ""

    # Logging
    log_level: str = "WARNING"

    class Config:
        env_prefix = "GHMODELS_"
        env_file = ".env"
        env_file_encoding = "utf-8"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept any stdlib logging level name, case-insensitively."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
