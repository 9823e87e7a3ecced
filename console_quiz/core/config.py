from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_format: str = Field(default="json", alias="LOG_FORMAT")

    shuffle_questions: bool = Field(default=True, alias="QUIZ_SHUFFLE_QUESTIONS")
    shuffle_options: bool = Field(default=True, alias="QUIZ_SHUFFLE_OPTIONS")
    random_seed: int | None = Field(default=None, alias="QUIZ_RANDOM_SEED")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
