from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

PLACEHOLDER_API_KEY = "your_tmdb_api_key_here"


class Settings(BaseSettings):
    tmdb_api_key: Optional[str] = Field(default=None, validation_alias="TMDB_API_KEY")
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3", validation_alias="TMDB_BASE_URL")
    tmdb_image_base_url: str = Field(default="https://image.tmdb.org/t/p", validation_alias="TMDB_IMAGE_BASE_URL")
    tmdb_language: str = Field(default="en-US", validation_alias="TMDB_LANGUAGE")
    tmdb_region: Optional[str] = Field(default=None, validation_alias="TMDB_REGION")
    tmdb_timeout_seconds: float = Field(default=10.0, gt=0, validation_alias="TMDB_TIMEOUT_SECONDS")
    cache_backend: Literal["memory", "redis"] = Field(default="memory", validation_alias="CACHE_BACKEND")
    redis_url: Optional[str] = Field(default=None, validation_alias="REDIS_URL")
    cache_capacity_bytes: Optional[int] = Field(default=None, gt=0, validation_alias="CACHE_CAPACITY_BYTES")
    log_json: bool = Field(default=False, validation_alias="LOG_JSON")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO", validation_alias="LOG_LEVEL")

    @field_validator("tmdb_api_key", mode="before")
    @classmethod
    def _drop_placeholder_key(cls, value):
        if value is None:
            return None
        value = str(value).strip()
        if not value or value == PLACEHOLDER_API_KEY:
            return None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    class Config:
        env_file = ".env"
        extra = "allow"


settings = Settings()
