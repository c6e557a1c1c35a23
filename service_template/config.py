"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the service starts with no environment
    - get_settings() is cached (lru_cache) - single instance per process
    - port is within 1-65535, log_format is "json" or "text"
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # API metadata
    app_name: str = "Service Template API"
    app_version: str = "1.0.0"
    app_description: str = "This is a sample service template"
    terms_of_service: str = "http://swagger.io/terms/"
    contact_name: str = "API Support"
    contact_url: str = "http://www.swagger.io/support"
    contact_email: str = "support@swagger.io"
    license_name: str = "MIT"
    license_url: str = "https://opensource.org/licenses/MIT"

    # Server
    host: str = "0.0.0.0"
    port: int = Field(8080, ge=1, le=65535)

    # Docs
    docs_url: str = "/swagger"
    openapi_url: str = "/swagger/doc.json"

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
