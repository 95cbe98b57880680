"""Settings for the part picker page.

Loaded from PARTPICKER_* environment variables (or a .env file) with
Pydantic Settings. Policy and mode names are checked against the
registries in selection and aria so a typo fails at startup rather than
on the first request.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from partpicker.aria import MARKER_CLASS_PATTERN, STRATEGIES
from partpicker.selection import POLICIES

__all__ = ["Settings", "get_settings"]


class Settings(BaseSettings):
    # Page
    page_name: str = Field("Index", alias="PARTPICKER_PAGE_NAME")
    page_title: str = Field("Parts", alias="PARTPICKER_PAGE_TITLE")
    marker_class: str = Field("form-check-input", alias="PARTPICKER_MARKER_CLASS")

    # Behaviour
    checked_policy: str = Field("even-id", alias="PARTPICKER_CHECKED_POLICY")
    aria_mode: str = Field("toggle", alias="PARTPICKER_ARIA_MODE")

    # Logging
    log_level: str = Field("INFO", alias="PARTPICKER_LOG_LEVEL")
    json_logs: bool = Field(False, alias="PARTPICKER_JSON_LOGS")

    # Server
    host: str = Field("127.0.0.1", alias="PARTPICKER_HOST")
    port: int = Field(8000, alias="PARTPICKER_PORT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator('checked_policy')
    @classmethod
    def policy_known(cls, v: str) -> str:
        if v not in POLICIES:
            raise ValueError(f"Unknown checked policy {v!r}, expected one of {', '.join(POLICIES)}")
        return v

    @field_validator('aria_mode')
    @classmethod
    def mode_known(cls, v: str) -> str:
        if v not in STRATEGIES:
            raise ValueError(f"Unknown aria mode {v!r}, expected one of {', '.join(STRATEGIES)}")
        return v

    @field_validator('marker_class')
    @classmethod
    def marker_is_class_token(cls, v: str) -> str:
        if not MARKER_CLASS_PATTERN.fullmatch(v):
            raise ValueError(f"Marker class must be a single CSS class name, got {v!r}")
        return v

    @field_validator('log_level')
    @classmethod
    def level_upper(cls, v: str) -> str:
        return v.upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached Settings instance, so the environment is parsed once."""
    return Settings()
