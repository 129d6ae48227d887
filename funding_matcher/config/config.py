"""Configuration management for the matching core."""

from typing import Optional
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config(BaseSettings):
    """Application configuration from environment variables."""

    log_level: str = "INFO"

    # Optional JSON/YAML file replacing the built-in classifier tables
    rule_tables_path: Optional[str] = None

    model_config = {"env_file": ".env", "case_sensitive": False}

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("rule_tables_path")
    @classmethod
    def blank_path_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()


def validate_config() -> Config:
    """Load and validate configuration from environment.

    Raises ValueError with a descriptive message naming ALL invalid
    variables (not just the first one).
    """
    try:
        return Config()
    except ValidationError as exc:
        invalid = sorted({str(err["loc"][0]).upper() for err in exc.errors() if err["loc"]})
        names = ", ".join(invalid) or "unknown"
        raise ValueError(
            f"Invalid environment variable(s): {names}. "
            "Please fix them in your .env file or environment."
        ) from exc


def load_config() -> Config:
    """Load configuration from environment (startup entry point)."""
    return validate_config()
