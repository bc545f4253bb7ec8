"""Runtime configuration for the Weelio core."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="WEELIO_", env_file=".env", extra="ignore")

    app_name: str = "weelio-core"
    log_level: str = "INFO"
    daily_riddle_attempts: int = Field(
        default=5,
        ge=0,
        description="How many riddle attempts a user may make per calendar day.",
    )
    default_riddle_max_attempts: int = Field(default=3, ge=1)
    reference_timezone: str = Field(
        default="UTC",
        description="IANA timezone whose calendar date defines 'today' for attempt quotas.",
    )


settings = Settings()
