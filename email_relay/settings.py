from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MAILCHANNELS_SEND_URL = "https://api.mailchannels.net/tx/v1/send"


class Settings(BaseSettings):
    # App
    app_env: str = "dev"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    # Security
    token: Optional[str] = None

    # Upstream
    upstream_url: str = MAILCHANNELS_SEND_URL
    http_timeout_seconds: float = 10.0

    # Log store
    redis_url: str = "redis://redis:6379/0"
    email_log_key_prefix: str = ""
    redis_timeout_seconds: float = 5.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("token")
    @classmethod
    def _blank_token_is_unset(cls, value: Optional[str]) -> Optional[str]:
        # TOKEN= in the environment counts as "not configured"
        return value or None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
