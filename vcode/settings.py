from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_env: str = "dev"
    log_level: str = "INFO"

    # Session
    session_backend: Literal["memory", "redis"] = "memory"
    redis_url: str = "redis://redis:6379/0"
    session_ttl_seconds: int = 1800
    session_key_prefix: str = "SESSION_KEY_FOR_CODE_"
    session_cookie_name: str = "VCODE_SESSION"

    # SMS code policy
    sms_code_length: int = 6
    sms_code_ttl_seconds: int = 300

    # Image code policy
    image_code_length: int = 4
    image_code_ttl_seconds: int = 60
    image_width: int = 67
    image_height: int = 23
    image_max_width: int = 400
    image_max_height: int = 200

    # SMS delivery
    sms_gateway: Literal["log", "http"] = "log"
    sms_gateway_url: str = "http://sms-mock:8030"
    sms_gateway_token: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
