from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Storefront REST API
    storefront_base_url: str = "http://localhost:5000/api"
    storefront_timeout: float = 30.0

    # Admin sessions
    session_secret: str = "CHANGE_ME_IN_PRODUCTION"
    jwt_algorithm: str = "HS256"
    session_expire_hours: int = 12
    session_cookie_secure: bool = True

    # App settings
    debug: bool = True
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
