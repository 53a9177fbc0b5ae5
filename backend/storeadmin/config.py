from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    DATABASE_URL: str = "sqlite:///./storeadmin.db"
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8000
    FRONTEND_ORIGINS: List[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"

    # identity is resolved by the auth layer in front of the API
    AUTH_USER_HEADER: str = "X-User-Id"
    REQUIRE_AUTH_FOR_READS: bool = False

    # used by the product client
    API_BASE_URL: str = "http://127.0.0.1:8000"
    REQUEST_TIMEOUT_SECONDS: float = 10.0


settings = Settings()
