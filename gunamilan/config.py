from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ─── App ──────────────────────────────
    APP_NAME: str = "guna-milan"
    ENV: str = "local"
    DEBUG: bool = False

    # ─── Logging ──────────────────────────
    LOG_LEVEL: str = "INFO"

    # ─── HTTP ─────────────────────────────
    API_PREFIX: str = "/api/v1"
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
