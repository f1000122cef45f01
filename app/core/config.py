# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - DATABASE_URL (Postgres connection string, or sqlite:// for local runs)
      - JWT_SECRET (signing secret for the staff/admin session cookie)

    Optional:
      - SEED_DEFAULTS (create default categories, users and products on startup)
    """

    PROJECT_NAME: str = "Restaurant POS Backend"
    API_PREFIX: str = "/api"

    DATABASE_URL: str

    # Session cookie (JWT)
    JWT_SECRET: str
    JWT_ALG: str = "HS256"
    JWT_EXPIRE_DAYS: int = 365
    AUTH_COOKIE_NAME: str = "token"

    SEED_DEFAULTS: bool = True

    # Comma separated
    CORS_ORIGINS: str = "http://localhost:9090,http://127.0.0.1:9090"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
