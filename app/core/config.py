# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - DATABASE_URL (Postgres or SQLite connection string)
      - JWT_SECRET (HS256 secret used to verify admin tokens)

    Optional:
      - UPLOAD_DIR: where uploaded images are written on disk
      - UPLOAD_URL_PATH: public path segment the upload dir is served under
    """

    PROJECT_NAME: str = "Eshop Catalog API"
    API_V1_STR: str = "/api/v1"

    # DB config
    DATABASE_URL: str

    # JWT verification (backend-side)
    JWT_SECRET: str
    JWT_ALG: str = "HS256"

    # Image uploads (served back by StaticFiles)
    UPLOAD_DIR: str = "public/uploads"
    UPLOAD_URL_PATH: str = "/public/uploads"
    MAX_GALLERY_IMAGES: int = 10

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
