# users_api/config.py
"""
Runtime settings, read from environment variables or a .env file.

    from users_api.config import get_settings
    settings = get_settings()
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    STORE_BACKEND: Literal["firestore", "sql"] = Field(
        default="firestore",
        description="Which user store to run against",
    )

    # Firestore; both are required when STORE_BACKEND=firestore
    GOOGLE_APPLICATION_CREDENTIALS: Optional[str] = Field(
        default=None,
        description="Path to the service-account JSON key file",
    )
    FIRESTORE_PROJECT_ID: Optional[str] = Field(
        default=None,
        description="Google Cloud project holding the Firestore database",
    )

    USERS_COLLECTION: str = Field(
        default="users",
        min_length=1,
        description="Firestore collection (or SQL table) holding user records",
    )

    DATABASE_URL: str = Field(
        default="sqlite:///users.sqlite",
        description="SQLAlchemy URL used when STORE_BACKEND=sql",
    )

    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000, ge=1, le=65535)

    LOG_LEVEL: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
