# portfolio_api/core/config.py
from pydantic_settings import BaseSettings
from typing import Optional, Any, List, Literal
import secrets


class Settings(BaseSettings):
    PROJECT_NAME: str = "Photo Portfolio API"
    API_PREFIX: str = "/api"
    SECRET_KEY: str = secrets.token_urlsafe(32)

    # Storage backend for photos and profile: "file" or "database"
    STORAGE_BACKEND: Literal["file", "database"] = "file"
    DATA_DIR: str = "./data"

    # Database settings
    POSTGRES_SERVER: Optional[str] = None
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_DB: Optional[str] = None
    SQLALCHEMY_DATABASE_URI: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []

    # Upload settings, measured in characters of base64 text
    MAX_IMAGE_DATA_LENGTH: int = 7 * 1024 * 1024

    # Admin access
    # "presence" accepts any bearer credential, "token" verifies signed tokens
    AUTH_MODE: Literal["presence", "token"] = "presence"
    ADMIN_PASSWORD_HASH: Optional[str] = None  # hex SHA-256 of the admin password
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 12

    class Config:
        env_file = ".env"
        case_sensitive = True

    def __init__(self, **data: Any):
        super().__init__(**data)

        # Construct DB URI if not provided directly
        if not self.SQLALCHEMY_DATABASE_URI:
            if self.POSTGRES_SERVER and self.POSTGRES_USER and self.POSTGRES_PASSWORD and self.POSTGRES_DB:
                self.SQLALCHEMY_DATABASE_URI = (
                    f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
                    f"@{self.POSTGRES_SERVER}/{self.POSTGRES_DB}"
                )
            else:
                # Default to SQLite if PostgreSQL settings are not complete
                self.SQLALCHEMY_DATABASE_URI = "sqlite:///./photo_portfolio.db"

    @property
    def secret_key_is_generated(self) -> bool:
        """True when SECRET_KEY came from the per-process random default"""
        return "SECRET_KEY" not in self.model_fields_set


settings = Settings()
