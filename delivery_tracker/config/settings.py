# delivery_tracker/config/settings.py
from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import Literal
import os

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

class Settings(BaseSettings):
    # App Info
    app_name: str = "Package Delivery Tracker"
    version: str = "1.0.0"
    debug: bool = False
    log_level: LogLevel = "INFO"

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./package_tracker.db")

    # Security
    secret_key: str = os.getenv("SECRET_KEY", "change-in-production")
    algorithm: str = "HS512"
    access_token_expire_seconds: int = 3600

    # Login credential pair accepted by /login
    auth_username: str = "admin"
    auth_password: str = "password"

    # Server
    host: str = "0.0.0.0"
    port: int = int(os.getenv("PORT", 8080))
    request_timeout_seconds: float = 30.0

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = 'ignore'

settings = Settings()

def get_settings() -> Settings:
    """Settings dependency for FastAPI"""
    return settings
