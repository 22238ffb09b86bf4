from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import List, Optional
from datetime import timedelta


class Settings(BaseSettings):
    ENV: str = "development"
    SECRET_KEY: str = "change-me-in-production"
    DATABASE_URL: str = "sqlite:///./brandsbridge.db"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:8080"

    # JWT
    JWT_ACCESS_EXPIRES_DAYS: int = 7

    # Uploads
    UPLOAD_DIR: str = "./uploads"
    UPLOAD_MAX_SIZE: int = 2000

    # Admin seed
    ADMIN_EMAIL: Optional[str] = "admin@brandsbridgeintl.com"
    ADMIN_PASSWORD: Optional[str] = None

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v.upper()

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def jwt_expires_delta(self) -> timedelta:
        return timedelta(days=self.JWT_ACCESS_EXPIRES_DAYS)

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"

    class Config:
        env_file = ".env"


settings = Settings()
