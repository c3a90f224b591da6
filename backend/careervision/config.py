from pydantic_settings import BaseSettings
from functools import lru_cache
import os


class Settings(BaseSettings):
    app_name: str = "CareerVision API"
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"
    log_level: str = "INFO"

    # Database - supports both SQLite (local) and PostgreSQL (production)
    database_url: str = "sqlite+aiosqlite:///./careervision.db"

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "http://localhost:4200,http://127.0.0.1:4200"

    # Resume uploads
    upload_dir: str = "uploads/resumes"
    max_upload_size: int = 10 * 1024 * 1024  # 10MB
    allowed_mime_types: str = (
        "application/pdf,"
        "application/msword,"
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    )

    # Career assistant
    intent_confidence_threshold: float = 0.35

    class Config:
        env_file = ".env"
        extra = "ignore"
        # Make field names case-insensitive for environment variables
        case_sensitive = False

    def get_cors_origins(self) -> list:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def get_allowed_mime_types(self) -> list:
        return [mime.strip() for mime in self.allowed_mime_types.split(",") if mime.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
