"""
Configuration management for StyleMatch backend
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


"""Application settings and configuration"""
class Settings:

    # Environment name (development, staging, production)
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # Database Configuration
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./stylematch.db")
    SQL_ECHO: bool = _env_bool("SQL_ECHO", "false")

    # Frontend URL (for CORS)
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:3000")
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Suggestion paging
    DEFAULT_PAGE_LIMIT: int = int(os.getenv("DEFAULT_PAGE_LIMIT", "12"))
    MAX_PAGE_LIMIT: int = int(os.getenv("MAX_PAGE_LIMIT", "100"))

    # Reason shown when no match fragment fired (plain browsing)
    FALLBACK_MATCH_REASON: str = os.getenv("FALLBACK_MATCH_REASON", "Popular pick")

    # Startup tasks
    ENSURE_INDEXES_ON_STARTUP: bool = _env_bool("ENSURE_INDEXES_ON_STARTUP", "true")

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() in ("development", "dev", "local")

    @property
    def cors_origins(self) -> list:
        """Comma-separated CORS_ORIGINS if provided, otherwise the frontend URL plus local dev hosts"""
        if self.CORS_ORIGINS:
            return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]
        return [
            "http://localhost:3000",
            "http://localhost:3001",
            self.FRONTEND_URL,
        ]

settings = Settings()
