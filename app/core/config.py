# Defines application-wide settings using pydantic-settings' BaseSettings
# Manages environment variables for the API:
# API configuration (prefix, project name, version)
# Database connection details
# CORS origins and environment flags


import json
from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

class Settings(BaseSettings):
    # API configuration
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Posts API"
    VERSION: str = "1.0.0"

    # Database
    DATABASE_URL: str = "sqlite:///./posts.db"

    # CORS - comma separated list or JSON array
    BACKEND_CORS_ORIGINS: str = "*"

    # Development settings - set these differently in production
    DEBUG: bool = False
    ENVIRONMENT: str = "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cors_origins(self) -> List[str]:
        value = self.BACKEND_CORS_ORIGINS.strip()
        if value.startswith("["):
            try:
                return json.loads(value)
            except ValueError:
                return []
        return [i.strip() for i in value.split(",") if i.strip()]

# Create settings instance
settings = Settings()
