# creative_studio/core/config.py
from typing import List
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
import logging

load_dotenv()

# define logger BEFORE using it
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]
    ENVIRONMENT: str = "development"
    API_PREFIX: str = "/api"

    # OpenAI-compatible generation provider
    OPENAI_API_KEY: str
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OPENAI_TEXT_MODEL: str = "gpt-4"
    OPENAI_IMAGE_MODEL: str = "dall-e-3"
    ORACLE_TIMEOUT_SECONDS: float = 120.0

    # Generation defaults
    HEADLINE_LANGUAGE: str = "German"
    HEADLINE_TEMPERATURE: float = 0.8
    IMAGE_SIZE: str = "1792x1024"  # 16:9
    IMAGE_QUALITY: str = "standard"

    # Database
    DATABASE_URL: str
    AUTO_CREATE_TABLES: bool = False

    # Observability
    LOG_LEVEL: str = "INFO"

    # Application
    DEBUG: bool = False
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v):
        if not v:
            raise ValueError("DATABASE_URL must be set")
        if "postgresql" not in v and "sqlite" not in v:
            raise ValueError("DATABASE_URL must be a PostgreSQL or SQLite connection string")
        return v

    @field_validator("API_PREFIX")
    @classmethod
    def validate_api_prefix(cls, v):
        v = v.rstrip("/")
        if v and not v.startswith("/"):
            raise ValueError("API_PREFIX must start with '/'")
        return v


try:
    settings = Settings()
    logger.info("✅ Configuration validated successfully")
except Exception as e:
    logger.error(f"❌ Configuration validation failed: {e}")
    raise
