"""
Configuration management for Sahayak.
Loads settings from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # =========================
    # Application Settings
    # =========================
    APP_NAME: str = "Sahayak"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = Field(default=False, description="Enable debug mode")
    ENVIRONMENT: str = Field(default="development", description="Environment name")

    # =========================
    # API Keys
    # =========================
    GROQ_API_KEY: str = Field(
        default="",
        description="Groq API key. When empty every chat call fails at the LLM boundary"
    )

    # =========================
    # Server Settings
    # =========================
    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=3001, description="Server port")
    CORS_ORIGINS: List[str] = Field(
        default=["*"],
        description="Origins allowed to call the API"
    )

    # =========================
    # Database Settings
    # =========================
    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./data/sahayak.db",
        description="Database connection URL"
    )
    DATABASE_ECHO: bool = Field(default=False, description="Echo SQL queries")
    SEED_SAMPLE_DATA: bool = Field(
        default=False,
        description="Upsert the sample schemes on startup"
    )

    # =========================
    # LLM Settings
    # =========================
    LLM_MODEL_ID: str = Field(
        default="llama-3.1-8b-instant",
        description="Groq LLM model to use"
    )
    LLM_TIMEOUT_SECONDS: float = Field(default=15.0, description="LLM API timeout")
    LLM_MAX_RETRIES: int = Field(
        default=1,
        description="Extra attempts after an LLM timeout"
    )
    LLM_TEMPERATURE: float = Field(default=0.7, description="Sampling temperature for replies")
    LLM_MAX_TOKENS: int = Field(default=1024, description="Maximum reply tokens")

    # =========================
    # Chat Settings
    # =========================
    DEFAULT_CHAT_LANGUAGE: str = Field(
        default="hi",
        description="Reply language when a chat request does not name one"
    )
    HISTORY_WINDOW: int = Field(
        default=4,
        description="Number of prior turns forwarded to the LLM"
    )
    SCHEME_SEARCH_LIMIT: int = Field(default=10, description="Maximum search results")
    SUGGESTED_SCHEME_LIMIT: int = Field(
        default=3,
        description="Maximum schemes attached to a chat reply"
    )

    # =========================
    # Voice Settings
    # =========================
    LANGUAGE_SWITCH_THRESHOLD: float = Field(
        default=0.7,
        description="Detector confidence needed to switch the voice language"
    )

    # =========================
    # Logging Settings
    # =========================
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    CHAT_LOG_PATH: Path = Field(
        default=Path("./logs/chat_log.md"),
        description="Path to the markdown chat log"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
