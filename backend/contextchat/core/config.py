"""
Application configuration using Pydantic Settings.

The chatbot provider is switched by the CHATBOT_PROVIDER variable.
"""

from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===========================================
    # Environment
    # ===========================================
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ===========================================
    # Database
    # ===========================================
    DATABASE_URL: str = "sqlite+aiosqlite:///./database.db"

    # ===========================================
    # Chatbot (hosted NLP engine)
    # ===========================================
    # Provider: "litellm" | "gemini-api"
    # - litellm: any LiteLLM-routable model, e.g. "nlp_cloud/chatdolphin"
    # - gemini-api: Gemini API via google-genai
    CHATBOT_PROVIDER: Literal["litellm", "gemini-api"] = "litellm"

    # Model identifier and credential, both required at startup
    NLP_MODEL: str = ""
    NLP_API_KEY: str = ""

    # Custom endpoint for LiteLLM (optional, for proxy servers)
    NLP_API_BASE: str = ""

    # Token budget shared by input, chat history and context
    TOKEN_LIMIT: int = Field(default=2048, ge=0)

    # ===========================================
    # Server
    # ===========================================
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    ALLOWED_ORIGINS: List[str] = Field(default=["*"])


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are loaded only once.
    """
    return Settings()
