"""Application configuration."""

import os
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Groq completion service
    groq_api_url: str = os.getenv(
        "GROQ_API_URL", "https://api.groq.com/openai/v1/chat/completions"
    )
    groq_api_key: str = os.getenv("GROQ_API_KEY", "")
    groq_model: str = os.getenv("GROQ_MODEL", "llama3-8b-8192")
    groq_timeout: Optional[float] = None  # None = wait as long as the transport does

    # Streak
    database_path: str = os.getenv("DATABASE_PATH", "data/streak.db")
    streak_goal_days: int = int(os.getenv("STREAK_GOAL_DAYS", "90"))
    streak_timezone: str = os.getenv("STREAK_TIMEZONE", "")  # empty = server local time

    # Server
    server_host: str = os.getenv("SERVER_HOST", "0.0.0.0")
    server_port: int = int(os.getenv("SERVER_PORT", "8000"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
