"""
Application Settings

Centralized configuration using Pydantic Settings for type safety and validation.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation and type safety."""

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", protected_namespaces=("settings_",)
    )

    # Required settings
    tavily_api_key: str

    # Search settings
    tavily_base_url: str = "https://api.tavily.com/search"
    search_timeout_seconds: float = 60.0
    search_max_retries: int = 3

    # Model settings
    model_type: Literal["ollama", "bedrock"] = "bedrock"
    model_temperature: float = 0.0
    completion_timeout_seconds: float = 300.0

    # Bedrock settings
    bedrock_model: str = "us.anthropic.claude-sonnet-4-20250514-v1:0"

    # Ollama settings
    ollama_host: str = "http://localhost:11434"
    ollama_model: str = "gpt-oss:20b"

    # Pipeline settings
    seed_query: str = "AI agents trends"
    topic_max_results: int = Field(default=3, gt=0)
    max_concurrent_sections: int | None = Field(default=None, gt=0)

    # Email settings
    smtp_host: str = "localhost"
    smtp_port: int = 587
    smtp_username: str = ""
    smtp_password: str = ""
    smtp_use_ssl: bool = False
    email_sender: str = ""
    email_recipients: str = ""

    # Schedule settings (weekly cron)
    schedule_day_of_week: str = "sun"
    schedule_hour: int = 1
    schedule_minute: int = 0

    log_dir: str = "logs"

    @property
    def email_recipients_list(self) -> list[str]:
        """Get email_recipients as a parsed list."""
        if not self.email_recipients:
            return []
        return [
            address.strip()
            for address in self.email_recipients.split(",")
            if address.strip()
        ]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()  # type: ignore
