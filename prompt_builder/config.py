"""
Application configuration management.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Prompt output
    prompt_dir: str = "/tmp/claude-prompts"
    prompt_filename: str = "claude-prompt.txt"

    # GitHub
    github_server_url: str = "https://github.com"
    github_env: Optional[str] = None  # Actions env file for exported variables

    # Application
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
