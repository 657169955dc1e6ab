"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from typing import List


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Fintrack"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./fintrack.db"
    create_tables_on_startup: bool = True

    # Identity: the upstream auth proxy forwards the signed-in user's email
    user_email_header: str = "X-User-Email"
    admin_emails: List[str] = []

    # Table view
    page_sizes: List[int] = [10, 15, 25, 50, 75, 100]
    default_page_size: int = 15
    search_debounce_ms: int = 200

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    frontend_url: str = "http://localhost:3000"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
