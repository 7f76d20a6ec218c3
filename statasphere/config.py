"""
Configuration management for Statasphere Channel Intelligence
"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


# Fully-qualified (project.dataset.table) source of the diagnose view
DEFAULT_PERFORMANCE_TABLE = "statasphere-analytics.statasphere_mvp.performance_master"


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_name: str = "Statasphere | Channel Intelligence"
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"
    log_dir: str = "logs"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # BigQuery warehouse
    gcp_project_id: Optional[str] = None
    # Service account JSON content, not a file path
    google_application_credentials: str = ""
    performance_table: str = DEFAULT_PERFORMANCE_TABLE
    bigquery_timeout_seconds: Optional[float] = None  # None = wait for BigQuery

    # Dashboard Basic Auth (gate for the whole app)
    dash_user: str = ""
    dash_pass: str = ""

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
