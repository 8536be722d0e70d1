"""
File: config.py
Purpose: Centralized configuration using environment variables (12-factor).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Load client configuration from environment variables."""
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    SERVICE_NAME: str = "pagerduty-rest"
    LOG_LEVEL: str = "INFO"

    # PagerDuty account
    PAGERDUTY_SUBDOMAIN: str = ""
    PAGERDUTY_API_KEY: str = ""
    PAGERDUTY_BASE_URL: str = ""       # optional; overrides https://{subdomain}.pagerduty.com/api/v1/
    PAGERDUTY_REQUESTER_ID: str = ""   # default requester for CLI status changes

    # HTTP client tuning
    HTTP_TIMEOUT_SECS: float = 10.0


settings = Settings()
