from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppConfig(BaseSettings):
    """Application configuration using Pydantic BaseSettings.

    Loads configuration from environment variables and .env file (if present).
    Fields are type-checked and validated. None of these settings touch the
    coupon table or the discount arithmetic; they only drive logging and the
    caller surfaces (CLI and Streamlit page).
    """
    # Application
    app_env: str = "local"
    log_level: str = "INFO"

    # Display settings
    display_decimals: int = 2

    # UI settings
    default_price: float = 100.0
    min_price: float = 0.0
    max_price: float = 100000.0

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Return the AppConfig instance (singleton pattern)."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config

def set_config_for_test(**kwargs):
    """For testing only: override the AppConfig instance with new values."""
    global _config
    _config = AppConfig(**kwargs)
