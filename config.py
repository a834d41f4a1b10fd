# -----------------------------------------------------------------
# config.py
# -----------------------------------------------------------------
# Centralized configuration for the user-fetch service, using Pydantic
# -----------------------------------------------------------------

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Application Settings
class AppSettings(BaseSettings):
    name: str = "user-fetch"
    version: str = "0.1.0"
    port: int = 8005
    debug: bool = False

    # Pydantic will look for APP_NAME, APP_VERSION, etc.
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix='APP_',
        extra="ignore"
    )


# Sample Endpoint Settings (external user API)
class SampleSettings(BaseSettings):
    api_url: str = "https://jsonplaceholder.typicode.com"
    timeout: float = 5.0

    # Pydantic will look for SAMPLE_API_URL, SAMPLE_TIMEOUT
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix='SAMPLE_',
        extra="ignore"
    )

    @field_validator("timeout")
    @classmethod
    def validate_timeout_positive(cls, v: float) -> float:
        """Validator: a zero or negative timeout would fail every request"""
        if v <= 0:
            raise ValueError("SAMPLE_TIMEOUT must be greater than 0")
        return v


# Logging Settings
class LogSettings(BaseSettings):
    level: str = "INFO"

    # Pydantic will look for LOG_LEVEL
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix='LOG_',
        extra="ignore"
    )

    @field_validator("level")
    @classmethod
    def validate_level_name(cls, v: str) -> str:
        """Validator: accept standard logging level names in any case"""
        name = v.upper()
        if name not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {v!r}")
        return name


# Main Settings Container
class Settings(BaseSettings):
    """
    Main settings container that groups all configuration classes.
    Import this single object in application code.
    """
    app: AppSettings = AppSettings()
    sample: SampleSettings = SampleSettings()
    log: LogSettings = LogSettings()


# Instantiate the settings once to be imported elsewhere
settings = Settings()
