"""
Centralized Configuration for the Odia IME backend
==================================================

Single source of truth for all environment variables and settings.
Uses Pydantic for validation and type safety.

Every field can be set from the environment with the ODIA_IME_ prefix,
e.g. ODIA_IME_LOG_LEVEL=DEBUG, or from a .env file.
"""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field, validator
from pathlib import Path


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables and .env file.

    Environment variables take precedence over .env file values.
    """

    # ==========================================
    #  APPLICATION SETTINGS
    # ==========================================

    app_name: str = "Odia IME"
    app_version: str = "1.0.0"
    environment: str = Field("production", description="development/staging/production/test")

    # ==========================================
    #  SERVER SETTINGS
    # ==========================================

    host: str = Field("0.0.0.0")
    port: int = Field(8000)

    # CORS origins (comma-separated)
    cors_origins: str = Field(
        "http://localhost:5173,http://localhost:3000,http://127.0.0.1:5173",
        validate_default=True,
    )

    # ==========================================
    #  DICTIONARY
    # ==========================================

    # Optional JSON file of extra romanized -> Odia entries
    dictionary_file: Optional[Path] = Field(
        None,
        description="Extra dictionary entries merged at startup"
    )

    # ==========================================
    #  IME SETTINGS
    # ==========================================

    suggestion_limit: int = Field(5, ge=1, le=20)
    max_input_length: int = Field(256, ge=1)

    # ==========================================
    #  LOGGING
    # ==========================================

    log_level: str = Field("INFO")
    log_dir: Path = Field(Path(__file__).parent / "logs")
    log_to_file: bool = Field(True)
    log_format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
    log_date_format: str = "%Y-%m-%d %H:%M:%S"

    # ==========================================
    #  VALIDATORS
    # ==========================================

    @validator('cors_origins')
    def parse_cors_origins(cls, v):
        """Convert comma-separated string to list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',') if origin.strip()]
        return v

    @validator('log_level')
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f'log_level must be one of {valid_levels}')
        return v_upper

    @validator('environment')
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ['development', 'staging', 'production', 'test']
        v_lower = v.lower()
        if v_lower not in valid_envs:
            raise ValueError(f'environment must be one of {valid_envs}')
        return v_lower

    def ensure_directories(self):
        """Ensure all required directories exist."""
        if self.log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)

    # ==========================================
    #  PYDANTIC CONFIG
    # ==========================================

    class Config:
        env_prefix = "ODIA_IME_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

        # Allow extra fields for forward compatibility
        extra = "ignore"


# ==========================================
#  GLOBAL SETTINGS INSTANCE
# ==========================================

_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get global settings instance (singleton pattern).

    This ensures we only load the .env file once and validate once.
    """
    global _settings

    if _settings is None:
        _settings = Settings()
        _settings.ensure_directories()

    return _settings


def reload_settings() -> Settings:
    """
    Reload settings (useful for testing).
    """
    global _settings
    _settings = None
    return get_settings()
