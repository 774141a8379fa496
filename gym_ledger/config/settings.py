"""
Environment configuration for the gym ledger engine.
Uses Pydantic's settings management to handle environment variables
with proper type validation and default values.
"""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file if it exists
env_path = Path('.') / '.env'
load_dotenv(dotenv_path=env_path)


class Settings(BaseSettings):
    """Engine settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application configuration
    APP_NAME: str = "Gym Ledger"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    TIMEZONE: str = "Asia/Kolkata"

    # Money
    CURRENCY: str = "INR"
    CURRENCY_SYMBOL: str = "₹"
    MONEY_DECIMAL_PLACES: int = 2

    # Business rules
    EARLY_RENEWAL_THRESHOLD_DAYS: int = 7
    SALARY_SLIP_FOOTER: str = (
        "This is a computer-generated salary slip and does not require a signature."
    )

    # Monitoring and logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"
    LOG_FILE: Optional[str] = None
    ENABLE_STRUCTURED_LOGGING: bool = False

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case"""
        level = str(v).strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {v}")
        return level

    @field_validator("LOG_FORMAT", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        fmt = str(v).strip().lower()
        if fmt not in {"text", "json"}:
            raise ValueError(f"Unsupported log format: {v}")
        return fmt

    @field_validator("EARLY_RENEWAL_THRESHOLD_DAYS", "MONEY_DECIMAL_PLACES")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Value cannot be negative")
        return v

    @property
    def money_quantum(self) -> Decimal:
        """Smallest currency unit used when rounding for display or persistence"""
        return Decimal(1).scaleb(-self.MONEY_DECIMAL_PLACES)

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.ENVIRONMENT == "development"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
