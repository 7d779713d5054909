"""Centralised application settings loaded from environment / .env file."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Fare rules
    default_rate_per_mile: float = Field(1.5, ge=0)  # USD / mile
    standard_base_fee: float = Field(2.0, ge=0)
    standard_rate_per_mile: float = Field(1.8, ge=0)
    premium_base_fee: float = Field(5.0, ge=0)
    premium_rate_per_mile: float = Field(3.5, ge=0)
    premium_multiplier: float = Field(1.15, ge=1.0)

    # Output
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    report_format: Literal["text", "json"] = "text"

    model_config = {"env_file": ".env", "env_prefix": "RIDEFARE_", "extra": "ignore"}

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


settings = Settings()
