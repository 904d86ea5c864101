"""
Configuration management with environment variable support and validation.

Design principles:
- Environment-specific configs (dev, staging, prod)
- Validation at startup (fail fast)
- Type safety with Pydantic
"""

import os
from decimal import Decimal
from functools import lru_cache
from typing import Literal, cast

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator

from core.domain.models import Country

# Load environment variables from .env file
load_dotenv()


class LocaleConfig(BaseModel):
    """Greeting localization settings."""

    ip_header: str = Field(
        default="x-real-ip", min_length=1, description="Header carrying the client IP"
    )
    default_country: Country = Field(
        default=Country.USA,
        description="Country whose greeting is used when the IP can't be resolved",
    )


class VitalsConfig(BaseModel):
    """Vital-sign check settings."""

    temperature_drop_tolerance: Decimal = Field(
        default=Decimal("1.5"),
        ge=Decimal("0"),
        description="Degrees a reading may fall below the patient's normal temperature",
    )
    alert_message_template: str = Field(
        default="Warning, patient with id: {patient_id}, need help",
        description="Alert text, formatted with the patient id",
    )

    @field_validator("alert_message_template")
    def validate_template(cls, v: str) -> str:
        if "{patient_id}" not in v:
            raise ValueError("alert_message_template must contain a {patient_id} placeholder")
        return v


class RepositoryConfig(BaseModel):
    """Patient storage settings."""

    patients_file: str | None = Field(
        default=None, description="JSON file backing the patient repository (in-memory when unset)"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    format: Literal["json", "console"] = Field(default="json", description="Logging format")


class AppConfig(BaseModel):
    """Main application configuration combining all subsystems."""

    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")

    locale: LocaleConfig = Field(default_factory=LocaleConfig)
    vitals: VitalsConfig = Field(default_factory=VitalsConfig)
    repository: RepositoryConfig = Field(default_factory=RepositoryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def debug_only_in_dev(self) -> "AppConfig":
        """Ensure debug mode is only allowed in development environment."""
        if self.debug and self.environment != "development":
            raise ValueError("debug mode is only allowed in development environment")
        return self


def _env_to_literal(val: str) -> Literal["development", "staging", "production"]:
    v = val.strip().lower()
    if v in {"dev", "development"}:
        return "development"
    if v in {"stage", "staging"}:
        return "staging"
    return "production"


def _level_to_literal(val: str) -> Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
    v = val.strip().upper()
    return cast(
        Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        v if v in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} else "INFO",
    )


def _country_from_env(val: str) -> Country:
    try:
        return Country(val.strip().upper())
    except ValueError:
        return Country.USA


def load_config_from_env() -> AppConfig:
    """Load configuration from environment variables with validation."""
    environment = _env_to_literal(os.getenv("ENVIRONMENT", "development"))
    debug = environment == "development"

    locale_config = LocaleConfig(
        ip_header=os.getenv("IP_HEADER", "x-real-ip"),
        default_country=_country_from_env(os.getenv("DEFAULT_COUNTRY", "USA")),
    )

    vitals_config = VitalsConfig(
        temperature_drop_tolerance=Decimal(os.getenv("TEMPERATURE_DROP_TOLERANCE", "1.5")),
    )

    repository_config = RepositoryConfig(patients_file=os.getenv("PATIENTS_FILE") or None)

    logging_config = LoggingConfig(
        level=_level_to_literal(os.getenv("LOG_LEVEL", "INFO")),
        format="console" if debug else "json",
    )

    return AppConfig(
        environment=environment,
        debug=debug,
        locale=locale_config,
        vitals=vitals_config,
        repository=repository_config,
        logging=logging_config,
    )


@lru_cache
def get_config() -> AppConfig:
    """Get cached application configuration."""
    return load_config_from_env()


def reset_config_cache() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    get_config.cache_clear()
