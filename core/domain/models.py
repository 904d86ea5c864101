"""
Domain models for greeting localization and patient vital-sign checks.

These models represent the core business concepts and are framework-agnostic.
They use Pydantic for validation and are frozen so a fetched snapshot can't
drift while a check is running.
"""

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Country(str, Enum):
    """Countries the geo lookup can resolve."""

    RUSSIA = "RUSSIA"
    USA = "USA"
    GERMANY = "GERMANY"
    BRAZIL = "BRAZIL"


class Location(BaseModel):
    """Location resolved from a client IP. Any field may be unknown."""

    model_config = ConfigDict(frozen=True)

    city: str | None = None
    country: Country | None = None
    street: str | None = None
    building: int = Field(default=0, ge=0, description="Building number, 0 when unknown")


class BloodPressure(BaseModel):
    """Systolic/diastolic pair. Two readings are equal only on an exact match."""

    model_config = ConfigDict(frozen=True)

    high: int = Field(description="Systolic pressure")
    low: int = Field(description="Diastolic pressure")

    def __str__(self) -> str:
        return f"{self.high}/{self.low}"


class HealthInfo(BaseModel):
    """Baseline vitals recorded for a patient."""

    model_config = ConfigDict(frozen=True)

    normal_temperature: Decimal
    blood_pressure: BloodPressure


class PatientInfo(BaseModel):
    """Patient snapshot as stored in a repository."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str
    surname: str
    birthday: date
    health_info: HealthInfo

    def with_id(self, patient_id: str) -> "PatientInfo":
        return self.model_copy(update={"id": patient_id})
