"""
Vital-sign checks against a patient's recorded baseline.

Each check fetches the patient from a PatientInfoRepository, compares the new
reading with the stored HealthInfo and sends a single alert through a
SendAlertService when the reading is out of tolerance.

Rules:
- Blood pressure must match the baseline exactly (both systolic and diastolic).
- Temperature is abnormal only when it is more than the tolerance *below* the
  baseline. Readings above the baseline are not flagged.
- Temperature readings must be finite numbers; NaN or infinity raises ValueError
  before the repository is queried.
"""

from decimal import Decimal, InvalidOperation
from typing import Protocol

import structlog

from core.config import VitalsConfig
from core.domain.models import BloodPressure, PatientInfo


class PatientInfoRepository(Protocol):
    """Read access to stored patients. Unknown ids are the repository's concern."""

    def get_by_id(self, patient_id: str) -> PatientInfo: ...


class SendAlertService(Protocol):
    """Delivers an alert message to whoever is on call."""

    def send(self, message: str) -> None: ...


class MedicalService:
    """Checks new readings for a patient and raises an alert when they look wrong."""

    def __init__(
        self,
        repository: PatientInfoRepository,
        alert_service: SendAlertService,
        config: VitalsConfig | None = None,
    ) -> None:
        self.repository = repository
        self.alert_service = alert_service
        self.config = config or VitalsConfig()
        self.logger = structlog.get_logger(__name__, component="medical_service")

    def check_blood_pressure(self, patient_id: str, blood_pressure: BloodPressure) -> None:
        patient = self.repository.get_by_id(patient_id)
        baseline = patient.health_info.blood_pressure
        if blood_pressure != baseline:
            self._alert(
                patient_id, "blood_pressure", measured=str(blood_pressure), baseline=str(baseline)
            )
        else:
            self.logger.debug("vital_sign_normal", patient_id=patient_id, vital="blood_pressure")

    def check_temperature(self, patient_id: str, temperature: Decimal | float | str) -> None:
        measured = _to_decimal(temperature)
        patient = self.repository.get_by_id(patient_id)
        baseline = patient.health_info.normal_temperature
        if baseline - measured > self.config.temperature_drop_tolerance:
            self._alert(patient_id, "temperature", measured=str(measured), baseline=str(baseline))
        else:
            self.logger.debug("vital_sign_normal", patient_id=patient_id, vital="temperature")

    def _alert(self, patient_id: str, vital: str, **readings: str) -> None:
        message = self.config.alert_message_template.format(patient_id=patient_id)
        self.logger.warning("vital_sign_abnormal", patient_id=patient_id, vital=vital, **readings)
        self.alert_service.send(message)


def _to_decimal(value: Decimal | float | str) -> Decimal:
    # str() first so 34.0 becomes Decimal("34.0") rather than its binary expansion
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Temperature reading is not a number: {value!r}") from None
    if not result.is_finite():
        raise ValueError(f"Temperature reading must be finite, got {value!r}")
    return result
