"""
Patient repositories.

Two PatientInfoRepository implementations sharing the same behavior:
- InMemoryPatientInfoRepository keeps patients in a dict
- JsonFilePatientInfoRepository persists them to a JSON array on disk

Saving a patient without an id assigns a fresh uuid4. Looking up or updating an
unknown id raises PatientNotFoundError.
"""

import os
import tempfile
import uuid
from pathlib import Path

import structlog
from pydantic import TypeAdapter

from core.domain.errors import PatientNotFoundError
from core.domain.models import PatientInfo

_PATIENT_LIST = TypeAdapter(list[PatientInfo])


class InMemoryPatientInfoRepository:
    """Dict-backed repository, mostly for demos and tests."""

    def __init__(self, patients: list[PatientInfo] | None = None) -> None:
        self._patients: dict[str, PatientInfo] = {}
        self.logger = structlog.get_logger(
            __name__, component="patient_repository", backend="memory"
        )
        for patient in patients or []:
            self.save(patient)

    def save(self, patient: PatientInfo) -> str:
        patient_id = patient.id or str(uuid.uuid4())
        self._commit({**self._patients, patient_id: patient.with_id(patient_id)})
        self.logger.debug("patient_saved", patient_id=patient_id)
        return patient_id

    def get_by_id(self, patient_id: str) -> PatientInfo:
        try:
            return self._patients[patient_id]
        except KeyError:
            raise PatientNotFoundError(patient_id) from None

    def update(self, patient: PatientInfo) -> str:
        if patient.id is None or patient.id not in self._patients:
            raise PatientNotFoundError(str(patient.id))
        self._commit({**self._patients, patient.id: patient})
        self.logger.debug("patient_updated", patient_id=patient.id)
        return patient.id

    def list_all(self) -> list[PatientInfo]:
        return list(self._patients.values())

    def _commit(self, patients: dict[str, PatientInfo]) -> None:
        self._patients = patients


class JsonFilePatientInfoRepository(InMemoryPatientInfoRepository):
    """
    Repository persisted as a JSON array of patient documents.

    The whole file is read on construction and rewritten after every change.
    A missing file is treated as an empty repository. The file is replaced
    atomically, and memory only changes once the new file is in place.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__()
        self.logger = structlog.get_logger(
            __name__, component="patient_repository", backend="json", path=str(self.path)
        )
        if self.path.exists():
            loaded: dict[str, PatientInfo] = {}
            for patient in _PATIENT_LIST.validate_json(self.path.read_bytes()):
                patient_id = patient.id or str(uuid.uuid4())
                loaded[patient_id] = patient.with_id(patient_id)
            self._patients = loaded
            self.logger.info("patients_loaded", count=len(loaded))

    def _commit(self, patients: dict[str, PatientInfo]) -> None:
        self._write(list(patients.values()))
        super()._commit(patients)

    def _write(self, patients: list[PatientInfo]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as tmp:
                tmp.write(_PATIENT_LIST.dump_json(patients, indent=2))
            tmp_path.replace(self.path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
