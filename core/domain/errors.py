"""Domain errors raised by collaborators."""


class PatientNotFoundError(LookupError):
    """No patient is stored under the requested identifier."""

    def __init__(self, patient_id: str) -> None:
        super().__init__(f"Patient not found: {patient_id}")
        self.patient_id = patient_id
