"""
Core services for the application.

This package contains the two request handlers: greeting localization by
client IP and vital-sign checks against a patient's baseline.
"""

from .medical_service import MedicalService, PatientInfoRepository, SendAlertService
from .message_sender import IP_ADDRESS_HEADER, GeoService, LocalizationService, MessageSender

__all__ = [
    "IP_ADDRESS_HEADER",
    "GeoService",
    "LocalizationService",
    "MessageSender",
    "MedicalService",
    "PatientInfoRepository",
    "SendAlertService",
]
