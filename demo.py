"""
End-to-end demo wiring the real adapters into both services.

This script runs:
1. Configuration loading and logging setup
2. Greeting localization for a handful of request headers
3. Blood pressure and temperature checks for a stored patient

Run with: uv run python demo.py
"""

from datetime import date
from decimal import Decimal

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from adapters.alert import ConsoleAlertService
from adapters.geo import LOCALHOST, MOSCOW_IP, NEW_YORK_IP, StaticGeoService
from adapters.i18n import StaticLocalizationService
from adapters.patients import InMemoryPatientInfoRepository, JsonFilePatientInfoRepository
from core.config import get_config
from core.domain.models import BloodPressure, HealthInfo, PatientInfo
from core.logging import configure_logging
from core.services import MedicalService, MessageSender

console = Console()


def demo_greetings(sender: MessageSender, ip_header: str) -> None:
    table = Table(title="Greeting by client IP")
    table.add_column("Headers")
    table.add_column("Greeting", style="green")

    scenarios: list[dict[str, str]] = [
        {ip_header: MOSCOW_IP},
        {ip_header: NEW_YORK_IP},
        {ip_header: "172.16.0.1"},
        {ip_header: "96.1.1.1"},
        {ip_header: LOCALHOST},
        {ip_header: "192.168.1.1"},
        {ip_header: "null"},
        {},
    ]
    for headers in scenarios:
        table.add_row(repr(headers), sender.send(headers))

    console.print(table)


def demo_vitals(service: MedicalService, alerts: ConsoleAlertService, patient_id: str) -> None:
    table = Table(title=f"Vital-sign checks for {patient_id}")
    table.add_column("Check")
    table.add_column("Reading")
    table.add_column("Alert", style="red")

    checks = [
        ("blood pressure", BloodPressure(high=120, low=80)),
        ("blood pressure", BloodPressure(high=150, low=100)),
        ("temperature", Decimal("36.0")),
        ("temperature", Decimal("34.0")),
        ("temperature", Decimal("38.5")),
    ]
    for name, reading in checks:
        before = len(alerts.sent)
        if isinstance(reading, BloodPressure):
            service.check_blood_pressure(patient_id, reading)
        else:
            service.check_temperature(patient_id, reading)
        fired = alerts.sent[before:]
        table.add_row(name, str(reading), fired[0] if fired else "-")

    console.print(table)


def main() -> None:
    config = get_config()
    configure_logging(config.logging)
    console.print(Panel.fit(f"Environment: {config.environment}", title="demo"))

    sender = MessageSender(StaticGeoService(), StaticLocalizationService(), config.locale)
    demo_greetings(sender, config.locale.ip_header)

    repository: InMemoryPatientInfoRepository
    if config.repository.patients_file:
        repository = JsonFilePatientInfoRepository(config.repository.patients_file)
    else:
        repository = InMemoryPatientInfoRepository()
    patient_id = repository.save(
        PatientInfo(
            name="Иван",
            surname="Петров",
            birthday=date(1980, 11, 26),
            health_info=HealthInfo(
                normal_temperature=Decimal("36.6"),
                blood_pressure=BloodPressure(high=120, low=80),
            ),
        )
    )

    alerts = ConsoleAlertService(console)
    service = MedicalService(repository, alerts, config.vitals)
    demo_vitals(service, alerts, patient_id)


if __name__ == "__main__":
    main()
