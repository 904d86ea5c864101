"""Tests for the console alert channel."""

from rich.console import Console
from structlog.testing import capture_logs

from adapters.alert import ConsoleAlertService


def test_send_prints_and_records_message() -> None:
    console = Console(record=True, width=120, color_system=None)
    alerts = ConsoleAlertService(console)

    alerts.send("Warning, patient with id: p-1, need help")

    assert alerts.sent == ["Warning, patient with id: p-1, need help"]
    assert "ALERT Warning, patient with id: p-1, need help" in console.export_text()


def test_message_markup_is_not_interpreted() -> None:
    console = Console(record=True, width=120, color_system=None)

    ConsoleAlertService(console).send("[bold]literal[/bold]")

    assert "[bold]literal[/bold]" in console.export_text()


def test_send_logs_alert_event() -> None:
    alerts = ConsoleAlertService(Console(record=True, color_system=None))

    with capture_logs() as logs:
        alerts.send("Warning, patient with id: p-1, need help")

    assert logs == [
        {
            "event": "alert_sent",
            "log_level": "warning",
            "component": "console_alert",
            "message": "Warning, patient with id: p-1, need help",
        }
    ]
